"""Cleanup of raw model transcriptions into canonical expression strings."""
from app.projects.snap_solve.core.constants import (
    DIGIT_RE,
    DISALLOWED_CHAR_RE,
    LABEL_RE,
    OPERATOR_RE,
    WHITESPACE_RE,
)


def strip_labels(text: str) -> str:
    """Remove "expression:", "result:", "answer:" style labels (any case)."""
    return LABEL_RE.sub("", text)


def remove_whitespace(text: str) -> str:
    return WHITESPACE_RE.sub("", text)


def looks_like_expression(text: str) -> bool:
    """At least one digit and at least one of + - * /."""
    return bool(DIGIT_RE.search(text)) and bool(OPERATOR_RE.search(text))


def sanitize_expression(text: str) -> str:
    """Drop every character outside the expression character set. Idempotent."""
    return DISALLOWED_CHAR_RE.sub("", text)
