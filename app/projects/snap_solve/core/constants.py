"""
Constants for Snap & Solve: character sets, tagged error messages, model defaults.
Single source of truth for the extractor, the evaluator and the routes.
"""
import re

ERROR_PREFIX = "ERROR:"

# --- Model defaults ---
DEFAULT_MODEL = "gemini-2.5-pro"
DEFAULT_TIMEOUT_SECONDS = 60
MAX_OUTPUT_TOKENS = 1024

# --- Request limits ---
MAX_EXPRESSION_LENGTH = 500

# --- Expression character set ---
DISALLOWED_CHAR_RE = re.compile(r"[^0-9.+\-*/()\s]")
WHITESPACE_RE = re.compile(r"\s+")
DIGIT_RE = re.compile(r"[0-9]")
OPERATOR_RE = re.compile(r"[+\-*/]")
OPERATOR_RUN_RE = re.compile(r"[+\-*/]{2,}")
# Labels some models prepend: "Expression: 2+2", "answer - 4"
LABEL_RE = re.compile(r"(expression|result|answer)[:\-]?\s*", re.IGNORECASE)
