"""
Result values passed between pipeline stages.
Stages return Ok or Err; the tagged "ERROR: ..." string only appears at the outer boundary.
"""
from dataclasses import dataclass
from enum import Enum

from app.projects.snap_solve.core.constants import ERROR_PREFIX


class ErrorKind(Enum):
    """Failure kinds, each with the tagged message shown to the user."""

    NO_EXPRESSION = "ERROR: No expression found"
    UNRECOGNIZED_EXPRESSION = "ERROR: Could not recognize a valid expression in the image."
    INVALID_CHARACTERS = "ERROR: Expression contains invalid characters."
    INVALID_OPERATOR_SEQUENCE = "ERROR: Invalid operator sequence."
    INVALID_NUMBER = "ERROR: Calculation resulted in an invalid number."
    MALFORMED_EXPRESSION = "ERROR: Invalid or unrecognized mathematical expression."
    COMMUNICATION_FAILURE = "ERROR: Failed to communicate with the AI model for extraction."


@dataclass(frozen=True)
class Ok:
    value: str

    @property
    def ok(self) -> bool:
        return True

    def to_tagged(self) -> str:
        return self.value


@dataclass(frozen=True)
class Err:
    kind: ErrorKind
    message: str = ""

    def __post_init__(self):
        if not self.message:
            object.__setattr__(self, "message", self.kind.value)

    @property
    def ok(self) -> bool:
        return False

    def to_tagged(self) -> str:
        return self.message


def is_tagged_error(text: str | None) -> bool:
    """True if text is a tagged error string."""
    return bool(text) and text.startswith(ERROR_PREFIX)
