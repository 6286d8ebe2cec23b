"""
Local expression evaluator for Snap & Solve.
Re-validates an expression string and computes it without any network call.
"""
import logging
import math

from app.projects.snap_solve.core.arithmetic import (
    ExpressionSyntaxError,
    evaluate_expression,
    format_number,
)
from app.projects.snap_solve.core.constants import (
    DISALLOWED_CHAR_RE,
    OPERATOR_RUN_RE,
    WHITESPACE_RE,
)
from app.projects.snap_solve.core.result import Err, ErrorKind, Ok

logger = logging.getLogger(__name__)


class Evaluator:
    """Evaluates canonical expression strings into JavaScript-style number text."""

    def evaluate_result(self, expression: str) -> Ok | Err:
        """Evaluate expression. Returns Ok(number_text) or Err; never raises."""
        try:
            return self._evaluate(expression)
        except Exception:
            logger.exception(f"Unexpected error evaluating expression {str(expression)[:200]!r}")
            return Err(ErrorKind.MALFORMED_EXPRESSION)

    async def evaluate(self, expression: str) -> str:
        """Evaluate expression. Returns the number text or a tagged error string."""
        return self.evaluate_result(expression).to_tagged()

    def _evaluate(self, expression: str) -> Ok | Err:
        if not isinstance(expression, str) or DISALLOWED_CHAR_RE.search(expression):
            return Err(ErrorKind.INVALID_CHARACTERS)

        # Adjacency is checked without whitespace so "3 + + 4" is rejected like "3++4"
        if OPERATOR_RUN_RE.search(WHITESPACE_RE.sub("", expression)):
            return Err(ErrorKind.INVALID_OPERATOR_SEQUENCE)

        try:
            value = evaluate_expression(expression)
        except ExpressionSyntaxError as e:
            logger.info(f"Rejected malformed expression {expression!r}: {e}")
            return Err(ErrorKind.MALFORMED_EXPRESSION)
        except ZeroDivisionError:
            return Err(ErrorKind.INVALID_NUMBER)

        if not math.isfinite(value):
            return Err(ErrorKind.INVALID_NUMBER)
        return Ok(format_number(value))
