"""
Expression extractor for Snap & Solve.
Asks the model client to transcribe the arithmetic expression in an image,
then validates and sanitizes the transcription.
"""
import logging

from app.projects.snap_solve.core.constants import ERROR_PREFIX
from app.projects.snap_solve.core.model_client import ModelClient
from app.projects.snap_solve.core.payload import ImagePayload
from app.projects.snap_solve.core.prompts import EXTRACTION_PROMPT
from app.projects.snap_solve.core.result import Err, ErrorKind, Ok
from app.projects.snap_solve.core.sanitizer import (
    looks_like_expression,
    remove_whitespace,
    sanitize_expression,
    strip_labels,
)

logger = logging.getLogger(__name__)


def interpret_transcription(raw: str | None) -> Ok | Err:
    """
    Turn raw model output into Ok(expression) or Err.
    Model-reported "ERROR: ..." text is passed through unchanged.
    """
    text = (raw or "").strip()
    if text.startswith(ERROR_PREFIX):
        return Err(ErrorKind.NO_EXPRESSION, text)

    cleaned = remove_whitespace(strip_labels(text))
    if not looks_like_expression(cleaned):
        logger.warning(f"Transcription is not an expression: {text[:200]!r}")
        return Err(ErrorKind.UNRECOGNIZED_EXPRESSION)
    return Ok(sanitize_expression(cleaned))


class Extractor:
    def __init__(self, client: ModelClient):
        self.client = client

    async def extract_result(self, image: ImagePayload) -> Ok | Err:
        """Transcribe image. Returns Ok(expression) or Err; never raises."""
        try:
            raw = await self.client.generate(EXTRACTION_PROMPT, image=image)
        except Exception:
            logger.exception("Expression extraction model call failed")
            return Err(ErrorKind.COMMUNICATION_FAILURE)
        return interpret_transcription(raw)

    async def extract(self, image: ImagePayload) -> str:
        """Transcribe image. Returns the expression or a tagged error string."""
        return (await self.extract_result(image)).to_tagged()
