"""
Model client for Snap & Solve.
Calls Gemini with a prompt and an optional inline image and returns the response text.
"""
import asyncio
import logging
from typing import Protocol

from google import genai
from google.genai import types

from app.projects.snap_solve.core.constants import (
    DEFAULT_MODEL,
    DEFAULT_TIMEOUT_SECONDS,
    MAX_OUTPUT_TOKENS,
)
from app.projects.snap_solve.core.payload import ImagePayload

logger = logging.getLogger(__name__)


class ModelClientError(Exception):
    """Raised when the hosted model cannot be reached or fails to answer."""


class ModelClient(Protocol):
    async def generate(self, prompt: str, image: ImagePayload | None = None) -> str:
        ...


class GeminiModelClient:
    def __init__(
        self,
        api_key: str,
        model: str = DEFAULT_MODEL,
        timeout_seconds: int = DEFAULT_TIMEOUT_SECONDS,
        max_output_tokens: int = MAX_OUTPUT_TOKENS,
    ):
        if not api_key:
            raise ValueError("A Google API key is required for the Gemini model client")
        self.api_key = api_key
        self.model = model
        self.timeout_seconds = timeout_seconds
        self.max_output_tokens = max_output_tokens

    async def generate(self, prompt: str, image: ImagePayload | None = None) -> str:
        """
        Send prompt (and image, if given) to Gemini.
        Returns the response text ("" when the model returns none).
        Raises ModelClientError on timeout or API errors.
        """
        contents = [prompt]
        if image is not None:
            contents.append(types.Part.from_bytes(data=image.to_bytes(), mime_type=image.mime_type))

        # A fresh client per call keeps the async transport bound to the running loop
        client = genai.Client(api_key=self.api_key)
        try:
            response = await asyncio.wait_for(
                client.aio.models.generate_content(
                    model=self.model,
                    contents=contents,
                    config={"max_output_tokens": self.max_output_tokens},
                ),
                timeout=self.timeout_seconds,
            )
        except asyncio.TimeoutError as e:
            raise ModelClientError(
                f"Gemini model '{self.model}' request timed out after {self.timeout_seconds} seconds"
            ) from e
        except Exception as e:
            raise ModelClientError(f"Gemini API error for model '{self.model}': {e}") from e

        usage = response.usage_metadata
        if usage:
            logger.debug(
                f"Gemini usage: input_tokens={usage.prompt_token_count or 0}, "
                f"output_tokens={usage.candidates_token_count or 0}"
            )
        return response.text or ""
