import logging
from functools import lru_cache
from typing import Any, Optional

import httpx
from pydantic import ValidationError

from src.api.gemini_schemas import GeminiResponse, build_generate_payload
from src.config.settings import Settings, get_settings

logger = logging.getLogger(__name__)


class GenerationError(Exception):
    """Base class for failures that are reported to the caller as `{"error": ...}`."""

    status_code: int = 500
    message: str = "internal server error"

    def __init__(
        self, message: Optional[str] = None, status_code: Optional[int] = None
    ):
        if message is not None:
            self.message = message
        if status_code is not None:
            self.status_code = status_code
        super().__init__(self.message)


class MissingApiKeyError(GenerationError):
    message = "API key not configured"


class UpstreamStatusError(GenerationError):
    """The upstream API answered with a non-success status code."""

    message = "failed to generate example"

    def __init__(self, status_code: int, upstream_body: Any = None):
        super().__init__(status_code=status_code)
        self.upstream_body = upstream_body


class UpstreamResponseError(GenerationError):
    """The upstream call failed in transport, or its body could not be interpreted."""

    message = "internal server error"


class GeminiService:
    """
    Forwards a single prompt to the Gemini `generateContent` endpoint.

    The service is stateless apart from the configuration it is built with;
    every call issues exactly one upstream request and buffers the whole
    response before returning.
    """

    def __init__(self, settings: Settings):
        self._api_key = settings.GEMINI_API_KEY or None
        self.model_name = settings.GEMINI_MODEL
        self.endpoint = (
            f"{settings.GEMINI_API_BASE_URL.rstrip('/')}"
            f"/models/{settings.GEMINI_MODEL}:generateContent"
        )
        self.timeout = httpx.Timeout(10.0, read=settings.GEMINI_TIMEOUT_SECONDS)
        if self._api_key is None:
            logger.warning(
                "GEMINI_API_KEY is not set; generation requests will be rejected."
            )

    @property
    def is_configured(self) -> bool:
        return self._api_key is not None

    async def generate_text(self, prompt: str) -> str:
        """
        Generate example text for the given prompt.

        Raises:
            MissingApiKeyError: No API key is configured. No request is sent.
            UpstreamStatusError: Gemini answered with a non-success status.
            UpstreamResponseError: The request failed or the answer had an
                unexpected shape.
        """
        if self._api_key is None:
            raise MissingApiKeyError()

        try:
            async with httpx.AsyncClient(timeout=self.timeout) as client:
                response = await client.post(
                    self.endpoint,
                    params={"key": self._api_key},
                    json=build_generate_payload(prompt),
                    headers={"Content-Type": "application/json"},
                )
        except httpx.HTTPError as e:
            logger.error("Error calling Gemini API: %s", e)
            raise UpstreamResponseError() from e

        if not response.is_success:
            upstream_body = self._read_error_body(response)
            logger.error(
                "Gemini API error: status=%s body=%s",
                response.status_code,
                upstream_body,
            )
            raise UpstreamStatusError(response.status_code, upstream_body)

        try:
            return GeminiResponse.model_validate(response.json()).first_text()
        except (ValueError, ValidationError) as e:
            logger.error("Invalid response structure from Gemini: %s", e)
            raise UpstreamResponseError() from e

    @staticmethod
    def _read_error_body(response: httpx.Response) -> Any:
        try:
            return response.json()
        except ValueError:
            return response.text

    @staticmethod
    @lru_cache
    def get_instance() -> "GeminiService":
        """Get singleton GeminiService instance."""
        return GeminiService(get_settings())
