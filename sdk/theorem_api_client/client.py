import logging

import httpx

from .errors import GenerationStatusError, UnexpectedResponseError

logger = logging.getLogger(__name__)


class TheoremApiClient:
    """
    A client for the example generation endpoint (`POST /api/generate`).

    Every call opens its own connection and buffers the whole answer; there is
    no retry and no streaming.
    """

    def __init__(self, api_url: str, timeout: float = 120.0):
        self.api_url = api_url.rstrip("/")
        self.generate_endpoint = f"{self.api_url}/api/generate"
        self.timeout = httpx.Timeout(10.0, read=timeout)

    async def generate(self, prompt: str) -> str:
        """
        Generates example text for a prompt.

        Args:
            prompt: The prompt to forward to the model.

        Returns:
            The generated Markdown text.

        Raises:
            GenerationStatusError: If the endpoint answers with a non-success status.
            UnexpectedResponseError: If a successful answer has no usable `text` field.
            httpx.RequestError: If a network error occurs.

        Examples:
            >>> client = TheoremApiClient("http://localhost:8000")
            >>> text = await client.generate(build_prompt("green"))
        """
        try:
            async with httpx.AsyncClient(timeout=self.timeout) as client:
                response = await client.post(
                    self.generate_endpoint,
                    json={"prompt": prompt},
                    headers={"Accept": "application/json"},
                )
        except httpx.RequestError:
            logger.exception("Theorem API generate request failed")
            raise

        if response.is_error:
            detail = self._error_detail(response)
            logger.error(
                "Theorem API returned status %s: %s", response.status_code, detail
            )
            raise GenerationStatusError(response.status_code, detail)

        try:
            data = response.json()
        except ValueError as e:
            raise UnexpectedResponseError("Response body is not valid JSON") from e

        text = data.get("text") if isinstance(data, dict) else None
        if not isinstance(text, str) or not text:
            raise UnexpectedResponseError("Response body has no 'text' field")
        return text

    @staticmethod
    def _error_detail(response: httpx.Response):
        try:
            data = response.json()
        except ValueError:
            return None
        if isinstance(data, dict) and isinstance(data.get("error"), str):
            return data["error"]
        return None
