import json
import logging
import time
from typing import Optional

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint

from src.config.settings import get_settings


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """
    Logs one line per generation request: status, prompt size and latency.

    Prompts and generated text are never written out, only their sizes.
    """

    def __init__(self, app):
        super().__init__(app)
        self._logger = logging.getLogger(__name__)

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        settings = get_settings()
        if not settings.API_LOGGING_ENABLED:
            return await call_next(request)

        if "/api/generate" not in request.url.path:
            return await call_next(request)

        request_body = await request.body()
        prompt = self._extract_prompt_from_body(request_body)

        async def receive() -> dict:
            return {"type": "http.request", "body": request_body}

        new_request = Request(request.scope, receive)

        started = time.perf_counter()
        error_details: Optional[str] = None
        response: Optional[Response] = None

        try:
            response = await call_next(new_request)

            if response.status_code >= 400:
                response_body_bytes = b""
                async for chunk in response.body_iterator:
                    response_body_bytes += chunk
                error_details = self._extract_error_from_body(response_body_bytes)

                # Re-create the response since we've consumed the iterator
                response = Response(
                    content=response_body_bytes,
                    status_code=response.status_code,
                    headers=dict(response.headers),
                    media_type=response.media_type,
                )
            return response
        except Exception as e:
            error_details = f"Exception: {e}"
            raise
        finally:
            elapsed_ms = (time.perf_counter() - started) * 1000
            status_code = response.status_code if response else 500
            self._log_request(request, status_code, prompt, elapsed_ms, error_details)

    def _extract_prompt_from_body(self, body: bytes) -> Optional[str]:
        try:
            data = json.loads(body)
        except (json.JSONDecodeError, TypeError, UnicodeDecodeError):
            return None
        if isinstance(data, dict) and isinstance(data.get("prompt"), str):
            return data["prompt"]
        return None

    def _extract_error_from_body(self, body: bytes) -> str:
        try:
            data = json.loads(body)
        except (json.JSONDecodeError, TypeError, UnicodeDecodeError):
            return "[No error details in body]"
        if isinstance(data, dict) and "error" in data:
            return str(data["error"])
        return "[No error details in body]"

    def _log_request(
        self,
        request: Request,
        status_code: int,
        prompt: Optional[str],
        elapsed_ms: float,
        error_details: Optional[str],
    ) -> None:
        client_host = request.client.host if request.client else "unknown"
        prompt_chars = len(prompt) if prompt is not None else None
        if error_details is None:
            self._logger.info(
                "%s %s from %s -> %s (prompt_chars=%s, %.1f ms)",
                request.method,
                request.url.path,
                client_host,
                status_code,
                prompt_chars,
                elapsed_ms,
            )
        else:
            self._logger.warning(
                "%s %s from %s -> %s (prompt_chars=%s, %.1f ms): %s",
                request.method,
                request.url.path,
                client_host,
                status_code,
                prompt_chars,
                elapsed_ms,
                error_details,
            )
