from typing import Optional


class TheoremApiError(Exception):
    """Base class for errors raised by the theorem API clients."""


class GenerationStatusError(TheoremApiError):
    """The generation endpoint answered with a non-success status code."""

    def __init__(self, status_code: int, detail: Optional[str] = None):
        self.status_code = status_code
        self.detail = detail
        message = f"Generation failed with status {status_code}"
        if detail:
            message = f"{message}: {detail}"
        super().__init__(message)


class UnexpectedResponseError(TheoremApiError):
    """A successful response did not contain the expected `text` field."""
