from pydantic import BaseModel


class GenerateRequest(BaseModel):
    """Request schema for the example generation endpoint."""

    prompt: str


class GenerateResponse(BaseModel):
    """Response schema for the example generation endpoint."""

    text: str


class ErrorResponse(BaseModel):
    error: str
