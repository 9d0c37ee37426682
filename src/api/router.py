from fastapi import APIRouter, Depends

from src.api.gemini_service import GeminiService
from src.api.schemas import ErrorResponse, GenerateRequest, GenerateResponse

router = APIRouter(
    prefix="/api",
    tags=["generate"],
)


@router.post(
    "/generate",
    response_model=GenerateResponse,
    responses={
        422: {"model": ErrorResponse},
        500: {"model": ErrorResponse},
    },
)
async def generate(
    request: GenerateRequest,
    gemini_service: GeminiService = Depends(GeminiService.get_instance),
) -> GenerateResponse:
    """
    Generate an example text for the given prompt.

    The prompt is forwarded unchanged to the configured Gemini model and the
    text of the first candidate is returned. Failures are turned into
    `{"error": ...}` bodies by the `GenerationError` handler in `src.main`.
    """
    text = await gemini_service.generate_text(request.prompt)
    return GenerateResponse(text=text)
