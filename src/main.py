import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from src.api import router as generate
from src.api.gemini_service import GenerationError
from src.config.logging import configure_logging
from src.config.settings import get_settings
from src.middlewares.request_logging_middleware import RequestLoggingMiddleware
from src.pages import router as pages

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan manager: configures logging and reports whether the
    Gemini API key is present. A missing key does not stop the application;
    each generation request fails with a configuration error instead.
    """
    settings = get_settings()
    configure_logging(settings.LOG_LEVEL)
    if settings.GEMINI_API_KEY:
        logger.info("Using Gemini model %s.", settings.GEMINI_MODEL)
    else:
        logger.warning("GEMINI_API_KEY is not set; /api/generate will return 500.")

    yield


app = FastAPI(
    title="Vector Calculus Theorems",
    version="0.1.0",
    description=(
        "Educational page for the Green, Stokes and Gauss theorems, with examples "
        "generated on demand by the Gemini API."
    ),
    lifespan=lifespan,
)

app.add_middleware(RequestLoggingMiddleware)

app.include_router(generate.router)
app.include_router(pages.router)


# ==============================================================================
# Global Exception Handlers
# ==============================================================================


@app.exception_handler(GenerationError)
async def generation_exception_handler(request: Request, exc: GenerationError):
    """
    Turns configuration, upstream status and upstream transport/parse failures
    into `{"error": ...}` bodies. Upstream details never reach the client.
    """
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": exc.message},
    )


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(
    request: Request, exc: RequestValidationError
):
    """
    Handles request bodies without a `prompt` string, returning a 422.
    """
    return JSONResponse(
        status_code=422,
        content={"error": "request body must be a JSON object with a 'prompt' string"},
    )


@app.exception_handler(Exception)
async def general_exception_handler(request: Request, exc: Exception):
    """
    Handles all unhandled exceptions, returning a 500 Internal Server Error.
    This prevents sensitive server information from being exposed to clients.
    """
    logger.exception("Unhandled error while processing %s", request.url.path)
    return JSONResponse(
        status_code=500,
        content={"error": "internal server error"},
    )


@app.get("/health", tags=["Health Check"])
async def health_check():
    """
    Simple health check endpoint to confirm the API is running.
    """
    return {"status": "ok"}


def run():
    """
    Entry point of the `calculus-theorems-api` console script.
    """
    settings = get_settings()
    uvicorn.run(
        "src.main:app",
        host=settings.HOST,
        port=settings.PORT,
        log_level=settings.LOG_LEVEL.lower(),
    )


if __name__ == "__main__":
    run()
