"""
Common fixtures for all test modules.
This file contains fixtures that are shared across different test types.
"""

from typing import AsyncGenerator
from unittest.mock import AsyncMock, MagicMock

import pytest
from dotenv import load_dotenv
from httpx import ASGITransport, AsyncClient

from sdk.theorem_api_client.mock_client import MockTheoremClient
from src.api.gemini_service import GeminiService
from src.main import app
from tests.gemini_helpers import make_settings

# Load environment variables from .env file
load_dotenv()

# =============================================================================
# Service Fixtures
# =============================================================================


@pytest.fixture
def gemini_service() -> GeminiService:
    """
    A real GeminiService configured with a test key, injected into the app.
    """
    service = GeminiService(make_settings())
    app.dependency_overrides[GeminiService.get_instance] = lambda: service
    yield service
    app.dependency_overrides.pop(GeminiService.get_instance, None)


@pytest.fixture
def unconfigured_gemini_service() -> GeminiService:
    """
    A real GeminiService without an API key, injected into the app.
    """
    service = GeminiService(make_settings(GEMINI_API_KEY=None))
    app.dependency_overrides[GeminiService.get_instance] = lambda: service
    yield service
    app.dependency_overrides.pop(GeminiService.get_instance, None)


@pytest.fixture
def mock_gemini_service() -> MagicMock:
    """
    Fixture to mock the GeminiService using FastAPI's dependency overrides.
    """
    mock_service = MagicMock()
    mock_service.generate_text = AsyncMock()

    app.dependency_overrides[GeminiService.get_instance] = lambda: mock_service
    yield mock_service
    app.dependency_overrides.pop(GeminiService.get_instance, None)


# =============================================================================
# Test Client Fixtures
# =============================================================================


@pytest.fixture
async def unit_test_client() -> AsyncGenerator[AsyncClient, None]:
    """
    Provides a test client bound directly to the ASGI app.
    """
    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test"
    ) as c:
        yield c


@pytest.fixture
async def lenient_test_client() -> AsyncGenerator[AsyncClient, None]:
    """
    Like `unit_test_client`, but app exceptions are answered by the app's
    handlers instead of being re-raised into the test.
    """
    async with AsyncClient(
        transport=ASGITransport(app=app, raise_app_exceptions=False),
        base_url="http://test",
    ) as c:
        yield c


# =============================================================================
# SDK Fixtures
# =============================================================================


@pytest.fixture
def mock_client() -> MockTheoremClient:
    """
    Provides a MockTheoremClient with zero delay and predictable responses.
    """
    return MockTheoremClient(
        delay=0, responses=["Test response 1", "Test response 2", "Test response 3"]
    )
