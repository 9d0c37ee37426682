import json

import httpx
import pytest
from respx import MockRouter

from sdk.theorem_api_client.client import TheoremApiClient
from sdk.theorem_api_client.errors import GenerationStatusError, UnexpectedResponseError
from sdk.theorem_api_client.protocol import TheoremClientProtocol

API_URL = "http://theorems.test"
GENERATE_URL = f"{API_URL}/api/generate"


class TestTheoremApiClientInit:
    """Test cases for TheoremApiClient construction"""

    def test_init_success(self):
        client = TheoremApiClient(api_url=API_URL)
        assert client.api_url == API_URL
        assert client.generate_endpoint == GENERATE_URL

    def test_init_strips_trailing_slash(self):
        client = TheoremApiClient(api_url=f"{API_URL}/")
        assert client.api_url == API_URL

    def test_init_without_api_url_raises_error(self):
        with pytest.raises(TypeError):
            TheoremApiClient()

    def test_implements_protocol(self):
        assert isinstance(TheoremApiClient(api_url=API_URL), TheoremClientProtocol)


@pytest.mark.asyncio
class TestGenerate:
    async def test_returns_text(self, respx_mock: MockRouter):
        route = respx_mock.post(GENERATE_URL).mock(
            return_value=httpx.Response(200, json={"text": "# Title\n$x^2$"})
        )
        client = TheoremApiClient(api_url=API_URL)

        assert await client.generate("prompt") == "# Title\n$x^2$"
        assert json.loads(route.calls.last.request.content) == {"prompt": "prompt"}

    async def test_error_status_raises_with_detail(self, respx_mock: MockRouter):
        respx_mock.post(GENERATE_URL).mock(
            return_value=httpx.Response(
                429, json={"error": "failed to generate example"}
            )
        )
        client = TheoremApiClient(api_url=API_URL)

        with pytest.raises(GenerationStatusError) as exc_info:
            await client.generate("prompt")

        assert exc_info.value.status_code == 429
        assert exc_info.value.detail == "failed to generate example"

    async def test_error_status_without_json_body(self, respx_mock: MockRouter):
        respx_mock.post(GENERATE_URL).mock(
            return_value=httpx.Response(502, text="Bad Gateway")
        )
        client = TheoremApiClient(api_url=API_URL)

        with pytest.raises(GenerationStatusError) as exc_info:
            await client.generate("prompt")

        assert exc_info.value.status_code == 502
        assert exc_info.value.detail is None

    @pytest.mark.parametrize(
        "response",
        [
            httpx.Response(200, json={}),
            httpx.Response(200, json={"text": ""}),
            httpx.Response(200, json={"text": 12}),
            httpx.Response(200, json=["text"]),
            httpx.Response(200, text="not json"),
        ],
    )
    async def test_unexpected_success_body(self, respx_mock: MockRouter, response):
        respx_mock.post(GENERATE_URL).mock(return_value=response)
        client = TheoremApiClient(api_url=API_URL)

        with pytest.raises(UnexpectedResponseError):
            await client.generate("prompt")

    async def test_network_error_propagates(self, respx_mock: MockRouter):
        respx_mock.post(GENERATE_URL).mock(side_effect=httpx.ConnectError("refused"))
        client = TheoremApiClient(api_url=API_URL)

        with pytest.raises(httpx.ConnectError):
            await client.generate("prompt")
