"""Tests for the LocationIQ autocomplete client."""

import httpx
import pytest

from route_planner.core.errors import GeocodeResponseError
from route_planner.providers.locationiq import (
    DEFAULT_LOCATIONIQ_URL,
    LocationIQSuggestionProvider,
)


def make_provider(handler, **kwargs) -> LocationIQSuggestionProvider:
    client = httpx.AsyncClient(transport=httpx.MockTransport(handler))
    return LocationIQSuggestionProvider(api_key="test-key", client=client, **kwargs)


class TestLocationIQSuggestionProvider:
    @pytest.mark.asyncio
    async def test_lookup_sends_key_query_and_limit(self):
        seen: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            return httpx.Response(
                200, json=[{"display_name": "Berlin, Germany", "lat": "52.5"}]
            )

        provider = make_provider(handler, limit=5)

        result = await provider.lookup("Berlin")

        assert result == [{"display_name": "Berlin, Germany", "lat": "52.5"}]
        request = seen[0]
        assert str(request.url).startswith(DEFAULT_LOCATIONIQ_URL)
        assert request.url.params["key"] == "test-key"
        assert request.url.params["q"] == "Berlin"
        assert request.url.params["limit"] == "5"
        assert request.url.params["format"] == "json"

    @pytest.mark.asyncio
    async def test_not_found_means_no_matches(self):
        provider = make_provider(
            lambda request: httpx.Response(404, json={"error": "Unable to geocode"})
        )

        assert await provider.lookup("Xq") == []

    @pytest.mark.asyncio
    async def test_server_error_raises_http_status_error(self):
        provider = make_provider(
            lambda request: httpx.Response(401, json={"error": "Invalid key"})
        )

        with pytest.raises(httpx.HTTPStatusError):
            await provider.lookup("Berlin")

    @pytest.mark.asyncio
    async def test_non_list_payload_is_rejected(self):
        provider = make_provider(
            lambda request: httpx.Response(200, json={"display_name": "Berlin"})
        )

        with pytest.raises(GeocodeResponseError, match="Expected a list of places"):
            await provider.lookup("Berlin")

    @pytest.mark.asyncio
    async def test_non_json_payload_is_rejected(self):
        provider = make_provider(
            lambda request: httpx.Response(200, content=b"<html>oops</html>")
        )

        with pytest.raises(GeocodeResponseError, match="not JSON"):
            await provider.lookup("Berlin")

    @pytest.mark.asyncio
    async def test_aclose_leaves_injected_client_open(self):
        client = httpx.AsyncClient(
            transport=httpx.MockTransport(lambda r: httpx.Response(200, json=[]))
        )
        provider = LocationIQSuggestionProvider(api_key="k", client=client)

        await provider.aclose()

        assert not client.is_closed
        await client.aclose()

    @pytest.mark.asyncio
    async def test_aclose_closes_owned_client(self):
        provider = LocationIQSuggestionProvider(api_key="k")

        await provider.aclose()

        assert provider._client.is_closed
