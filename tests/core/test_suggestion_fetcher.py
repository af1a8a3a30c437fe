"""Tests for SuggestionFetcher."""

from unittest.mock import AsyncMock

import httpx
import pytest

from route_planner.core.errors import FetchError, GeocodeResponseError
from route_planner.core.models import Candidate, Query
from route_planner.core.suggestion_fetcher import SuggestionFetcher


def make_fetcher(lookup_result=None, side_effect=None, **kwargs) -> SuggestionFetcher:
    provider = AsyncMock()
    provider.lookup.return_value = lookup_result or []
    provider.lookup.side_effect = side_effect
    return SuggestionFetcher(provider, **kwargs)


class TestSuggestionFetcher:
    @pytest.mark.asyncio
    async def test_returns_candidates_with_provider_fields(self):
        fetcher = make_fetcher(
            [
                {"display_name": "Berlin, Germany", "lat": "52.52", "lon": "13.40"},
                {"display_name": "Bern, Switzerland", "place_id": "123"},
            ]
        )

        result = await fetcher.fetch(Query("Ber", 1))

        assert [c.display_name for c in result] == [
            "Berlin, Germany",
            "Bern, Switzerland",
        ]
        assert isinstance(result[0], Candidate)
        assert result[0].model_extra == {"lat": "52.52", "lon": "13.40"}
        fetcher._provider.lookup.assert_awaited_once_with("Ber")

    @pytest.mark.asyncio
    async def test_truncates_to_suggestion_limit(self):
        records = [{"display_name": f"Place {i}"} for i in range(5)]
        fetcher = make_fetcher(records, suggestion_limit=3)

        result = await fetcher.fetch(Query("Pl", 1))

        assert [c.display_name for c in result] == ["Place 0", "Place 1", "Place 2"]

    @pytest.mark.asyncio
    @pytest.mark.parametrize("text", ["", "B"])
    async def test_rejects_short_queries(self, text):
        fetcher = make_fetcher()

        with pytest.raises(ValueError, match="shorter than 2 characters"):
            await fetcher.fetch(Query(text, 1))

        fetcher._provider.lookup.assert_not_called()

    @pytest.mark.asyncio
    async def test_wraps_http_errors(self):
        cause = httpx.ConnectError("connection refused")
        fetcher = make_fetcher(side_effect=cause)

        with pytest.raises(FetchError, match="connection refused") as exc_info:
            await fetcher.fetch(Query("Berlin", 1))

        assert exc_info.value.__cause__ is cause
        assert exc_info.value.query_text == "Berlin"

    @pytest.mark.asyncio
    async def test_wraps_unreadable_responses(self):
        fetcher = make_fetcher(side_effect=GeocodeResponseError("not a list"))

        with pytest.raises(FetchError, match="not a list"):
            await fetcher.fetch(Query("Berlin", 1))

    @pytest.mark.asyncio
    async def test_wraps_any_provider_exception(self):
        cause = ConnectionError("socket closed")
        fetcher = make_fetcher(side_effect=cause)

        with pytest.raises(FetchError, match="ConnectionError: socket closed") as e:
            await fetcher.fetch(Query("Ber", 1))

        assert e.value.__cause__ is cause

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "records",
        [
            [{"name": "no display name"}],
            [{"display_name": ""}],
            ["Berlin"],
        ],
    )
    async def test_malformed_candidates_raise_fetch_error(self, records):
        fetcher = make_fetcher(records)

        with pytest.raises(FetchError, match="malformed candidate"):
            await fetcher.fetch(Query("Berlin", 1))
