"""LocationIQ autocomplete client.

Talks to the LocationIQ autocomplete endpoint, which answers a partial place
name with a JSON list of places (``display_name``, ``lat``, ``lon``, ...).
"""

from __future__ import annotations

from typing import Any

import httpx

from route_planner.core.errors import GeocodeResponseError


DEFAULT_LOCATIONIQ_URL = "https://api.locationiq.com/v1/autocomplete"


class LocationIQSuggestionProvider:
    """Asynchronous client for the LocationIQ autocomplete API."""

    def __init__(
        self,
        *,
        api_key: str,
        base_url: str = DEFAULT_LOCATIONIQ_URL,
        limit: int = 10,
        timeout: float = 10.0,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        self.base_url = base_url
        self.limit = limit
        self._api_key = api_key
        self._owns_client = client is None
        self._client = client or httpx.AsyncClient(timeout=httpx.Timeout(timeout))

    async def aclose(self) -> None:
        if self._owns_client:
            await self._client.aclose()

    async def lookup(self, text: str) -> list[dict[str, Any]]:
        params: dict[str, Any] = {
            "key": self._api_key,
            "q": text,
            "limit": self.limit,
            "format": "json",
        }
        resp = await self._client.get(self.base_url, params=params)

        # LocationIQ reports "Unable to geocode" as a 404.
        if resp.status_code == httpx.codes.NOT_FOUND:
            return []
        resp.raise_for_status()

        try:
            data = resp.json()
        except ValueError as e:
            raise GeocodeResponseError(f"Response is not JSON: {e}") from e

        if not isinstance(data, list):
            raise GeocodeResponseError(
                f"Expected a list of places, got {type(data).__name__}"
            )
        return data
