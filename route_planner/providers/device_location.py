"""Device location providers.

Outside a browser there is no geolocation permission prompt, so the position
comes either from an IP geolocation service or from a fixed, configured point
(for example a depot the vehicle always starts from).
"""

from __future__ import annotations

import logging

import httpx
from pydantic import ValidationError

from route_planner.core.errors import LocationUnavailableError
from route_planner.core.models import Position


logger = logging.getLogger(__name__)

DEFAULT_IP_GEOLOCATION_URL = "https://ipapi.co/json/"


class IpGeolocationProvider:
    """Approximates the device position from its public IP address."""

    def __init__(
        self,
        *,
        url: str = DEFAULT_IP_GEOLOCATION_URL,
        timeout: float = 10.0,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        self.url = url
        self._owns_client = client is None
        self._client = client or httpx.AsyncClient(timeout=httpx.Timeout(timeout))

    async def aclose(self) -> None:
        if self._owns_client:
            await self._client.aclose()

    async def get_current_position(self) -> Position:
        try:
            resp = await self._client.get(self.url)
            resp.raise_for_status()
            data = resp.json()
        except httpx.HTTPError as e:
            raise LocationUnavailableError(f"IP geolocation request failed: {e}") from e
        except ValueError as e:
            raise LocationUnavailableError(
                "IP geolocation returned invalid JSON"
            ) from e

        if not isinstance(data, dict) or data.get("error"):
            reason = data.get("reason") if isinstance(data, dict) else None
            raise LocationUnavailableError(
                f"IP geolocation refused the lookup: {reason or 'unknown reason'}"
            )

        try:
            position = Position.model_validate(data)
        except ValidationError as e:
            raise LocationUnavailableError(
                "IP geolocation response has no usable coordinates"
            ) from e

        logger.debug("Resolved IP position %s", position.as_text())
        return position


class StaticLocationProvider:
    """Always reports the same configured position."""

    def __init__(self, position: Position | None) -> None:
        self.position = position

    async def get_current_position(self) -> Position:
        if self.position is None:
            raise LocationUnavailableError("No fixed location is configured")
        return self.position
