from __future__ import annotations

from typing import Any, Protocol

from route_planner.core.models import Position


class GeocodeSuggestionProvider(Protocol):
    """Protocol for place-name autocomplete backends."""

    async def lookup(self, text: str) -> list[dict[str, Any]]:
        """Look up places matching a partial query.

        Args:
            text: The text typed so far (at least two characters).

        Returns:
            Raw place records, each carrying at least ``display_name``.

        Raises:
            httpx.HTTPError: On transport or HTTP status failures.
            GeocodeResponseError: If the response body cannot be read.
        """
        ...

    async def aclose(self) -> None:
        """Release any connections held by the provider."""
        ...


class DeviceLocationProvider(Protocol):
    """Protocol for resolving the current device position."""

    async def get_current_position(self) -> Position:
        """Resolve the current position.

        Raises:
            Exception: If permission is denied or location is unsupported.
        """
        ...


class RouteLauncher(Protocol):
    """Protocol for handing a finished route to a navigation service."""

    def open(self, origin: str, destination: str) -> None:
        """Open directions from ``origin`` to ``destination``."""
        ...
