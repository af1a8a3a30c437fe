"""LocationPairCoordinator - owns the origin/destination pair.

Responsibilities:
- Swap the two fields' text, closing any suggestion session on both sides
- Fill the origin from the device location (origin only)
- Validate the pair and hand it to the route launcher
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import TYPE_CHECKING, Any

from route_planner.core.errors import IncompleteRouteError, LocationUnavailableError
from route_planner.core.field_controller import FieldController
from route_planner.core.models import PairState, Position, RouteRequest


if TYPE_CHECKING:
    from route_planner.providers.protocols import (
        DeviceLocationProvider,
        RouteLauncher,
    )


logger = logging.getLogger(__name__)


class LocationPairCoordinator:
    def __init__(
        self,
        *,
        origin: FieldController,
        destination: FieldController,
        location_provider: DeviceLocationProvider,
        route_launcher: RouteLauncher,
        notify: Callable[..., None] | None = None,
        on_close: Callable[[], Any] | None = None,
    ) -> None:
        """Initialize the coordinator.

        Args:
            origin: Controller of the origin field.
            destination: Controller of the destination field.
            location_provider: Resolves the device position for the origin.
            route_launcher: Opens the committed route.
            notify: Receives non-blocking user notices as
                ``notify(message, title=..., severity=...)``.
            on_close: Awaitable factory run by ``aclose()`` to release
                resources owned by whoever built the coordinator.
        """
        self.origin = origin
        self.destination = destination
        self._location_provider = location_provider
        self._route_launcher = route_launcher
        self._notify = notify
        self._on_close = on_close

    @property
    def state(self) -> PairState:
        return PairState(origin=self.origin.state, destination=self.destination.state)

    def swap(self) -> None:
        origin_text = self.origin.raw_text
        self.origin.set_text(self.destination.raw_text)
        self.destination.set_text(origin_text)
        self.origin.reset()
        self.destination.reset()

    def commit_route(self) -> RouteRequest:
        """Return the finalized pair.

        Raises:
            IncompleteRouteError: If either field is empty.
        """
        origin = self.origin.raw_text
        destination = self.destination.raw_text
        missing = [
            name
            for name, text in (("origin", origin), ("destination", destination))
            if not text
        ]
        if missing:
            raise IncompleteRouteError(missing)
        return RouteRequest(origin=origin, destination=destination)

    def open_route(self) -> bool:
        """Commit the route and open it; returns False if it was incomplete."""
        try:
            route = self.commit_route()
        except IncompleteRouteError as e:
            self._report(str(e), title="Route incomplete")
            return False

        logger.info("Opening route %r -> %r", route.origin, route.destination)
        self._route_launcher.open(route.origin, route.destination)
        return True

    async def request_device_location(self) -> Position | None:
        """Fill the origin from the device location.

        Failures are reported as a notice and leave the origin untouched.
        """
        try:
            position = await self._location_provider.get_current_position()
        except Exception as e:
            error = (
                e
                if isinstance(e, LocationUnavailableError)
                else LocationUnavailableError(f"Could not get current location: {e}")
            )
            logger.warning("Device location unavailable: %s", error)
            self._report(str(error), title="Location unavailable")
            return None

        self.origin.on_device_location_resolved(position.latitude, position.longitude)
        return position

    async def aclose(self) -> None:
        await self.origin.aclose()
        await self.destination.aclose()
        if self._on_close is not None:
            await self._on_close()

    def _report(self, message: str, *, title: str) -> None:
        if self._notify is not None:
            self._notify(message, title=title, severity="warning")
