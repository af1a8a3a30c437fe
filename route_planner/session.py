"""Builds a ready-to-use LocationPairCoordinator from settings."""

from __future__ import annotations

import logging
from collections.abc import Callable

import httpx

from route_planner.core.debouncer import Debouncer
from route_planner.core.field_controller import FieldController
from route_planner.core.location_pair_coordinator import LocationPairCoordinator
from route_planner.core.models import FieldState
from route_planner.core.suggestion_fetcher import SuggestionFetcher
from route_planner.providers.device_location import (
    IpGeolocationProvider,
    StaticLocationProvider,
)
from route_planner.providers.locationiq import LocationIQSuggestionProvider
from route_planner.providers.protocols import DeviceLocationProvider
from route_planner.providers.route_launcher import GoogleMapsRouteLauncher
from route_planner.stores.planner_settings import (
    ENV_LOCATIONIQ_API_KEY,
    PlannerSettings,
)


logger = logging.getLogger(__name__)

ORIGIN = "origin"
DESTINATION = "destination"


def build_coordinator(
    settings: PlannerSettings | None = None,
    *,
    notify: Callable[..., None] | None = None,
    on_change: Callable[[str, FieldState], None] | None = None,
    http_client: httpx.AsyncClient | None = None,
) -> LocationPairCoordinator:
    """Wire providers, fetcher, debouncer and both fields together.

    Args:
        settings: Planner settings; loaded from disk when omitted.
        notify: Receives user notices (location failures, incomplete routes).
        on_change: Called with (field name, state) whenever a field changes.
        http_client: Shared client for all HTTP providers. When omitted, one
            is created and closed by ``coordinator.aclose()``.
    """
    settings = settings or PlannerSettings.load()

    if settings.locationiq_api_key is None:
        logger.warning(
            f"{ENV_LOCATIONIQ_API_KEY} not set; suggestion lookups will be rejected"
        )
    api_key = (
        settings.locationiq_api_key.get_secret_value()
        if settings.locationiq_api_key
        else ""
    )

    owns_client = http_client is None
    client = http_client or httpx.AsyncClient(
        timeout=httpx.Timeout(settings.request_timeout)
    )

    suggestion_provider = LocationIQSuggestionProvider(
        api_key=api_key,
        base_url=settings.locationiq_url,
        limit=settings.suggestion_limit,
        client=client,
    )
    fetcher = SuggestionFetcher(
        suggestion_provider,
        min_query_length=settings.min_query_length,
        suggestion_limit=settings.suggestion_limit,
    )
    debouncer = Debouncer()

    location_provider: DeviceLocationProvider
    if settings.static_location is not None:
        location_provider = StaticLocationProvider(settings.static_location)
    else:
        location_provider = IpGeolocationProvider(
            url=settings.ip_geolocation_url, client=client
        )

    def make_field(name: str) -> FieldController:
        return FieldController(
            name,
            fetcher=fetcher,
            debouncer=debouncer,
            debounce_delay=settings.debounce_delay,
            on_change=on_change,
        )

    async def close_client() -> None:
        debouncer.cancel_all()
        if owns_client:
            await client.aclose()

    return LocationPairCoordinator(
        origin=make_field(ORIGIN),
        destination=make_field(DESTINATION),
        location_provider=location_provider,
        route_launcher=GoogleMapsRouteLauncher(settings.maps_directions_url),
        notify=notify,
        on_close=close_client,
    )
