"""Adapters for the services the autocomplete core talks to."""

from route_planner.providers.device_location import (
    IpGeolocationProvider,
    StaticLocationProvider,
)
from route_planner.providers.locationiq import LocationIQSuggestionProvider
from route_planner.providers.protocols import (
    DeviceLocationProvider,
    GeocodeSuggestionProvider,
    RouteLauncher,
)
from route_planner.providers.route_launcher import (
    GoogleMapsRouteLauncher,
    build_directions_url,
)


__all__ = [
    "DeviceLocationProvider",
    "GeocodeSuggestionProvider",
    "GoogleMapsRouteLauncher",
    "IpGeolocationProvider",
    "LocationIQSuggestionProvider",
    "RouteLauncher",
    "StaticLocationProvider",
    "build_directions_url",
]
