"""Error taxonomy for the route planner core.

None of these are fatal to a planning session: fetch failures degrade to an
empty suggestion list, location failures leave the origin untouched, and an
incomplete route is reported back to the user as a validation message.
"""

from collections.abc import Sequence


class RoutePlannerError(Exception):
    """Base class for all route planner errors."""

    pass


class FetchError(RoutePlannerError):
    """Suggestion lookup failed (network error or unusable response)."""

    def __init__(self, query_text: str, reason: str):
        super().__init__(f"Suggestion lookup for {query_text!r} failed: {reason}")
        self.query_text = query_text
        self.reason = reason


class GeocodeResponseError(RoutePlannerError):
    """The geocoding provider answered with a payload we cannot read."""

    pass


class LocationUnavailableError(RoutePlannerError):
    """Device location was denied, unsupported or could not be resolved."""

    pass


class IncompleteRouteError(RoutePlannerError):
    """A route was committed while one of its fields is still empty."""

    def __init__(self, missing: Sequence[str]):
        self.missing = list(missing)
        fields = " and ".join(self.missing)
        super().__init__(f"Please enter a {fields} before requesting a route.")
