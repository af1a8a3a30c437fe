"""Core autocomplete engine: debouncing, lookups and the field state machine."""

from route_planner.core.debouncer import Debouncer
from route_planner.core.errors import (
    FetchError,
    GeocodeResponseError,
    IncompleteRouteError,
    LocationUnavailableError,
    RoutePlannerError,
)
from route_planner.core.field_controller import FieldController
from route_planner.core.location_pair_coordinator import LocationPairCoordinator
from route_planner.core.models import (
    Candidate,
    FieldState,
    FieldStatus,
    PairState,
    Position,
    Query,
    ResultDisposition,
    RouteRequest,
)
from route_planner.core.suggestion_fetcher import SuggestionFetcher


__all__ = [
    # Components
    "Debouncer",
    "FieldController",
    "LocationPairCoordinator",
    "SuggestionFetcher",
    # Models
    "Candidate",
    "FieldState",
    "FieldStatus",
    "PairState",
    "Position",
    "Query",
    "ResultDisposition",
    "RouteRequest",
    # Errors
    "FetchError",
    "GeocodeResponseError",
    "IncompleteRouteError",
    "LocationUnavailableError",
    "RoutePlannerError",
]
