"""Dual-field location autocomplete engine for route planning."""

from route_planner.core import (
    Candidate,
    FieldState,
    FieldStatus,
    IncompleteRouteError,
    LocationPairCoordinator,
    LocationUnavailableError,
    RouteRequest,
)
from route_planner.session import build_coordinator
from route_planner.stores import PlannerSettings


__all__ = [
    "Candidate",
    "FieldState",
    "FieldStatus",
    "IncompleteRouteError",
    "LocationPairCoordinator",
    "LocationUnavailableError",
    "PlannerSettings",
    "RouteRequest",
    "build_coordinator",
]
