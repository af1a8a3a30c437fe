from route_planner.stores.planner_settings import (
    ENV_LOCATIONIQ_API_KEY,
    PlannerSettings,
)


__all__ = [
    "ENV_LOCATIONIQ_API_KEY",
    "PlannerSettings",
]
