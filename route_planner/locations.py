import os
from pathlib import Path


# Environment variable that relocates everything the planner writes to disk
PERSISTENCE_DIR_ENV = "ROUTE_PLANNER_DIR"
DEFAULT_PERSISTENCE_DIR = "~/.route_planner"

SETTINGS_FILENAME = "route_planner.json"


def get_persistence_dir() -> Path:
    return Path(
        os.environ.get(PERSISTENCE_DIR_ENV, os.path.expanduser(DEFAULT_PERSISTENCE_DIR))
    )
