"""Route planner settings models and utilities."""

import json
import os
from pathlib import Path
from typing import Any

from pydantic import BaseModel, SecretStr, field_serializer, field_validator

from route_planner.core.field_controller import DEFAULT_DEBOUNCE_DELAY
from route_planner.core.models import Position
from route_planner.core.suggestion_fetcher import (
    DEFAULT_MIN_QUERY_LENGTH,
    DEFAULT_SUGGESTION_LIMIT,
)
from route_planner.locations import SETTINGS_FILENAME, get_persistence_dir
from route_planner.providers.device_location import DEFAULT_IP_GEOLOCATION_URL
from route_planner.providers.locationiq import DEFAULT_LOCATIONIQ_URL
from route_planner.providers.route_launcher import DEFAULT_DIRECTIONS_URL


# Environment variable names for settings that must never be written to disk
ENV_LOCATIONIQ_API_KEY = "LOCATIONIQ_API_KEY"

DEFAULT_REQUEST_TIMEOUT = 10.0


class PlannerSettings(BaseModel):
    """Model for route planner settings."""

    debounce_delay: float = DEFAULT_DEBOUNCE_DELAY
    min_query_length: int = DEFAULT_MIN_QUERY_LENGTH
    suggestion_limit: int = DEFAULT_SUGGESTION_LIMIT
    request_timeout: float = DEFAULT_REQUEST_TIMEOUT
    locationiq_api_key: SecretStr | None = None
    locationiq_url: str = DEFAULT_LOCATIONIQ_URL
    ip_geolocation_url: str = DEFAULT_IP_GEOLOCATION_URL
    maps_directions_url: str = DEFAULT_DIRECTIONS_URL
    # When set, "use my location" fills in this point instead of asking the
    # IP geolocation service
    static_location: Position | None = None

    @field_validator("debounce_delay")
    @classmethod
    def validate_debounce_delay(cls, v: float) -> float:
        """Validate that the debounce delay is between 0 and 5 seconds."""
        if not 0.0 <= v <= 5.0:
            raise ValueError(f"Debounce delay must be between 0 and 5 seconds, got {v}")
        return v

    @field_validator("min_query_length")
    @classmethod
    def validate_min_query_length(cls, v: int) -> int:
        if v < 1:
            raise ValueError(f"Minimum query length must be at least 1, got {v}")
        return v

    @field_validator("suggestion_limit")
    @classmethod
    def validate_suggestion_limit(cls, v: int) -> int:
        """Validate that the suggestion limit is between 1 and 50."""
        if not 1 <= v <= 50:
            raise ValueError(f"Suggestion limit must be between 1 and 50, got {v}")
        return v

    @field_validator("request_timeout")
    @classmethod
    def validate_request_timeout(cls, v: float) -> float:
        if v <= 0:
            raise ValueError(f"Request timeout must be positive, got {v}")
        return v

    @field_serializer("locationiq_api_key", when_used="json")
    def dump_secret(self, v: SecretStr | None) -> str | None:
        return v.get_secret_value() if v is not None else None

    @classmethod
    def get_config_path(cls) -> Path:
        """Get the path to the settings file."""
        return get_persistence_dir() / SETTINGS_FILENAME

    @classmethod
    def _apply_env_overrides(cls, data: dict[str, Any]) -> dict[str, Any]:
        """Overlay environment variables on top of stored settings."""
        api_key = os.environ.get(ENV_LOCATIONIQ_API_KEY) or None
        if api_key:
            data["locationiq_api_key"] = api_key
        return data

    @classmethod
    def load(cls) -> "PlannerSettings":
        """Load settings from file, then apply environment overrides.

        Returns:
            PlannerSettings with loaded settings, or defaults if the file is
            missing or corrupted
        """
        config_path = cls.get_config_path()

        data: dict[str, Any] = {}
        if config_path.exists():
            try:
                with open(config_path) as f:
                    loaded = json.load(f)
                cls.model_validate(loaded)
                data = loaded
            except (json.JSONDecodeError, ValueError):
                # If file is corrupted, fall back to defaults
                data = {}

        return cls.model_validate(cls._apply_env_overrides(data))

    def save(self) -> None:
        """Save settings to file.

        The LocationIQ key is only written when it did not come from the
        environment.
        """
        config_path = self.get_config_path()
        config_path.parent.mkdir(parents=True, exist_ok=True)

        data = self.model_dump(mode="json")
        env_key = os.environ.get(ENV_LOCATIONIQ_API_KEY) or None
        if env_key and data.get("locationiq_api_key") == env_key:
            data["locationiq_api_key"] = None

        with open(config_path, "w") as f:
            json.dump(data, f, indent=2)
