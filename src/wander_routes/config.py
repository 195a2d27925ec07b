"""Application configuration and settings management."""

from typing import Any, Literal

import json
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Runtime configuration loaded from environment variables or defaults."""

    model_config = SettingsConfigDict(
        env_prefix="WANDER_",
        case_sensitive=False,
        env_file=".env",
        env_file_encoding="utf-8",
    )

    app_name: str = "Wander Route Optimizer API"
    api_prefix: str = "/api"
    log_level: str = Field(default="INFO", description="Level applied to the wander_routes logger.")
    frontend_allowed_origins: tuple[str, ...] = Field(
        default=(
            "http://localhost:8081",
            "http://127.0.0.1:8081",
            "http://localhost:19006",
        ),
        description="Permitted web origins for browser clients (CORS).",
    )

    # Itinerary defaults used when a caller omits preferences or constraints
    default_strategy: Literal[
        "minimize_travel", "minimize_distance", "priority_first", "chronological", "balanced"
    ] = "balanced"
    default_day_start: str = Field(default="09:00", pattern=r"^\d{2}:\d{2}$")
    default_day_end: str = Field(default="21:00", pattern=r"^\d{2}:\d{2}$")
    default_lunch_window: tuple[str, ...] = Field(default=("12:00", "14:00"))
    default_dinner_window: tuple[str, ...] = Field(default=("18:00", "20:00"))
    default_preferred_modes: tuple[str, ...] = Field(default=("walking", "transit", "rideshare"))
    default_max_walking_distance_m: float = Field(default=1500.0, ge=0.0)
    default_max_walking_duration_min: int = Field(default=20, ge=0)

    # Travel estimator
    cycling_max_distance_m: float = Field(default=5000.0, ge=0.0)
    rush_hour_multiplier: float = Field(default=1.5, ge=1.0)
    rush_hour_windows: tuple[int, ...] = Field(
        default=(7, 9, 17, 19),
        description="Inclusive (start_hour, end_hour) pairs, flattened.",
    )
    transit_buffer_minutes: float = Field(default=10.0, ge=0.0)

    # Warning thresholds
    long_travel_warning_minutes: int = Field(default=45, ge=0)
    long_wait_warning_minutes: int = Field(default=30, ge=0)

    # Partial approval reconstruction
    approval_apply_mode: Literal["permutation", "splice"] = "permutation"

    @field_validator(
        "frontend_allowed_origins",
        "default_lunch_window",
        "default_dinner_window",
        "default_preferred_modes",
        mode="before",
    )
    @classmethod
    def _parse_str_tuple_from_env(cls, value: Any) -> tuple[str, ...]:
        """Parse string tuple from environment variable (comma-separated or JSON array)."""
        if isinstance(value, tuple):
            return value
        if isinstance(value, list):
            return tuple(str(item) for item in value)
        if isinstance(value, str):
            try:
                parsed = json.loads(value)
                if isinstance(parsed, list):
                    return tuple(str(item) for item in parsed)
            except (json.JSONDecodeError, TypeError):
                pass
            if "," in value:
                return tuple(item.strip() for item in value.split(",") if item.strip())
            if value.strip():
                return (value.strip(),)
        return tuple()

    @field_validator("rush_hour_windows", mode="before")
    @classmethod
    def _parse_int_tuple_from_env(cls, value: Any) -> tuple[int, ...]:
        """Parse integer tuple from environment variable (comma-separated or JSON array)."""
        if isinstance(value, tuple):
            return value
        if isinstance(value, list):
            return tuple(int(item) for item in value)
        if isinstance(value, str):
            try:
                parsed = json.loads(value)
                if isinstance(parsed, list):
                    return tuple(int(item) for item in parsed)
            except (json.JSONDecodeError, TypeError, ValueError):
                pass
            if "," in value:
                return tuple(int(item.strip()) for item in value.split(",") if item.strip())
            if value.strip():
                try:
                    return (int(value.strip()),)
                except ValueError:
                    return tuple()
        return tuple()

    @field_validator("rush_hour_windows")
    @classmethod
    def _check_pairs(cls, value: tuple[int, ...]) -> tuple[int, ...]:
        if len(value) % 2:
            raise ValueError("rush_hour_windows must contain (start, end) hour pairs")
        return value

    def rush_hour_ranges(self) -> list[tuple[int, int]]:
        windows = self.rush_hour_windows
        return [(windows[i], windows[i + 1]) for i in range(0, len(windows), 2)]


settings = Settings()
