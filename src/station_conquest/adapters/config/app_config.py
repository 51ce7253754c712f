"""12-factor configuration adapter using environment variables and TOML config."""

import logging
import tomllib
from pathlib import Path
from typing import Any

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from station_conquest.domain.models import DEFAULT_RATING, is_valid_rating

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class AppConfig(BaseSettings):
    """Application configuration following 12-factor principles."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Izakaya API configuration
    api_url: str = Field(
        default="http://localhost:3000",
        description="Base URL of the izakaya listing and check-in service",
    )
    api_timeout: int = Field(default=10, description="Timeout for API requests in seconds")

    # Station catalog
    # If not set, the built-in Tokyo catalog is used
    stations_file: str | None = Field(
        default=None,
        description="Path to TOML file with [[stations]] tables (name, latitude, longitude)",
    )

    # Check-in behaviour
    default_rating: int = Field(
        default=DEFAULT_RATING,
        description="Rating a freshly selected venue starts with (1-5)",
    )
    refresh_after_visit: bool = Field(
        default=False,
        description="Re-fetch venues and visited ids after each recorded visit",
    )

    # Session identity (normally handed over by the login flow)
    checkin_user_id: str | None = Field(default=None, description="Id of the checked-in user")
    checkin_username: str | None = Field(
        default=None, description="Display name of the checked-in user"
    )

    # Logging
    log_level: str = Field(default="INFO", description="Root log level")

    @field_validator("api_url")
    @classmethod
    def validate_api_url(cls, v: str) -> str:
        """Validate api_url is an http(s) URL and strip the trailing slash."""
        if not v.startswith(("http://", "https://")):
            raise ValueError("api_url must start with http:// or https://")
        return v.rstrip("/")

    @field_validator("default_rating")
    @classmethod
    def validate_default_rating(cls, v: int) -> int:
        """Validate default_rating is one of the star ratings."""
        if not is_valid_rating(v):
            raise ValueError("default_rating must be between 1 and 5")
        return v

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log_level is a standard logging level name."""
        if v.upper() not in _LOG_LEVELS:
            raise ValueError(f"log_level must be one of {', '.join(_LOG_LEVELS)}")
        return v.upper()

    @classmethod
    def for_testing(cls, **overrides: Any) -> "AppConfig":
        """Build a config that ignores any local .env file."""
        return cls(_env_file=None, **overrides)  # type: ignore[call-arg]

    @property
    def log_level_number(self) -> int:
        return logging.getLevelName(self.log_level)

    def get_stations_config(self) -> list[dict[str, Any]]:
        """Parse and return the [[stations]] tables from the TOML file.

        Returns an empty list when no stations_file is configured.
        """
        if not self.stations_file:
            return []

        config_path = Path(self.stations_file)
        if not config_path.exists():
            raise FileNotFoundError(f"Station file not found: {config_path}")

        with open(config_path, "rb") as f:
            toml_data = tomllib.load(f)

        stations = toml_data.get("stations", [])
        if not isinstance(stations, list):
            raise ValueError("TOML config 'stations' must be a list")
        return stations
