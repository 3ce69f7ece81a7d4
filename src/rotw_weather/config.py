"""Typed settings loader for the village weather engine."""

from __future__ import annotations

from typing import Any, Literal

from pydantic import Field, ValidationError, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .exceptions import ConfigError
from .redaction import redact_mongo_uri


class Settings(BaseSettings):
    """Application settings loaded from environment variables and `.env`."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    app_env: Literal["dev", "staging", "prod"] = Field(default="dev", alias="APP_ENV")
    mongodb_uri: str = Field(alias="MONGODB_URI", repr=False)
    mongodb_database: str = Field(default="tinglebot", alias="MONGODB_DATABASE")
    weather_collection: str = Field(default="weathers", alias="WEATHER_COLLECTION")
    mongodb_timeout_ms: int = Field(default=10000, alias="MONGODB_TIMEOUT_MS")

    weather_special_chance: float = Field(default=0.3, alias="WEATHER_SPECIAL_CHANCE")
    weather_history_depth: int = Field(default=3, alias="WEATHER_HISTORY_DEPTH")
    weather_temperature_max_delta_f: int = Field(
        default=20,
        alias="WEATHER_TEMPERATURE_MAX_DELTA_F",
    )
    weather_period_lookback_hours: int = Field(
        default=24,
        alias="WEATHER_PERIOD_LOOKBACK_HOURS",
    )

    log_level: str = Field(default="INFO", alias="LOG_LEVEL")

    @field_validator("mongodb_uri", "mongodb_database", "weather_collection", mode="before")
    @classmethod
    def strip_strings(cls, value: Any) -> Any:
        """Trim whitespace around env-string values."""
        if isinstance(value, str):
            return value.strip()
        return value

    @field_validator("log_level", mode="before")
    @classmethod
    def upper_log_level(cls, value: Any) -> Any:
        if isinstance(value, str):
            return value.strip().upper() or "INFO"
        return value

    @model_validator(mode="after")
    def validate_ranges(self) -> Settings:
        """Reject values the weather engine cannot run with."""
        if not self.mongodb_uri:
            raise ValueError("MONGODB_URI must not be empty.")
        if not self.mongodb_uri.startswith(("mongodb://", "mongodb+srv://")):
            raise ValueError("MONGODB_URI must start with 'mongodb://' or 'mongodb+srv://'.")
        if not self.mongodb_database:
            raise ValueError("MONGODB_DATABASE must not be empty.")
        if not self.weather_collection:
            raise ValueError("WEATHER_COLLECTION must not be empty.")
        if self.mongodb_timeout_ms <= 0:
            raise ValueError("MONGODB_TIMEOUT_MS must be > 0.")
        if not (0 <= self.weather_special_chance <= 1):
            raise ValueError("WEATHER_SPECIAL_CHANCE must be between 0 and 1.")
        if self.weather_history_depth < 1:
            raise ValueError("WEATHER_HISTORY_DEPTH must be >= 1.")
        if self.weather_temperature_max_delta_f < 0:
            raise ValueError("WEATHER_TEMPERATURE_MAX_DELTA_F must be >= 0.")
        if not (0 <= self.weather_period_lookback_hours <= 48):
            raise ValueError("WEATHER_PERIOD_LOOKBACK_HOURS must be between 0 and 48.")
        if self.log_level not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"LOG_LEVEL {self.log_level!r} is not a logging level name.")
        return self

    def safe_summary(self) -> dict[str, Any]:
        """Return config summary safe for logging (no credentials)."""
        return {
            "app_env": self.app_env,
            "mongodb_uri": redact_mongo_uri(self.mongodb_uri),
            "mongodb_database": self.mongodb_database,
            "weather_collection": self.weather_collection,
            "weather_special_chance": self.weather_special_chance,
            "weather_history_depth": self.weather_history_depth,
            "weather_temperature_max_delta_f": self.weather_temperature_max_delta_f,
            "weather_period_lookback_hours": self.weather_period_lookback_hours,
            "log_level": self.log_level,
        }


def load_settings() -> Settings:
    """Load and validate settings, raising ConfigError on failure."""
    try:
        return Settings()
    except ValidationError as exc:
        raise ConfigError(f"Invalid configuration: {exc}") from exc
    except OSError as exc:
        raise ConfigError(f"Failed reading environment/.env: {exc}") from exc
