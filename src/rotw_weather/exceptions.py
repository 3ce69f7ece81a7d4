"""Application exception classes."""


class WeatherError(Exception):
    """Base class for weather engine failures."""


class ConfigError(WeatherError):
    """Raised when configuration is invalid or incomplete."""


class WeatherConfigurationError(WeatherError):
    """Raised for missing tables, unknown villages/labels or invalid period input."""


class WeatherGenerationError(WeatherError):
    """Raised when sampling cannot produce a complete weather record."""


class WeatherPersistenceError(WeatherError):
    """Raised when the store does not reliably commit or return a weather record."""


class SpecialWeatherConflictError(WeatherError):
    """Raised when the target period already carries a guaranteed special."""

    code = "SPECIAL_WEATHER_ALREADY_SET"

    def __init__(
        self,
        message: str,
        *,
        village: str,
        existing_label: str | None = None,
    ) -> None:
        super().__init__(message)
        self.village = village
        self.existing_label = existing_label
