"""Village weather: periods, generation, persistence and derived effects."""

from .effects import calculate_weather_damage, overlay_for, select_banner_index, stable_hash32
from .generator import GeneratedWeather, WeatherGenerator
from .models import (
    GUARANTEED_PROBABILITY,
    Period,
    PostedState,
    ScheduledSpecialWeather,
    Season,
    Village,
    WeatherCondition,
    WeatherRecord,
)
from .periods import current_period_bounds, current_season, next_period_bounds
from .repository import MongoWeatherRepository, WeatherRepository
from .sampler import WeightedSampler
from .service import WeatherService
from .tables import DEFAULT_TABLES, WeatherTables

__all__ = [
    "DEFAULT_TABLES",
    "GUARANTEED_PROBABILITY",
    "GeneratedWeather",
    "MongoWeatherRepository",
    "Period",
    "PostedState",
    "ScheduledSpecialWeather",
    "Season",
    "Village",
    "WeatherCondition",
    "WeatherGenerator",
    "WeatherRecord",
    "WeatherRepository",
    "WeatherService",
    "WeatherTables",
    "WeightedSampler",
    "calculate_weather_damage",
    "current_period_bounds",
    "current_season",
    "next_period_bounds",
    "overlay_for",
    "select_banner_index",
    "stable_hash32",
]
