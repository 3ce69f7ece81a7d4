"""Weighted weather generation with history-based smoothing."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import Any

from pydantic import BaseModel, Field

from ..exceptions import WeatherGenerationError
from ..log_setup import child_logger
from .conditions import adjacent_labels, applicable, labels_within, parse_fahrenheit, parse_wind_kph
from .models import Season, Village, WeatherCondition, WeatherRecord
from .sampler import WeightedSampler
from .tables import DEFAULT_TABLES, Dimension, SeasonTable, WeatherTables

CLOUDY_LABELS = frozenset({"Cloudy", "Partly cloudy"})
RAIN_LABELS = frozenset({"Rain", "Light Rain", "Heavy Rain", "Thunderstorm"})
STORM_LABELS = frozenset({"Thunderstorm", "Heavy Rain"})
NO_REPEAT_SPECIALS = frozenset({"Blight Rain"})

DEFAULT_SPECIAL_CHANCE = 0.3
DEFAULT_MAX_DELTA_F = 20
DEFAULT_HISTORY_DEPTH = 3


class SmoothingContext(BaseModel):
    """What recent history says about today's draw."""

    previous: WeatherRecord | None = None
    cloudy_streak: int = 0
    rain_streak: int = 0
    storm_yesterday: bool = False
    fallbacks: list[str] = Field(default_factory=list)


class GeneratedWeather(BaseModel):
    """A freshly sampled forecast, not yet tied to a period."""

    village: Village
    season: Season
    temperature: WeatherCondition
    wind: WeatherCondition
    precipitation: WeatherCondition
    special: WeatherCondition | None = None
    context: SmoothingContext


def smoothing_context(history: Sequence[WeatherRecord], depth: int = DEFAULT_HISTORY_DEPTH) -> SmoothingContext:
    """Summarize up to ``depth`` records, most recent first."""
    recent = list(history[:depth])
    previous = recent[0] if recent else None
    cloudy_streak = sum(1 for r in recent[:2] if r.precipitation.label in CLOUDY_LABELS)
    rain_streak = sum(1 for r in recent[:3] if r.precipitation.label in RAIN_LABELS)
    storm_yesterday = previous is not None and previous.precipitation.label in STORM_LABELS
    return SmoothingContext(
        previous=previous,
        cloudy_streak=cloudy_streak,
        rain_streak=rain_streak,
        storm_yesterday=storm_yesterday,
    )


class WeatherGenerator:
    """Produce one village's weather for a season from tables, history and a sampler."""

    def __init__(
        self,
        tables: WeatherTables | None = None,
        sampler: WeightedSampler | None = None,
        *,
        special_chance: float = DEFAULT_SPECIAL_CHANCE,
        max_delta_f: int = DEFAULT_MAX_DELTA_F,
        history_depth: int = DEFAULT_HISTORY_DEPTH,
        logger: logging.Logger | None = None,
    ) -> None:
        self.tables = tables or DEFAULT_TABLES
        self.logger = logger or child_logger("weather.generator")
        self.sampler = sampler or WeightedSampler(logger=self.logger)
        self.special_chance = special_chance
        self.max_delta_f = max_delta_f
        self.history_depth = history_depth

    @classmethod
    def from_settings(
        cls,
        settings: Any,
        *,
        tables: WeatherTables | None = None,
        sampler: WeightedSampler | None = None,
        logger: logging.Logger | None = None,
    ) -> WeatherGenerator:
        return cls(
            tables=tables,
            sampler=sampler,
            special_chance=settings.weather_special_chance,
            max_delta_f=settings.weather_temperature_max_delta_f,
            history_depth=settings.weather_history_depth,
            logger=logger,
        )

    def generate(
        self,
        village: Village | str,
        season: Season | str,
        history: Sequence[WeatherRecord] = (),
    ) -> GeneratedWeather:
        """Sample temperature, wind, precipitation and an optional special.

        ``history`` is ordered most recent first. Raises WeatherConfigurationError
        when no table exists for the pair, WeatherGenerationError when a dimension
        cannot be sampled.
        """
        table = self.tables.season_table(village, season)
        context = smoothing_context(history, self.history_depth)

        temperature = self._sample_temperature(table, context)
        wind = self._sample_wind(table, context)
        temperature_f = parse_fahrenheit(temperature)
        wind_kph = parse_wind_kph(wind)
        precipitation = self._sample_precipitation(table, context, temperature_f, wind_kph)

        if not temperature or not wind or not precipitation:
            raise WeatherGenerationError(
                f"Failed to generate weather labels for {table.village.value}."
            )

        special = None
        if table.special and self.sampler.chance(self.special_chance):
            special = self._sample_special(table, context, temperature_f, wind_kph, precipitation)

        result = GeneratedWeather(
            village=table.village,
            season=table.season,
            temperature=self._condition(table, "temperature", temperature),
            wind=self._condition(table, "wind", wind),
            precipitation=self._condition(table, "precipitation", precipitation),
            special=self._condition(table, "special", special) if special else None,
            context=context,
        )
        self.logger.debug(
            "Generated weather village=%s season=%s temperature=%s wind=%s precipitation=%s special=%s",
            table.village.value,
            table.season.value,
            temperature,
            wind,
            precipitation,
            special,
        )
        return result

    def _sample_temperature(self, table: SeasonTable, context: SmoothingContext) -> str:
        options = table.temperature
        weights = self.tables.weights("temperature")
        modifiers = table.modifiers_for("temperature")
        previous = context.previous
        if previous is None or not previous.temperature.label:
            return self.sampler.choice(options, weights, modifiers)

        max_delta = 0 if context.storm_yesterday else self.max_delta_f
        filtered = labels_within(options, parse_fahrenheit(previous.temperature.label), max_delta)
        if not filtered:
            self._fallback(table, context, "temperature", previous.temperature.label)
            return self.sampler.choice(options, weights, modifiers)
        return self.sampler.choice(filtered, weights, modifiers)

    def _sample_wind(self, table: SeasonTable, context: SmoothingContext) -> str:
        # Wind draws use base weights only.
        options = table.wind
        weights = self.tables.weights("wind")
        previous = context.previous
        if previous is None or not previous.wind.label:
            return self.sampler.choice(options, weights)

        filtered = adjacent_labels(options, previous.wind.label)
        if not filtered:
            self._fallback(table, context, "wind", previous.wind.label)
            return self.sampler.choice(options, weights)
        return self.sampler.choice(filtered, weights)

    def _sample_precipitation(
        self,
        table: SeasonTable,
        context: SmoothingContext,
        temperature_f: int,
        wind_kph: int,
    ) -> str:
        options = table.precipitation
        if not options:
            raise WeatherGenerationError(
                f"No precipitation options for {table.village.value} in {table.season.value}."
            )
        weights = self.tables.weights("precipitation")
        modifiers = table.modifiers_for("precipitation")
        eligible = []
        for label in options:
            definition = self.tables.precipitation(label)
            if definition is None or applicable(
                definition.conditions, temperature_f=temperature_f, wind_kph=wind_kph
            ):
                eligible.append(label)
        if not eligible:
            self._fallback(table, context, "precipitation", f"{temperature_f}F/{wind_kph}kph")
            return self.sampler.choice(options, weights, modifiers)
        return self.sampler.choice(eligible, weights, modifiers)

    def _sample_special(
        self,
        table: SeasonTable,
        context: SmoothingContext,
        temperature_f: int,
        wind_kph: int,
        precipitation: str,
    ) -> str | None:
        previous_special = None
        if context.previous is not None and context.previous.special is not None:
            previous_special = context.previous.special.label

        eligible = []
        for label in table.special:
            if label in NO_REPEAT_SPECIALS and label == previous_special:
                continue
            definition = self.tables.special(label)
            if definition is None or applicable(
                definition.conditions,
                temperature_f=temperature_f,
                wind_kph=wind_kph,
                precipitation_label=precipitation,
            ):
                eligible.append(label)

        if not eligible:
            self.logger.info(
                "No special weather eligible for %s under current conditions.",
                table.village.value,
            )
            return None
        chosen = self.sampler.choice(
            eligible,
            self.tables.weights("special"),
            table.modifiers_for("special"),
        )
        if self.tables.special(chosen) is None:
            self.logger.warning(
                "Special weather label %r has no definition for %s; dropping it.",
                chosen,
                table.village.value,
            )
            return None
        return chosen

    def _condition(self, table: SeasonTable, dimension: Dimension, label: str) -> WeatherCondition:
        probability = self.sampler.probability(
            table.labels(dimension),
            label,
            self.tables.weights(dimension),
            table.modifiers_for(dimension),
        )
        return WeatherCondition(
            label=label,
            emoji=self.tables.emoji(dimension, label),
            probability=probability,
        )

    def _fallback(self, table: SeasonTable, context: SmoothingContext, dimension: str, anchor: str) -> None:
        context.fallbacks.append(dimension)
        self.logger.warning(
            "smoothing_fallback dimension=%s village=%s season=%s anchor=%s; using full season list.",
            dimension,
            table.village.value,
            table.season.value,
            anchor,
        )
