"""Typed access to the static weather tables."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any, Literal

from pydantic import BaseModel, Field

from ..exceptions import WeatherConfigurationError
from . import data
from .models import Season, Village

Dimension = Literal["temperature", "wind", "precipitation", "special"]

DEFAULT_EMOJI: dict[str, str] = {
    "temperature": "🌡️",
    "wind": "💨",
    "precipitation": "🌧️",
    "special": "✨",
}


class LabelDefinition(BaseModel):
    """A precipitation or special label with its applicability conditions."""

    label: str
    emoji: str
    conditions: dict[str, list[str]] = Field(default_factory=dict)


class SeasonTable(BaseModel):
    """Candidate labels and weight modifiers for one village in one season."""

    village: Village
    season: Season
    temperature: list[str]
    wind: list[str]
    precipitation: list[str]
    special: list[str] = Field(default_factory=list)
    modifiers: dict[str, dict[str, float]] = Field(default_factory=dict)

    def labels(self, dimension: Dimension) -> list[str]:
        return list(getattr(self, dimension))

    def modifiers_for(self, dimension: Dimension) -> dict[str, float]:
        return dict(self.modifiers.get(dimension, {}))


class WeatherTables:
    """Label lists, base weights, modifiers and definitions used by the generator."""

    def __init__(
        self,
        *,
        season_labels: Mapping[str, Mapping[str, Mapping[str, Sequence[str]]]],
        weight_modifiers: Mapping[str, Mapping[str, Mapping[str, Mapping[str, float]]]],
        weights: Mapping[str, Mapping[str, float]],
        emoji: Mapping[str, Mapping[str, str]],
        precipitation_definitions: Sequence[Mapping[str, Any]],
        special_definitions: Sequence[Mapping[str, Any]],
    ) -> None:
        self._season_labels = season_labels
        self._weight_modifiers = weight_modifiers
        self._weights = weights
        self._emoji = emoji
        self._precipitation = {
            d["label"]: LabelDefinition.model_validate(d) for d in precipitation_definitions
        }
        self._specials = {d["label"]: LabelDefinition.model_validate(d) for d in special_definitions}

    @classmethod
    def default(cls) -> WeatherTables:
        return cls(
            season_labels=data.SEASON_LABELS,
            weight_modifiers=data.WEIGHT_MODIFIERS,
            weights={
                "temperature": data.TEMPERATURE_WEIGHTS,
                "wind": data.WIND_WEIGHTS,
                "precipitation": data.PRECIPITATION_WEIGHTS,
                "special": data.SPECIAL_WEIGHTS,
            },
            emoji={"temperature": data.TEMPERATURE_EMOJI, "wind": data.WIND_EMOJI},
            precipitation_definitions=data.PRECIPITATION_DEFINITIONS,
            special_definitions=data.SPECIAL_DEFINITIONS,
        )

    def season_table(self, village: Village | str, season: Season | str) -> SeasonTable:
        """Return the table for a village/season pair or fail fast."""
        village = Village.normalize(village)
        season = Season.normalize(season)
        seasons = self._season_labels.get(village.value)
        labels = seasons.get(season.value) if seasons else None
        if not labels:
            raise WeatherConfigurationError(
                f"No season data found for {village.value} in {season.value}."
            )
        modifiers = self._weight_modifiers.get(village.value, {}).get(season.value, {})
        return SeasonTable(
            village=village,
            season=season,
            temperature=list(labels.get("temperature", [])),
            wind=list(labels.get("wind", [])),
            precipitation=list(labels.get("precipitation", [])),
            special=list(labels.get("special", [])),
            modifiers={dim: dict(values) for dim, values in modifiers.items()},
        )

    def weights(self, dimension: Dimension) -> Mapping[str, float]:
        return self._weights.get(dimension, {})

    def precipitation(self, label: str) -> LabelDefinition | None:
        return self._precipitation.get(label)

    def special(self, label: str) -> LabelDefinition | None:
        return self._specials.get(label)

    def find_special(self, label: str | None) -> LabelDefinition:
        """Case-insensitive special lookup for user input."""
        wanted = str(label or "").strip()
        if not wanted:
            raise WeatherConfigurationError("A special weather label is required.")
        for definition in self._specials.values():
            if definition.label.lower() == wanted.lower():
                return definition
        raise WeatherConfigurationError(f"Unknown special weather label {label!r}.")

    def special_labels(self) -> list[str]:
        return list(self._specials)

    def emoji(self, dimension: Dimension, label: str) -> str:
        if dimension == "precipitation":
            definition = self._precipitation.get(label)
            found = definition.emoji if definition else None
        elif dimension == "special":
            definition = self._specials.get(label)
            found = definition.emoji if definition else None
        else:
            found = self._emoji.get(dimension, {}).get(label)
        return found or DEFAULT_EMOJI[dimension]


DEFAULT_TABLES = WeatherTables.default()
