"""Static season tables: coverage and lookups."""

from __future__ import annotations

import pytest

from rotw_weather.exceptions import WeatherConfigurationError
from rotw_weather.weather import data
from rotw_weather.weather.conditions import applicable, parse_fahrenheit, parse_wind_kph
from rotw_weather.weather.models import Season, Village
from rotw_weather.weather.tables import DEFAULT_TABLES


@pytest.mark.parametrize("village", list(Village))
@pytest.mark.parametrize("season", list(Season))
def test_every_village_season_has_a_table(village: Village, season: Season) -> None:
    table = DEFAULT_TABLES.season_table(village, season)
    assert table.temperature
    assert table.wind
    assert table.precipitation


def test_every_table_label_is_defined() -> None:
    precipitation_labels = {d["label"] for d in data.PRECIPITATION_DEFINITIONS}
    special_labels = {d["label"] for d in data.SPECIAL_DEFINITIONS}
    for village in Village:
        for season in Season:
            table = DEFAULT_TABLES.season_table(village, season)
            assert set(table.temperature) <= set(data.TEMPERATURE_WEIGHTS), (village, season)
            assert set(table.wind) <= set(data.WIND_WEIGHTS), (village, season)
            assert set(table.precipitation) <= precipitation_labels, (village, season)
            assert set(table.special) <= special_labels, (village, season)


# Listed, but their conditions exclude every temperature of the season.
KNOWN_UNREACHABLE_PRECIPITATION = {
    (Village.RUDANIA, Season.SUMMER, "Sleet"),
    (Village.RUDANIA, Season.FALL, "Heat Lightning"),
    (Village.INARIKO, Season.FALL, "Heat Lightning"),
}


def test_precipitation_reachability() -> None:
    """A listed precipitation is drawable when some table temperature/wind satisfies it."""
    unreachable = set()
    for village in Village:
        for season in Season:
            table = DEFAULT_TABLES.season_table(village, season)
            for label in table.precipitation:
                definition = DEFAULT_TABLES.precipitation(label)
                assert definition is not None
                reachable = any(
                    applicable(
                        definition.conditions,
                        temperature_f=parse_fahrenheit(temperature),
                        wind_kph=parse_wind_kph(wind),
                    )
                    for temperature in table.temperature
                    for wind in table.wind
                )
                if not reachable:
                    unreachable.add((village, season, label))
    assert unreachable == KNOWN_UNREACHABLE_PRECIPITATION


def test_lookup_accepts_loose_names() -> None:
    table = DEFAULT_TABLES.season_table("rudania", "autumn")
    assert table.village is Village.RUDANIA
    assert table.season is Season.FALL


def test_unknown_village_raises() -> None:
    with pytest.raises(WeatherConfigurationError):
        DEFAULT_TABLES.season_table("Hateno", "spring")


def test_find_special_is_case_insensitive() -> None:
    assert DEFAULT_TABLES.find_special("  blight rain ").label == "Blight Rain"
    with pytest.raises(WeatherConfigurationError):
        DEFAULT_TABLES.find_special("Sandstorm")
    with pytest.raises(WeatherConfigurationError):
        DEFAULT_TABLES.find_special("")


def test_emoji_fallbacks() -> None:
    assert DEFAULT_TABLES.emoji("temperature", "1000°F / 538°C - Lava") == "🌡️"
    assert DEFAULT_TABLES.emoji("wind", "Gusty") == "💨"
    assert DEFAULT_TABLES.emoji("precipitation", "Mist") == "🌧️"
    assert DEFAULT_TABLES.emoji("precipitation", "Sunny") == "☀️"
