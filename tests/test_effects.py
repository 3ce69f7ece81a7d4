"""Banner hashing, overlay resolution and village damage."""

from __future__ import annotations

from datetime import UTC, datetime

import pytest

from rotw_weather.exceptions import WeatherConfigurationError
from rotw_weather.weather.effects import (
    banner_seed,
    calculate_weather_damage,
    overlay_for,
    select_banner_index,
    stable_hash32,
)
from rotw_weather.weather.models import Season, Village, WeatherCondition, WeatherRecord


def _record(
    wind: str = "< 2(km/h) // Calm",
    precipitation: str = "Sunny",
    special: str | None = None,
    record_id: str | None = None,
) -> WeatherRecord:
    def condition(label: str) -> WeatherCondition:
        return WeatherCondition(label=label, emoji="", probability="5.0%")

    return WeatherRecord(
        _id=record_id,
        village=Village.RUDANIA,
        date=datetime(2024, 3, 15, 13, 0, tzinfo=UTC),
        season=Season.WINTER,
        temperature=condition("61°F / 16°C - Mild"),
        wind=condition(wind),
        precipitation=condition(precipitation),
        special=condition(special) if special else None,
    )


def test_fnv1a_reference_values() -> None:
    assert stable_hash32("") == 0x811C9DC5
    assert stable_hash32("a") == 0xE40C292C
    assert stable_hash32("foobar") == 0xBF9CF968
    assert stable_hash32(None) == stable_hash32("")


def test_hash_is_unsigned_32_bit() -> None:
    for text in ("Rudania|65f0c0ffee", "Inariko|2024-03-15T13:00:00.000Z", "🌧️ rain"):
        assert 0 <= stable_hash32(text) < 2**32


def test_banner_seed_prefers_id_then_date() -> None:
    assert banner_seed("rudania", _record(record_id="65f0")) == "Rudania|65f0"
    assert banner_seed(Village.RUDANIA, _record()) == "Rudania|2024-03-15T13:00:00.000Z"
    assert banner_seed("Vhintl", None) == "Vhintl|no-seed"


def test_banner_choice_is_stable_for_one_record() -> None:
    record = _record(record_id="65f0c0ffee")
    morning = select_banner_index("Rudania", record, 3)
    evening = select_banner_index("Rudania", record.model_copy(), 3)
    assert morning == evening
    assert 0 <= morning < 3


def test_banner_choice_requires_banners() -> None:
    with pytest.raises(WeatherConfigurationError):
        select_banner_index("Rudania", _record(), 0)


def test_overlay_special_takes_priority() -> None:
    assert overlay_for(_record(precipitation="Rain", special="Blight Rain")) == "blightrain"
    assert overlay_for(_record(precipitation="Heavy Snow", special="Avalanche")) == "snow"
    assert overlay_for(_record(precipitation="Thunderstorm")) == "thunderstorm"
    assert overlay_for(_record(precipitation="Sunny")) is None


def test_damage_totals() -> None:
    damage = calculate_weather_damage(
        _record(wind=">= 118(km/h) // Hurricane", precipitation="Blizzard", special="Blight Rain")
    )
    assert (damage.wind, damage.precipitation, damage.special, damage.total) == (2, 5, 25, 32)

    calm = calculate_weather_damage(_record())
    assert calm.total == 0
    assert calculate_weather_damage(None).total == 0

    storm = calculate_weather_damage(_record(wind="41 - 62(km/h) // Strong", special="Lightning Storm"))
    assert storm.total == 6
