"""Label parsing and applicability predicates."""

from __future__ import annotations

import pytest

from rotw_weather.weather.conditions import (
    adjacent_labels,
    applicable,
    labels_within,
    numeric_conditions_met,
    parse_fahrenheit,
    parse_wind_kph,
    precipitation_conditions_met,
)

WINDS = [
    "< 2(km/h) // Calm",
    "2 - 12(km/h) // Breeze",
    "13 - 30(km/h) // Moderate",
    ">= 118(km/h) // Hurricane",
]


@pytest.mark.parametrize(
    ("label", "expected"),
    [
        ("52°F / 11°C - Cool", 52),
        ("0°F / -18°C - Frigid", 0),
        ("Mystery", 0),
        (None, 0),
    ],
)
def test_parse_fahrenheit(label: str | None, expected: int) -> None:
    assert parse_fahrenheit(label) == expected


@pytest.mark.parametrize(
    ("label", "expected"),
    [
        ("< 2(km/h) // Calm", 1),
        ("2 - 12(km/h) // Breeze", 7),
        ("13 - 30(km/h) // Moderate", 22),
        (">= 118(km/h) // Hurricane", 118),
        ("still", 0),
    ],
)
def test_parse_wind(label: str, expected: int) -> None:
    assert parse_wind_kph(label) == expected


def test_numeric_conditions() -> None:
    assert numeric_conditions_met([">= 36°F", "<= 44°F"], 40)
    assert not numeric_conditions_met([">= 36°F", "<= 44°F"], 45)
    assert numeric_conditions_met(["any"], -100)
    assert numeric_conditions_met(None, 5)
    assert numeric_conditions_met(["warm-ish"], 5)


def test_precipitation_families() -> None:
    assert precipitation_conditions_met(["rain"], "Light Rain")
    assert precipitation_conditions_met(["snow"], "Blizzard")
    assert precipitation_conditions_met(["sunny", "partly cloudy"], "Partly cloudy")
    assert precipitation_conditions_met(["Heavy Rain"], "Heavy Rain")
    assert not precipitation_conditions_met(["rain"], "Thunderstorm")
    assert not precipitation_conditions_met(["sunny"], "Fog")


def test_applicable_combines_dimensions() -> None:
    conditions = {"temperature": [">= 44°F"], "wind": ["any"], "precipitation": ["rain"]}
    assert applicable(conditions, temperature_f=61, wind_kph=22, precipitation_label="Rain")
    assert not applicable(conditions, temperature_f=36, wind_kph=22, precipitation_label="Rain")
    assert not applicable(conditions, temperature_f=61, wind_kph=22, precipitation_label="Sunny")
    # Without a precipitation label only the numeric checks apply.
    assert applicable(conditions, temperature_f=61, wind_kph=22)
    assert applicable({}, temperature_f=0, wind_kph=0)


def test_labels_within() -> None:
    labels = ["44°F / 6°C - Brisk", "61°F / 16°C - Mild", "82°F / 28°C - Warm"]
    assert labels_within(labels, 61, 20) == labels[:2]
    assert labels_within(labels, 61, 0) == ["61°F / 16°C - Mild"]
    assert labels_within(labels, 10, 5) == []


def test_adjacent_labels() -> None:
    assert adjacent_labels(WINDS, WINDS[0]) == WINDS[:2]
    assert adjacent_labels(WINDS, WINDS[2]) == WINDS[1:4]
    assert adjacent_labels(WINDS, WINDS[-1]) == WINDS[-2:]
    assert adjacent_labels(WINDS, "unknown") == []
