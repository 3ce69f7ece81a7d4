"""Weather period boundaries and season calendar."""

from __future__ import annotations

from datetime import UTC, date, datetime, timedelta, timezone

import pytest

from rotw_weather.exceptions import WeatherConfigurationError
from rotw_weather.weather.models import Season
from rotw_weather.weather.periods import (
    current_period_bounds,
    current_season,
    next_period_bounds,
    season_for_date,
)


def test_before_cutover_belongs_to_previous_day() -> None:
    period = current_period_bounds(datetime(2024, 3, 15, 12, 0, tzinfo=UTC))
    assert period.start == datetime(2024, 3, 14, 13, 0, tzinfo=UTC)
    assert period.end == datetime(2024, 3, 15, 12, 59, 59, 999000, tzinfo=UTC)


def test_at_cutover_starts_new_period() -> None:
    reference = datetime(2024, 3, 15, 13, 0, 42, tzinfo=UTC)
    period = current_period_bounds(reference)
    assert period.start == reference.replace(second=0)
    assert period.contains(reference)


def test_last_millisecond_stays_in_period() -> None:
    reference = datetime(2024, 3, 15, 12, 59, 59, 999000, tzinfo=UTC)
    period = current_period_bounds(reference)
    assert period.start == datetime(2024, 3, 14, 13, 0, tzinfo=UTC)
    assert period.end == reference


@pytest.mark.parametrize(
    "reference",
    [
        datetime(2024, 1, 1, 0, 0, tzinfo=UTC),
        datetime(2024, 2, 29, 13, 0, tzinfo=UTC),
        datetime(2024, 12, 31, 23, 59, tzinfo=UTC),
        datetime(2025, 3, 30, 12, 59, tzinfo=UTC),
    ],
)
def test_current_and_next_are_contiguous(reference: datetime) -> None:
    current = current_period_bounds(reference)
    following = next_period_bounds(reference)
    assert current.exclusive_end == following.start
    assert current.end + timedelta(milliseconds=1) == following.start
    assert current.duration == timedelta(hours=24)
    assert following.duration == timedelta(hours=24)
    assert following.start - current.start == timedelta(hours=24)


def test_non_utc_reference_is_converted() -> None:
    eastern = timezone(timedelta(hours=-5))
    # 08:30 EST is 13:30 UTC.
    period = current_period_bounds(datetime(2024, 3, 15, 8, 30, tzinfo=eastern))
    assert period.start == datetime(2024, 3, 15, 13, 0, tzinfo=UTC)


def test_naive_reference_is_read_as_utc() -> None:
    period = current_period_bounds(datetime(2024, 3, 15, 14, 0))
    assert period.start == datetime(2024, 3, 15, 13, 0, tzinfo=UTC)


def test_invalid_reference_raises() -> None:
    with pytest.raises(WeatherConfigurationError):
        current_period_bounds("2024-03-15T12:00:00Z")  # type: ignore[arg-type]


@pytest.mark.parametrize(
    ("day", "expected"),
    [
        (date(2024, 3, 20), Season.WINTER),
        (date(2024, 3, 21), Season.SPRING),
        (date(2024, 6, 20), Season.SPRING),
        (date(2024, 6, 21), Season.SUMMER),
        (date(2024, 9, 21), Season.FALL),
        (date(2024, 12, 20), Season.FALL),
        (date(2024, 12, 21), Season.WINTER),
        (date(2025, 1, 5), Season.WINTER),
    ],
)
def test_season_calendar(day: date, expected: Season) -> None:
    assert season_for_date(day) is expected


def test_current_season_uses_utc_date() -> None:
    # 23:30 on Jun 20 at UTC-5 is already Jun 21 in UTC.
    local = datetime(2024, 6, 20, 23, 30, tzinfo=timezone(timedelta(hours=-5)))
    assert current_season(local) is Season.SUMMER
