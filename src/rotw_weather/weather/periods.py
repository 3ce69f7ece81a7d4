"""Weather-day arithmetic: 13:00 UTC cutover periods and the season calendar."""

from __future__ import annotations

from datetime import UTC, date, datetime, timedelta

from ..exceptions import WeatherConfigurationError
from .models import Period, Season

PERIOD_START_HOUR_UTC = 13
PERIOD_LENGTH = timedelta(days=1)
_LAST_MILLISECOND = timedelta(milliseconds=1)


def _coerce_reference(reference: datetime | None) -> datetime:
    if reference is None:
        return datetime.now(UTC)
    if not isinstance(reference, datetime):
        raise WeatherConfigurationError(
            f"Reference instant must be a datetime, got {type(reference).__name__}."
        )
    if reference.tzinfo is None:
        return reference.replace(tzinfo=UTC)
    return reference.astimezone(UTC)


def current_period_bounds(reference: datetime | None = None) -> Period:
    """Return the weather day containing ``reference`` (naive values are read as UTC)."""
    now = _coerce_reference(reference)
    start = datetime(now.year, now.month, now.day, PERIOD_START_HOUR_UTC, tzinfo=UTC)
    if now.hour < PERIOD_START_HOUR_UTC:
        start -= PERIOD_LENGTH
    end = start + PERIOD_LENGTH - _LAST_MILLISECOND
    if end <= start:
        raise WeatherConfigurationError(
            f"Invalid period bounds: end {end.isoformat()} is not after start {start.isoformat()}."
        )
    return Period(start=start, end=end)


def next_period_bounds(reference: datetime | None = None) -> Period:
    """Return the weather day after the current one, shifted rather than recomputed."""
    current = current_period_bounds(reference)
    following = current.shifted(days=1)
    if following.start <= current.start or following.end <= current.end:
        raise WeatherConfigurationError(
            "Invalid next period bounds: next period is not after the current period."
        )
    return following


def season_for_date(day: date) -> Season:
    """Spring from Mar 21, summer from Jun 21, fall from Sep 21, winter from Dec 21."""
    return Season.for_date(day)


def current_season(reference: datetime | None = None) -> Season:
    return season_for_date(_coerce_reference(reference).date())
