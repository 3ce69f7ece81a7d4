"""Typed models for village weather records and weather periods."""

from __future__ import annotations

from datetime import UTC, date, datetime, timedelta
from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from ..exceptions import WeatherConfigurationError

GUARANTEED_PROBABILITY = "Guaranteed (Song of Storms)"


class Village(str, Enum):
    """Villages that receive a daily forecast."""

    RUDANIA = "Rudania"
    INARIKO = "Inariko"
    VHINTL = "Vhintl"

    @classmethod
    def normalize(cls, name: str | Village | None) -> Village:
        """Resolve a user-supplied village name ("rudania", "VHINTL") to a member."""
        if isinstance(name, Village):
            return name
        text = str(name or "").strip()
        if not text:
            raise WeatherConfigurationError("A village is required.")
        capitalized = text[0].upper() + text[1:].lower()
        try:
            return cls(capitalized)
        except ValueError as exc:
            raise WeatherConfigurationError(f"Unknown village {name!r}.") from exc


class Season(str, Enum):
    SPRING = "spring"
    SUMMER = "summer"
    FALL = "fall"
    WINTER = "winter"

    @classmethod
    def normalize(cls, name: str | Season | None) -> Season:
        if isinstance(name, Season):
            return name
        text = str(name or "").strip().lower()
        if text == "autumn":
            text = "fall"
        try:
            return cls(text)
        except ValueError as exc:
            raise WeatherConfigurationError(f"Unknown season {name!r}.") from exc

    @classmethod
    def for_date(cls, day: date) -> Season:
        key = (day.month, day.day)
        for starts_on, season in _SEASON_STARTS:
            if key >= starts_on:
                return season
        return cls.WINTER


# (month, day) on which each season begins, latest first.
_SEASON_STARTS: tuple[tuple[tuple[int, int], Season], ...] = (
    ((12, 21), Season.WINTER),
    ((9, 21), Season.FALL),
    ((6, 21), Season.SUMMER),
    ((3, 21), Season.SPRING),
)


class PostedState(str, Enum):
    """Announcement state; legacy records predate the posted flag."""

    NOT_POSTED = "not_posted"
    POSTED = "posted"
    LEGACY_UNKNOWN = "legacy_unknown"


class WeatherCondition(BaseModel):
    """One weather dimension as shown to players."""

    label: str
    emoji: str
    probability: str

    @property
    def is_guaranteed(self) -> bool:
        return "guaranteed" in self.probability.lower()


def _as_utc(value: datetime) -> datetime:
    if value.tzinfo is None:
        return value.replace(tzinfo=UTC)
    return value.astimezone(UTC)


class WeatherRecord(BaseModel):
    """Persisted weather for one village and one weather period."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    id: Any | None = Field(default=None, alias="_id")
    village: Village
    date: datetime
    season: Season
    temperature: WeatherCondition
    wind: WeatherCondition
    precipitation: WeatherCondition
    special: WeatherCondition | None = None
    posted_to_discord: bool | None = Field(default=None, alias="postedToDiscord")
    posted_at: datetime | None = Field(default=None, alias="postedAt")
    pm_posted_to_discord: bool | None = Field(default=None, alias="pmPostedToDiscord")
    pm_posted_at: datetime | None = Field(default=None, alias="pmPostedAt")

    @model_validator(mode="before")
    @classmethod
    def default_season(cls, data: Any) -> Any:
        """Older documents carry no season; derive it from the record date."""
        if isinstance(data, dict) and not data.get("season") and isinstance(data.get("date"), datetime):
            data = {**data, "season": Season.for_date(_as_utc(data["date"]).date())}
        return data

    @field_validator("date", "posted_at", "pm_posted_at")
    @classmethod
    def ensure_utc(cls, value: datetime | None) -> datetime | None:
        """Mongo hands back naive UTC datetimes unless the client is tz-aware."""
        if value is None:
            return None
        return _as_utc(value)

    @field_validator("village", mode="before")
    @classmethod
    def coerce_village(cls, value: Any) -> Any:
        if isinstance(value, str) and value:
            return value[0].upper() + value[1:].lower()
        return value

    @field_validator("season", mode="before")
    @classmethod
    def coerce_season(cls, value: Any) -> Any:
        if isinstance(value, str):
            text = value.strip().lower()
            return "fall" if text == "autumn" else text
        return value

    @property
    def posted_state(self) -> PostedState:
        if self.posted_to_discord is None:
            return PostedState.LEGACY_UNKNOWN
        return PostedState.POSTED if self.posted_to_discord else PostedState.NOT_POSTED

    @property
    def is_posted(self) -> bool:
        """Legacy records without the flag count as posted."""
        return self.posted_state is not PostedState.NOT_POSTED

    @property
    def has_guaranteed_special(self) -> bool:
        return self.special is not None and self.special.is_guaranteed

    def to_document(self) -> dict[str, Any]:
        """Return the Mongo document shape (camelCase keys, enum values, no empty fields)."""
        document: dict[str, Any] = {
            "village": self.village.value,
            "date": self.date,
            "season": self.season.value,
            "temperature": self.temperature.model_dump(),
            "wind": self.wind.model_dump(),
            "precipitation": self.precipitation.model_dump(),
        }
        if self.special is not None:
            document["special"] = self.special.model_dump()
        if self.posted_to_discord is not None:
            document["postedToDiscord"] = self.posted_to_discord
        if self.posted_at is not None:
            document["postedAt"] = self.posted_at
        if self.pm_posted_to_discord is not None:
            document["pmPostedToDiscord"] = self.pm_posted_to_discord
        if self.pm_posted_at is not None:
            document["pmPostedAt"] = self.pm_posted_at
        return document


class Period(BaseModel):
    """A weather day: ``start`` inclusive through ``end`` (last millisecond)."""

    start: datetime
    end: datetime

    @property
    def exclusive_end(self) -> datetime:
        return self.start + timedelta(days=1)

    @property
    def duration(self) -> timedelta:
        return self.exclusive_end - self.start

    def contains(self, instant: datetime) -> bool:
        return self.start <= _as_utc(instant) < self.exclusive_end

    def shifted(self, days: int) -> Period:
        delta = timedelta(days=days)
        return Period(start=self.start + delta, end=self.end + delta)


class ScheduledSpecialWeather(BaseModel):
    """Result of scheduling a guaranteed special for the next period."""

    record: WeatherRecord
    period_start: datetime
    period_end: datetime
