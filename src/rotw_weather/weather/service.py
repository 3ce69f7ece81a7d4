"""Current-weather retrieval, exactly-once generation and posted-state bookkeeping."""

from __future__ import annotations

import logging
from collections.abc import Callable
from datetime import UTC, datetime, timedelta
from typing import Any

from pymongo.errors import DuplicateKeyError

from ..exceptions import SpecialWeatherConflictError, WeatherPersistenceError
from ..log_setup import child_logger
from .generator import DEFAULT_HISTORY_DEPTH, WeatherGenerator
from .models import (
    GUARANTEED_PROBABILITY,
    Period,
    ScheduledSpecialWeather,
    Season,
    Village,
    WeatherCondition,
    WeatherRecord,
)
from .periods import current_period_bounds, next_period_bounds, season_for_date
from .repository import WeatherRepository

DEFAULT_LOOKBACK_HOURS = 24
DEFAULT_SCHEDULE_SOURCE = "Song of Storms"


def utc_now() -> datetime:
    return datetime.now(UTC)


class WeatherService:
    """Resolve each village's weather for the current period, generating it at most once.

    All coordination between concurrent callers happens in the repository: records
    are written with an insert-only upsert keyed on ``(village, date)`` and a losing
    writer recovers the winner's record by re-querying. Nothing is retried here.
    """

    def __init__(
        self,
        repository: WeatherRepository,
        generator: WeatherGenerator | None = None,
        *,
        lookback_hours: int = DEFAULT_LOOKBACK_HOURS,
        history_depth: int = DEFAULT_HISTORY_DEPTH,
        clock: Callable[[], datetime] | None = None,
        logger: logging.Logger | None = None,
    ) -> None:
        self.repository = repository
        self.logger = logger or child_logger("weather.service")
        self.generator = generator or WeatherGenerator(logger=self.logger)
        self.lookback = timedelta(hours=lookback_hours)
        self.history_depth = history_depth
        self.clock = clock or utc_now

    @classmethod
    def from_settings(
        cls,
        settings: Any,
        repository: WeatherRepository,
        *,
        generator: WeatherGenerator | None = None,
        clock: Callable[[], datetime] | None = None,
        logger: logging.Logger | None = None,
    ) -> WeatherService:
        return cls(
            repository,
            generator or WeatherGenerator.from_settings(settings, logger=logger),
            lookback_hours=settings.weather_period_lookback_hours,
            history_depth=settings.weather_history_depth,
            clock=clock,
            logger=logger,
        )

    def current_period_bounds(self, now: datetime | None = None) -> Period:
        return current_period_bounds(now or self.clock())

    def next_period_bounds(self, now: datetime | None = None) -> Period:
        return next_period_bounds(now or self.clock())

    async def get_current_weather(self, village: Village | str) -> WeatherRecord:
        """Return the current period's record, generating and saving it if absent."""
        village = Village.normalize(village)
        now = self.clock()
        period = current_period_bounds(now)
        next_start = next_period_bounds(now).start
        search_start = period.start - self.lookback

        found = await self.repository.find_for_period(village, search_start, next_start)
        if found is None:
            found = await self.repository.find_exact(village, period.start)
        record = self._within(found, period, village)

        if record is None:
            # A concurrent caller may have saved the record since the first read.
            record = self._within(
                await self.repository.find_for_period(village, search_start, next_start),
                period,
                village,
            )
            if record is not None:
                self.logger.info(
                    "Found weather for %s on re-check (id=%s); not generating.",
                    village.value,
                    record.id,
                )

        if record is None:
            self.logger.info(
                "No weather for %s in period starting %s; generating.",
                village.value,
                period.start.isoformat(),
            )
            record = await self._generate_and_save(
                village,
                period,
                season_for_date(period.start.date()),
                search_start=search_start,
            )
        return record

    async def get_weather_without_generation(
        self,
        village: Village | str,
        *,
        only_posted: bool = False,
    ) -> WeatherRecord | None:
        """Read-only lookup of the current period's record.

        With ``only_posted`` a record is returned only when it was posted or
        predates the posted flag.
        """
        village = Village.normalize(village)
        now = self.clock()
        period = current_period_bounds(now)
        next_start = next_period_bounds(now).start
        found = await self.repository.find_for_period(
            village,
            period.start - self.lookback,
            next_start,
            only_posted=only_posted,
        )
        record = self._within(found, period, village)
        if record is not None and only_posted and not record.is_posted:
            return None
        if record is None and only_posted:
            self.logger.info("No posted weather found for %s in current period.", village.value)
        return record

    async def mark_as_posted(
        self,
        village: Village | str,
        record: WeatherRecord | None,
    ) -> WeatherRecord | None:
        return await self._mark(village, record, "postedToDiscord", "postedAt", "posted")

    async def mark_as_pm_posted(
        self,
        village: Village | str,
        record: WeatherRecord | None,
    ) -> WeatherRecord | None:
        return await self._mark(village, record, "pmPostedToDiscord", "pmPostedAt", "PM-posted")

    async def schedule_special_weather(
        self,
        village: Village | str,
        label: str | None,
        *,
        triggered_by: str | None = None,
        recipient: str | None = None,
        source: str = DEFAULT_SCHEDULE_SOURCE,
    ) -> ScheduledSpecialWeather:
        """Force a special onto the next period's record.

        Raises WeatherConfigurationError for a missing village or unknown label and
        SpecialWeatherConflictError when the period already has a guaranteed special.
        """
        village = Village.normalize(village)
        definition = self.generator.tables.find_special(label)
        period = next_period_bounds(self.clock())
        season = season_for_date(period.start.date())

        record = await self.repository.find_for_period(village, period.start, period.exclusive_end)
        if record is None:
            record = await self.repository.find_exact(village, period.start)
        if record is None:
            record = await self._generate_and_save(
                village,
                period,
                season,
                search_start=period.start,
                include_special=False,
            )

        if record.has_guaranteed_special:
            raise self._conflict(village, record)

        special = WeatherCondition(
            label=definition.label,
            emoji=definition.emoji,
            probability=GUARANTEED_PROBABILITY,
        )
        extra: dict[str, Any] = {"season": record.season.value}
        if not record.posted_to_discord:
            extra["postedToDiscord"] = False
        updated = await self.repository.set_special_unless_guaranteed(
            record.id,
            special.model_dump(),
            extra,
        )
        if updated is None:
            current = await self.repository.find_exact(village, record.date)
            if current is not None and current.has_guaranteed_special:
                raise self._conflict(village, current)
            raise WeatherPersistenceError(
                f"Weather record {record.id!r} for {village.value} disappeared while scheduling."
            )

        self.logger.info(
            "Scheduled %s for %s on period starting %s (source=%s triggered_by=%s recipient=%s).",
            definition.label,
            village.value,
            period.start.isoformat(),
            source,
            triggered_by or "-",
            recipient or "-",
        )
        return ScheduledSpecialWeather(
            record=updated,
            period_start=period.start,
            period_end=period.end,
        )

    def _within(
        self,
        record: WeatherRecord | None,
        period: Period,
        village: Village,
    ) -> WeatherRecord | None:
        """Drop records from the lookback window or from a later period."""
        if record is None:
            return None
        if record.date < period.start:
            self.logger.info(
                "Ignoring weather for %s dated %s; before current period start %s.",
                village.value,
                record.date.isoformat(),
                period.start.isoformat(),
            )
            return None
        if record.date >= period.exclusive_end:
            self.logger.info(
                "Ignoring weather for %s dated %s; belongs to a later period.",
                village.value,
                record.date.isoformat(),
            )
            return None
        return record

    async def _generate_and_save(
        self,
        village: Village,
        period: Period,
        season: Season,
        *,
        search_start: datetime,
        include_special: bool = True,
    ) -> WeatherRecord:
        history = await self.repository.recent(village, self.history_depth, before=period.start)
        generated = self.generator.generate(village, season, history)
        record = WeatherRecord(
            village=village,
            date=period.start,
            season=season,
            temperature=generated.temperature,
            wind=generated.wind,
            precipitation=generated.precipitation,
            special=generated.special if include_special else None,
            posted_to_discord=False,
        )

        try:
            saved = await self.repository.insert_if_absent(record)
        except DuplicateKeyError as exc:
            self.logger.warning(
                "Duplicate weather detected for %s; fetching existing record.",
                village.value,
            )
            existing = self._within(
                await self.repository.find_for_period(village, search_start, period.exclusive_end),
                period,
                village,
            )
            if existing is None:
                existing = await self.repository.find_exact(village, period.start)
            if existing is None:
                raise WeatherPersistenceError(
                    f"Failed to save weather for {village.value} and no existing record was found."
                ) from exc
            return existing

        if not await self.repository.exists(saved.id):
            raise WeatherPersistenceError(
                f"Weather save verification failed for {village.value} (id={saved.id!r})."
            )
        self.logger.info(
            "Saved weather for %s (id=%s, date=%s).",
            village.value,
            saved.id,
            saved.date.isoformat(),
        )
        return saved

    async def _mark(
        self,
        village: Village | str,
        record: WeatherRecord | None,
        flag: str,
        stamp: str,
        description: str,
    ) -> WeatherRecord | None:
        village = Village.normalize(village)
        if record is None or record.id is None:
            self.logger.warning(
                "Weather for %s has no id; skipping %s update.",
                village.value,
                description,
            )
            return None
        updated = await self.repository.set_fields(record.id, {flag: True, stamp: self.clock()})
        if updated is not None:
            self.logger.info("Marked weather as %s for %s (id=%s).", description, village.value, record.id)
        return updated

    @staticmethod
    def _conflict(village: Village, record: WeatherRecord) -> SpecialWeatherConflictError:
        existing = record.special.label if record.special else None
        return SpecialWeatherConflictError(
            f"{village.value} already has guaranteed special weather scheduled for the next period.",
            village=village.value,
            existing_label=existing,
        )
