"""Operator CLI: inspect periods, resolve today's weather, mark posts and schedule specials."""

from __future__ import annotations

import argparse
import asyncio
import logging
import sys
from datetime import UTC, datetime

from rich.console import Console
from rich.table import Table

from .config import Settings, load_settings
from .exceptions import ConfigError, SpecialWeatherConflictError, WeatherError
from .log_setup import setup_logger
from .redaction import sanitize_for_logging
from .weather.effects import calculate_weather_damage
from .weather.models import Period, Village, WeatherRecord
from .weather.periods import current_period_bounds, next_period_bounds
from .weather.repository import MongoWeatherRepository, WeatherRepository
from .weather.service import DEFAULT_SCHEDULE_SOURCE, WeatherService


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse weather CLI arguments."""
    parser = argparse.ArgumentParser(
        prog="rotw-weather",
        description="Village weather: periods, current weather, posted flags and scheduled specials.",
    )
    commands = parser.add_subparsers(dest="command", required=True)

    commands.add_parser("periods", help="Show the current and next weather periods.")

    current = commands.add_parser("current", help="Resolve current weather (generates if missing).")
    current.add_argument("village")

    peek = commands.add_parser("peek", help="Show current weather without generating.")
    peek.add_argument("village")
    peek.add_argument("--only-posted", action="store_true", help="Ignore unposted records.")

    posted = commands.add_parser("mark-posted", help="Mark current weather as posted.")
    posted.add_argument("village")

    pm_posted = commands.add_parser("mark-pm-posted", help="Mark current weather as PM-posted.")
    pm_posted.add_argument("village")

    schedule = commands.add_parser("schedule", help="Schedule a guaranteed special for the next period.")
    schedule.add_argument("village")
    schedule.add_argument("label")
    schedule.add_argument("--triggered-by", default=None)
    schedule.add_argument("--recipient", default=None)
    schedule.add_argument("--source", default=DEFAULT_SCHEDULE_SOURCE)
    return parser.parse_args(argv)


def _build_repository(settings: Settings, logger: logging.Logger) -> WeatherRepository:
    return MongoWeatherRepository.from_settings(settings, logger=logger)


def _print_periods(console: Console, current: Period, following: Period) -> None:
    table = Table(title="Weather Periods (UTC)")
    table.add_column("Period")
    table.add_column("Start")
    table.add_column("End")
    for name, period in (("current", current), ("next", following)):
        table.add_row(
            name,
            period.start.astimezone(UTC).isoformat(timespec="milliseconds"),
            period.end.astimezone(UTC).isoformat(timespec="milliseconds"),
        )
    console.print(table)


def _print_record(console: Console, record: WeatherRecord, title: str) -> None:
    table = Table(title=title)
    table.add_column("Dimension")
    table.add_column("Label", overflow="fold")
    table.add_column("Probability")
    for name, condition in (
        ("temperature", record.temperature),
        ("wind", record.wind),
        ("precipitation", record.precipitation),
        ("special", record.special),
    ):
        if condition is None:
            table.add_row(name, "-", "-")
            continue
        table.add_row(name, f"{condition.emoji} {condition.label}", condition.probability)
    console.print(table)

    damage = calculate_weather_damage(record)
    console.print(
        f"village={record.village.value} date={record.date.isoformat()} "
        f"season={record.season.value} posted={record.posted_state.value} "
        f"pm_posted={bool(record.pm_posted_to_discord)} damage={damage.total}"
    )


async def _run(
    args: argparse.Namespace,
    settings: Settings,
    logger: logging.Logger,
    console: Console,
) -> int:
    repository = _build_repository(settings, logger)
    service = WeatherService.from_settings(settings, repository, logger=logger)
    try:
        await repository.ensure_indexes()
        if args.command == "current":
            record = await service.get_current_weather(args.village)
            _print_record(console, record, f"Current Weather: {record.village.value}")
        elif args.command == "peek":
            record = await service.get_weather_without_generation(
                args.village,
                only_posted=args.only_posted,
            )
            if record is None:
                console.print(f"No weather stored for {Village.normalize(args.village).value} this period.")
            else:
                _print_record(console, record, f"Stored Weather: {record.village.value}")
        elif args.command in {"mark-posted", "mark-pm-posted"}:
            record = await service.get_weather_without_generation(args.village)
            if args.command == "mark-posted":
                updated = await service.mark_as_posted(args.village, record)
            else:
                updated = await service.mark_as_pm_posted(args.village, record)
            if updated is None:
                console.print("Nothing to mark.")
            else:
                _print_record(console, updated, f"Marked Weather: {updated.village.value}")
        elif args.command == "schedule":
            scheduled = await service.schedule_special_weather(
                args.village,
                args.label,
                triggered_by=args.triggered_by,
                recipient=args.recipient,
                source=args.source,
            )
            console.print(
                f"Scheduled {scheduled.record.special.label if scheduled.record.special else '-'} "
                f"from {scheduled.period_start.isoformat()} to {scheduled.period_end.isoformat()}"
            )
            _print_record(console, scheduled.record, f"Scheduled Weather: {scheduled.record.village.value}")
    finally:
        await repository.close()
    return 0


def main(argv: list[str] | None = None) -> int:
    """Run the weather CLI."""
    args = parse_args(argv)
    logger = setup_logger()
    console = Console()

    if args.command == "periods":
        now = datetime.now(UTC)
        _print_periods(console, current_period_bounds(now), next_period_bounds(now))
        return 0

    try:
        settings = load_settings()
    except ConfigError as exc:
        logger.error("Configuration failure: %s", exc)
        return 2
    logger.setLevel(settings.log_level)
    logger.info("Loaded settings: %s", sanitize_for_logging(settings.safe_summary()))

    try:
        return asyncio.run(_run(args, settings, logger, console))
    except SpecialWeatherConflictError as exc:
        logger.error("Scheduling conflict (%s): %s", exc.code, exc)
        return 3
    except WeatherError as exc:
        logger.error("Weather failure: %s", exc)
        return 4
    except Exception as exc:  # pragma: no cover - defensive catch for CLI runtime
        logger.exception("Unexpected weather CLI failure: %s", exc)
        return 99


if __name__ == "__main__":
    sys.exit(main())
