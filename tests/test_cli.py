"""Weather CLI smoke tests with a mocked repository."""

from __future__ import annotations

from datetime import timedelta
from pathlib import Path
from typing import Any
from unittest.mock import AsyncMock, MagicMock

from rotw_weather import cli
from rotw_weather.weather.models import (
    GUARANTEED_PROBABILITY,
    Season,
    Village,
    WeatherCondition,
    WeatherRecord,
)
from rotw_weather.weather.periods import current_period_bounds, next_period_bounds


def _set_required_env(monkeypatch: Any, tmp_path: Path) -> None:
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("MONGODB_URI", "mongodb://bot:pw@localhost:27017")
    monkeypatch.setenv("LOG_LEVEL", "WARNING")


def _record(**fields: Any) -> WeatherRecord:
    condition = WeatherCondition(label="Sunny", emoji="☀️", probability="40.0%")
    values: dict[str, Any] = {
        "id": "abc",
        "village": Village.RUDANIA,
        "date": current_period_bounds().start,
        "season": Season.SPRING,
        "temperature": condition,
        "wind": condition,
        "precipitation": condition,
        "posted_to_discord": True,
    }
    values.update(fields)
    return WeatherRecord(**values)


def _repository(monkeypatch: Any, **methods: Any) -> MagicMock:
    repository = MagicMock()
    repository.ensure_indexes = AsyncMock()
    repository.close = AsyncMock()
    repository.find_for_period = AsyncMock(return_value=None)
    repository.find_exact = AsyncMock(return_value=None)
    for name, value in methods.items():
        setattr(repository, name, value)
    monkeypatch.setattr(cli, "_build_repository", lambda settings, logger: repository)
    return repository


def test_periods_needs_no_configuration(monkeypatch: Any, tmp_path: Path, capsys: Any) -> None:
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("MONGODB_URI", raising=False)
    assert cli.main(["periods"]) == 0
    output = capsys.readouterr().out
    assert "Weather Periods" in output
    assert "current" in output


def test_missing_configuration_exit_code(monkeypatch: Any, tmp_path: Path) -> None:
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("MONGODB_URI", raising=False)
    assert cli.main(["peek", "rudania"]) == 2


def test_peek_prints_stored_weather(monkeypatch: Any, tmp_path: Path, capsys: Any) -> None:
    _set_required_env(monkeypatch, tmp_path)
    repository = _repository(monkeypatch, find_for_period=AsyncMock(return_value=_record()))

    assert cli.main(["peek", "rudania", "--only-posted"]) == 0

    output = capsys.readouterr().out
    assert "Sunny" in output
    assert "posted=posted" in output
    assert repository.find_for_period.await_args.kwargs["only_posted"] is True
    repository.close.assert_awaited_once()


def test_peek_without_record(monkeypatch: Any, tmp_path: Path, capsys: Any) -> None:
    _set_required_env(monkeypatch, tmp_path)
    _repository(monkeypatch)
    assert cli.main(["peek", "vhintl"]) == 0
    assert "No weather stored for Vhintl" in capsys.readouterr().out


def test_mark_posted(monkeypatch: Any, tmp_path: Path) -> None:
    _set_required_env(monkeypatch, tmp_path)
    stored = _record(posted_to_discord=False)
    repository = _repository(
        monkeypatch,
        find_for_period=AsyncMock(return_value=stored),
        set_fields=AsyncMock(return_value=stored.model_copy(update={"posted_to_discord": True})),
    )
    assert cli.main(["mark-posted", "Rudania"]) == 0
    record_id, fields = repository.set_fields.await_args.args
    assert record_id == "abc"
    assert fields["postedToDiscord"] is True


def test_schedule_conflict_exit_code(monkeypatch: Any, tmp_path: Path) -> None:
    _set_required_env(monkeypatch, tmp_path)
    scheduled = _record(
        date=next_period_bounds().start,
        special=WeatherCondition(label="Flood", emoji="🌊", probability=GUARANTEED_PROBABILITY),
    )
    _repository(monkeypatch, find_for_period=AsyncMock(return_value=scheduled))
    assert cli.main(["schedule", "Rudania", "Rock Slide", "--triggered-by", "Zelda"]) == 3


def test_unknown_label_is_weather_failure(monkeypatch: Any, tmp_path: Path) -> None:
    _set_required_env(monkeypatch, tmp_path)
    _repository(monkeypatch)
    assert cli.main(["schedule", "Rudania", "Sandstorm"]) == 4


def test_current_generates_when_missing(monkeypatch: Any, tmp_path: Path, capsys: Any) -> None:
    _set_required_env(monkeypatch, tmp_path)

    async def insert(record: WeatherRecord) -> WeatherRecord:
        return record.model_copy(update={"id": "new"})

    repository = _repository(
        monkeypatch,
        recent=AsyncMock(return_value=[_record(date=current_period_bounds().start - timedelta(days=1))]),
        insert_if_absent=AsyncMock(side_effect=insert),
        exists=AsyncMock(return_value=True),
    )
    assert cli.main(["current", "inariko"]) == 0
    saved = repository.insert_if_absent.await_args.args[0]
    assert saved.village is Village.INARIKO
    assert saved.posted_to_discord is False
    assert "Current Weather: Inariko" in capsys.readouterr().out
