"""Weighted sampler tests."""

from __future__ import annotations

import logging
import random
from collections import Counter

import pytest

from rotw_weather.exceptions import WeatherGenerationError
from rotw_weather.weather.sampler import (
    EPSILON_WEIGHT,
    WeightedSampler,
    candidate_weight,
    format_probability,
    probability_of,
)


def test_missing_weight_defaults_to_epsilon() -> None:
    assert candidate_weight("Fog", {}) == pytest.approx(EPSILON_WEIGHT)
    assert candidate_weight("Fog", {"Fog": 0.5}, {"Fog": 2}) == pytest.approx(1.0)


def test_choice_returns_supplied_candidate() -> None:
    sampler = WeightedSampler(random.Random(1))
    candidates = ["Sunny", "Rain", "Fog"]
    for _ in range(50):
        assert sampler.choice(candidates, {"Sunny": 0.6, "Rain": 0.3}) in candidates


def test_unlisted_candidates_stay_reachable() -> None:
    sampler = WeightedSampler(random.Random(3))
    seen = Counter(sampler.choice(["A", "B"], {}) for _ in range(200))
    assert set(seen) == {"A", "B"}


def test_modifier_shifts_distribution() -> None:
    sampler = WeightedSampler(random.Random(5))
    seen = Counter(
        sampler.choice(["A", "B"], {"A": 1.0, "B": 1.0}, {"B": 0.0}) for _ in range(100)
    )
    assert seen == {"A": 100}


def test_zero_total_falls_back_to_uniform(caplog: pytest.LogCaptureFixture) -> None:
    sampler = WeightedSampler(random.Random(9), logging.getLogger("test.sampler"))
    with caplog.at_level(logging.WARNING):
        picked = sampler.choice(["A", "B"], {"A": 0, "B": 0})
    assert picked in {"A", "B"}
    assert "choosing uniformly" in caplog.text


def test_empty_candidates_raise() -> None:
    with pytest.raises(WeatherGenerationError):
        WeightedSampler(random.Random(0)).choice([], {})


def test_cumulative_bracket_selection() -> None:
    class FixedRandom(random.Random):
        def random(self) -> float:
            return 0.5

    sampler = WeightedSampler(FixedRandom())
    # Total 4.0, threshold 2.0: A covers [0, 1), B covers [1, 3).
    assert sampler.choice(["A", "B", "C"], {"A": 1, "B": 2, "C": 1}) == "B"


def test_probability_of_and_formatting() -> None:
    weights = {"A": 3.0, "B": 1.0}
    assert probability_of(["A", "B"], "A", weights) == pytest.approx(75.0)
    assert format_probability(probability_of(["A"], "A", {})) == "100.0%"
    assert WeightedSampler(random.Random(0)).probability(["A", "B"], "B", weights) == "25.0%"


def test_chance_bounds() -> None:
    sampler = WeightedSampler(random.Random(2))
    assert not any(sampler.chance(0.0) for _ in range(50))
    assert all(sampler.chance(1.0) for _ in range(50))
