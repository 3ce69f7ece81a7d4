"""Weighted random selection shared by every weather dimension."""

from __future__ import annotations

import logging
import random
from collections.abc import Hashable, Mapping, Sequence
from typing import TypeVar

from ..exceptions import WeatherGenerationError
from ..log_setup import child_logger

T = TypeVar("T", bound=Hashable)

# Weight for candidates missing from the weight table; keeps every label reachable.
EPSILON_WEIGHT = 0.01


def candidate_weight(
    candidate: T,
    weights: Mapping[T, float],
    modifiers: Mapping[T, float] | None = None,
) -> float:
    base = weights.get(candidate)
    if base is None:
        base = EPSILON_WEIGHT
    modifier = (modifiers or {}).get(candidate)
    if modifier is None:
        modifier = 1.0
    return float(base) * float(modifier)


def probability_of(
    candidates: Sequence[T],
    selected: T,
    weights: Mapping[T, float],
    modifiers: Mapping[T, float] | None = None,
) -> float:
    """Return the selected candidate's share of the total weight, in percent."""
    total = sum(candidate_weight(c, weights, modifiers) for c in candidates)
    if total <= 0:
        return 100.0 / len(candidates) if candidates else 0.0
    return candidate_weight(selected, weights, modifiers) / total * 100


def format_probability(percent: float) -> str:
    return f"{percent:.1f}%"


class WeightedSampler:
    """Draw candidates proportionally to ``weight * modifier``."""

    def __init__(
        self,
        rng: random.Random | None = None,
        logger: logging.Logger | None = None,
    ) -> None:
        self.rng = rng or random.Random()
        self.logger = logger or child_logger("weather.sampler")

    def choice(
        self,
        candidates: Sequence[T],
        weights: Mapping[T, float],
        modifiers: Mapping[T, float] | None = None,
    ) -> T:
        if not candidates:
            raise WeatherGenerationError("No candidates provided to weighted choice.")

        weighted = [(c, candidate_weight(c, weights, modifiers)) for c in candidates]
        total = sum(weight for _, weight in weighted)
        if total <= 0:
            self.logger.warning(
                "Total weight %.4f is not positive for %d candidates; choosing uniformly.",
                total,
                len(candidates),
            )
            return candidates[self.rng.randrange(len(candidates))]

        threshold = self.rng.random() * total
        for candidate, weight in weighted:
            threshold -= weight
            if threshold < 0:
                return candidate
        # Floating point residue can leave threshold at ~0 after the last bracket.
        return candidates[-1]

    def chance(self, probability: float) -> bool:
        """Independent coin flip: True with the given probability."""
        return self.rng.random() < probability

    def probability(
        self,
        candidates: Sequence[T],
        selected: T,
        weights: Mapping[T, float],
        modifiers: Mapping[T, float] | None = None,
    ) -> str:
        return format_probability(probability_of(candidates, selected, weights, modifiers))
