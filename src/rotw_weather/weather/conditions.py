"""Label parsing and applicability predicates for the season tables."""

from __future__ import annotations

import operator
import re
from collections.abc import Callable, Iterable, Mapping, Sequence

_FAHRENHEIT_RE = re.compile(r"(\d+)°F")
_WIND_BELOW_RE = re.compile(r"< (\d+)")
_WIND_AT_LEAST_RE = re.compile(r">= (\d+)")
_WIND_RANGE_RE = re.compile(r"(\d+)\s*-\s*(\d+)")
_NUMBER_RE = re.compile(r"(\d+)")
_COMPARISON_RE = re.compile(r"([<>=]+)\s*(\d+)")

_OPERATORS: dict[str, Callable[[int, int], bool]] = {
    "<=": operator.le,
    ">=": operator.ge,
    "<": operator.lt,
    ">": operator.gt,
    "==": operator.eq,
}

# Precipitation condition keywords that stand for a family of labels.
PRECIPITATION_FAMILIES: dict[str, frozenset[str]] = {
    "sunny": frozenset({"sunny"}),
    "rain": frozenset({"rain", "light rain", "heavy rain"}),
    "snow": frozenset({"snow", "light snow", "heavy snow", "blizzard"}),
    "fog": frozenset({"fog"}),
    "cloudy": frozenset({"cloudy"}),
}


def parse_fahrenheit(label: str | None) -> int:
    """Return the Fahrenheit value in a temperature label ("52°F / 11°C - Cool" -> 52)."""
    if not label:
        return 0
    match = _FAHRENHEIT_RE.search(label)
    return int(match.group(1)) if match else 0


def parse_wind_kph(label: str | None) -> int:
    """Return a representative km/h value for a wind label."""
    if not label:
        return 0
    match = _WIND_BELOW_RE.search(label)
    if match:
        return max(0, int(match.group(1)) - 1)
    match = _WIND_AT_LEAST_RE.search(label)
    if match:
        return int(match.group(1))
    match = _WIND_RANGE_RE.search(label)
    if match:
        low, high = int(match.group(1)), int(match.group(2))
        # JS Math.round semantics: halves round up.
        return int((low + high) / 2 + 0.5)
    match = _NUMBER_RE.search(label)
    if match:
        return int(match.group(1))
    return 0


def _is_unconstrained(conditions: Sequence[str] | None) -> bool:
    return not conditions or any(c.strip().lower() == "any" for c in conditions)


def numeric_conditions_met(conditions: Sequence[str] | None, value: int) -> bool:
    """All comparisons ("<= 24°F", "< 63 km/h") must hold; unparseable ones pass."""
    if _is_unconstrained(conditions):
        return True
    for condition in conditions or ():
        match = _COMPARISON_RE.search(condition)
        if not match:
            continue
        compare = _OPERATORS.get(match.group(1))
        if compare is None:
            continue
        if not compare(value, int(match.group(2))):
            return False
    return True


def precipitation_conditions_met(conditions: Sequence[str] | None, label: str) -> bool:
    """Any listed precipitation keyword or exact label matches."""
    if _is_unconstrained(conditions):
        return True
    normalized = label.strip().lower()
    for condition in conditions or ():
        keyword = condition.strip().lower()
        family = PRECIPITATION_FAMILIES.get(keyword)
        if family is not None:
            if normalized in family:
                return True
        elif normalized == keyword:
            return True
    return False


def applicable(
    conditions: Mapping[str, Sequence[str]] | None,
    *,
    temperature_f: int,
    wind_kph: int,
    precipitation_label: str | None = None,
) -> bool:
    """Check a label's declared conditions against simulated values."""
    if not conditions:
        return True
    if not numeric_conditions_met(conditions.get("temperature"), temperature_f):
        return False
    if not numeric_conditions_met(conditions.get("wind"), wind_kph):
        return False
    if precipitation_label is not None and not precipitation_conditions_met(
        conditions.get("precipitation"), precipitation_label
    ):
        return False
    return True


def labels_within(labels: Iterable[str], center_f: int, max_delta_f: int) -> list[str]:
    """Temperature labels whose Fahrenheit value is within ``max_delta_f`` of ``center_f``."""
    return [label for label in labels if abs(parse_fahrenheit(label) - center_f) <= max_delta_f]


def adjacent_labels(labels: Sequence[str], current: str) -> list[str]:
    """The label itself and its neighbours in table order; empty if not listed."""
    if current not in labels:
        return []
    index = labels.index(current)
    return [labels[i] for i in (index - 1, index, index + 1) if 0 <= i < len(labels)]
