"""First-order caffeine decay model.

remaining = initial_mg * 0.5 ** (elapsed_hours / half_life_hours)

Values returned here are unrounded. Round only when formatting for display so
threshold comparisons never flip on a rounding boundary.
"""

import math
from collections.abc import Iterable
from dataclasses import dataclass
from datetime import datetime

from caffeine_guard.domain.caffeine import ConsumptionEntry

DEFAULT_HALF_LIFE_HOURS = 5.0
_SECONDS_PER_HOUR = 3600


@dataclass(frozen=True)
class Milestone:
    """Remaining caffeine after a whole number of half-lives."""

    label: str
    hours: float
    remaining_mg: float


def remaining_caffeine(
    initial_mg: float,
    elapsed_hours: float,
    half_life_hours: float = DEFAULT_HALF_LIFE_HOURS,
) -> float:
    """Return caffeine still active after elapsed_hours."""
    if initial_mg < 0:
        raise ValueError(f"initial_mg must be >= 0, got {initial_mg}")
    if elapsed_hours < 0:
        raise ValueError(f"elapsed_hours must be >= 0, got {elapsed_hours}")
    _check_half_life(half_life_hours)
    return initial_mg * 0.5 ** (elapsed_hours / half_life_hours)


def hours_until_below(
    current_mg: float,
    target_mg: float,
    half_life_hours: float = DEFAULT_HALF_LIFE_HOURS,
) -> float:
    """Return hours until current_mg decays to target_mg (0 if already there)."""
    if current_mg < 0:
        raise ValueError(f"current_mg must be >= 0, got {current_mg}")
    if target_mg <= 0:
        raise ValueError(f"target_mg must be > 0, got {target_mg}")
    _check_half_life(half_life_hours)
    if current_mg <= target_mg:
        return 0.0
    return half_life_hours * math.log2(current_mg / target_mg)


def active_caffeine(
    entries: Iterable[ConsumptionEntry],
    now: datetime,
    half_life_hours: float = DEFAULT_HALF_LIFE_HOURS,
) -> float:
    """Sum the decayed caffeine of every entry consumed at or before now."""
    total = 0.0
    for entry in entries:
        if entry.consumed_at > now:
            continue
        elapsed = (now - entry.consumed_at).total_seconds() / _SECONDS_PER_HOUR
        total += remaining_caffeine(entry.caffeine_mg, elapsed, half_life_hours)
    return total


def peak_caffeine(
    entries: Iterable[ConsumptionEntry],
    half_life_hours: float = DEFAULT_HALF_LIFE_HOURS,
) -> float:
    """Return the highest level reached right after any of the entries."""
    ordered = sorted(entries, key=lambda entry: entry.consumed_at)
    peak = 0.0
    for entry in ordered:
        peak = max(peak, active_caffeine(ordered, entry.consumed_at, half_life_hours))
    return peak


def milestones(
    initial_mg: float, half_life_hours: float = DEFAULT_HALF_LIFE_HOURS
) -> list[Milestone]:
    """Return remaining caffeine at one and two half-lives."""
    return [
        Milestone(
            label="Half-life",
            hours=half_life_hours,
            remaining_mg=remaining_caffeine(
                initial_mg, half_life_hours, half_life_hours
            ),
        ),
        Milestone(
            label="Quarter-life",
            hours=half_life_hours * 2,
            remaining_mg=remaining_caffeine(
                initial_mg, half_life_hours * 2, half_life_hours
            ),
        ),
    ]


def _check_half_life(half_life_hours: float) -> None:
    if half_life_hours <= 0:
        raise ValueError(f"half_life_hours must be > 0, got {half_life_hours}")
