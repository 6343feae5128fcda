"""Domain models for caffeine tracking and sleep decisions."""

import math
from dataclasses import dataclass
from datetime import datetime
from enum import StrEnum
from uuid import UUID


class VerdictCode(StrEnum):
    """Three-tier sleep compatibility for a single drink choice."""

    SAFE = "safe"
    CAUTION = "caution"
    RISK = "risk"


class GuidanceState(StrEnum):
    """Guidance states, listed in evaluation priority order."""

    DAILY_LIMIT = "daily_limit"
    BOTH_RISKS = "both_risks"
    JITTER_RISK = "jitter_risk"
    LIMIT_APPROACHING = "limit_approaching"
    SAFE = "safe"


class SeverityColor(StrEnum):
    """Severity color shown alongside guidance."""

    GREEN = "green"
    YELLOW = "yellow"
    RED = "red"


class EnergyLevel(StrEnum):
    """Desired energy level for recommendations."""

    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


class TimeOfDay(StrEnum):
    """Coarse time-of-day bucket."""

    MORNING = "morning"
    AFTERNOON = "afternoon"
    EVENING = "evening"
    LATE_NIGHT = "late_night"


@dataclass(frozen=True)
class ConsumptionEntry:
    """A logged drink with the caffeine it contributed."""

    id: UUID
    drink_name: str
    caffeine_mg: float
    consumed_at: datetime
    drink_id: str | None = None
    size_oz: int | None = None
    shots: int | None = None
    notes: str | None = None


@dataclass(frozen=True)
class Verdict:
    """Sleep verdict for a single dose taken now."""

    code: VerdictCode
    chip: str
    headline: str
    detail: str
    suggestion: str
    remaining_mg: float
    hours_until_bed: float

    @property
    def rounded_remaining_mg(self) -> int:
        """Remaining caffeine at bedtime rounded for display."""
        return round_half_up(self.remaining_mg)


@dataclass(frozen=True)
class Guidance:
    """Guidance combining bedtime projection with daily intake."""

    state: GuidanceState
    color: SeverityColor
    headline: str
    message: str
    projected_at_bedtime: int
    wait_hours: float | None = None
    wait_time: str | None = None

    @property
    def can_have_caffeine(self) -> bool:
        """Return True when another drink is fine right now."""
        return self.state is GuidanceState.SAFE


@dataclass(frozen=True)
class CaffeineStatus:
    """Snapshot of the user's caffeine state at a point in time."""

    as_of: datetime
    current_level_mg: int
    peak_level_mg: int
    consumed_today_mg: float
    daily_limit_mg: float
    daily_progress_pct: float
    hours_until_bed: float
    cutoff_time: str
    guidance: Guidance


@dataclass(frozen=True)
class ConsumptionStats:
    """Aggregated consumption statistics."""

    total_today_mg: float
    total_week_mg: float
    total_month_mg: float
    drinks_today: int
    drinks_week: int
    drinks_month: int
    average_per_day_mg: float
    most_consumed: str | None
    last_consumed_at: datetime | None


def round_half_up(value: float) -> int:
    """Round to the nearest integer with halves rounded up."""
    return math.floor(value + 0.5)
