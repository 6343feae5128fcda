"""Clock helpers for bedtime and time-of-day calculations."""

import re
from datetime import UTC, datetime, timedelta

from caffeine_guard.domain.caffeine import EnergyLevel, TimeOfDay

CUTOFF_HOURS_BEFORE_BED = 8
MORNING_START_HOUR = 5
AFTERNOON_START_HOUR = 11
EVENING_START_HOUR = 17
LATE_NIGHT_START_HOUR = 22
_TIME_PATTERN = re.compile(r"^([01]?\d|2[0-3]):([0-5]\d)$")

DEFAULT_ENERGY_FOR_TIME: dict[TimeOfDay, EnergyLevel] = {
    TimeOfDay.MORNING: EnergyLevel.HIGH,
    TimeOfDay.AFTERNOON: EnergyLevel.MEDIUM,
    TimeOfDay.EVENING: EnergyLevel.LOW,
    TimeOfDay.LATE_NIGHT: EnergyLevel.LOW,
}


def parse_clock_time(value: str) -> tuple[int, int]:
    """Parse an HH:MM 24h string into (hour, minute)."""
    match = _TIME_PATTERN.match(value.strip())
    if not match:
        raise ValueError(f"Expected HH:MM time, got {value!r}")
    return int(match.group(1)), int(match.group(2))


def hours_until_bedtime(now: datetime, bedtime: str) -> float:
    """Return hours from now until the next occurrence of bedtime."""
    hour, minute = parse_clock_time(bedtime)
    bed = now.replace(hour=hour, minute=minute, second=0, microsecond=0)
    if bed <= now:
        bed += timedelta(days=1)
    # Compare instants so a DST change between now and bedtime is counted.
    elapsed = bed.astimezone(UTC) - now.astimezone(UTC)
    return max(0.0, elapsed.total_seconds() / 3600)


def caffeine_cutoff(bedtime: str) -> str:
    """Return the last advisable caffeine time, 8 hours before bedtime."""
    hour, minute = parse_clock_time(bedtime)
    total = (hour * 60 + minute - CUTOFF_HOURS_BEFORE_BED * 60) % (24 * 60)
    return f"{total // 60:02d}:{total % 60:02d}"


def time_of_day_for(now: datetime) -> TimeOfDay:
    """Return the time-of-day bucket for a local datetime."""
    hour = now.hour
    if MORNING_START_HOUR <= hour < AFTERNOON_START_HOUR:
        return TimeOfDay.MORNING
    if AFTERNOON_START_HOUR <= hour < EVENING_START_HOUR:
        return TimeOfDay.AFTERNOON
    if EVENING_START_HOUR <= hour < LATE_NIGHT_START_HOUR:
        return TimeOfDay.EVENING
    return TimeOfDay.LATE_NIGHT
