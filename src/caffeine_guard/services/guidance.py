"""Guidance combining bedtime projection with cumulative daily intake.

States are evaluated in priority order and the first match wins:

1. daily_limit       consumed today >= daily limit
2. both_risks        bedtime projection > 50 mg and another typical dose
                     would exceed the daily limit
3. jitter_risk       bedtime projection > 50 mg
4. limit_approaching another typical dose would exceed the daily limit
5. safe
"""

import math

from caffeine_guard.domain.caffeine import (
    Guidance,
    GuidanceState,
    SeverityColor,
    round_half_up,
)
from caffeine_guard.services.decay import (
    DEFAULT_HALF_LIFE_HOURS,
    hours_until_below,
    remaining_caffeine,
)

JITTER_THRESHOLD_MG = 50
HIGH_PROJECTION_MG = 100


def caffeine_guidance(  # noqa: PLR0913
    current_active_mg: float,
    hours_until_bed: float,
    daily_consumed_mg: float,
    daily_limit_mg: float,
    typical_dose_mg: float,
    half_life_hours: float = DEFAULT_HALF_LIFE_HOURS,
) -> Guidance:
    """Return guidance for whether another drink is advisable now."""
    if current_active_mg < 0:
        raise ValueError(f"current_active_mg must be >= 0, got {current_active_mg}")
    if hours_until_bed < 0:
        raise ValueError(f"hours_until_bed must be >= 0, got {hours_until_bed}")
    if daily_consumed_mg < 0:
        raise ValueError(f"daily_consumed_mg must be >= 0, got {daily_consumed_mg}")
    if daily_limit_mg <= 0:
        raise ValueError(f"daily_limit_mg must be > 0, got {daily_limit_mg}")
    if typical_dose_mg <= 0:
        raise ValueError(f"typical_dose_mg must be > 0, got {typical_dose_mg}")

    projected = remaining_caffeine(current_active_mg, hours_until_bed, half_life_hours)
    projected_display = round_half_up(projected)
    jitter = projected > JITTER_THRESHOLD_MG
    limit_next = daily_consumed_mg + typical_dose_mg > daily_limit_mg

    if daily_consumed_mg >= daily_limit_mg:
        return Guidance(
            state=GuidanceState.DAILY_LIMIT,
            color=SeverityColor.RED,
            headline="Daily limit reached",
            message=(
                f"You've had {round_half_up(daily_consumed_mg)} mg today, at or above "
                f"your {round_half_up(daily_limit_mg)} mg limit. "
                "Switch to decaf or herbal tea for the rest of the day."
            ),
            projected_at_bedtime=projected_display,
        )

    wait_hours = hours_until_below(
        current_active_mg, JITTER_THRESHOLD_MG, half_life_hours
    )
    if jitter and limit_next:
        return Guidance(
            state=GuidanceState.BOTH_RISKS,
            color=SeverityColor.RED,
            headline="Hold off for now",
            message=(
                f"About {projected_display} mg would still be active at bedtime, "
                "and another drink would take you past your daily limit."
            ),
            projected_at_bedtime=projected_display,
            wait_hours=wait_hours,
            wait_time=format_duration(wait_hours * 60),
        )
    if jitter:
        wait_time = format_duration(wait_hours * 60)
        return Guidance(
            state=GuidanceState.JITTER_RISK,
            color=(
                SeverityColor.RED
                if projected > HIGH_PROJECTION_MG
                else SeverityColor.YELLOW
            ),
            headline="Caffeine still active",
            message=(
                f"About {projected_display} mg would still be active at bedtime. "
                f"Wait ~{wait_time} before your next one."
            ),
            projected_at_bedtime=projected_display,
            wait_hours=wait_hours,
            wait_time=wait_time,
        )
    if limit_next:
        remaining_budget = max(0.0, daily_limit_mg - daily_consumed_mg)
        return Guidance(
            state=GuidanceState.LIMIT_APPROACHING,
            color=SeverityColor.YELLOW,
            headline="Daily limit nearly reached",
            message=(
                f"Only {round_half_up(remaining_budget)} mg left in today's budget. "
                "Consider a smaller size, tea, or decaf."
            ),
            projected_at_bedtime=projected_display,
        )
    return Guidance(
        state=GuidanceState.SAFE,
        color=SeverityColor.GREEN,
        headline="Safe to have coffee",
        message="Go ahead and enjoy your drink.",
        projected_at_bedtime=projected_display,
    )


def format_duration(minutes: float) -> str:
    """Format a duration in minutes as e.g. '45m', '2h', '3h 24m'."""
    if minutes < 1:
        return "Now"
    total = math.ceil(minutes)
    if total < 60:
        return f"{total}m"
    hours, mins = divmod(total, 60)
    if mins == 0:
        return f"{hours}h"
    return f"{hours}h {mins}m"
