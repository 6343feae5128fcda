"""Sleep verdict for a single drink taken now."""

from caffeine_guard.domain.caffeine import Verdict, VerdictCode, round_half_up
from caffeine_guard.services.decay import DEFAULT_HALF_LIFE_HOURS, remaining_caffeine

SAFE_BELOW_MG = 50
RISK_ABOVE_MG = 100


def classify_remaining(remaining_mg: float) -> VerdictCode:
    """Map remaining caffeine at bedtime to a verdict tier."""
    if remaining_mg < SAFE_BELOW_MG:
        return VerdictCode.SAFE
    if remaining_mg <= RISK_ABOVE_MG:
        return VerdictCode.CAUTION
    return VerdictCode.RISK


def sleep_verdict(
    dose_mg: float,
    hours_until_bed: float,
    half_life_hours: float = DEFAULT_HALF_LIFE_HOURS,
) -> Verdict:
    """Return the sleep verdict for drinking dose_mg now."""
    if hours_until_bed < 0:
        raise ValueError(
            f"hours_until_bed must be >= 0 (bedtime already passed), got {hours_until_bed}"
        )
    remaining = remaining_caffeine(dose_mg, hours_until_bed, half_life_hours)
    code = classify_remaining(remaining)
    dose = round_half_up(dose_mg)
    left = round_half_up(remaining)
    hours = f"{round(hours_until_bed, 1):g}"

    if code is VerdictCode.SAFE:
        return Verdict(
            code=code,
            chip="Sleep-Friendly",
            headline="Clear to Sip",
            detail=(
                f"This cup's ~{dose} mg will mellow out to ~{left} mg "
                f"by bedtime in {hours}h. Sleep should be sweet."
            ),
            suggestion="You could even go a size up here and still be fine.",
            remaining_mg=remaining,
            hours_until_bed=hours_until_bed,
        )
    if code is VerdictCode.CAUTION:
        return Verdict(
            code=code,
            chip="Might Keep You Up",
            headline="Sip Smart",
            detail=(
                f"If you sip this now, you'll still have about {left} mg active "
                f"at bedtime in {hours}h. Not a total no-go, but you might toss a bit."
            ),
            suggestion=(
                "Want to play it safe? Try a smaller size or half-caff "
                "and be bedtime-ready."
            ),
            remaining_mg=remaining,
            hours_until_bed=hours_until_bed,
        )
    return Verdict(
        code=code,
        chip="Wide Awake Tonight",
        headline="Better Hold Off",
        detail=(
            f"This {dose} mg drink will leave you with over {left} mg "
            f"at bedtime in {hours}h. Swap for decaf or tea instead."
        ),
        suggestion="You can still enjoy coffee now, just make it small or lighter.",
        remaining_mg=remaining,
        hours_until_bed=hours_until_bed,
    )
