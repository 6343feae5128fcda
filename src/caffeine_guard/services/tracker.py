"""Caffeine status for the current moment."""

from dataclasses import dataclass
from datetime import datetime, timedelta
from zoneinfo import ZoneInfo

from caffeine_guard.domain.caffeine import (
    CaffeineStatus,
    EnergyLevel,
    Verdict,
    round_half_up,
)
from caffeine_guard.domain.catalog import get_drink
from caffeine_guard.domain.drinks import Drink
from caffeine_guard.services.consumption import ConsumptionLogRepository
from caffeine_guard.services.decay import active_caffeine, peak_caffeine
from caffeine_guard.services.guidance import caffeine_guidance
from caffeine_guard.services.preferences import PreferencesService
from caffeine_guard.services.recommendations import RecommendationService
from caffeine_guard.services.schedule import (
    caffeine_cutoff,
    hours_until_bedtime,
    time_of_day_for,
)
from caffeine_guard.services.servings import adjusted_dose
from caffeine_guard.services.verdicts import sleep_verdict

DEFAULT_TYPICAL_DOSE_MG = 95.0
TYPICAL_DOSE_LOOKBACK_DAYS = 7
ACTIVE_LOOKBACK_DAYS = 2


@dataclass
class CaffeineTrackerService:
    """Combine the log, preferences and clock into sleep decisions."""

    repository: ConsumptionLogRepository
    preferences_service: PreferencesService
    recommendation_service: RecommendationService

    def get_status(self, now: datetime) -> CaffeineStatus:
        """Return current level, today's intake and guidance."""
        prefs = self.preferences_service.load()
        tz = ZoneInfo(prefs.timezone)
        local_now = now.astimezone(tz)
        start_of_today = local_now.replace(hour=0, minute=0, second=0, microsecond=0)

        lookback = now - timedelta(days=TYPICAL_DOSE_LOOKBACK_DAYS)
        recent = self.repository.list_entries(lookback, now)
        active_window = now - timedelta(days=ACTIVE_LOOKBACK_DAYS)
        active_entries = [e for e in recent if e.consumed_at >= active_window]
        today = [e for e in recent if e.consumed_at >= start_of_today]

        current = active_caffeine(active_entries, now, prefs.half_life_hours)
        consumed_today = sum((e.caffeine_mg for e in today), 0.0)
        hours_to_bed = hours_until_bedtime(local_now, prefs.bedtime)
        typical = _typical_dose([e.caffeine_mg for e in recent])
        guidance = caffeine_guidance(
            current_active_mg=current,
            hours_until_bed=hours_to_bed,
            daily_consumed_mg=consumed_today,
            daily_limit_mg=prefs.daily_limit_mg,
            typical_dose_mg=typical,
            half_life_hours=prefs.half_life_hours,
        )
        return CaffeineStatus(
            as_of=now,
            current_level_mg=round_half_up(current),
            peak_level_mg=round_half_up(peak_caffeine(today, prefs.half_life_hours)),
            consumed_today_mg=consumed_today,
            daily_limit_mg=prefs.daily_limit_mg,
            daily_progress_pct=min(100.0, consumed_today / prefs.daily_limit_mg * 100),
            hours_until_bed=hours_to_bed,
            cutoff_time=caffeine_cutoff(prefs.bedtime),
            guidance=guidance,
        )

    def verdict_for(
        self,
        drink_id: str,
        now: datetime,
        size_oz: int | None = None,
        shots: int | None = None,
        hours_until_bed: float | None = None,
    ) -> tuple[float, Verdict]:
        """Return the effective dose and sleep verdict for drinking now."""
        prefs = self.preferences_service.load()
        drink = get_drink(drink_id)
        dose = adjusted_dose(
            drink,
            size_oz if size_oz is not None else prefs.serving_size_oz,
            shots if shots is not None else prefs.shots,
        )
        if hours_until_bed is None:
            local_now = now.astimezone(ZoneInfo(prefs.timezone))
            hours_until_bed = hours_until_bedtime(local_now, prefs.bedtime)
        return dose, sleep_verdict(dose, hours_until_bed, prefs.half_life_hours)

    def recommend(
        self,
        now: datetime,
        energy: EnergyLevel | None = None,
        max_results: int = 3,
    ) -> list[Drink]:
        """Recommend drinks for the user's local time and bedtime."""
        prefs = self.preferences_service.load()
        local_now = now.astimezone(ZoneInfo(prefs.timezone))
        return self.recommendation_service.recommend(
            time_of_day=time_of_day_for(local_now),
            energy=energy,
            hours_until_bed=hours_until_bedtime(local_now, prefs.bedtime),
            half_life_hours=prefs.half_life_hours,
            size_oz=prefs.serving_size_oz,
            shots=prefs.shots,
            max_results=max_results,
        )


def _typical_dose(doses: list[float]) -> float:
    positive = [dose for dose in doses if dose > 0]
    if not positive:
        return DEFAULT_TYPICAL_DOSE_MG
    return sum(positive) / len(positive)
