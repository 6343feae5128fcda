"""Drink recommendations filtered for bedtime safety."""

import logging
import random
from collections.abc import Callable, Sequence
from dataclasses import dataclass, field

from caffeine_guard.domain.caffeine import EnergyLevel, TimeOfDay
from caffeine_guard.domain.catalog import DRINK_CATALOG
from caffeine_guard.domain.drinks import Drink, DrinkTag
from caffeine_guard.services.decay import DEFAULT_HALF_LIFE_HOURS, remaining_caffeine
from caffeine_guard.services.schedule import DEFAULT_ENERGY_FOR_TIME
from caffeine_guard.services.servings import adjusted_dose

SAFE_AT_BEDTIME_MG = 50
RELAXED_AT_BEDTIME_MG = 60
MIN_STRICT_POOL = 10
SHUFFLE_WINDOW = 15

# Nominal caffeine bands per energy level (inclusive).
HIGH_ENERGY_MG = (90, 220)
MEDIUM_ENERGY_MG = (60, 130)
LOW_ENERGY_MAX_MG = 60

# Hours-until-bed breakpoints and the nominal ceiling used below each one.
FULL_BAND_HOURS = 8
LIGHT_BAND_HOURS = 5
LIGHT_MAX_MG = 50
TRACE_BAND_HOURS = 2
TRACE_MAX_MG = 5
NEAR_BED_MAX_MG = 2

_logger = logging.getLogger(__name__)


def _in_range(value: float, low: float, high: float) -> bool:
    return low <= value <= high


def _energy_band(drink: Drink, energy: EnergyLevel) -> bool:
    mg = drink.caffeine_mg
    if energy is EnergyLevel.HIGH:
        return _in_range(mg, *HIGH_ENERGY_MG)
    if energy is EnergyLevel.MEDIUM:
        return _in_range(mg, *MEDIUM_ENERGY_MG)
    return mg <= LOW_ENERGY_MAX_MG or drink.has_tag(DrinkTag.LOW_CAFFEINE)


def _bedtime_band(drink: Drink, energy: EnergyLevel, hours_until_bed: float) -> bool:
    mg = drink.caffeine_mg
    if hours_until_bed >= FULL_BAND_HOURS:
        return _energy_band(drink, energy)
    if hours_until_bed >= LIGHT_BAND_HOURS:
        return mg <= LIGHT_MAX_MG or drink.has_tag(DrinkTag.LOW_CAFFEINE)
    if hours_until_bed >= TRACE_BAND_HOURS:
        return mg <= TRACE_MAX_MG or drink.has_tag(
            DrinkTag.DECAF, DrinkTag.LOW_CAFFEINE
        )
    return mg <= NEAR_BED_MAX_MG or drink.has_tag(
        DrinkTag.DECAF, DrinkTag.LOW_CAFFEINE
    )


@dataclass
class RecommendationService:
    """Pick a small, varied set of drinks suited to the time and bedtime."""

    catalog: Sequence[Drink] = DRINK_CATALOG
    random_source: Callable[[], float] = field(default=random.random)

    def recommend(  # noqa: PLR0913
        self,
        time_of_day: TimeOfDay,
        energy: EnergyLevel | None = None,
        hours_until_bed: float | None = None,
        half_life_hours: float = DEFAULT_HALF_LIFE_HOURS,
        size_oz: int = 12,
        shots: int = 1,
        max_results: int = 3,
    ) -> list[Drink]:
        """Return up to max_results drinks; an empty list means no suggestions."""
        if max_results < 0:
            raise ValueError(f"max_results must be >= 0, got {max_results}")
        resolved_energy = energy or DEFAULT_ENERGY_FOR_TIME[time_of_day]
        bedtime_known = hours_until_bed is not None and hours_until_bed > 0

        if bedtime_known:
            pool = [
                drink
                for drink in self.catalog
                if _bedtime_band(drink, resolved_energy, hours_until_bed)
            ]
            pool = self._refine(pool, hours_until_bed, half_life_hours, size_oz, shots)
        else:
            pool = [
                drink
                for drink in self.catalog
                if _energy_band(drink, resolved_energy)
            ]

        if len(pool) <= max_results:
            return pool
        descending = resolved_energy is not EnergyLevel.LOW
        ranked = sorted(pool, key=lambda drink: drink.caffeine_mg, reverse=descending)
        window = ranked[:SHUFFLE_WINDOW]
        self._shuffle(window)
        return window[:max_results]

    def _refine(  # noqa: PLR0913
        self,
        pool: list[Drink],
        hours_until_bed: float,
        half_life_hours: float,
        size_oz: int,
        shots: int,
    ) -> list[Drink]:
        """Keep drinks projected to stay under the bedtime threshold."""
        projected = {
            drink.id: remaining_caffeine(
                adjusted_dose(drink, size_oz, shots), hours_until_bed, half_life_hours
            )
            for drink in pool
        }
        strict = [drink for drink in pool if projected[drink.id] <= SAFE_AT_BEDTIME_MG]
        if len(strict) >= MIN_STRICT_POOL:
            return strict
        relaxed = [
            drink for drink in pool if projected[drink.id] <= RELAXED_AT_BEDTIME_MG
        ]
        if len(relaxed) > len(strict):
            _logger.debug(
                "Expanded recommendation pool: strict=%s relaxed=%s",
                len(strict),
                len(relaxed),
            )
            return relaxed
        return strict

    def _shuffle(self, items: list[Drink]) -> None:
        """Fisher-Yates shuffle in place using the injected random source."""
        for i in range(len(items) - 1, 0, -1):
            j = int(self.random_source() * (i + 1))
            items[i], items[j] = items[j], items[i]
