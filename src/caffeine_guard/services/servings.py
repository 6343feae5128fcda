"""Serving size and shot adjustments for catalog drinks."""

from caffeine_guard.domain.caffeine import round_half_up
from caffeine_guard.domain.drinks import Drink

SIZES_OZ = frozenset({8, 12, 16, 20})
SHOT_COUNTS = frozenset({1, 2, 3})

# Standard single espresso shot.
EXTRA_SHOT_MG = 75

DEFAULT_BASE_SIZE_OZ = 8

# Single-shot espresso drinks where extra shots add caffeine.
SHOT_ELIGIBLE_IDS = frozenset(
    {
        "espresso_machine_home",
        "single_espresso",
        "americano_8oz",
        "affogato",
        "cappuccino",
        "latte",
        "caramel_macchiato",
        "mocha",
    }
)

# Brewed, milk and tea drinks whose caffeine scales with cup size.
SIZE_SCALABLE_IDS = frozenset(
    {
        "drip_coffee",
        "pour_over",
        "french_press",
        "decaf_drip_coffee",
        "cappuccino",
        "cafe_au_lait",
        "latte",
        "caramel_macchiato",
        "mocha",
        "shaken_espresso",
        "chai_latte",
        "matcha_latte",
        "decaf_latte",
        "green_tea",
        "oolong_tea",
        "black_tea",
        "earl_grey",
        "masala_chai",
        "iced_tea",
        "boba_tea",
    }
)

# Scalable drinks conventionally served in a 12oz cup.
LARGE_BASE_IDS = frozenset(
    {
        "latte",
        "caramel_macchiato",
        "mocha",
        "shaken_espresso",
        "chai_latte",
        "matcha_latte",
        "decaf_latte",
        "iced_tea",
        "boba_tea",
    }
)


def is_shot_eligible(drink: Drink) -> bool:
    """Return True when extra shots change the drink's caffeine."""
    return drink.id in SHOT_ELIGIBLE_IDS


def is_size_scalable(drink: Drink) -> bool:
    """Return True when the drink's caffeine scales with serving size."""
    return drink.id in SIZE_SCALABLE_IDS


def base_size_oz(drink: Drink) -> int:
    """Return the serving size the nominal caffeine refers to."""
    return 12 if drink.id in LARGE_BASE_IDS else DEFAULT_BASE_SIZE_OZ


def adjusted_dose(drink: Drink, size_oz: int = 12, shots: int = 1) -> float:
    """Return the effective caffeine dose for a serving of a drink.

    Shots are applied to the nominal caffeine first; size scaling is then
    applied to the shot-adjusted amount. Drinks outside both groups keep their
    nominal caffeine for every size and shot count.
    """
    if size_oz not in SIZES_OZ:
        raise ValueError(f"size_oz must be one of {sorted(SIZES_OZ)}, got {size_oz}")
    if shots not in SHOT_COUNTS:
        raise ValueError(f"shots must be one of {sorted(SHOT_COUNTS)}, got {shots}")

    mg = float(drink.caffeine_mg)
    if is_shot_eligible(drink):
        mg += EXTRA_SHOT_MG * (shots - 1)
    if is_size_scalable(drink):
        mg = round_half_up(mg * size_oz / base_size_oz(drink))
    return max(0.0, float(mg))
