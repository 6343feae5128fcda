"""Tests for serving size and shot adjustments."""

import pytest

from caffeine_guard.domain.catalog import get_drink
from caffeine_guard.domain.drinks import Drink, DrinkCategory
from caffeine_guard.services.servings import (
    adjusted_dose,
    base_size_oz,
    is_shot_eligible,
    is_size_scalable,
)


def test_brewed_coffee_scales_from_eight_ounces() -> None:
    drip = get_drink("drip_coffee")

    assert adjusted_dose(drip, size_oz=8) == 80
    assert adjusted_dose(drip, size_oz=16) == 160
    assert adjusted_dose(drip, size_oz=16, shots=3) == 160


def test_extra_shots_add_a_single_shot_each() -> None:
    espresso = get_drink("single_espresso")

    assert adjusted_dose(espresso, shots=1) == 75
    assert adjusted_dose(espresso, shots=2) == 150
    assert adjusted_dose(espresso, shots=3) == 225
    assert adjusted_dose(espresso, size_oz=20, shots=2) == 150


def test_shots_apply_before_size_scaling() -> None:
    latte = get_drink("latte")

    assert base_size_oz(latte) == 12
    assert adjusted_dose(latte, size_oz=16, shots=2) == 200
    assert adjusted_dose(latte, size_oz=8) == 50


def test_size_scaling_rounds_half_up() -> None:
    cappuccino = get_drink("cappuccino")

    assert adjusted_dose(cappuccino, size_oz=12) == 113


def test_latte_sixteen_ounce_example() -> None:
    latte = Drink("latte", "Latte", DrinkCategory.MILK, 80)

    assert adjusted_dose(latte, size_oz=16) == 107


def test_other_drinks_keep_nominal_caffeine() -> None:
    red_bull = get_drink("red_bull")

    assert not is_shot_eligible(red_bull)
    assert not is_size_scalable(red_bull)
    for size in (8, 12, 16, 20):
        for shots in (1, 2, 3):
            assert adjusted_dose(red_bull, size, shots) == 80


def test_zero_caffeine_drink_stays_zero() -> None:
    assert adjusted_dose(get_drink("sprite"), size_oz=20) == 0


@pytest.mark.parametrize(("size_oz", "shots"), [(10, 1), (12, 0), (12, 4)])
def test_rejects_unsupported_servings(size_oz: int, shots: int) -> None:
    with pytest.raises(ValueError):
        adjusted_dose(get_drink("latte"), size_oz, shots)
