"""Tests for the drink catalog."""

import pytest

from caffeine_guard.domain.catalog import (
    DRINK_CATALOG,
    UnknownDrinkError,
    drinks_in_category,
    get_drink,
)
from caffeine_guard.domain.drinks import Drink, DrinkCategory, DrinkTag
from caffeine_guard.services.servings import (
    LARGE_BASE_IDS,
    SHOT_ELIGIBLE_IDS,
    SIZE_SCALABLE_IDS,
)


def test_catalog_ids_are_unique() -> None:
    ids = [drink.id for drink in DRINK_CATALOG]

    assert len(ids) == len(set(ids))


def test_serving_groups_refer_to_catalog_drinks() -> None:
    ids = {drink.id for drink in DRINK_CATALOG}

    assert SHOT_ELIGIBLE_IDS <= ids
    assert SIZE_SCALABLE_IDS <= ids
    assert LARGE_BASE_IDS <= SIZE_SCALABLE_IDS


def test_decaf_drinks_are_also_low_caffeine() -> None:
    for drink in DRINK_CATALOG:
        if drink.has_tag(DrinkTag.DECAF):
            assert drink.has_tag(DrinkTag.LOW_CAFFEINE)


def test_get_drink() -> None:
    assert get_drink("cold_brew").caffeine_mg == 155

    with pytest.raises(UnknownDrinkError, match="Unknown drink"):
        get_drink("mystery_brew")


def test_drinks_in_category() -> None:
    sodas = drinks_in_category(DrinkCategory.SODA)

    assert sodas
    assert all(drink.category is DrinkCategory.SODA for drink in sodas)
    assert "sprite" in {drink.id for drink in sodas}


def test_drink_rejects_negative_caffeine() -> None:
    with pytest.raises(ValueError):
        Drink("bad", "Bad", DrinkCategory.BREWED, -1)
