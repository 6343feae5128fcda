"""Tests for the sleep verdict."""

import pytest

from caffeine_guard.domain.caffeine import VerdictCode
from caffeine_guard.domain.drinks import Drink, DrinkCategory
from caffeine_guard.services.servings import adjusted_dose
from caffeine_guard.services.verdicts import classify_remaining, sleep_verdict


@pytest.mark.parametrize(
    ("remaining", "expected"),
    [
        (0, VerdictCode.SAFE),
        (49, VerdictCode.SAFE),
        (49.6, VerdictCode.SAFE),
        (50, VerdictCode.CAUTION),
        (100, VerdictCode.CAUTION),
        (100.4, VerdictCode.RISK),
        (101, VerdictCode.RISK),
    ],
)
def test_classify_remaining_thresholds(remaining: float, expected: VerdictCode) -> None:
    assert classify_remaining(remaining) is expected


def test_classification_uses_unrounded_value() -> None:
    verdict = sleep_verdict(49.6, 0)

    assert verdict.code is VerdictCode.SAFE
    assert verdict.rounded_remaining_mg == 50


def test_sixteen_ounce_latte_six_hours_before_bed_is_safe() -> None:
    latte = Drink("latte", "Latte", DrinkCategory.MILK, 80)
    dose = adjusted_dose(latte, size_oz=16)

    verdict = sleep_verdict(dose, 6)

    assert verdict.code is VerdictCode.SAFE
    assert verdict.remaining_mg == pytest.approx(46.575, abs=0.01)
    assert verdict.chip == "Sleep-Friendly"
    assert verdict.headline == "Clear to Sip"
    assert "~107 mg" in verdict.detail
    assert "~47 mg" in verdict.detail
    assert "in 6h" in verdict.detail


def test_caution_verdict() -> None:
    verdict = sleep_verdict(100, 2)

    assert verdict.code is VerdictCode.CAUTION
    assert verdict.chip == "Might Keep You Up"
    assert verdict.headline == "Sip Smart"
    assert "about 76 mg" in verdict.detail


def test_risk_verdict() -> None:
    verdict = sleep_verdict(200, 3)

    assert verdict.code is VerdictCode.RISK
    assert verdict.chip == "Wide Awake Tonight"
    assert verdict.headline == "Better Hold Off"
    assert verdict.suggestion


def test_shorter_half_life_changes_tier() -> None:
    assert sleep_verdict(200, 3, half_life_hours=1).code is VerdictCode.SAFE


def test_fractional_hours_in_detail() -> None:
    verdict = sleep_verdict(10, 2.5)

    assert "in 2.5h" in verdict.detail


def test_bedtime_passed_is_rejected() -> None:
    with pytest.raises(ValueError, match="bedtime already passed"):
        sleep_verdict(80, -1)
