"""Tests for unit normalization."""

import pytest

from pettr.domain.errors import InvalidQuantity, InvalidUnit
from pettr.domain.food import MassUnit
from pettr.services.units import (
    DRY_DAILY_UNITS,
    GRAMS_PER_UNIT,
    WET_DAILY_UNITS,
    WET_UNIT_WEIGHT_UNITS,
    from_grams,
    to_grams,
)


def test_to_grams_uses_fixed_factors() -> None:
    assert to_grams("2.0", "kg") == 2000
    assert to_grams("1", "pounds") == pytest.approx(453.592)
    assert to_grams("1", "oz") == pytest.approx(28.3495)
    assert to_grams("2", "cups") == 480
    assert to_grams("85", "grams") == 85


@pytest.mark.parametrize("unit", list(MassUnit))
@pytest.mark.parametrize("quantity", [0.25, 3, 17.5])
def test_to_grams_recovers_quantity(unit: MassUnit, quantity: float) -> None:
    grams = to_grams(quantity, unit)

    assert grams / GRAMS_PER_UNIT[unit] == pytest.approx(quantity)
    assert from_grams(grams, unit) == pytest.approx(quantity)


def test_to_grams_rejects_cups_for_wet_food() -> None:
    with pytest.raises(InvalidUnit):
        to_grams("1", "cups", WET_UNIT_WEIGHT_UNITS)
    with pytest.raises(InvalidUnit):
        to_grams("1", "cups", WET_DAILY_UNITS)


def test_to_grams_rejects_oz_for_dry_daily_amount() -> None:
    with pytest.raises(InvalidUnit):
        to_grams("3", "oz", DRY_DAILY_UNITS)


def test_to_grams_rejects_unknown_unit() -> None:
    with pytest.raises(InvalidUnit):
        to_grams("1", "stone")


@pytest.mark.parametrize("quantity", ["-1", "abc", "", "nan", "inf", None, True])
def test_to_grams_rejects_bad_quantities(quantity: object) -> None:
    with pytest.raises(InvalidQuantity):
        to_grams(quantity, "grams")


def test_to_grams_allows_zero() -> None:
    assert to_grams("0", "grams") == 0
