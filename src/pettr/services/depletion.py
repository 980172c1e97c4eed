"""Depletion estimates for tracked food entries."""

import math
from datetime import date, timedelta

from pettr.domain.errors import DivisionByZero, InvalidQuantity
from pettr.domain.food import DepletionEstimate, FoodEntry, FoodType, MassUnit
from pettr.services.units import (
    DRY_BAG_UNITS,
    DRY_DAILY_UNITS,
    WET_DAILY_UNITS,
    WET_UNIT_WEIGHT_UNITS,
    to_grams,
)

# Absorbs float noise such as 2.9999999999 before ceil/floor.
_RATIO_PRECISION = 9


def mass_units_for(food_type: FoodType) -> frozenset[MassUnit]:
    """Return the units allowed for the stock mass of a food type."""
    match food_type:
        case FoodType.DRY:
            return DRY_BAG_UNITS
        case FoodType.WET:
            return WET_UNIT_WEIGHT_UNITS


def daily_units_for(food_type: FoodType) -> frozenset[MassUnit]:
    """Return the units allowed for the daily amount of a food type."""
    match food_type:
        case FoodType.DRY:
            return DRY_DAILY_UNITS
        case FoodType.WET:
            return WET_DAILY_UNITS


def total_mass_grams(entry: FoodEntry) -> float:
    """Return the full stock of an entry in grams."""
    match entry.food_type:
        case FoodType.DRY:
            total = to_grams(
                entry.bag_weight, entry.bag_weight_unit, mass_units_for(FoodType.DRY)
            )
        case FoodType.WET:
            units = entry.number_of_units
            if isinstance(units, bool) or not isinstance(units, int) or units <= 0:
                raise InvalidQuantity(
                    f"Number of units must be a positive integer, got {units!r}"
                )
            total = units * to_grams(
                entry.weight_per_unit,
                entry.weight_per_unit_unit,
                mass_units_for(FoodType.WET),
            )
    if total <= 0:
        raise InvalidQuantity("Total food mass must be greater than zero")
    return total


def daily_amount_grams(entry: FoodEntry) -> float:
    """Return the planned daily amount in grams."""
    return to_grams(
        entry.daily_amount, entry.daily_amount_unit, daily_units_for(entry.food_type)
    )


def expected_days(total_grams: float, daily_grams: float) -> int:
    """Return how many days the stock lasts, counting a partial day as full."""
    if daily_grams <= 0:
        raise DivisionByZero("Daily amount must be greater than zero grams")
    ratio = total_grams / daily_grams
    if not math.isfinite(ratio):
        raise InvalidQuantity("Daily amount is too small to estimate a supply")
    return math.ceil(round(ratio, _RATIO_PRECISION))


def estimate_depletion(entry: FoodEntry, today: date) -> DepletionEstimate:
    """Estimate expected and remaining days of supply as of today."""
    total = total_mass_grams(entry)
    daily = daily_amount_grams(entry)
    expected = expected_days(total, daily)

    elapsed = max(0, (today - entry.date_started).days)
    remaining_grams = max(0.0, total - elapsed * daily)
    remaining_days = math.floor(round(remaining_grams / daily, _RATIO_PRECISION))
    # Both candidate depletion dates must fit in a date.
    if (
        expected > (date.max - entry.date_started).days
        or remaining_days > (date.max - today).days
    ):
        raise InvalidQuantity("Daily amount is too small to estimate a depletion date")

    if remaining_days > 0:
        depletion_date = today + timedelta(days=remaining_days)
    else:
        depletion_date = entry.date_started + timedelta(days=expected)

    return DepletionEstimate(
        total_grams=total,
        daily_grams=daily,
        expected_days=expected,
        remaining_days=remaining_days,
        remaining_grams=remaining_grams,
        depletion_date=depletion_date,
    )


def actual_days_elapsed(date_started: date, date_finished: date) -> int:
    """Return calendar days between start and finish, at least one."""
    if date_finished < date_started:
        raise InvalidQuantity("Finish date cannot be before the start date")
    return max(1, (date_finished - date_started).days)
