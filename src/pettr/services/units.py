"""Unit normalization for food quantities."""

import math

from pettr.domain.errors import InvalidQuantity, InvalidUnit
from pettr.domain.food import MassUnit

# Cups are a dry-food volume approximation.
GRAMS_PER_UNIT: dict[MassUnit, float] = {
    MassUnit.GRAMS: 1.0,
    MassUnit.KG: 1000.0,
    MassUnit.POUNDS: 453.592,
    MassUnit.OZ: 28.3495,
    MassUnit.CUPS: 240.0,
}

DRY_BAG_UNITS = frozenset(
    {MassUnit.KG, MassUnit.POUNDS, MassUnit.GRAMS, MassUnit.CUPS, MassUnit.OZ}
)
DRY_DAILY_UNITS = frozenset({MassUnit.GRAMS, MassUnit.CUPS})
WET_UNIT_WEIGHT_UNITS = frozenset({MassUnit.GRAMS, MassUnit.OZ})
WET_DAILY_UNITS = frozenset({MassUnit.GRAMS, MassUnit.OZ})


def parse_quantity(value: object) -> float:
    """Parse a non-negative finite quantity from a number or decimal string."""
    if isinstance(value, bool):
        raise InvalidQuantity(f"Quantity must be numeric, got {value!r}")
    if isinstance(value, int | float):
        quantity = float(value)
    elif isinstance(value, str):
        try:
            quantity = float(value.strip())
        except ValueError:
            raise InvalidQuantity(f"Quantity must be numeric, got {value!r}") from None
    else:
        raise InvalidQuantity(f"Quantity must be numeric, got {value!r}")
    if not math.isfinite(quantity):
        raise InvalidQuantity(f"Quantity must be finite, got {value!r}")
    if quantity < 0:
        raise InvalidQuantity(f"Quantity cannot be negative, got {value!r}")
    return quantity


def parse_unit(unit: object, allowed: frozenset[MassUnit] | None = None) -> MassUnit:
    """Return the unit as a MassUnit, checking it against an allowed set."""
    try:
        parsed = MassUnit(str(unit))
    except ValueError:
        raise InvalidUnit(f"Unknown unit {unit!r}") from None
    if allowed is not None and parsed not in allowed:
        options = ", ".join(sorted(allowed))
        raise InvalidUnit(f"Unit {parsed} is not allowed here; use one of {options}")
    return parsed


def to_grams(
    quantity: object,
    unit: object,
    allowed: frozenset[MassUnit] | None = None,
) -> float:
    """Convert a quantity in the given unit to grams."""
    parsed_unit = parse_unit(unit, allowed)
    return parse_quantity(quantity) * GRAMS_PER_UNIT[parsed_unit]


def from_grams(grams: float, unit: object) -> float:
    """Convert grams back into the given unit for display."""
    return grams / GRAMS_PER_UNIT[parse_unit(unit)]
