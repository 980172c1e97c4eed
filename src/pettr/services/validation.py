"""Input validation for food entry requests."""

from datetime import date

from pettr.domain.errors import ConsumptionError, ValidationError
from pettr.domain.food import FoodType, MassUnit
from pettr.services.depletion import daily_units_for, mass_units_for
from pettr.services.units import parse_quantity, parse_unit

MAX_BRAND_NAME_LENGTH = 100
MAX_PRODUCT_NAME_LENGTH = 150
MAX_NUMBER_OF_UNITS = 100

MAX_BAG_WEIGHT: dict[MassUnit, float] = {
    MassUnit.KG: 50,
    MassUnit.POUNDS: 110,
    MassUnit.GRAMS: 50_000,
    MassUnit.CUPS: 200,
    MassUnit.OZ: 1765,
}
MAX_WEIGHT_PER_UNIT: dict[MassUnit, float] = {
    MassUnit.GRAMS: 5000,
    MassUnit.OZ: 176,
}
MAX_DAILY_AMOUNT: dict[MassUnit, float] = {
    MassUnit.GRAMS: 2000,
    MassUnit.CUPS: 16,
    MassUnit.OZ: 70,
}

COMMON_FIELDS = (
    "brand_name",
    "product_name",
    "daily_amount",
    "daily_amount_unit",
    "date_started",
)
CLEARABLE_FIELDS = ("brand_name", "product_name")
TYPE_FIELDS: dict[FoodType, tuple[str, ...]] = {
    FoodType.DRY: ("bag_weight", "bag_weight_unit"),
    FoodType.WET: ("number_of_units", "weight_per_unit", "weight_per_unit_unit"),
}
REQUIRED_FIELDS: dict[FoodType, tuple[str, ...]] = {
    FoodType.DRY: (
        "bag_weight",
        "bag_weight_unit",
        "daily_amount",
        "daily_amount_unit",
        "date_started",
    ),
    FoodType.WET: (
        "number_of_units",
        "weight_per_unit",
        "weight_per_unit_unit",
        "daily_amount",
        "daily_amount_unit",
        "date_started",
    ),
}


def editable_fields(food_type: FoodType) -> tuple[str, ...]:
    """Return the payload keys that apply to a food type."""
    return COMMON_FIELDS + TYPE_FIELDS[food_type]


def select_fields(food_type: FoodType, payload: dict[str, object]) -> dict[str, object]:
    """Keep only keys relevant to the food type.

    ``None`` drops a key, except for the optional names where it clears them.
    """
    return {
        key: payload[key]
        for key in editable_fields(food_type)
        if key in payload and (payload[key] is not None or key in CLEARABLE_FIELDS)
    }


def validate_entry(food_type: FoodType, data: dict[str, object], today: date) -> None:
    """Validate a complete set of entry fields for the food type."""
    missing = [
        field for field in REQUIRED_FIELDS[food_type] if data.get(field) in (None, "")
    ]
    if missing:
        raise ValidationError(
            f"Missing required fields for {food_type} food: {', '.join(missing)}"
        )

    _check_name(data.get("brand_name"), "Brand name", MAX_BRAND_NAME_LENGTH)
    _check_name(data.get("product_name"), "Product name", MAX_PRODUCT_NAME_LENGTH)

    match food_type:
        case FoodType.DRY:
            _check_amount(
                data["bag_weight"],
                data["bag_weight_unit"],
                mass_units_for(food_type),
                MAX_BAG_WEIGHT,
                "Bag weight",
            )
        case FoodType.WET:
            _check_number_of_units(data["number_of_units"])
            _check_amount(
                data["weight_per_unit"],
                data["weight_per_unit_unit"],
                mass_units_for(food_type),
                MAX_WEIGHT_PER_UNIT,
                "Weight per unit",
            )

    _check_amount(
        data["daily_amount"],
        data["daily_amount_unit"],
        daily_units_for(food_type),
        MAX_DAILY_AMOUNT,
        "Daily amount",
    )

    date_started = parse_date(data["date_started"], "start date")
    if date_started > today:
        raise ValidationError("Start date cannot be in the future")


def validate_finish_date(date_started: date, date_finished: date, today: date) -> None:
    """Validate a finish date against the entry's start date and today."""
    if date_finished < date_started:
        raise ValidationError("Finish date cannot be before the start date")
    if date_finished > today:
        raise ValidationError("Finish date cannot be in the future")


def parse_date(value: object, label: str) -> date:
    """Parse a date object or ISO date string."""
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        try:
            return date.fromisoformat(value)
        except ValueError:
            pass
    raise ValidationError(f"Invalid date format for {label}")


def _check_name(value: object, label: str, max_length: int) -> None:
    if value is not None and len(str(value)) > max_length:
        raise ValidationError(f"{label} must be {max_length} characters or less")


def _check_number_of_units(value: object) -> None:
    if isinstance(value, str) and value.strip().isdecimal():
        value = int(value.strip())
    if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
        raise ValidationError("Number of units must be a positive integer")
    if value > MAX_NUMBER_OF_UNITS:
        raise ValidationError(
            f"Number of units seems unreasonably large (max {MAX_NUMBER_OF_UNITS})"
        )


def _check_amount(
    quantity: object,
    unit: object,
    allowed: frozenset[MassUnit],
    limits: dict[MassUnit, float],
    label: str,
) -> None:
    try:
        parsed_unit = parse_unit(unit, allowed)
        amount = parse_quantity(quantity)
    except ConsumptionError as exc:
        raise ValidationError(f"{label}: {exc}") from exc
    if amount <= 0:
        raise ValidationError(f"{label} must be a positive number")
    limit = limits[parsed_unit]
    if amount > limit:
        raise ValidationError(
            f"{label} seems unreasonably large (max {limit:g} {parsed_unit})"
        )
