"""Domain models for food tracking."""

from dataclasses import dataclass
from datetime import date, datetime
from enum import StrEnum
from uuid import UUID


class FoodType(StrEnum):
    """Kind of food being tracked."""

    DRY = "dry"
    WET = "wet"


class MassUnit(StrEnum):
    """Units accepted for food quantities."""

    GRAMS = "grams"
    KG = "kg"
    POUNDS = "pounds"
    OZ = "oz"
    CUPS = "cups"


class FeedingStatus(StrEnum):
    """How actual consumption compared to the planned daily amount."""

    OVERFEEDING = "overfeeding"
    SLIGHTLY_OVER = "slightly-over"
    NORMAL = "normal"
    SLIGHTLY_UNDER = "slightly-under"
    UNDERFEEDING = "underfeeding"


@dataclass(frozen=True)
class FoodEntry:
    """A bag of dry food or a case of wet food being tracked for a pet."""

    id: UUID
    pet_id: UUID
    food_type: FoodType
    daily_amount: str
    daily_amount_unit: str
    date_started: date
    brand_name: str | None = None
    product_name: str | None = None
    bag_weight: str | None = None
    bag_weight_unit: str | None = None
    number_of_units: int | None = None
    weight_per_unit: str | None = None
    weight_per_unit_unit: str | None = None
    date_finished: date | None = None
    is_active: bool = True
    remaining_days: int | None = None
    actual_days_elapsed: int | None = None
    feeding_status: FeedingStatus | None = None
    variance_percent: float | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None


@dataclass(frozen=True)
class DepletionEstimate:
    """Projected supply for a food entry, in grams and days."""

    total_grams: float
    daily_grams: float
    expected_days: int
    remaining_days: int
    remaining_grams: float
    depletion_date: date


@dataclass(frozen=True)
class FeedingClassification:
    """Feeding status bucket and signed day variance."""

    status: FeedingStatus
    variance_percent: float


@dataclass(frozen=True)
class FeedingAssessment:
    """Outcome of a finished food entry."""

    status: FeedingStatus
    variance_percent: float
    actual_days_elapsed: int
    expected_days: int
    expected_daily_grams: float
    actual_daily_grams: float
