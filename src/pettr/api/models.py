"""Pydantic request models for the food API."""

from datetime import date
from typing import Annotated

from pydantic import BaseModel, BeforeValidator, Field


def _decimal_text(value: object) -> object:
    if isinstance(value, int | float) and not isinstance(value, bool):
        return str(value)
    return value


DecimalString = Annotated[str, BeforeValidator(_decimal_text)]


class DryFoodCreate(BaseModel):
    """Payload for starting a bag of dry food."""

    brand_name: str | None = None
    product_name: str | None = None
    bag_weight: DecimalString
    bag_weight_unit: str
    daily_amount: DecimalString
    daily_amount_unit: str
    date_started: date


class WetFoodCreate(BaseModel):
    """Payload for starting a case of wet food."""

    brand_name: str | None = None
    product_name: str | None = None
    number_of_units: int = Field(gt=0)
    weight_per_unit: DecimalString
    weight_per_unit_unit: str
    daily_amount: DecimalString
    daily_amount_unit: str
    date_started: date


class FoodEntryUpdate(BaseModel):
    """Partial update for an active entry; fields of the other food type are ignored."""

    brand_name: str | None = None
    product_name: str | None = None
    bag_weight: DecimalString | None = None
    bag_weight_unit: str | None = None
    number_of_units: int | None = Field(default=None, gt=0)
    weight_per_unit: DecimalString | None = None
    weight_per_unit_unit: str | None = None
    daily_amount: DecimalString | None = None
    daily_amount_unit: str | None = None
    date_started: date | None = None


class FinishRequest(BaseModel):
    """Finish an entry, defaulting to today."""

    date_finished: date | None = None


class FinishDateUpdate(BaseModel):
    """New finish date for an already finished entry."""

    date_finished: date
