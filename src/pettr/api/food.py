"""Food tracker API endpoints."""

from __future__ import annotations

from dataclasses import asdict
from typing import TYPE_CHECKING
from uuid import UUID  # noqa: TC003

from fastapi import APIRouter, Request, Response, status

from pettr.api.models import (
    DryFoodCreate,
    FinishDateUpdate,
    FinishRequest,
    FoodEntryUpdate,
    WetFoodCreate,
)
from pettr.domain.food import FoodType
from pettr.services.formatting import format_finish_summary, format_variance

if TYPE_CHECKING:
    from pettr.containers import AppContainer
    from pettr.services.food import FoodEntryReport, FoodService

router = APIRouter(prefix="/pets/{pet_id}/food", tags=["food"])


def _service(request: Request) -> FoodService:
    container: AppContainer = request.app.state.container
    return container.food_service


@router.get("")
async def list_entries(
    pet_id: UUID, request: Request, food_type: FoodType | None = None
) -> dict[str, object]:
    """Return all food entries for a pet."""
    reports = _service(request).list_entries(pet_id, food_type)
    return {
        "food_entries": [serialize_report(report) for report in reports],
        "total": len(reports),
    }


@router.get("/finished")
async def list_finished(
    pet_id: UUID,
    request: Request,
    food_type: FoodType | None = None,
    limit: int = 5,
) -> dict[str, object]:
    """Return recently finished food entries."""
    reports = _service(request).list_finished(pet_id, food_type, limit)
    return {
        "food_entries": [serialize_report(report) for report in reports],
        "total": len(reports),
    }


@router.post("/dry", status_code=status.HTTP_201_CREATED)
async def create_dry_entry(
    pet_id: UUID, body: DryFoodCreate, request: Request
) -> dict[str, object]:
    """Start tracking a bag of dry food."""
    report = _service(request).create_entry(pet_id, FoodType.DRY, body.model_dump())
    return {"food_entry": serialize_report(report)}


@router.post("/wet", status_code=status.HTTP_201_CREATED)
async def create_wet_entry(
    pet_id: UUID, body: WetFoodCreate, request: Request
) -> dict[str, object]:
    """Start tracking a case of wet food."""
    report = _service(request).create_entry(pet_id, FoodType.WET, body.model_dump())
    return {"food_entry": serialize_report(report)}


@router.get("/{entry_id}")
async def get_entry(
    pet_id: UUID, entry_id: UUID, request: Request
) -> dict[str, object]:
    """Return a single food entry."""
    report = _service(request).get_entry(pet_id, entry_id)
    return {"food_entry": serialize_report(report)}


@router.patch("/{entry_id}")
async def update_entry(
    pet_id: UUID, entry_id: UUID, body: FoodEntryUpdate, request: Request
) -> dict[str, object]:
    """Update an active food entry."""
    report = _service(request).update_entry(
        pet_id, entry_id, body.model_dump(exclude_unset=True)
    )
    return {"food_entry": serialize_report(report)}


@router.post("/{entry_id}/finish")
async def finish_entry(
    pet_id: UUID,
    entry_id: UUID,
    request: Request,
    body: FinishRequest | None = None,
) -> dict[str, object]:
    """Mark a food entry as finished."""
    date_finished = body.date_finished if body else None
    report = _service(request).mark_finished(pet_id, entry_id, date_finished)
    return {"food_entry": serialize_report(report), "message": _finish_message(report)}


@router.patch("/{entry_id}/finish-date")
async def update_finish_date(
    pet_id: UUID, entry_id: UUID, body: FinishDateUpdate, request: Request
) -> dict[str, object]:
    """Change the finish date of a finished entry."""
    report = _service(request).update_finish_date(pet_id, entry_id, body.date_finished)
    return {"food_entry": serialize_report(report), "message": _finish_message(report)}


@router.delete("/{entry_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_entry(pet_id: UUID, entry_id: UUID, request: Request) -> Response:
    """Delete a food entry."""
    _service(request).delete_entry(pet_id, entry_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


def serialize_report(report: FoodEntryReport) -> dict[str, object]:
    """Flatten an entry report into a JSON-ready dict."""
    data = asdict(report.entry)
    data["remaining_days"] = report.remaining_days
    data["remaining_weight"] = (
        round(report.remaining_weight, 2)
        if report.remaining_weight is not None
        else None
    )
    if report.estimate is not None:
        data["expected_days"] = report.estimate.expected_days
        data["depletion_date"] = report.estimate.depletion_date
    else:
        data["expected_days"] = None
        data["depletion_date"] = None
    if report.assessment is not None:
        data["expected_daily_grams"] = round(report.assessment.expected_daily_grams, 2)
        data["actual_daily_grams"] = round(report.assessment.actual_daily_grams, 2)
        data["variance"] = format_variance(report.assessment.variance_percent)
    data["feeding_status_message"] = report.status_message
    return data


def _finish_message(report: FoodEntryReport) -> str:
    if report.assessment is None:
        return "Finish date updated"
    return format_finish_summary(
        report.assessment.status,
        report.assessment.actual_days_elapsed,
        report.assessment.expected_days,
    )
