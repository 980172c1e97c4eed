"""Food entry service: validation, lifecycle and derived fields."""

import logging
from dataclasses import asdict, dataclass
from datetime import date, datetime
from typing import Protocol
from uuid import UUID, uuid4
from zoneinfo import ZoneInfo

from pettr.domain.errors import (
    ActiveEntryExists,
    ConsumptionError,
    NotFoundError,
    ValidationError,
)
from pettr.domain.food import (
    DepletionEstimate,
    FeedingAssessment,
    FoodEntry,
    FoodType,
)
from pettr.services.depletion import estimate_depletion
from pettr.services.feeding import assess_feeding
from pettr.services.formatting import format_status_message
from pettr.services.units import from_grams
from pettr.services.validation import (
    parse_date,
    select_fields,
    validate_entry,
    validate_finish_date,
)

logger = logging.getLogger(__name__)

MAX_FINISHED_LIMIT = 100


class FoodRepository(Protocol):
    """Persistence interface for food entries."""

    def create_entry(self, payload: dict[str, object]) -> FoodEntry:
        """Create a food entry and return it."""

    def get_entry(self, entry_id: UUID) -> FoodEntry | None:
        """Return a food entry by id, if present."""

    def list_entries(  # noqa: PLR0913
        self,
        pet_id: UUID,
        food_type: FoodType | None = None,
        is_active: bool | None = None,
        limit: int | None = None,
        order_by: str = "created_at",
    ) -> list[FoodEntry]:
        """Return entries for a pet, newest first by the order column."""

    def update_entry(self, entry_id: UUID, payload: dict[str, object]) -> FoodEntry:
        """Update a food entry and return it."""

    def delete_entry(self, entry_id: UUID) -> None:
        """Delete a food entry."""


@dataclass(frozen=True)
class FoodEntryReport:
    """A food entry with freshly computed supply and feeding figures."""

    entry: FoodEntry
    estimate: DepletionEstimate | None
    assessment: FeedingAssessment | None
    remaining_days: int
    remaining_weight: float | None
    status_message: str | None


@dataclass
class FoodService:
    """Application service for tracking food entries."""

    repository: FoodRepository
    timezone: str = "UTC"

    def today(self) -> date:
        """Return today's date in the configured timezone."""
        return datetime.now(tz=ZoneInfo(self.timezone)).date()

    def create_entry(
        self, pet_id: UUID, food_type: FoodType, payload: dict[str, object]
    ) -> FoodEntryReport:
        """Validate and create a new active entry."""
        today = self.today()
        data = _normalize(select_fields(food_type, payload))
        validate_entry(food_type, data, today)

        active = self.repository.list_entries(
            pet_id, food_type=food_type, is_active=True
        )
        if active:
            raise ActiveEntryExists(
                f"Pet already has an active {food_type} food entry; "
                "finish it before starting a new one"
            )

        draft = FoodEntry(id=uuid4(), pet_id=pet_id, food_type=food_type, **data)
        estimate = _estimate(draft, today)
        entry = self.repository.create_entry(
            {
                "pet_id": pet_id,
                "food_type": food_type,
                "is_active": True,
                "remaining_days": estimate.remaining_days,
                **data,
            }
        )
        logger.info("Created %s food entry %s for pet %s", food_type, entry.id, pet_id)
        return self._report(entry, today)

    def get_entry(self, pet_id: UUID, entry_id: UUID) -> FoodEntryReport:
        """Return an entry with remaining days recomputed for today."""
        return self._report(self._require_entry(pet_id, entry_id), self.today())

    def list_entries(
        self, pet_id: UUID, food_type: FoodType | None = None
    ) -> list[FoodEntryReport]:
        """Return all entries for a pet, newest first."""
        today = self.today()
        entries = self.repository.list_entries(pet_id, food_type=food_type)
        return [self._report(entry, today) for entry in entries]

    def list_finished(
        self, pet_id: UUID, food_type: FoodType | None = None, limit: int = 5
    ) -> list[FoodEntryReport]:
        """Return recently finished entries."""
        if limit <= 0 or limit > MAX_FINISHED_LIMIT:
            raise ValidationError(f"Limit must be between 1 and {MAX_FINISHED_LIMIT}")
        today = self.today()
        entries = self.repository.list_entries(
            pet_id,
            food_type=food_type,
            is_active=False,
            limit=limit,
            order_by="updated_at",
        )
        return [self._report(entry, today) for entry in entries]

    def update_entry(
        self, pet_id: UUID, entry_id: UUID, payload: dict[str, object]
    ) -> FoodEntryReport:
        """Apply a partial update to an active entry."""
        entry = self._require_entry(pet_id, entry_id)
        if not entry.is_active:
            raise NotFoundError("Active food entry not found")
        changes = _normalize(select_fields(entry.food_type, payload))
        if not changes:
            raise ValidationError("At least one field must be provided for update")

        today = self.today()
        merged = {**_entry_fields(entry), **changes}
        validate_entry(entry.food_type, merged, today)
        estimate = _estimate(
            FoodEntry(id=entry.id, pet_id=pet_id, food_type=entry.food_type, **merged),
            today,
        )
        updated = self.repository.update_entry(
            entry_id,
            {
                **changes,
                "remaining_days": estimate.remaining_days,
                "updated_at": datetime.now(tz=ZoneInfo(self.timezone)),
            },
        )
        logger.info("Updated food entry %s fields %s", entry_id, sorted(changes))
        return self._report(updated, today)

    def mark_finished(
        self, pet_id: UUID, entry_id: UUID, date_finished: object | None = None
    ) -> FoodEntryReport:
        """Mark an active entry finished and record its feeding status."""
        entry = self._require_entry(pet_id, entry_id)
        if not entry.is_active:
            raise NotFoundError("Active food entry not found")
        today = self.today()
        finished = (
            today if date_finished is None else parse_date(date_finished, "finish date")
        )
        updated = self._finish(entry, finished, today)
        logger.info(
            "Food entry %s finished after %s days: %s",
            entry_id,
            updated.actual_days_elapsed,
            updated.feeding_status,
        )
        return self._report(updated, today)

    def update_finish_date(
        self, pet_id: UUID, entry_id: UUID, date_finished: object
    ) -> FoodEntryReport:
        """Change the finish date of a finished entry and reclassify it."""
        entry = self._require_entry(pet_id, entry_id)
        if entry.is_active:
            raise ValidationError("Only finished food entries have a finish date")
        today = self.today()
        finished = parse_date(date_finished, "finish date")
        updated = self._finish(entry, finished, today)
        logger.info(
            "Food entry %s finish date changed to %s: %s",
            entry_id,
            finished,
            updated.feeding_status,
        )
        return self._report(updated, today)

    def delete_entry(self, pet_id: UUID, entry_id: UUID) -> None:
        """Delete an entry belonging to the pet."""
        self._require_entry(pet_id, entry_id)
        self.repository.delete_entry(entry_id)
        logger.info("Deleted food entry %s", entry_id)

    def _require_entry(self, pet_id: UUID, entry_id: UUID) -> FoodEntry:
        entry = self.repository.get_entry(entry_id)
        if entry is None or entry.pet_id != pet_id:
            raise NotFoundError("Food entry not found")
        return entry

    def _finish(self, entry: FoodEntry, finished: date, today: date) -> FoodEntry:
        validate_finish_date(entry.date_started, finished, today)
        try:
            assessment = assess_feeding(entry, finished)
        except ConsumptionError as exc:
            raise ValidationError(str(exc)) from exc
        return self.repository.update_entry(
            entry.id,
            {
                "is_active": False,
                "date_finished": finished,
                "remaining_days": 0,
                "actual_days_elapsed": assessment.actual_days_elapsed,
                "feeding_status": assessment.status,
                "variance_percent": assessment.variance_percent,
                "updated_at": datetime.now(tz=ZoneInfo(self.timezone)),
            },
        )

    def _report(self, entry: FoodEntry, today: date) -> FoodEntryReport:
        try:
            estimate = estimate_depletion(entry, today)
        except ConsumptionError:
            logger.warning("Cannot estimate depletion for food entry %s", entry.id)
            estimate = None

        assessment = None
        status_message = None
        if not entry.is_active and entry.date_finished is not None:
            try:
                assessment = assess_feeding(entry)
            except ConsumptionError:
                logger.warning("Cannot assess feeding for food entry %s", entry.id)
            else:
                status_message = format_status_message(
                    assessment.status,
                    assessment.actual_days_elapsed,
                    assessment.expected_days,
                )

        if not entry.is_active or estimate is None:
            remaining_days = 0
            remaining_weight = 0.0 if estimate is not None else None
        else:
            remaining_days = estimate.remaining_days
            remaining_weight = from_grams(estimate.remaining_grams, _stock_unit(entry))

        return FoodEntryReport(
            entry=entry,
            estimate=estimate,
            assessment=assessment,
            remaining_days=remaining_days,
            remaining_weight=remaining_weight,
            status_message=status_message,
        )


def _estimate(entry: FoodEntry, today: date) -> DepletionEstimate:
    try:
        return estimate_depletion(entry, today)
    except ConsumptionError as exc:
        raise ValidationError(str(exc)) from exc


def _stock_unit(entry: FoodEntry) -> str | None:
    match entry.food_type:
        case FoodType.DRY:
            return entry.bag_weight_unit
        case FoodType.WET:
            return entry.weight_per_unit_unit


def _normalize(data: dict[str, object]) -> dict[str, object]:
    """Coerce request values into the types stored on a FoodEntry."""
    normalized = dict(data)
    for key in ("bag_weight", "weight_per_unit", "daily_amount"):
        if key in normalized:
            normalized[key] = str(normalized[key]).strip()
    for key in ("bag_weight_unit", "weight_per_unit_unit", "daily_amount_unit"):
        if key in normalized:
            normalized[key] = str(normalized[key])
    if "date_started" in normalized:
        normalized["date_started"] = parse_date(
            normalized["date_started"], "start date"
        )
    units = normalized.get("number_of_units")
    if isinstance(units, str) and units.strip().isdecimal():
        normalized["number_of_units"] = int(units.strip())
    return normalized


def _entry_fields(entry: FoodEntry) -> dict[str, object]:
    return select_fields(entry.food_type, asdict(entry))
