"""Supabase implementation for food entries."""

from dataclasses import dataclass
from datetime import date, datetime
from enum import Enum
from uuid import UUID

from supabase import Client

from pettr.domain.food import FeedingStatus, FoodEntry, FoodType
from pettr.services.food import FoodRepository


@dataclass
class SupabaseFoodRepository(FoodRepository):
    """Supabase-backed repository for food entries."""

    client: Client
    table: str = "food_entries"

    def create_entry(self, payload: dict[str, object]) -> FoodEntry:
        """Create a food entry and return it."""
        response = self.client.table(self.table).insert(_to_row(payload)).execute()
        if not response.data:
            raise RuntimeError("Failed to create food entry")
        return _parse_entry(response.data[0])

    def get_entry(self, entry_id: UUID) -> FoodEntry | None:
        """Return a food entry by id, if present."""
        response = (
            self.client.table(self.table)
            .select("*")
            .eq("id", str(entry_id))
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        return _parse_entry(response.data[0])

    def list_entries(  # noqa: PLR0913
        self,
        pet_id: UUID,
        food_type: FoodType | None = None,
        is_active: bool | None = None,
        limit: int | None = None,
        order_by: str = "created_at",
    ) -> list[FoodEntry]:
        """Return entries for a pet, newest first."""
        query = self.client.table(self.table).select("*").eq("pet_id", str(pet_id))
        if food_type is not None:
            query = query.eq("food_type", str(food_type))
        if is_active is not None:
            query = query.eq("is_active", "true" if is_active else "false")
        query = query.order(order_by, desc=True)
        if limit is not None:
            query = query.limit(limit)
        response = query.execute()
        return [_parse_entry(row) for row in response.data or []]

    def update_entry(self, entry_id: UUID, payload: dict[str, object]) -> FoodEntry:
        """Update a food entry and return it."""
        response = (
            self.client.table(self.table)
            .update(_to_row(payload))
            .eq("id", str(entry_id))
            .execute()
        )
        if not response.data:
            raise RuntimeError("Failed to update food entry")
        return _parse_entry(response.data[0])

    def delete_entry(self, entry_id: UUID) -> None:
        """Delete a food entry."""
        self.client.table(self.table).delete().eq("id", str(entry_id)).execute()


def _to_row(payload: dict[str, object]) -> dict[str, object]:
    """Convert domain values into JSON-friendly column values."""
    row: dict[str, object] = {}
    for key, value in payload.items():
        if isinstance(value, date | datetime):
            row[key] = value.isoformat()
        elif isinstance(value, UUID):
            row[key] = str(value)
        elif isinstance(value, Enum):
            row[key] = value.value
        else:
            row[key] = value
    return row


def _parse_entry(row: dict[str, object]) -> FoodEntry:
    """Parse a food entry row into a domain model."""
    status_raw = row.get("feeding_status")
    variance_raw = row.get("variance_percent")
    return FoodEntry(
        id=UUID(str(row["id"])),
        pet_id=UUID(str(row["pet_id"])),
        food_type=FoodType(str(row["food_type"])),
        daily_amount=str(row.get("daily_amount", "")),
        daily_amount_unit=str(row.get("daily_amount_unit", "")),
        date_started=date.fromisoformat(str(row["date_started"])),
        brand_name=row.get("brand_name"),
        product_name=row.get("product_name"),
        bag_weight=_optional_str(row.get("bag_weight")),
        bag_weight_unit=row.get("bag_weight_unit"),
        number_of_units=_optional_int(row.get("number_of_units")),
        weight_per_unit=_optional_str(row.get("weight_per_unit")),
        weight_per_unit_unit=row.get("weight_per_unit_unit"),
        date_finished=_optional_date(row.get("date_finished")),
        is_active=bool(row.get("is_active", True)),
        remaining_days=_optional_int(row.get("remaining_days")),
        actual_days_elapsed=_optional_int(row.get("actual_days_elapsed")),
        feeding_status=FeedingStatus(str(status_raw)) if status_raw else None,
        variance_percent=float(variance_raw) if variance_raw is not None else None,
        created_at=_optional_datetime(row.get("created_at")),
        updated_at=_optional_datetime(row.get("updated_at")),
    )


def _optional_str(value: object) -> str | None:
    return None if value is None else str(value)


def _optional_int(value: object) -> int | None:
    return None if value is None else int(value)


def _optional_date(value: object) -> date | None:
    if isinstance(value, str) and value:
        return date.fromisoformat(value[:10])
    return None


def _optional_datetime(value: object) -> datetime | None:
    if isinstance(value, str) and value:
        return datetime.fromisoformat(value)
    return None
