"""Shared test fixtures."""

from dataclasses import dataclass, field, fields, replace
from datetime import UTC, date, datetime, timedelta
from uuid import UUID, uuid4

import pytest

from pettr.config import Settings
from pettr.containers import AppContainer
from pettr.domain.food import FoodEntry, FoodType
from pettr.services.food import FoodRepository, FoodService

_ENTRY_FIELDS = {item.name for item in fields(FoodEntry)}


@dataclass
class InMemoryFoodRepository(FoodRepository):
    """In-memory food entry repository for tests."""

    entries: dict[UUID, FoodEntry] = field(default_factory=dict)
    deleted: list[UUID] = field(default_factory=list)

    def create_entry(self, payload: dict[str, object]) -> FoodEntry:
        now = datetime.now(tz=UTC)
        values = {key: value for key, value in payload.items() if key in _ENTRY_FIELDS}
        entry = FoodEntry(id=uuid4(), created_at=now, updated_at=now, **values)
        self.entries[entry.id] = entry
        return entry

    def get_entry(self, entry_id: UUID) -> FoodEntry | None:
        return self.entries.get(entry_id)

    def list_entries(  # noqa: PLR0913
        self,
        pet_id: UUID,
        food_type: FoodType | None = None,
        is_active: bool | None = None,
        limit: int | None = None,
        order_by: str = "created_at",
    ) -> list[FoodEntry]:
        results = [
            entry
            for entry in self.entries.values()
            if entry.pet_id == pet_id
            and (food_type is None or entry.food_type == food_type)
            and (is_active is None or entry.is_active == is_active)
        ]
        results.sort(key=lambda entry: getattr(entry, order_by), reverse=True)
        return results[:limit] if limit is not None else results

    def update_entry(self, entry_id: UUID, payload: dict[str, object]) -> FoodEntry:
        values = {key: value for key, value in payload.items() if key in _ENTRY_FIELDS}
        updated = replace(self.entries[entry_id], **values)
        self.entries[entry_id] = updated
        return updated

    def delete_entry(self, entry_id: UUID) -> None:
        self.entries.pop(entry_id, None)
        self.deleted.append(entry_id)


def days_ago(days: int) -> date:
    """Return the UTC date a number of days before today."""
    return datetime.now(tz=UTC).date() - timedelta(days=days)


def dry_payload(**overrides: object) -> dict[str, object]:
    """Return a valid dry food payload: 2 kg bag at 100 g per day."""
    payload: dict[str, object] = {
        "brand_name": "Acana",
        "product_name": "Wild Prairie",
        "bag_weight": "2.0",
        "bag_weight_unit": "kg",
        "daily_amount": "100",
        "daily_amount_unit": "grams",
        "date_started": days_ago(0),
    }
    payload.update(overrides)
    return payload


def wet_payload(**overrides: object) -> dict[str, object]:
    """Return a valid wet food payload: 12 cans of 85 g at 170 g per day."""
    payload: dict[str, object] = {
        "brand_name": "Ziwi",
        "number_of_units": 12,
        "weight_per_unit": "85",
        "weight_per_unit_unit": "grams",
        "daily_amount": "170",
        "daily_amount_unit": "grams",
        "date_started": days_ago(0),
    }
    payload.update(overrides)
    return payload


@pytest.fixture
def settings() -> Settings:
    return Settings(
        supabase_url="https://example.supabase.co",
        supabase_service_key=(
            "eyJhbGciOiJIUzI1NiIsInR5cCI6IkpXVCJ9."
            "eyJyb2xlIjoic2VydmljZV9yb2xlIn0."
            "c2lnbmF0dXJl"
        ),
    )


@pytest.fixture
def food_repository() -> InMemoryFoodRepository:
    return InMemoryFoodRepository()


@pytest.fixture
def food_service(food_repository: InMemoryFoodRepository) -> FoodService:
    return FoodService(repository=food_repository)


@pytest.fixture
def pet_id() -> UUID:
    return uuid4()


@pytest.fixture
def container(settings: Settings, food_service: FoodService) -> AppContainer:
    async def close_resources() -> None:
        return None

    return AppContainer(
        settings=settings,
        food_service=food_service,
        close_resources=close_resources,
    )
