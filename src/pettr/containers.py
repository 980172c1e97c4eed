"""Dependency container wiring for the application."""

from collections.abc import Awaitable, Callable
from dataclasses import dataclass

from supabase import create_client

from pettr.adapters.supabase_food_repository import SupabaseFoodRepository
from pettr.config import Settings
from pettr.services.food import FoodService


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    food_service: FoodService
    close_resources: Callable[[], Awaitable[None]]


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    supabase_client = create_client(
        resolved_settings.supabase_url, resolved_settings.supabase_service_key
    )
    food_repository = SupabaseFoodRepository(
        supabase_client, table=resolved_settings.food_entries_table
    )
    food_service = FoodService(
        repository=food_repository,
        timezone=resolved_settings.timezone,
    )

    async def close_resources() -> None:
        return None

    return AppContainer(
        settings=resolved_settings,
        food_service=food_service,
        close_resources=close_resources,
    )
