"""Dependency container wiring for the application."""

from dataclasses import dataclass

from supabase import create_client

from nutribattle.adapters.supabase_food_repository import SupabaseFoodRepository
from nutribattle.config import Settings
from nutribattle.services.catalog import CatalogService


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    catalog_service: CatalogService


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    supabase_client = create_client(
        resolved_settings.supabase_url, resolved_settings.supabase_service_key
    )
    food_repository = SupabaseFoodRepository(
        supabase_client, table=resolved_settings.foods_table
    )
    return AppContainer(
        settings=resolved_settings,
        catalog_service=CatalogService(food_repository),
    )
