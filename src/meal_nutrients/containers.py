"""Dependency container wiring for the application."""

from collections.abc import Awaitable, Callable
from dataclasses import dataclass

from supabase import Client, create_client

from meal_nutrients.adapters.null_repositories import (
    EmptyCatalogRepository,
    UnconfiguredMealRepository,
)
from meal_nutrients.adapters.supabase_catalog_repository import (
    SupabaseCatalogRepository,
)
from meal_nutrients.adapters.supabase_meal_repository import SupabaseMealRepository
from meal_nutrients.config import Settings
from meal_nutrients.services.catalog import CatalogRepository, CatalogService
from meal_nutrients.services.mapping import MappingService, MealRepository


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    catalog_service: CatalogService
    mapping_service: MappingService
    close_resources: Callable[[], Awaitable[None]]


def create_supabase_client(settings: Settings) -> Client:
    """Create a Supabase client from settings with credentials."""
    return create_client(settings.supabase_url, settings.supabase_service_key)


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    catalog_repository: CatalogRepository
    meal_repository: MealRepository
    if resolved_settings.has_supabase_credentials():
        supabase_client = create_supabase_client(resolved_settings)
        catalog_repository = SupabaseCatalogRepository(
            supabase_client, table=resolved_settings.catalog_table
        )
        meal_repository = SupabaseMealRepository(
            supabase_client, table=resolved_settings.meals_table
        )
    else:
        catalog_repository = EmptyCatalogRepository()
        meal_repository = UnconfiguredMealRepository()

    catalog_service = CatalogService(catalog_repository)
    mapping_service = MappingService(
        catalog_service=catalog_service,
        repository=meal_repository,
        nutrient_db_version=resolved_settings.nutrient_db_version,
    )

    async def close_resources() -> None:
        return None

    return AppContainer(
        settings=resolved_settings,
        catalog_service=catalog_service,
        mapping_service=mapping_service,
        close_resources=close_resources,
    )
