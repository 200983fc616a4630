"""Repositories used when no Supabase credentials are configured."""

from dataclasses import dataclass

from meal_nutrients.errors import PersistenceError
from meal_nutrients.services.catalog import CatalogRepository
from meal_nutrients.services.mapping import MealRepository


@dataclass
class EmptyCatalogRepository(CatalogRepository):
    """Catalog store with no rows, so the static catalog is used."""

    def list_foods(self) -> list[dict[str, object]]:
        return []


@dataclass
class UnconfiguredMealRepository(MealRepository):
    """Meal store that refuses writes."""

    def save_mapping(self, meal_id: str, fields: dict[str, object]) -> None:
        raise PersistenceError("Meal store is not configured")
