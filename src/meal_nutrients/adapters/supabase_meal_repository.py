"""Supabase repository for computed meal results."""

from dataclasses import dataclass

from supabase import Client

from meal_nutrients.errors import PersistenceError
from meal_nutrients.services.mapping import MealRepository


@dataclass
class SupabaseMealRepository(MealRepository):
    """Writes mapping results onto rows of the meals table."""

    client: Client
    table: str = "meals"

    def save_mapping(self, meal_id: str, fields: dict[str, object]) -> None:
        """Replace the computed fields on a meal row."""
        try:
            response = (
                self.client.table(self.table)
                .update(fields)
                .eq("id", meal_id)
                .execute()
            )
        except Exception as exc:
            raise PersistenceError(f"Failed to update meal {meal_id}: {exc}") from exc
        if not response.data:
            raise PersistenceError(f"Meal {meal_id} not found")
