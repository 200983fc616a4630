"""Canonical food catalog models."""

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Literal

from meal_nutrients.domain.nutrients import NutrientVector, make_vector, zero_vector

UNKNOWN_FOOD_ID = "food-unknown"
UNKNOWN_FOOD_NAME = "Unknown food"

FoodSource = Literal["stub", "usda"]


@dataclass(frozen=True)
class CanonicalFood:
    """Deduplicated reference food with nutrients per 100 g."""

    canonical_id: str
    canonical_name: str
    per_100g: NutrientVector
    source: FoodSource = "stub"
    fdc_id: str | None = None

    def to_row(self) -> dict[str, object]:
        """Return the storage/JSON representation of the food."""
        row: dict[str, object] = {
            "canonical_id": self.canonical_id,
            "canonical_name": self.canonical_name,
            "per_100g": dict(self.per_100g),
            "source": self.source,
        }
        if self.fdc_id is not None:
            row["fdc_id"] = self.fdc_id
        return row


def unknown_food() -> CanonicalFood:
    """Return the reserved fallback food with an all-zero vector."""
    return CanonicalFood(
        canonical_id=UNKNOWN_FOOD_ID,
        canonical_name=UNKNOWN_FOOD_NAME,
        per_100g=zero_vector(),
        source="stub",
    )


@dataclass(frozen=True)
class Catalog:
    """Ordered, read-only set of canonical foods keyed by id.

    The reserved ``food-unknown`` entry is always present.
    """

    _foods: dict[str, CanonicalFood]

    @classmethod
    def from_foods(cls, foods: Iterable[CanonicalFood]) -> "Catalog":
        """Build a catalog, keeping the last row seen for a repeated id."""
        entries: dict[str, CanonicalFood] = {UNKNOWN_FOOD_ID: unknown_food()}
        for food in foods:
            if food.canonical_id == UNKNOWN_FOOD_ID:
                continue
            entries[food.canonical_id] = CanonicalFood(
                canonical_id=food.canonical_id,
                canonical_name=food.canonical_name,
                per_100g=make_vector(food.per_100g),
                source=food.source,
                fdc_id=food.fdc_id,
            )
        return cls(entries)

    def get(self, canonical_id: str) -> CanonicalFood | None:
        """Return a food by id, if present."""
        return self._foods.get(canonical_id)

    def per_100g(self, canonical_id: str) -> NutrientVector:
        """Return the nutrient vector for an id, zero for unknown ids."""
        food = self._foods.get(canonical_id)
        if food is None:
            return zero_vector()
        return food.per_100g

    def candidates(self) -> Iterator[CanonicalFood]:
        """Iterate foods eligible for matching, in catalog order."""
        for food in self._foods.values():
            if food.canonical_id != UNKNOWN_FOOD_ID:
                yield food

    def __contains__(self, canonical_id: object) -> bool:
        return canonical_id in self._foods

    def __iter__(self) -> Iterator[CanonicalFood]:
        return iter(self._foods.values())

    def __len__(self) -> int:
        return len(self._foods)
