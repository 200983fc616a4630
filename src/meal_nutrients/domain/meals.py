"""Domain models for meal mapping results."""

from dataclasses import dataclass

from meal_nutrients.domain.nutrients import NutrientVector


@dataclass(frozen=True)
class ParsedItem:
    """Food name and mass estimate produced by the vision step."""

    name: str
    estimated_grams: float
    confidence: float


@dataclass(frozen=True)
class MappedItem:
    """Parsed item resolved onto a canonical food."""

    name: str
    canonical_id: str
    canonical_name: str
    grams: float
    confidence: float

    def to_payload(self) -> dict[str, object]:
        return {
            "name": self.name,
            "canonical_id": self.canonical_id,
            "canonical_name": self.canonical_name,
            "grams": self.grams,
            "confidence": self.confidence,
        }


@dataclass(frozen=True)
class MealNutrientTotals:
    """Summed nutrients for a meal and their fraction of daily values."""

    totals: NutrientVector
    percent_dv: NutrientVector

    def to_payload(self) -> dict[str, object]:
        return {"totals": dict(self.totals), "percent_dv": dict(self.percent_dv)}


@dataclass(frozen=True)
class Contributor:
    """Food ranked by its summed daily-value contribution."""

    canonical_id: str
    name: str
    score: float

    def to_payload(self) -> dict[str, object]:
        return {
            "canonical_id": self.canonical_id,
            "name": self.name,
            "score": self.score,
        }


@dataclass(frozen=True)
class MappingResult:
    """Full nutrient report for a meal."""

    meal_id: str
    items: list[MappedItem]
    nutrient_totals: MealNutrientTotals
    nutrient_db_version: str
    top_contributors: list[Contributor]
    used_fallback_catalog: bool = False

    def insights_payload(self) -> dict[str, object]:
        return {
            "top_contributors": [
                contributor.to_payload() for contributor in self.top_contributors
            ]
        }

    def to_payload(self) -> dict[str, object]:
        """Return the response body for the mapping endpoint."""
        return {
            "items": [item.to_payload() for item in self.items],
            "nutrient_totals": self.nutrient_totals.to_payload(),
            "nutrient_db_version": self.nutrient_db_version,
            "insights": self.insights_payload(),
            "catalog_fallback": self.used_fallback_catalog,
        }
