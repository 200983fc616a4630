"""Meal mapping orchestration: resolve, aggregate, rank, persist."""

import logging
import math
from dataclasses import dataclass
from typing import Protocol

from meal_nutrients.domain.catalog import Catalog
from meal_nutrients.domain.meals import MappedItem, MappingResult, ParsedItem
from meal_nutrients.domain.nutrients import NUTRIENT_DB_VERSION
from meal_nutrients.errors import PersistenceError, ValidationError
from meal_nutrients.services.aggregator import aggregate, clamp_grams
from meal_nutrients.services.catalog import CatalogService
from meal_nutrients.services.ranker import rank_contributors
from meal_nutrients.services.resolver import resolve

_logger = logging.getLogger(__name__)


class MealRepository(Protocol):
    """Persistence interface for computed meal results."""

    def save_mapping(self, meal_id: str, fields: dict[str, object]) -> None:
        """Replace the computed fields on a meal record."""


@dataclass
class MappingService:
    """Turns parsed meal items into a persisted nutrient report."""

    catalog_service: CatalogService
    repository: MealRepository
    nutrient_db_version: str = NUTRIENT_DB_VERSION

    def map_meal(self, meal_id: str | None, items: list[ParsedItem]) -> MappingResult:
        """Compute and persist the nutrient report for a meal."""
        if not meal_id or not meal_id.strip():
            raise ValidationError("meal_id required")

        loaded = self.catalog_service.load()
        if loaded.used_fallback:
            _logger.info("Mapping meal %s on fallback catalog", meal_id)
        mapped = map_items(items, loaded.catalog)
        totals = aggregate(mapped, loaded.catalog)
        contributors = rank_contributors(mapped, loaded.catalog)
        result = MappingResult(
            meal_id=meal_id,
            items=mapped,
            nutrient_totals=totals,
            nutrient_db_version=self.nutrient_db_version,
            top_contributors=contributors,
            used_fallback_catalog=loaded.used_fallback,
        )

        try:
            self.repository.save_mapping(meal_id, persisted_fields(result))
        except PersistenceError:
            raise
        except Exception as exc:
            raise PersistenceError(f"Failed to save meal {meal_id}: {exc}") from exc
        _logger.info(
            "Mapped meal %s: items=%s contributors=%s",
            meal_id,
            len(mapped),
            len(contributors),
        )
        return result


def map_items(items: list[ParsedItem], catalog: Catalog) -> list[MappedItem]:
    """Resolve every parsed item against the catalog."""
    mapped: list[MappedItem] = []
    for item in items:
        resolution = resolve(item.name, catalog)
        mapped.append(
            MappedItem(
                name=item.name,
                canonical_id=resolution.canonical_id,
                canonical_name=resolution.canonical_name,
                grams=clamp_grams(item.estimated_grams),
                confidence=_clamp_confidence(item.confidence),
            )
        )
    return mapped


def persisted_fields(result: MappingResult) -> dict[str, object]:
    """Columns written onto the meal record."""
    return {
        "final_items": [item.to_payload() for item in result.items],
        "nutrient_totals": result.nutrient_totals.to_payload(),
        "nutrient_db_version": result.nutrient_db_version,
        "insights": result.insights_payload(),
    }


def _clamp_confidence(value: float) -> float:
    if not math.isfinite(value):
        return 0.0
    return min(max(float(value), 0.0), 1.0)
