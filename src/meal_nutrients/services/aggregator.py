"""Nutrient scaling, summation, and daily-value math."""

import math
from collections.abc import Iterable, Mapping
from typing import Protocol

from meal_nutrients.domain.catalog import Catalog
from meal_nutrients.domain.meals import MealNutrientTotals
from meal_nutrients.domain.nutrients import (
    DAILY_VALUES,
    NUTRIENT_KEYS,
    NutrientVector,
    zero_vector,
)


class PortionLike(Protocol):
    """Anything carrying a canonical id and a gram amount."""

    canonical_id: str
    grams: float


Portion = PortionLike | tuple[str, float]


def clamp_grams(grams: float) -> float:
    """Clamp a gram amount to a finite, non-negative number."""
    if not isinstance(grams, int | float) or isinstance(grams, bool):
        return 0.0
    value = float(grams)
    if not math.isfinite(value) or value < 0:
        return 0.0
    return value


def scale_vector(per_100g: Mapping[str, float], grams: float) -> NutrientVector:
    """Scale a per-100 g vector to the given mass."""
    factor = clamp_grams(grams) / 100
    return {key: per_100g.get(key, 0.0) * factor for key in NUTRIENT_KEYS}


def sum_vectors(vectors: Iterable[Mapping[str, float]]) -> NutrientVector:
    """Elementwise sum of nutrient vectors."""
    total = zero_vector()
    for vector in vectors:
        for key in NUTRIENT_KEYS:
            total[key] += vector.get(key, 0.0)
    return total


def percent_daily_value(
    totals: Mapping[str, float], daily_values: Mapping[str, float] = DAILY_VALUES
) -> NutrientVector:
    """Express totals as a fraction of the daily reference values."""
    percent = zero_vector()
    for key in NUTRIENT_KEYS:
        reference = daily_values.get(key, 0.0)
        if reference > 0:
            percent[key] = totals.get(key, 0.0) / reference
    return percent


def item_vector(canonical_id: str, grams: float, catalog: Catalog) -> NutrientVector:
    """Nutrients contributed by one portion of a catalog food."""
    return scale_vector(catalog.per_100g(canonical_id), grams)


def aggregate(items: Iterable[Portion], catalog: Catalog) -> MealNutrientTotals:
    """Compute meal totals and percent of daily values."""
    vectors = []
    for item in items:
        canonical_id, grams = _portion(item)
        vectors.append(item_vector(canonical_id, grams, catalog))
    totals = sum_vectors(vectors)
    return MealNutrientTotals(totals=totals, percent_dv=percent_daily_value(totals))


def _portion(item: Portion) -> tuple[str, float]:
    if isinstance(item, tuple):
        canonical_id, grams = item
        return canonical_id, grams
    return item.canonical_id, item.grams
