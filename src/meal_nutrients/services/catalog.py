"""Catalog loading with a static fallback."""

import logging
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from typing import Protocol

from meal_nutrients.domain.catalog import CanonicalFood, Catalog, FoodSource
from meal_nutrients.domain.fallback_foods import STATIC_FOODS
from meal_nutrients.domain.nutrients import NUTRIENT_KEYS, coerce_amount, zero_vector

_logger = logging.getLogger(__name__)

_SOURCES: set[str] = {"stub", "usda"}


class CatalogRepository(Protocol):
    """Read access to the persisted canonical food store."""

    def list_foods(self) -> list[dict[str, object]]:
        """Return raw canonical food rows."""


@dataclass(frozen=True)
class CatalogLoad:
    """Catalog plus whether it came only from the static fallback set."""

    catalog: Catalog
    used_fallback: bool


@dataclass
class CatalogService:
    """Loads the catalog for each request."""

    repository: CatalogRepository
    fallback_foods: tuple[CanonicalFood, ...] = field(default=STATIC_FOODS)

    def load(self) -> CatalogLoad:
        """Load the store overlaid on the fallback set; never raises."""
        try:
            rows = self.repository.list_foods()
        except Exception as exc:  # noqa: BLE001
            _logger.warning("Catalog store unavailable, using fallback: %s", exc)
            return self._fallback()
        if not rows:
            _logger.warning("Catalog store is empty, using fallback")
            return self._fallback()
        catalog = merge_catalog(self.fallback_foods, rows)
        _logger.info("Catalog loaded: store_rows=%s foods=%s", len(rows), len(catalog))
        return CatalogLoad(catalog=catalog, used_fallback=False)

    def _fallback(self) -> CatalogLoad:
        return CatalogLoad(
            catalog=Catalog.from_foods(self.fallback_foods), used_fallback=True
        )


def merge_catalog(
    fallback_foods: Iterable[CanonicalFood],
    store_rows: Iterable[Mapping[str, object]],
) -> Catalog:
    """Overlay store rows on the fallback foods, field by field."""
    entries = {food.canonical_id: food for food in fallback_foods}
    for row in store_rows:
        canonical_id = str(row.get("canonical_id") or "").strip()
        if not canonical_id:
            continue
        entries[canonical_id] = _overlay(entries.get(canonical_id), canonical_id, row)
    return Catalog.from_foods(entries.values())


def _overlay(
    base: CanonicalFood | None, canonical_id: str, row: Mapping[str, object]
) -> CanonicalFood:
    per_100g = dict(base.per_100g) if base else zero_vector()
    raw_vector = row.get("per_100g")
    if isinstance(raw_vector, Mapping):
        for key in NUTRIENT_KEYS:
            if key in raw_vector:
                per_100g[key] = coerce_amount(raw_vector[key])

    name = row.get("canonical_name")
    if not isinstance(name, str) or not name.strip():
        name = base.canonical_name if base else canonical_id

    source = row.get("source")
    resolved_source: FoodSource
    if isinstance(source, str) and source in _SOURCES:
        resolved_source = source  # type: ignore[assignment]
    else:
        resolved_source = base.source if base else "usda"

    fdc_id = row.get("fdc_id")
    if fdc_id in (None, ""):
        fdc_id = base.fdc_id if base else None
    return CanonicalFood(
        canonical_id=canonical_id,
        canonical_name=name,
        per_100g=per_100g,
        source=resolved_source,
        fdc_id=str(fdc_id) if fdc_id is not None else None,
    )
