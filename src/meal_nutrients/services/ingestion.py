"""Build canonical foods from USDA FoodData Central CSV exports."""

import logging
import math
import re
from collections.abc import Iterable, Mapping, Sequence
from dataclasses import dataclass
from typing import Protocol

from meal_nutrients.domain.catalog import CanonicalFood
from meal_nutrients.domain.nutrients import NutrientVector, zero_vector
from meal_nutrients.errors import IngestionError

_logger = logging.getLogger(__name__)

DEFAULT_BATCH_SIZE = 500

FOOD_CATEGORY_MARKERS: tuple[str, ...] = ("foundation",)

FOOD_COLUMNS: dict[str, tuple[str, ...]] = {
    "fdc_id": ("fdc_id", "fdc id"),
    "description": ("description", "food_description"),
    "data_type": ("data_type", "data type"),
}
NUTRIENT_COLUMNS: dict[str, tuple[str, ...]] = {
    "id": ("id", "nutrient_id"),
    "name": ("name", "nutrient_name"),
    "unit": ("unit_name", "unit"),
}
FOOD_NUTRIENT_COLUMNS: dict[str, tuple[str, ...]] = {
    "fdc_id": ("fdc_id", "fdc id"),
    "nutrient_id": ("nutrient_id", "nutrient id"),
    "amount": ("amount", "value"),
}

# (key, unit, accepted nutrient names) as they appear in nutrient.csv.
NUTRIENT_NAME_MAP: tuple[tuple[str, str, tuple[str, ...]], ...] = (
    ("vitamin_a_ug", "UG", ("vitamin a, rae",)),
    ("vitamin_c_mg", "MG", ("vitamin c, total ascorbic acid",)),
    ("vitamin_d_ug", "UG", ("vitamin d (d2 + d3)",)),
    ("vitamin_e_mg", "MG", ("vitamin e (alpha-tocopherol)",)),
    ("vitamin_k_ug", "UG", ("vitamin k (phylloquinone)",)),
    ("thiamin_mg", "MG", ("thiamin",)),
    ("riboflavin_mg", "MG", ("riboflavin",)),
    ("niacin_mg", "MG", ("niacin",)),
    ("vitamin_b6_mg", "MG", ("vitamin b-6",)),
    ("folate_ug", "UG", ("folate, total",)),
    ("vitamin_b12_ug", "UG", ("vitamin b-12",)),
    ("calcium_mg", "MG", ("calcium, ca",)),
    ("iron_mg", "MG", ("iron, fe",)),
    ("magnesium_mg", "MG", ("magnesium, mg",)),
    ("phosphorus_mg", "MG", ("phosphorus, p",)),
    ("potassium_mg", "MG", ("potassium, k",)),
    ("zinc_mg", "MG", ("zinc, zn",)),
    ("selenium_ug", "UG", ("selenium, se",)),
    ("omega3_g", "G", ("fatty acids, total omega-3",)),
)

_DASHES = re.compile("[\u2013\u2014]")
_NON_ALNUM = re.compile(r"[^a-z0-9]+")


@dataclass(frozen=True)
class ExportTable:
    """Rows of one CSV export with its header order."""

    headers: list[str]
    rows: list[dict[str, str]]


class CatalogWriter(Protocol):
    """Write access to the canonical food store."""

    def upsert_foods(self, rows: list[dict[str, object]]) -> None:
        """Insert or update rows keyed by canonical_id."""


@dataclass(frozen=True)
class IngestionReport:
    """Outcome of an ingestion run."""

    prepared: int
    committed: int
    batches: int


def normalize_label(value: object) -> str:
    """Normalize a header or nutrient name for comparison."""
    text = _DASHES.sub("-", str(value or "").lower())
    return _NON_ALNUM.sub(" ", text).strip()


def slugify(value: str) -> str:
    """Turn a food description into a canonical id slug."""
    return normalize_label(value).replace(" ", "-").strip("-") or "food"


def resolve_columns(
    headers: Sequence[str], required: Mapping[str, tuple[str, ...]], table: str
) -> dict[str, str]:
    """Map logical fields to the actual header names of a table."""
    normalized = [normalize_label(header) for header in headers]
    resolved: dict[str, str] = {}
    for field_name, synonyms in required.items():
        accepted = {normalize_label(synonym) for synonym in synonyms}
        match = next(
            (
                header
                for header, label in zip(headers, normalized, strict=True)
                if label in accepted
            ),
            None,
        )
        if match is None:
            raise IngestionError(
                f"Missing column for {field_name} in {table}. "
                f"Headers: {', '.join(headers)}"
            )
        resolved[field_name] = match
    return resolved


def build_nutrient_lookup(table: ExportTable) -> dict[str, str]:
    """Map nutrient ids to nutrient keys by name and unit."""
    columns = resolve_columns(table.headers, NUTRIENT_COLUMNS, "nutrient.csv")
    lookup: dict[str, str] = {}
    for row in table.rows:
        nutrient_id = str(row.get(columns["id"]) or "").strip()
        if not nutrient_id:
            continue
        name = normalize_label(row.get(columns["name"]))
        unit = str(row.get(columns["unit"]) or "").strip().upper()
        for key, expected_unit, names in NUTRIENT_NAME_MAP:
            if unit == expected_unit and any(
                normalize_label(candidate) == name for candidate in names
            ):
                lookup[nutrient_id] = key
                break
    return lookup


def _is_kept_food(data_type: str) -> bool:
    if not data_type:
        return True
    return any(marker in data_type for marker in FOOD_CATEGORY_MARKERS)


def _select_foods(table: ExportTable) -> dict[str, str]:
    columns = resolve_columns(table.headers, FOOD_COLUMNS, "food.csv")
    foods: dict[str, str] = {}
    for row in table.rows:
        fdc_id = str(row.get(columns["fdc_id"]) or "").strip()
        if not fdc_id:
            continue
        data_type = str(row.get(columns["data_type"]) or "").strip().lower()
        if not _is_kept_food(data_type):
            continue
        foods[fdc_id] = str(row.get(columns["description"]) or "").strip()
    return foods


def _collect_vectors(
    table: ExportTable, foods: Mapping[str, str], lookup: Mapping[str, str]
) -> dict[str, NutrientVector]:
    columns = resolve_columns(
        table.headers, FOOD_NUTRIENT_COLUMNS, "food_nutrient.csv"
    )
    vectors: dict[str, NutrientVector] = {}
    for row in table.rows:
        fdc_id = str(row.get(columns["fdc_id"]) or "").strip()
        if fdc_id not in foods:
            continue
        key = lookup.get(str(row.get(columns["nutrient_id"]) or "").strip())
        if key is None:
            continue
        try:
            amount = float(str(row.get(columns["amount"]) or "").strip())
        except ValueError:
            continue
        if not math.isfinite(amount):
            continue
        vectors.setdefault(fdc_id, zero_vector())[key] = amount
    return vectors


def _unique_id(slug: str, fdc_id: str, issued: set[str]) -> str:
    if slug not in issued:
        return slug
    candidate = f"{slug}-{fdc_id}"
    suffix = 2
    while candidate in issued:
        candidate = f"{slug}-{fdc_id}-{suffix}"
        suffix += 1
    return candidate


def build_canonical_foods(
    foods_table: ExportTable,
    nutrients_table: ExportTable,
    food_nutrients_table: ExportTable,
    limit: int | None = None,
) -> list[CanonicalFood]:
    """Convert the three export tables into canonical food rows."""
    foods = _select_foods(foods_table)
    lookup = build_nutrient_lookup(nutrients_table)
    vectors = _collect_vectors(food_nutrients_table, foods, lookup)

    issued: set[str] = set()
    rows: list[CanonicalFood] = []
    for fdc_id, description in foods.items():
        if limit is not None and len(rows) >= limit:
            break
        if not description:
            continue
        canonical_id = _unique_id(slugify(description), fdc_id, issued)
        issued.add(canonical_id)
        rows.append(
            CanonicalFood(
                canonical_id=canonical_id,
                canonical_name=description,
                per_100g=vectors.get(fdc_id) or zero_vector(),
                source="usda",
                fdc_id=fdc_id,
            )
        )
    _logger.info(
        "Prepared %s canonical foods (%s nutrients mapped)", len(rows), len(lookup)
    )
    return rows


def ingest_catalog(
    foods: Iterable[CanonicalFood],
    writer: CatalogWriter,
    batch_size: int = DEFAULT_BATCH_SIZE,
) -> IngestionReport:
    """Upsert foods in sequential batches; stop at the first failure."""
    if batch_size <= 0:
        raise IngestionError("batch_size must be positive")
    rows = [food.to_row() for food in foods]
    committed = 0
    batches = 0
    for start in range(0, len(rows), batch_size):
        chunk = rows[start : start + batch_size]
        try:
            writer.upsert_foods(chunk)
        except Exception as exc:
            raise IngestionError(
                f"Catalog upsert failed after {committed} rows: {exc}",
                committed=committed,
            ) from exc
        committed += len(chunk)
        batches += 1
        _logger.info("Inserted %s / %s", committed, len(rows))
    return IngestionReport(prepared=len(rows), committed=committed, batches=batches)
