"""Tests for building and ingesting canonical foods."""

import pytest

from meal_nutrients.domain.catalog import CanonicalFood
from meal_nutrients.domain.nutrients import zero_vector
from meal_nutrients.errors import IngestionError
from meal_nutrients.services.ingestion import (
    ExportTable,
    build_canonical_foods,
    build_nutrient_lookup,
    ingest_catalog,
    resolve_columns,
    slugify,
)
from tests.conftest import RecordingCatalogWriter


def _table(rows: list[dict[str, str]]) -> ExportTable:
    return ExportTable(headers=list(rows[0]), rows=rows)


FOODS = _table(
    [
        {"fdc_id": "1001", "data_type": "foundation_food", "description": "Apples, raw"},
        {"fdc_id": "1002", "data_type": "branded_food", "description": "Apple Juice"},
        {"fdc_id": "1003", "data_type": "", "description": "Apples,  RAW"},
        {"fdc_id": "", "data_type": "foundation_food", "description": "No id"},
        {"fdc_id": "1004", "data_type": "Foundation_Food", "description": ""},
        {"fdc_id": "1005", "data_type": "foundation_food", "description": "Kale – raw"},
    ]
)
NUTRIENTS = _table(
    [
        {"id": "1162", "name": "Vitamin C, total ascorbic acid", "unit_name": "MG"},
        {"id": "1089", "name": "Iron, Fe", "unit_name": "mg"},
        {"id": "1106", "name": "Vitamin A, RAE", "unit_name": "UG"},
        {"id": "1104", "name": "Vitamin A, IU", "unit_name": "IU"},
        {"id": "", "name": "Thiamin", "unit_name": "MG"},
    ]
)
FOOD_NUTRIENTS = _table(
    [
        {"fdc_id": "1001", "nutrient_id": "1162", "amount": "4.6"},
        {"fdc_id": "1001", "nutrient_id": "1089", "amount": "0.12"},
        {"fdc_id": "1001", "nutrient_id": "1104", "amount": "54"},
        {"fdc_id": "1002", "nutrient_id": "1162", "amount": "40"},
        {"fdc_id": "1003", "nutrient_id": "1162", "amount": "not-a-number"},
        {"fdc_id": "1005", "nutrient_id": "1106", "amount": "241"},
    ]
)


def test_slugify() -> None:
    assert slugify("Apples, raw") == "apples-raw"
    assert slugify("  Kale – raw!! ") == "kale-raw"
    assert slugify("***") == "food"


def test_resolve_columns_matches_synonyms_case_insensitively() -> None:
    columns = resolve_columns(
        ["FDC ID", "Food_Description", "Data Type"],
        {
            "fdc_id": ("fdc_id",),
            "description": ("description", "food_description"),
            "data_type": ("data_type",),
        },
        "food.csv",
    )

    assert columns == {
        "fdc_id": "FDC ID",
        "description": "Food_Description",
        "data_type": "Data Type",
    }


def test_resolve_columns_missing_field_names_headers() -> None:
    with pytest.raises(IngestionError) as excinfo:
        resolve_columns(["fdc_id", "title"], {"description": ("description",)}, "food.csv")

    message = str(excinfo.value)
    assert "description" in message
    assert "fdc_id, title" in message


def test_nutrient_lookup_requires_name_and_unit_match() -> None:
    lookup = build_nutrient_lookup(NUTRIENTS)

    assert lookup == {"1162": "vitamin_c_mg", "1089": "iron_mg", "1106": "vitamin_a_ug"}


def test_build_canonical_foods() -> None:
    foods = build_canonical_foods(FOODS, NUTRIENTS, FOOD_NUTRIENTS)

    assert [food.canonical_id for food in foods] == [
        "apples-raw",
        "apples-raw-1003",
        "kale-raw",
    ]
    apples = foods[0]
    assert apples.canonical_name == "Apples, raw"
    assert apples.source == "usda"
    assert apples.fdc_id == "1001"
    assert apples.per_100g["vitamin_c_mg"] == 4.6
    assert apples.per_100g["iron_mg"] == 0.12
    assert apples.per_100g["vitamin_a_ug"] == 0.0
    assert all(value == 0.0 for value in foods[1].per_100g.values())
    assert foods[2].per_100g["vitamin_a_ug"] == 241


def test_build_canonical_foods_respects_limit() -> None:
    foods = build_canonical_foods(FOODS, NUTRIENTS, FOOD_NUTRIENTS, limit=2)

    assert [food.canonical_id for food in foods] == ["apples-raw", "apples-raw-1003"]


def test_build_canonical_foods_missing_column() -> None:
    broken = ExportTable(headers=["fdc_id", "nutrient_id"], rows=[])

    with pytest.raises(IngestionError, match="amount"):
        build_canonical_foods(FOODS, NUTRIENTS, broken)


def _foods(count: int) -> list[CanonicalFood]:
    return [
        CanonicalFood(
            canonical_id=f"food-{index}",
            canonical_name=f"Food {index}",
            per_100g=zero_vector(),
            source="usda",
            fdc_id=str(index),
        )
        for index in range(count)
    ]


def test_ingest_catalog_writes_sequential_batches() -> None:
    writer = RecordingCatalogWriter()

    report = ingest_catalog(_foods(5), writer, batch_size=2)

    assert report.prepared == 5
    assert report.committed == 5
    assert report.batches == 3
    assert [len(batch) for batch in writer.batches] == [2, 2, 1]
    assert writer.batches[0][0]["canonical_id"] == "food-0"
    assert writer.batches[0][0]["fdc_id"] == "0"


def test_ingest_catalog_stops_at_failed_batch() -> None:
    writer = RecordingCatalogWriter(fail_on_batch=1)

    with pytest.raises(IngestionError) as excinfo:
        ingest_catalog(_foods(5), writer, batch_size=2)

    assert excinfo.value.committed == 2
    assert len(writer.batches) == 1


def test_ingest_catalog_is_idempotent_per_canonical_id() -> None:
    writer = RecordingCatalogWriter()
    foods = _foods(3)

    ingest_catalog(foods, writer, batch_size=10)
    ingest_catalog(foods, writer, batch_size=10)

    assert writer.batches[0] == writer.batches[1]


@pytest.mark.parametrize(
    ("descriptions", "expected"),
    [
        (
            [("2", "Apple"), ("3", "Apple"), ("9", "Apple 3")],
            ["apple", "apple-3", "apple-3-9"],
        ),
        (
            [("9", "Apple 3"), ("2", "Apple"), ("3", "Apple")],
            ["apple-3", "apple", "apple-3-2"],
        ),
    ],
)
def test_build_canonical_foods_ids_stay_unique_across_suffixes(
    descriptions: list[tuple[str, str]], expected: list[str]
) -> None:
    foods = _table(
        [
            {"fdc_id": fdc_id, "data_type": "foundation_food", "description": text}
            for fdc_id, text in descriptions
        ]
    )

    ids = [
        food.canonical_id
        for food in build_canonical_foods(foods, NUTRIENTS, FOOD_NUTRIENTS)
    ]

    assert ids == expected
    assert len(set(ids)) == len(ids)
