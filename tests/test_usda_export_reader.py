"""Tests for reading USDA CSV exports."""

import logging
from pathlib import Path

import pytest

from meal_nutrients.adapters.usda_export_reader import read_table, read_usda_export
from meal_nutrients.errors import IngestionError
from tests.conftest import write_export


def test_read_table_keeps_blank_cells_as_strings(tmp_path: Path) -> None:
    write_export(tmp_path)

    table = read_table(tmp_path / "food.csv")

    assert table.headers == ["fdc_id", "data_type", "description", "food_category_id"]
    assert table.rows[1]["food_category_id"] == ""
    assert table.rows[0]["fdc_id"] == "321358"


def test_read_usda_export_reads_all_tables(tmp_path: Path) -> None:
    write_export(tmp_path)

    export = read_usda_export(tmp_path)

    assert len(export.foods.rows) == 3
    assert len(export.nutrients.rows) == 2
    assert export.food_nutrients.headers == ["id", "fdc_id", "nutrient_id", "amount"]


def test_read_usda_export_missing_file(tmp_path: Path) -> None:
    write_export(tmp_path)
    (tmp_path / "nutrient.csv").unlink()

    with pytest.raises(IngestionError, match="nutrient.csv"):
        read_usda_export(tmp_path)


def test_read_table_empty_file(tmp_path: Path) -> None:
    path = tmp_path / "food.csv"
    path.write_text("", encoding="utf-8")

    with pytest.raises(IngestionError, match="empty"):
        read_table(path)


def test_read_table_keeps_rows_with_extra_fields(
    tmp_path: Path,
    caplog: pytest.LogCaptureFixture,
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    monkeypatch.setattr(logging.getLogger("meal_nutrients"), "propagate", True)
    path = tmp_path / "food.csv"
    path.write_text(
        "fdc_id,data_type,description\n"
        "1,foundation_food,Apples\n"
        "2,foundation_food,Kale,stray\n"
        "3,foundation_food\n",
        encoding="utf-8",
    )

    with caplog.at_level("WARNING", logger="meal_nutrients"):
        table = read_table(path)

    assert [row["fdc_id"] for row in table.rows] == ["1", "2", "3"]
    assert table.rows[1]["description"] == "Kale"
    assert table.rows[2]["description"] == ""
    assert "Truncated 1 rows with extra fields in food.csv" in caplog.text
