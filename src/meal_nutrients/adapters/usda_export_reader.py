"""Read FoodData Central CSV exports from a directory."""

import logging
from dataclasses import dataclass
from pathlib import Path

import pandas as pd

from meal_nutrients.errors import IngestionError
from meal_nutrients.services.ingestion import ExportTable

FOOD_FILE = "food.csv"
NUTRIENT_FILE = "nutrient.csv"
FOOD_NUTRIENT_FILE = "food_nutrient.csv"

_logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class UsdaExport:
    """The three tables needed to build the catalog."""

    foods: ExportTable
    nutrients: ExportTable
    food_nutrients: ExportTable


def read_table(path: Path) -> ExportTable:
    """Read a CSV file as strings, keeping blank cells as empty strings.

    Rows with more fields than the header are kept, truncated to the header
    width. Short rows are padded with empty strings.
    """
    try:
        width = len(pd.read_csv(path, nrows=0, dtype=str).columns)
    except pd.errors.EmptyDataError as exc:
        raise IngestionError(f"{path.name} is empty") from exc

    truncated = 0

    def keep_leading_fields(fields: list[str]) -> list[str]:
        nonlocal truncated
        truncated += 1
        return fields[:width]

    frame = pd.read_csv(
        path,
        dtype=str,
        engine="python",
        keep_default_na=False,
        skip_blank_lines=True,
        skipinitialspace=True,
        on_bad_lines=keep_leading_fields,
    )
    if truncated:
        _logger.warning(
            "Truncated %s rows with extra fields in %s", truncated, path.name
        )
    frame = frame.fillna("")
    frame.columns = [str(column).strip() for column in frame.columns]
    for column in frame.columns:
        frame[column] = frame[column].str.strip()
    return ExportTable(
        headers=list(frame.columns),
        rows=frame.to_dict(orient="records"),
    )


def read_usda_export(data_dir: Path) -> UsdaExport:
    """Load food, nutrient and food_nutrient tables from ``data_dir``."""
    names = (FOOD_FILE, NUTRIENT_FILE, FOOD_NUTRIENT_FILE)
    paths = [data_dir / name for name in names]
    missing = [path.name for path in paths if not path.is_file()]
    if missing:
        raise IngestionError(
            f"Expected {FOOD_FILE}, {NUTRIENT_FILE}, and {FOOD_NUTRIENT_FILE} "
            f"inside {data_dir}. Missing: {', '.join(missing)}"
        )
    foods, nutrients, food_nutrients = (read_table(path) for path in paths)
    return UsdaExport(foods=foods, nutrients=nutrients, food_nutrients=food_nutrients)
