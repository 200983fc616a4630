"""Command-line entrypoint for building and loading the canonical catalog.

Usage:
    meal-nutrients-ingest <data_dir> [--limit=N] [--dry-run] [--out=PATH]
"""

import argparse
import json
import logging
import sys
from pathlib import Path

from meal_nutrients.adapters.supabase_catalog_repository import (
    SupabaseCatalogRepository,
)
from meal_nutrients.adapters.usda_export_reader import read_usda_export
from meal_nutrients.app_logging import configure_logging
from meal_nutrients.config import Settings
from meal_nutrients.containers import create_supabase_client
from meal_nutrients.domain.catalog import CanonicalFood
from meal_nutrients.errors import IngestionError
from meal_nutrients.services.ingestion import build_canonical_foods, ingest_catalog

_logger = logging.getLogger(__name__)


def _positive_int(value: str) -> int:
    try:
        parsed = int(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"invalid limit: {value}") from exc
    if parsed <= 0:
        raise argparse.ArgumentTypeError("limit must be a positive integer")
    return parsed


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="meal-nutrients-ingest",
        description="Build canonical foods from a USDA FoodData Central export.",
    )
    parser.add_argument(
        "data_dir",
        nargs="?",
        default="usda",
        help="Directory containing food.csv, nutrient.csv and food_nutrient.csv",
    )
    parser.add_argument("--limit", type=_positive_int, default=None)
    parser.add_argument("--dry-run", action="store_true")
    parser.add_argument("--out", default=None, help="Write rows as JSON to PATH")
    return parser


def write_rows(path: Path, foods: list[CanonicalFood]) -> None:
    """Write canonical foods as a JSON array."""
    payload = [food.to_row() for food in foods]
    path.write_text(json.dumps(payload, indent=2), encoding="utf-8")


def run_ingestion(args: argparse.Namespace, settings: Settings | None = None) -> int:
    """Run one ingestion; returns the number of rows committed."""
    export = read_usda_export(Path(args.data_dir).resolve())
    foods = build_canonical_foods(
        export.foods, export.nutrients, export.food_nutrients, limit=args.limit
    )
    if args.out:
        out_path = Path(args.out).resolve()
        write_rows(out_path, foods)
        _logger.info("Wrote %s rows to %s", len(foods), out_path)
    else:
        _logger.info("Prepared %s rows.", len(foods))

    if args.dry_run:
        _logger.info("Dry run: skipping catalog upsert.")
        return 0

    resolved_settings = settings or Settings()
    if not resolved_settings.has_supabase_credentials():
        raise IngestionError(
            "SUPABASE_URL and SUPABASE_SERVICE_ROLE_KEY env vars are required."
        )
    repository = SupabaseCatalogRepository(
        create_supabase_client(resolved_settings),
        table=resolved_settings.catalog_table,
    )
    report = ingest_catalog(
        foods, repository, batch_size=resolved_settings.ingest_batch_size
    )
    return report.committed


def main(argv: list[str] | None = None) -> int:
    """Parse arguments and run ingestion; returns a process exit code."""
    configure_logging()
    args = build_parser().parse_args(argv)
    try:
        run_ingestion(args)
    except IngestionError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        if exc.committed:
            print(f"Rows committed before failure: {exc.committed}", file=sys.stderr)
        return 1
    return 0


def run() -> None:
    sys.exit(main())


if __name__ == "__main__":
    run()
