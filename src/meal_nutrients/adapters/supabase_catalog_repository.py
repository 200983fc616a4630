"""Supabase repository for the canonical food catalog."""

from dataclasses import dataclass

from supabase import Client

from meal_nutrients.errors import DataSourceError
from meal_nutrients.services.catalog import CatalogRepository
from meal_nutrients.services.ingestion import CatalogWriter

_COLUMNS = "canonical_id, canonical_name, per_100g, source, fdc_id"


@dataclass
class SupabaseCatalogRepository(CatalogRepository, CatalogWriter):
    """Supabase-backed canonical food store."""

    client: Client
    table: str = "canonical_foods"
    page_size: int = 1000

    def list_foods(self) -> list[dict[str, object]]:
        """Return every canonical food row, paging through the table."""
        rows: list[dict[str, object]] = []
        offset = 0
        while True:
            try:
                response = (
                    self.client.table(self.table)
                    .select(_COLUMNS)
                    .order("canonical_id", desc=False)
                    .range(offset, offset + self.page_size - 1)
                    .execute()
                )
            except Exception as exc:
                raise DataSourceError(f"Failed to read {self.table}: {exc}") from exc
            page = response.data or []
            rows.extend(page)
            if len(page) < self.page_size:
                return rows
            offset += self.page_size

    def upsert_foods(self, rows: list[dict[str, object]]) -> None:
        """Insert or update rows keyed by canonical_id."""
        if not rows:
            return
        self.client.table(self.table).upsert(
            rows, on_conflict="canonical_id"
        ).execute()
