"""Shared test fixtures."""

from dataclasses import dataclass, field
from pathlib import Path

import pytest

from meal_nutrients.config import Settings
from meal_nutrients.containers import AppContainer
from meal_nutrients.domain.catalog import Catalog
from meal_nutrients.domain.fallback_foods import STATIC_FOODS
from meal_nutrients.errors import DataSourceError, PersistenceError
from meal_nutrients.services.catalog import CatalogRepository, CatalogService
from meal_nutrients.services.ingestion import CatalogWriter
from meal_nutrients.services.mapping import MappingService, MealRepository


@dataclass
class InMemoryCatalogRepository(CatalogRepository):
    """In-memory catalog store for tests."""

    rows: list[dict[str, object]] = field(default_factory=list)
    fail: bool = False
    calls: int = 0

    def list_foods(self) -> list[dict[str, object]]:
        self.calls += 1
        if self.fail:
            raise DataSourceError("catalog store unreachable")
        return [dict(row) for row in self.rows]


@dataclass
class InMemoryMealRepository(MealRepository):
    """In-memory meal store that records saved results."""

    meals: dict[str, dict[str, object]] = field(default_factory=dict)
    fail: bool = False

    def save_mapping(self, meal_id: str, fields: dict[str, object]) -> None:
        if self.fail:
            raise PersistenceError("write failed")
        self.meals[meal_id] = fields


@dataclass
class RecordingCatalogWriter(CatalogWriter):
    """Catalog writer that records batches and can fail on a given batch."""

    batches: list[list[dict[str, object]]] = field(default_factory=list)
    fail_on_batch: int | None = None

    def upsert_foods(self, rows: list[dict[str, object]]) -> None:
        if self.fail_on_batch is not None and len(self.batches) == self.fail_on_batch:
            raise RuntimeError("upsert rejected")
        self.batches.append(rows)


@pytest.fixture
def settings() -> Settings:
    return Settings(
        supabase_url="https://example.supabase.co",
        supabase_service_key="service-key",
    )


@pytest.fixture
def catalog() -> Catalog:
    return Catalog.from_foods(STATIC_FOODS)


@pytest.fixture
def catalog_repository() -> InMemoryCatalogRepository:
    return InMemoryCatalogRepository()


@pytest.fixture
def meal_repository() -> InMemoryMealRepository:
    return InMemoryMealRepository()


@pytest.fixture
def mapping_service(
    catalog_repository: InMemoryCatalogRepository,
    meal_repository: InMemoryMealRepository,
) -> MappingService:
    return MappingService(
        catalog_service=CatalogService(catalog_repository),
        repository=meal_repository,
    )


@pytest.fixture
def container(settings: Settings, mapping_service: MappingService) -> AppContainer:
    async def close_resources() -> None:
        return None

    return AppContainer(
        settings=settings,
        catalog_service=mapping_service.catalog_service,
        mapping_service=mapping_service,
        close_resources=close_resources,
    )


@dataclass
class FakeResponse:
    data: list[dict[str, object]] | None


@dataclass
class FakeTable:
    """Chainable stand-in for a Supabase query builder."""

    name: str
    response_queue: dict[str, list[list[dict[str, object]]]] = field(
        default_factory=lambda: {"select": [], "update": [], "upsert": []}
    )
    payloads: list[object] = field(default_factory=list)
    filters: list[tuple[str, object]] = field(default_factory=list)
    ranges: list[tuple[int, int]] = field(default_factory=list)
    upsert_options: list[dict[str, object]] = field(default_factory=list)
    error: Exception | None = None

    def queue(self, action: str, data: list[dict[str, object]]) -> None:
        self.response_queue[action].append(data)

    def select(self, *_args) -> "FakeTable":  # type: ignore[no-untyped-def]
        self._action = "select"
        return self

    def update(self, payload) -> "FakeTable":  # type: ignore[no-untyped-def]
        self._action = "update"
        self.payloads.append(payload)
        return self

    def upsert(self, payload, **kwargs) -> "FakeTable":  # type: ignore[no-untyped-def]
        self._action = "upsert"
        self.payloads.append(payload)
        self.upsert_options.append(kwargs)
        return self

    def eq(self, column: str, value) -> "FakeTable":  # type: ignore[no-untyped-def]
        self.filters.append((column, value))
        return self

    def order(self, _column: str, desc: bool = False) -> "FakeTable":
        return self

    def range(self, start: int, end: int) -> "FakeTable":
        self.ranges.append((start, end))
        return self

    def execute(self) -> FakeResponse:
        if self.error is not None:
            raise self.error
        action = getattr(self, "_action", "select")
        queue = self.response_queue.get(action, [])
        data = queue.pop(0) if queue else []
        return FakeResponse(data=data)


@dataclass
class FakeSupabaseClient:
    tables: dict[str, FakeTable] = field(default_factory=dict)

    def table(self, name: str) -> FakeTable:
        if name not in self.tables:
            self.tables[name] = FakeTable(name=name)
        return self.tables[name]


def write_export(data_dir: Path) -> None:
    data_dir.mkdir(parents=True, exist_ok=True)
    (data_dir / "food.csv").write_text(
        '"fdc_id","data_type","description","food_category_id"\n'
        '"321358","foundation_food","Hummus, commercial","16"\n'
        '"321359","sub_sample_food","Hummus, sample 1",""\n'
        '"321360","foundation_food","Tomatoes, grape, raw","11"\n',
        encoding="utf-8",
    )
    (data_dir / "nutrient.csv").write_text(
        '"id","name","unit_name","nutrient_nbr"\n'
        '"1162","Vitamin C, total ascorbic acid","MG","401"\n'
        '"1092","Potassium, K","MG","306"\n',
        encoding="utf-8",
    )
    (data_dir / "food_nutrient.csv").write_text(
        '"id","fdc_id","nutrient_id","amount"\n'
        '"1","321358","1092",""\n'
        '"2","321360","1162","27.2"\n'
        '"3","321360","1092","260"\n',
        encoding="utf-8",
    )
