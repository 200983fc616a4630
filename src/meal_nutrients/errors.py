"""Error types raised by the meal nutrients service."""


class MealNutrientsError(Exception):
    """Base class for service errors."""


class ValidationError(MealNutrientsError):
    """Request is missing required data or is malformed."""


class DataSourceError(MealNutrientsError):
    """Catalog store could not be read."""


class PersistenceError(MealNutrientsError):
    """Computed results could not be written to the meal record."""


class IngestionError(MealNutrientsError):
    """Catalog ingestion run failed.

    ``committed`` is the number of rows written before the failure.
    """

    def __init__(self, message: str, committed: int = 0) -> None:
        super().__init__(message)
        self.committed = committed
