"""FastAPI application factory."""

import logging
from collections.abc import AsyncIterator, Sequence
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from meal_nutrients.api.models import MapFoodsRequest
from meal_nutrients.app_logging import configure_logging
from meal_nutrients.containers import AppContainer
from meal_nutrients.errors import MealNutrientsError


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging()
    logger = logging.getLogger(__name__)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        yield
        await app.state.container.close_resources()

    app = FastAPI(lifespan=lifespan)
    app.state.container = container
    app.add_middleware(
        CORSMiddleware,
        allow_origins=container.settings.cors_origins,
        allow_methods=["GET", "POST", "OPTIONS"],
        allow_headers=container.settings.cors_allow_headers,
    )

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        """Report malformed bodies as an error payload with status 200."""
        return JSONResponse({"error": _format_validation_error(exc.errors())})

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    @app.post("/map-foods")
    async def map_foods(
        payload: MapFoodsRequest, request: Request
    ) -> dict[str, object]:
        """Resolve parsed meal items and return the nutrient report."""
        state_container: AppContainer = request.app.state.container
        try:
            result = state_container.mapping_service.map_meal(
                payload.meal_id, payload.parsed_items()
            )
        except MealNutrientsError as exc:
            logger.warning("Mapping failed for meal %s: %s", payload.meal_id, exc)
            return {"error": str(exc)}
        except Exception as exc:
            logger.exception("Unexpected mapping failure for meal %s", payload.meal_id)
            return {"error": str(exc) or "Unknown error"}
        return result.to_payload()

    @app.get("/foods/{canonical_id}")
    async def get_food(canonical_id: str, request: Request) -> dict[str, object]:
        """Return a canonical food from the merged catalog."""
        state_container: AppContainer = request.app.state.container
        loaded = state_container.catalog_service.load()
        food = loaded.catalog.get(canonical_id)
        if food is None:
            return {"error": f"Unknown canonical_id: {canonical_id}"}
        return {"food": food.to_row(), "catalog_fallback": loaded.used_fallback}

    return app


def _format_validation_error(errors: Sequence[dict[str, object]]) -> str:
    if not errors:
        return "Invalid request body"
    first = errors[0]
    loc = first.get("loc") or ()
    parts = [str(part) for part in loc if part != "body"]  # type: ignore[union-attr]
    message = str(first.get("msg") or "invalid value")
    if not parts:
        return f"Invalid request body: {message}"
    return f"Invalid request body: {'.'.join(parts)}: {message}"
