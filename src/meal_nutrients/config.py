"""Application configuration."""

import os

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from meal_nutrients.domain.nutrients import NUTRIENT_DB_VERSION
from meal_nutrients.services.ingestion import DEFAULT_BATCH_SIZE

_ENVIRONMENT = os.getenv("ENVIRONMENT", "local")


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    supabase_url: str | None = None
    supabase_service_key: str | None = Field(
        default=None,
        validation_alias=AliasChoices(
            "supabase_service_key", "supabase_service_role_key"
        ),
    )
    catalog_table: str = "canonical_foods"
    meals_table: str = "meals"
    nutrient_db_version: str = NUTRIENT_DB_VERSION
    ingest_batch_size: int = DEFAULT_BATCH_SIZE
    environment: str = _ENVIRONMENT
    cors_origins: list[str] = ["*"]
    cors_allow_headers: list[str] = [
        "authorization",
        "x-client-info",
        "apikey",
        "content-type",
    ]

    model_config = SettingsConfigDict(
        env_file=(f".env.{_ENVIRONMENT}", ".env"),
        extra="ignore",
        populate_by_name=True,
    )

    def has_supabase_credentials(self) -> bool:
        """Return whether both Supabase URL and key are set."""
        return bool(
            self.supabase_url
            and self.supabase_url.strip()
            and self.supabase_service_key
            and self.supabase_service_key.strip()
        )
