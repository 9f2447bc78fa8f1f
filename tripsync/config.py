"""Typed settings configuration - single source of truth."""

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", env_prefix="TRIPSYNC_", extra="ignore"
    )

    # Database
    database_url: str | None = None

    # Remote trip store
    remote_store_url: str = "https://firestore.tripsync.app/v1"
    remote_store_timeout_s: float = 10.0
    users_collection: str = "users"
    trips_collection: str = "trips"

    # Forex
    forex_api_url: str = "https://open.er-api.com/v6/latest"
    forex_timeout_s: float = 4.0
    fx_ttl_hours: int = 24

    # Sessions (seconds; 0 = never expires)
    session_duration_s: int = 86400


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
