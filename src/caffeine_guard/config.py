"""Application configuration."""

import os

from pydantic_settings import BaseSettings, SettingsConfigDict

_ENVIRONMENT = os.getenv("ENVIRONMENT", "local")


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    supabase_url: str | None = None
    supabase_service_key: str | None = None
    kv_table: str = "kv_store"
    default_bedtime: str = "23:00"
    default_wake_time: str = "07:00"
    default_timezone: str = "UTC"
    default_daily_limit_mg: float = 400
    default_half_life_hours: float = 5
    default_serving_size_oz: int = 12
    default_shots: int = 1
    environment: str = _ENVIRONMENT

    model_config = SettingsConfigDict(
        env_file=(f".env.{_ENVIRONMENT}", ".env"),
        extra="ignore",
    )

    def has_supabase(self) -> bool:
        """Return True when Supabase credentials are configured."""
        return bool(self.supabase_url and self.supabase_service_key)
