"""Pydantic request models for the HTTP API."""

from datetime import datetime
from typing import Literal

from pydantic import BaseModel, Field, model_validator


class VerdictRequest(BaseModel):
    """Ask whether a drink taken now is compatible with bedtime."""

    drink_id: str
    size_oz: int | None = None
    shots: int | None = None
    hours_until_bed: float | None = None


class LogRequest(BaseModel):
    """Log a catalog drink or a custom drink."""

    drink_id: str | None = None
    name: str | None = None
    caffeine_mg: float | None = Field(default=None, ge=0)
    size_oz: int = 12
    shots: int = 1
    consumed_at: datetime | None = None
    notes: str | None = None

    @model_validator(mode="after")
    def _require_drink(self) -> "LogRequest":
        if self.drink_id is None and (self.name is None or self.caffeine_mg is None):
            raise ValueError("Provide drink_id or both name and caffeine_mg")
        return self


class PreferencesUpdate(BaseModel):
    """Partial preferences update."""

    bedtime: str | None = None
    wake_time: str | None = None
    timezone: str | None = None
    daily_limit_mg: float | None = None
    half_life_hours: float | None = None
    serving_size_oz: Literal[8, 12, 16, 20] | None = None
    shots: Literal[1, 2, 3] | None = None
    favorite_drinks: list[str] | None = None
