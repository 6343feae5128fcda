"""User preferences persisted in a key-value store."""

import logging
from dataclasses import dataclass, field
from typing import Literal
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from pydantic import BaseModel, Field, ValidationError, field_validator

from caffeine_guard.services.events import CaffeineEvent, EventBus
from caffeine_guard.services.schedule import parse_clock_time
from caffeine_guard.services.store import KeyValueStore

PREFERENCES_KEY = "preferences"

_logger = logging.getLogger(__name__)


class UserPreferences(BaseModel):
    """Validated user preferences."""

    bedtime: str = "23:00"
    wake_time: str = "07:00"
    timezone: str = "UTC"
    daily_limit_mg: float = Field(default=400, gt=0, le=1000)
    half_life_hours: float = Field(default=5, gt=0, le=24)
    serving_size_oz: Literal[8, 12, 16, 20] = 12
    shots: Literal[1, 2, 3] = 1
    favorite_drinks: list[str] = Field(default_factory=list)

    @field_validator("bedtime", "wake_time")
    @classmethod
    def _check_clock_time(cls, value: str) -> str:
        hour, minute = parse_clock_time(value)
        return f"{hour:02d}:{minute:02d}"

    @field_validator("timezone")
    @classmethod
    def _check_timezone(cls, value: str) -> str:
        try:
            ZoneInfo(value)
        except (ZoneInfoNotFoundError, ValueError) as exc:
            raise ValueError(f"Unknown timezone: {value}") from exc
        return value


@dataclass
class PreferencesService:
    """Load, update and reset preferences."""

    store: KeyValueStore
    defaults: UserPreferences = field(default_factory=UserPreferences)
    event_bus: EventBus | None = None

    def load(self) -> UserPreferences:
        """Return stored preferences, falling back to defaults when invalid."""
        raw = self.store.get(PREFERENCES_KEY)
        if raw is None:
            return self.defaults.model_copy()
        try:
            stored = UserPreferences.model_validate_json(raw)
        except ValidationError as exc:
            _logger.warning("Invalid stored preferences, using defaults: %s", exc)
            return self.defaults.model_copy()
        return stored

    def update(self, **changes: object) -> UserPreferences:
        """Validate and persist changes on top of the current preferences."""
        current = self.load()
        updated = UserPreferences.model_validate(
            {**current.model_dump(), **changes}
        )
        self._save(updated)
        return updated

    def reset(self) -> UserPreferences:
        """Restore default preferences."""
        defaults = self.defaults.model_copy()
        self._save(defaults)
        return defaults

    def _save(self, preferences: UserPreferences) -> None:
        self.store.set(PREFERENCES_KEY, preferences.model_dump_json())
        if self.event_bus is not None:
            self.event_bus.publish(CaffeineEvent.PREFERENCES_UPDATED, preferences)
