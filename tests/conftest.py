"""Shared test fixtures."""

import logging
from dataclasses import dataclass, field
from datetime import UTC, datetime
from uuid import UUID, uuid4

import pytest

from caffeine_guard.adapters.kv_consumption_log_repository import (
    KeyValueConsumptionLogRepository,
)
from caffeine_guard.config import Settings
from caffeine_guard.containers import AppContainer, build_container
from caffeine_guard.domain.caffeine import ConsumptionEntry
from caffeine_guard.services.consumption import ConsumptionLogService
from caffeine_guard.services.events import EventBus
from caffeine_guard.services.preferences import PreferencesService
from caffeine_guard.services.recommendations import RecommendationService
from caffeine_guard.services.store import InMemoryKeyValueStore
from caffeine_guard.services.tracker import CaffeineTrackerService

# 14:00 UTC, nine hours before the default 23:00 bedtime.
FIXED_NOW = datetime(2026, 3, 10, 14, 0, tzinfo=UTC)


def keep_order() -> float:
    """Random source that makes the Fisher-Yates shuffle an identity."""
    return 0.9999


def make_entry(
    caffeine_mg: float, consumed_at: datetime, name: str = "Drip Coffee"
) -> ConsumptionEntry:
    return ConsumptionEntry(
        id=uuid4(),
        drink_name=name,
        caffeine_mg=caffeine_mg,
        consumed_at=consumed_at,
    )


@dataclass
class RecordingHandler:
    """Event handler that records payloads."""

    payloads: list[object] = field(default_factory=list)

    def __call__(self, payload: object) -> None:
        self.payloads.append(payload)


@dataclass
class InMemoryConsumptionLogRepository:
    """List-backed consumption log repository for tests."""

    entries: list[ConsumptionEntry] = field(default_factory=list)

    def add_entry(self, entry: ConsumptionEntry) -> None:
        self.entries.append(entry)

    def delete_entry(self, entry_id: UUID) -> bool:
        before = len(self.entries)
        self.entries = [entry for entry in self.entries if entry.id != entry_id]
        return len(self.entries) != before

    def list_entries(self, start=None, end=None) -> list[ConsumptionEntry]:
        return sorted(
            (
                entry
                for entry in self.entries
                if (start is None or entry.consumed_at >= start)
                and (end is None or entry.consumed_at <= end)
            ),
            key=lambda entry: entry.consumed_at,
        )


@pytest.fixture(autouse=True)
def propagate_app_logs(monkeypatch: pytest.MonkeyPatch) -> None:
    """Let caplog see application records after configure_logging has run."""
    monkeypatch.setattr(logging.getLogger("caffeine_guard"), "propagate", True)


@pytest.fixture
def settings() -> Settings:
    return Settings(default_bedtime="23:00", default_timezone="UTC")


@pytest.fixture
def store() -> InMemoryKeyValueStore:
    return InMemoryKeyValueStore()


@pytest.fixture
def event_bus() -> EventBus:
    return EventBus()


@pytest.fixture
def preferences_service(
    store: InMemoryKeyValueStore, event_bus: EventBus
) -> PreferencesService:
    return PreferencesService(store=store, event_bus=event_bus)


@pytest.fixture
def log_repository() -> InMemoryConsumptionLogRepository:
    return InMemoryConsumptionLogRepository()


@pytest.fixture
def consumption_service(
    log_repository: InMemoryConsumptionLogRepository, event_bus: EventBus
) -> ConsumptionLogService:
    return ConsumptionLogService(log_repository, event_bus=event_bus)


@pytest.fixture
def tracker_service(
    log_repository: InMemoryConsumptionLogRepository,
    preferences_service: PreferencesService,
) -> CaffeineTrackerService:
    return CaffeineTrackerService(
        repository=log_repository,
        preferences_service=preferences_service,
        recommendation_service=RecommendationService(random_source=keep_order),
    )


@pytest.fixture
def container(settings: Settings, store: InMemoryKeyValueStore) -> AppContainer:
    built = build_container(settings, store=store, clock=lambda: FIXED_NOW)
    built.recommendation_service.random_source = keep_order
    return built


@pytest.fixture
def kv_log_repository(
    store: InMemoryKeyValueStore,
) -> KeyValueConsumptionLogRepository:
    return KeyValueConsumptionLogRepository(store)
