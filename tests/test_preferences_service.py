"""Tests for the preferences service."""

import pytest
from pydantic import ValidationError

from caffeine_guard.services.events import CaffeineEvent, EventBus
from caffeine_guard.services.preferences import (
    PREFERENCES_KEY,
    PreferencesService,
    UserPreferences,
)
from caffeine_guard.services.store import InMemoryKeyValueStore
from tests.conftest import RecordingHandler


def test_load_returns_defaults_when_nothing_stored(
    preferences_service: PreferencesService,
) -> None:
    prefs = preferences_service.load()

    assert prefs == UserPreferences()
    assert prefs.bedtime == "23:00"
    assert prefs.daily_limit_mg == 400
    assert prefs.half_life_hours == 5


def test_update_persists_and_normalizes(
    preferences_service: PreferencesService, store: InMemoryKeyValueStore
) -> None:
    updated = preferences_service.update(bedtime="7:30", serving_size_oz=16)

    assert updated.bedtime == "07:30"
    assert updated.serving_size_oz == 16
    assert store.get(PREFERENCES_KEY) is not None
    assert preferences_service.load() == updated


def test_update_publishes_event(
    preferences_service: PreferencesService, event_bus: EventBus
) -> None:
    handler = RecordingHandler()
    event_bus.subscribe(CaffeineEvent.PREFERENCES_UPDATED, handler)

    preferences_service.update(daily_limit_mg=300)

    assert len(handler.payloads) == 1
    assert handler.payloads[0].daily_limit_mg == 300


@pytest.mark.parametrize(
    "changes",
    [
        {"bedtime": "25:00"},
        {"daily_limit_mg": 0},
        {"half_life_hours": -1},
        {"serving_size_oz": 10},
        {"shots": 4},
        {"timezone": "Mars/Olympus"},
    ],
)
def test_update_rejects_invalid_values(
    preferences_service: PreferencesService, changes: dict[str, object]
) -> None:
    with pytest.raises(ValidationError):
        preferences_service.update(**changes)

    assert preferences_service.load() == UserPreferences()


def test_invalid_stored_preferences_fall_back_to_defaults(
    store: InMemoryKeyValueStore, caplog: pytest.LogCaptureFixture
) -> None:
    store.set(PREFERENCES_KEY, "not json")
    service = PreferencesService(store=store)

    assert service.load() == UserPreferences()
    assert "Invalid stored preferences" in caplog.text


def test_reset_restores_configured_defaults(store: InMemoryKeyValueStore) -> None:
    defaults = UserPreferences(bedtime="22:00", daily_limit_mg=300)
    service = PreferencesService(store=store, defaults=defaults)
    service.update(bedtime="01:00")

    reset = service.reset()

    assert reset == defaults
    assert service.load().bedtime == "22:00"
