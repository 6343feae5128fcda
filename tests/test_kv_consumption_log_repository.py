"""Tests for the key-value backed consumption log repository."""

from datetime import timedelta
from uuid import uuid4

import pytest

from caffeine_guard.adapters.kv_consumption_log_repository import (
    LOGS_KEY,
    KeyValueConsumptionLogRepository,
)
from caffeine_guard.domain.caffeine import ConsumptionEntry
from caffeine_guard.services.store import InMemoryKeyValueStore
from tests.conftest import FIXED_NOW, make_entry


def test_entries_survive_a_new_repository_instance(
    store: InMemoryKeyValueStore,
) -> None:
    entry = ConsumptionEntry(
        id=uuid4(),
        drink_id="latte",
        drink_name="Latte",
        caffeine_mg=200,
        consumed_at=FIXED_NOW,
        size_oz=16,
        shots=2,
        notes="oat milk",
    )
    KeyValueConsumptionLogRepository(store).add_entry(entry)

    assert KeyValueConsumptionLogRepository(store).list_entries() == [entry]


def test_entries_are_kept_in_time_order(
    kv_log_repository: KeyValueConsumptionLogRepository,
) -> None:
    later = make_entry(80, FIXED_NOW)
    earlier = make_entry(60, FIXED_NOW - timedelta(hours=3))

    kv_log_repository.add_entry(later)
    kv_log_repository.add_entry(earlier)

    assert kv_log_repository.list_entries() == [earlier, later]


def test_list_entries_bounds_are_inclusive(
    kv_log_repository: KeyValueConsumptionLogRepository,
) -> None:
    start = FIXED_NOW - timedelta(hours=4)
    inside = [make_entry(10, start), make_entry(20, FIXED_NOW)]
    outside = make_entry(30, start - timedelta(seconds=1))
    for entry in [outside, *inside]:
        kv_log_repository.add_entry(entry)

    assert kv_log_repository.list_entries(start, FIXED_NOW) == inside


def test_delete_entry(kv_log_repository: KeyValueConsumptionLogRepository) -> None:
    keep = make_entry(10, FIXED_NOW)
    drop = make_entry(20, FIXED_NOW)
    kv_log_repository.add_entry(keep)
    kv_log_repository.add_entry(drop)

    assert kv_log_repository.delete_entry(drop.id) is True
    assert kv_log_repository.delete_entry(drop.id) is False
    assert kv_log_repository.list_entries() == [keep]


def test_unreadable_log_is_treated_as_empty(
    store: InMemoryKeyValueStore, caplog: pytest.LogCaptureFixture
) -> None:
    store.set(LOGS_KEY, "{broken")
    repository = KeyValueConsumptionLogRepository(store)

    assert repository.list_entries() == []
    assert "Ignoring unreadable consumption log" in caplog.text


def test_writes_leave_unreadable_log_untouched(
    store: InMemoryKeyValueStore,
) -> None:
    corrupt = '[{"id": "x", "truncated'
    store.set(LOGS_KEY, corrupt)
    repository = KeyValueConsumptionLogRepository(store)

    with pytest.raises(ValueError, match="Unreadable consumption log"):
        repository.add_entry(make_entry(80, FIXED_NOW))
    with pytest.raises(ValueError, match="Unreadable consumption log"):
        repository.delete_entry(uuid4())

    assert store.get(LOGS_KEY) == corrupt
