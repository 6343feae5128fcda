"""Consumption log persisted as a JSON document in a key-value store."""

import json
import logging
from dataclasses import dataclass
from datetime import datetime
from uuid import UUID

from caffeine_guard.domain.caffeine import ConsumptionEntry
from caffeine_guard.services.consumption import ConsumptionLogRepository
from caffeine_guard.services.store import KeyValueStore

LOGS_KEY = "consumption_logs"

_logger = logging.getLogger(__name__)


@dataclass
class KeyValueConsumptionLogRepository(ConsumptionLogRepository):
    """Store all entries under a single key, oldest first."""

    store: KeyValueStore
    key: str = LOGS_KEY

    def add_entry(self, entry: ConsumptionEntry) -> None:
        """Append an entry and keep the list ordered by consumption time."""
        entries = self._load(strict=True)
        entries.append(entry)
        entries.sort(key=lambda item: item.consumed_at)
        self._save(entries)

    def delete_entry(self, entry_id: UUID) -> bool:
        """Remove an entry by id."""
        entries = self._load(strict=True)
        kept = [entry for entry in entries if entry.id != entry_id]
        if len(kept) == len(entries):
            return False
        self._save(kept)
        return True

    def list_entries(
        self, start: datetime | None = None, end: datetime | None = None
    ) -> list[ConsumptionEntry]:
        """Return entries within the optional inclusive bounds."""
        return [
            entry
            for entry in self._load()
            if (start is None or entry.consumed_at >= start)
            and (end is None or entry.consumed_at <= end)
        ]

    def _load(self, strict: bool = False) -> list[ConsumptionEntry]:
        """Load entries; unreadable data is skipped on reads and fatal on writes."""
        raw = self.store.get(self.key)
        if not raw:
            return []
        try:
            rows = json.loads(raw)
        except json.JSONDecodeError as exc:
            if strict:
                raise ValueError(
                    f"Unreadable consumption log under {self.key!r}"
                ) from exc
            _logger.warning("Ignoring unreadable consumption log under %s", self.key)
            return []
        return [_parse_row(row) for row in rows]

    def _save(self, entries: list[ConsumptionEntry]) -> None:
        self.store.set(self.key, json.dumps([_to_row(entry) for entry in entries]))


def _to_row(entry: ConsumptionEntry) -> dict[str, object]:
    return {
        "id": str(entry.id),
        "drink_id": entry.drink_id,
        "drink_name": entry.drink_name,
        "caffeine_mg": entry.caffeine_mg,
        "consumed_at": entry.consumed_at.isoformat(),
        "size_oz": entry.size_oz,
        "shots": entry.shots,
        "notes": entry.notes,
    }


def _parse_row(row: dict[str, object]) -> ConsumptionEntry:
    return ConsumptionEntry(
        id=UUID(str(row["id"])),
        drink_id=row.get("drink_id"),
        drink_name=str(row.get("drink_name", "")),
        caffeine_mg=float(row.get("caffeine_mg", 0.0)),
        consumed_at=datetime.fromisoformat(str(row["consumed_at"])),
        size_oz=row.get("size_oz"),
        shots=row.get("shots"),
        notes=row.get("notes"),
    )
