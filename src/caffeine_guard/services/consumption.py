"""Consumption logging and statistics."""

import logging
from collections import Counter
from dataclasses import dataclass
from datetime import UTC, datetime, timedelta
from typing import Protocol
from uuid import UUID, uuid4
from zoneinfo import ZoneInfo

from caffeine_guard.domain.caffeine import ConsumptionEntry, ConsumptionStats
from caffeine_guard.domain.catalog import get_drink
from caffeine_guard.services.events import CaffeineEvent, EventBus
from caffeine_guard.services.servings import adjusted_dose

WEEK_DAYS = 7
MONTH_DAYS = 30

_logger = logging.getLogger(__name__)


class ConsumptionLogRepository(Protocol):
    """Persistence interface for consumption log entries."""

    def add_entry(self, entry: ConsumptionEntry) -> None:
        """Persist a new entry."""

    def delete_entry(self, entry_id: UUID) -> bool:
        """Delete an entry, returning False when it did not exist."""

    def list_entries(
        self, start: datetime | None = None, end: datetime | None = None
    ) -> list[ConsumptionEntry]:
        """Return entries in [start, end], oldest first."""


@dataclass
class ConsumptionLogService:
    """Record drinks and summarize what was consumed."""

    repository: ConsumptionLogRepository
    event_bus: EventBus | None = None

    def log_drink(  # noqa: PLR0913
        self,
        drink_id: str,
        consumed_at: datetime,
        size_oz: int = 12,
        shots: int = 1,
        notes: str | None = None,
    ) -> ConsumptionEntry:
        """Log a catalog drink at its serving-adjusted dose."""
        drink = get_drink(drink_id)
        entry = ConsumptionEntry(
            id=uuid4(),
            drink_id=drink.id,
            drink_name=drink.name,
            caffeine_mg=adjusted_dose(drink, size_oz, shots),
            consumed_at=consumed_at,
            size_oz=size_oz,
            shots=shots,
            notes=notes,
        )
        return self._record(entry)

    def log_custom(
        self,
        name: str,
        caffeine_mg: float,
        consumed_at: datetime,
        notes: str | None = None,
    ) -> ConsumptionEntry:
        """Log a drink that is not in the catalog."""
        if caffeine_mg < 0:
            raise ValueError(f"caffeine_mg must be >= 0, got {caffeine_mg}")
        entry = ConsumptionEntry(
            id=uuid4(),
            drink_name=name,
            caffeine_mg=caffeine_mg,
            consumed_at=consumed_at,
            notes=notes,
        )
        return self._record(entry)

    def delete_entry(self, entry_id: UUID) -> bool:
        """Delete a logged entry."""
        deleted = self.repository.delete_entry(entry_id)
        if deleted:
            _logger.info("Deleted consumption entry %s", entry_id)
            self._publish(CaffeineEvent.DRINK_DELETED, entry_id)
        return deleted

    def list_entries(self, now: datetime, days: int = WEEK_DAYS) -> list[ConsumptionEntry]:
        """Return entries from the last `days` days up to now."""
        return self.repository.list_entries(now - timedelta(days=days), now)

    def get_stats(self, now: datetime, timezone_name: str = "UTC") -> ConsumptionStats:
        """Return totals for today, the last week and the last month."""
        tz = ZoneInfo(timezone_name)
        start_of_today = now.astimezone(tz).replace(
            hour=0, minute=0, second=0, microsecond=0
        )
        month = self.repository.list_entries(now - timedelta(days=MONTH_DAYS), now)
        week_start = now - timedelta(days=WEEK_DAYS)
        week = [entry for entry in month if entry.consumed_at >= week_start]
        today = [entry for entry in month if entry.consumed_at >= start_of_today]

        counts = Counter(entry.drink_name for entry in month)
        most_consumed = counts.most_common(1)[0][0] if counts else None
        total_week = _total(week)
        return ConsumptionStats(
            total_today_mg=_total(today),
            total_week_mg=total_week,
            total_month_mg=_total(month),
            drinks_today=len(today),
            drinks_week=len(week),
            drinks_month=len(month),
            average_per_day_mg=total_week / WEEK_DAYS,
            most_consumed=most_consumed,
            last_consumed_at=max(
                (entry.consumed_at for entry in month), default=None
            ),
        )

    def _record(self, entry: ConsumptionEntry) -> ConsumptionEntry:
        self.repository.add_entry(entry)
        _logger.info(
            "Logged %s (%.0f mg) at %s",
            entry.drink_name,
            entry.caffeine_mg,
            entry.consumed_at.astimezone(UTC).isoformat(),
        )
        self._publish(CaffeineEvent.DRINK_LOGGED, entry)
        return entry

    def _publish(self, event: CaffeineEvent, payload: object) -> None:
        if self.event_bus is not None:
            self.event_bus.publish(event, payload)


def _total(entries: list[ConsumptionEntry]) -> float:
    return sum((entry.caffeine_mg for entry in entries), 0.0)
