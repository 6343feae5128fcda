"""Publish/subscribe bus scoped to one application container."""

import logging
from collections import defaultdict
from collections.abc import Callable
from dataclasses import dataclass, field
from enum import StrEnum

_logger = logging.getLogger(__name__)

Handler = Callable[[object], None]


class CaffeineEvent(StrEnum):
    """Events that should trigger recomputation of derived state."""

    DRINK_LOGGED = "drink_logged"
    DRINK_DELETED = "drink_deleted"
    PREFERENCES_UPDATED = "preferences_updated"


@dataclass
class EventBus:
    """Synchronous observer registry."""

    _handlers: dict[CaffeineEvent, list[Handler]] = field(
        default_factory=lambda: defaultdict(list)
    )

    def subscribe(self, event: CaffeineEvent, handler: Handler) -> Callable[[], None]:
        """Register a handler and return a callable that removes it."""
        self._handlers[event].append(handler)

        def unsubscribe() -> None:
            handlers = self._handlers[event]
            if handler in handlers:
                handlers.remove(handler)

        return unsubscribe

    def publish(self, event: CaffeineEvent, payload: object = None) -> None:
        """Deliver payload to every handler subscribed to event."""
        for handler in list(self._handlers[event]):
            try:
                handler(payload)
            except Exception:
                _logger.exception("Event handler failed for %s", event)
