"""Key-value store abstractions for preferences and logs."""

from dataclasses import dataclass
from typing import Protocol


class KeyValueStore(Protocol):
    """Storage interface for string values addressed by key."""

    def get(self, key: str) -> str | None:
        """Return the stored value, if present."""

    def set(self, key: str, value: str) -> None:
        """Store a value under a key, replacing any existing one."""

    def delete(self, key: str) -> None:
        """Remove a key if present."""


@dataclass
class InMemoryKeyValueStore(KeyValueStore):
    """In-memory store used when no backing database is configured."""

    _entries: dict[str, str]

    def __init__(self) -> None:
        self._entries = {}

    def get(self, key: str) -> str | None:
        """Return a stored value."""
        return self._entries.get(key)

    def set(self, key: str, value: str) -> None:
        """Store a value."""
        self._entries[key] = value

    def delete(self, key: str) -> None:
        """Remove a stored value."""
        self._entries.pop(key, None)
