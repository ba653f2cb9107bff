"""TTL cache for catalog responses."""

from collections import OrderedDict
from collections.abc import Callable
from dataclasses import dataclass
from datetime import UTC, datetime, timedelta
from typing import Protocol


class Cache(Protocol):
    """Key-value cache with per-entry expiry."""

    def get(self, key: str) -> object | None:
        """Return a cached value if present and not expired."""

    def set(self, key: str, value: object, ttl_seconds: int) -> None:
        """Store a value for ttl_seconds."""


def _utcnow() -> datetime:
    return datetime.now(tz=UTC)


@dataclass
class _CacheEntry:
    value: object
    expires_at: datetime


@dataclass
class InMemoryCache(Cache):
    """Process-local cache, evicting the oldest entry past max_entries."""

    _entries: "OrderedDict[str, _CacheEntry]"
    max_entries: int
    clock: Callable[[], datetime]

    def __init__(
        self, max_entries: int = 256, clock: Callable[[], datetime] = _utcnow
    ) -> None:
        self._entries = OrderedDict()
        self.max_entries = max_entries
        self.clock = clock

    def get(self, key: str) -> object | None:
        entry = self._entries.get(key)
        if entry is None:
            return None
        if self.clock() >= entry.expires_at:
            del self._entries[key]
            return None
        return entry.value

    def set(self, key: str, value: object, ttl_seconds: int) -> None:
        self._entries.pop(key, None)
        self._entries[key] = _CacheEntry(
            value=value, expires_at=self.clock() + timedelta(seconds=ttl_seconds)
        )
        while len(self._entries) > self.max_entries:
            self._entries.popitem(last=False)
