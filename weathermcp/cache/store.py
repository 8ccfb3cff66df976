"""In-memory TTL cache keyed by request URL."""

import threading
import time
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

DEFAULT_TTL_SECONDS = 300.0


@dataclass(frozen=True)
class CacheEntry:
    key: str
    value: Any
    stored_at: float


class TtlCache:
    """Time-expiring key/value store.

    Expired entries are never removed, only hidden from ``get`` until the
    next ``put`` for the same key replaces them.
    """

    def __init__(
        self,
        ttl_seconds: float = DEFAULT_TTL_SECONDS,
        clock: Callable[[], float] = time.monotonic,
    ):
        self.ttl_seconds = ttl_seconds
        self._clock = clock
        self._entries: dict[str, CacheEntry] = {}
        self._lock = threading.Lock()

    def get(self, key: str) -> Any | None:
        with self._lock:
            entry = self._entries.get(key)
        if entry is None or self.is_expired(entry):
            return None
        return entry.value

    def put(self, key: str, value: Any) -> None:
        entry = CacheEntry(key=key, value=value, stored_at=self._clock())
        with self._lock:
            self._entries[key] = entry

    def is_expired(self, entry: CacheEntry) -> bool:
        # Exactly ttl old is still fresh
        return self._clock() - entry.stored_at > self.ttl_seconds

    def clear(self) -> None:
        with self._lock:
            self._entries.clear()

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)
