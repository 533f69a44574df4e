"""In-memory key/value cache with per-entry expiry."""

from __future__ import annotations

import threading
import time
from typing import Any, Callable, Hashable, Optional, TypeVar

T = TypeVar("T")

_MISSING = object()


class TTLCache:
    """Thread-safe cache where each ``set`` supplies its own time-to-live."""

    def __init__(self, clock: Callable[[], float] = time.monotonic) -> None:
        self._clock = clock
        self._entries: dict[Hashable, tuple[float, Any]] = {}
        self._lock = threading.Lock()

    def get(self, key: Hashable, default: Any = None) -> Any:
        with self._lock:
            entry = self._entries.get(key)
            if entry is None:
                return default
            expires_at, value = entry
            if self._clock() >= expires_at:
                del self._entries[key]
                return default
            return value

    def set(self, key: Hashable, value: Any, ttl_seconds: float) -> None:
        if ttl_seconds <= 0:
            return
        with self._lock:
            self._entries[key] = (self._clock() + ttl_seconds, value)

    def get_or_set(self, key: Hashable, ttl_seconds: float, factory: Callable[[], T]) -> T:
        cached = self.get(key, _MISSING)
        if cached is not _MISSING:
            return cached
        value = factory()
        self.set(key, value, ttl_seconds)
        return value

    def clear(self) -> None:
        with self._lock:
            self._entries.clear()

    def __len__(self) -> int:
        with self._lock:
            now = self._clock()
            return sum(1 for expires_at, _ in self._entries.values() if now < expires_at)


def cache_key(league_id: str, scope: Any, max_week: Optional[int] = None) -> tuple[str, str, Optional[int]]:
    """Key for memoized league views: ``(league, week-or-"season", max_week)``."""
    return (str(league_id), str(scope), max_week)
