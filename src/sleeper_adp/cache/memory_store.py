from __future__ import annotations

import logging
import time
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from collections.abc import Callable

logger = logging.getLogger(__name__)

DEFAULT_TTL_SECONDS = 5 * 60


class MemoryCacheStore:
    """Process-local response cache with a fixed time-to-live.

    Entries are stamped when written and treated as missing once
    ``ttl_seconds`` have passed. There is no locking: concurrent readers that
    both miss will both fetch and the later write wins.
    """

    def __init__(self, ttl_seconds: float = DEFAULT_TTL_SECONDS, clock: Callable[[], float] = time.time) -> None:
        self._ttl_seconds = ttl_seconds
        self._clock = clock
        self._entries: dict[tuple[str, str], tuple[float, Any]] = {}

    @property
    def ttl_seconds(self) -> float:
        return self._ttl_seconds

    def get(self, namespace: str, key: str) -> Any | None:
        entry = self._entries.get((namespace, key))
        if entry is None:
            return None
        stored_at, value = entry
        if self._clock() - stored_at >= self._ttl_seconds:
            del self._entries[(namespace, key)]
            logger.debug("Cache entry expired for %s:%s", namespace, key)
            return None
        return value

    def put(self, namespace: str, key: str, value: Any, timestamp: float | None = None) -> None:
        stored_at = self._clock() if timestamp is None else timestamp
        self._entries[(namespace, key)] = (stored_at, value)

    def invalidate(self, namespace: str, key: str | None = None) -> None:
        if key is not None:
            self._entries.pop((namespace, key), None)
            return
        for entry_key in [k for k in self._entries if k[0] == namespace]:
            del self._entries[entry_key]

    def __len__(self) -> int:
        return len(self._entries)


class NullCacheStore:
    """Cache that never stores anything; used when caching is disabled."""

    def get(self, namespace: str, key: str) -> Any | None:
        return None

    def put(self, namespace: str, key: str, value: Any, timestamp: float | None = None) -> None:
        return None

    def invalidate(self, namespace: str, key: str | None = None) -> None:
        return None
