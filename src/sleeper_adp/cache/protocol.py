from __future__ import annotations

from typing import Any, Protocol


class CacheStore(Protocol):
    def get(self, namespace: str, key: str) -> Any | None: ...

    def put(self, namespace: str, key: str, value: Any, timestamp: float | None = None) -> None: ...

    def invalidate(self, namespace: str, key: str | None = None) -> None: ...
