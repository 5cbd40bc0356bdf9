# src/cache/memory_store.py — v1
"""In-process cache store (default CACHE_BACKEND=memory).

Entries live in a dict for the lifetime of the process. Not shared between
instances.
"""

from __future__ import annotations

import copy
import time
from typing import Any, Callable

from readmekit.cache.base_cache_store import BaseCacheStore


class MemoryCacheStore(BaseCacheStore):
    """Dict-backed cache store. Expired entries are dropped on read and on every write."""

    def __init__(self, clock: Callable[[], float] = time.monotonic) -> None:
        self._clock = clock
        self._entries: dict[str, tuple[float, dict[str, Any]]] = {}

    async def get(self, key: str) -> dict[str, Any] | None:
        item = self._entries.get(key)
        if item is None:
            return None
        expires_at, value = item
        if self._clock() >= expires_at:
            self._entries.pop(key, None)
            return None
        return copy.deepcopy(value)

    async def set(self, key: str, value: dict[str, Any], ttl_seconds: float) -> None:
        now = self._clock()
        self._sweep(now)
        self._entries[key] = (now + ttl_seconds, copy.deepcopy(value))

    async def delete(self, key: str) -> None:
        self._entries.pop(key, None)

    def _sweep(self, now: float) -> None:
        """Drop every expired entry."""
        expired = [k for k, (expires_at, _) in self._entries.items() if now >= expires_at]
        for key in expired:
            del self._entries[key]

    def __len__(self) -> int:
        return len(self._entries)
