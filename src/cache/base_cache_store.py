# src/cache/base_cache_store.py — v2
"""Abstract cache store interface: get / set-with-TTL keyed by string."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any


class BaseCacheStore(ABC):
    """Unified interface for cache storage backends.

    Expiry is evaluated on read: an entry past its TTL is reported as
    absent, whether or not the backend has already evicted it.
    """

    @abstractmethod
    async def get(self, key: str) -> dict[str, Any] | None:
        """Return the live value stored under key, or None."""

    @abstractmethod
    async def set(self, key: str, value: dict[str, Any], ttl_seconds: float) -> None:
        """Store value under key for ttl_seconds."""

    @abstractmethod
    async def delete(self, key: str) -> None:
        """Remove a cache entry."""

    async def close(self) -> None:
        """Release backend resources."""
