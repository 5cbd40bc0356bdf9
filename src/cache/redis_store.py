# src/cache/redis_store.py — v2
"""Redis-based cache store (CACHE_BACKEND=redis).

Requires 'redis' package: pip install redis.
Suitable for distributed/multi-instance deployments. TTL is enforced by
Redis itself via PX.
"""

from __future__ import annotations

import json
import logging
from typing import Any

from readmekit.cache.base_cache_store import BaseCacheStore

logger = logging.getLogger(__name__)

_KEY_PREFIX = "readmekit:cache:"


class RedisCacheStore(BaseCacheStore):
    """Redis-backed cache store for distributed deployments."""

    def __init__(self, redis_url: str) -> None:
        try:
            import redis
        except ImportError as e:
            raise ImportError(
                "redis package required: pip install redis"
            ) from e

        self._client = redis.Redis.from_url(redis_url, decode_responses=True)

    async def get(self, key: str) -> dict[str, Any] | None:
        """Retrieve a cache value by key."""
        data = self._client.get(f"{_KEY_PREFIX}{key}")
        if data is None:
            return None
        try:
            return json.loads(data)
        except ValueError as e:
            logger.warning("Failed to deserialize cache entry %s: %s", key, e)
            return None

    async def set(self, key: str, value: dict[str, Any], ttl_seconds: float) -> None:
        """Store a cache value with a millisecond TTL."""
        ttl_ms = max(1, int(ttl_seconds * 1000))
        self._client.set(f"{_KEY_PREFIX}{key}", json.dumps(value), px=ttl_ms)

    async def delete(self, key: str) -> None:
        """Remove a cache entry."""
        self._client.delete(f"{_KEY_PREFIX}{key}")

    async def close(self) -> None:
        """Close the Redis connection."""
        self._client.close()
