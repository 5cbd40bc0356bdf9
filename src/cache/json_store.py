# src/cache/json_store.py — v2
"""JSON file-based cache store (CACHE_BACKEND=json).

Stores each entry as an individual JSON file under CACHE_ROOT together with
its expiry time. Survives restarts of a single instance.
"""

from __future__ import annotations

import hashlib
import logging
import time
from pathlib import Path
from typing import Any, Callable

from readmekit.cache.base_cache_store import BaseCacheStore
from readmekit.cache.models import CacheRecord

logger = logging.getLogger(__name__)


class JsonCacheStore(BaseCacheStore):
    """File-based cache store using JSON files."""

    def __init__(
        self, cache_root: Path | str, clock: Callable[[], float] = time.time
    ) -> None:
        self._root = Path(cache_root).expanduser()
        self._root.mkdir(parents=True, exist_ok=True)
        self._clock = clock

    async def get(self, key: str) -> dict[str, Any] | None:
        """Retrieve a live cache value by key."""
        path = self._entry_path(key)
        if not path.exists():
            return None
        try:
            record = CacheRecord.model_validate_json(path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as e:
            logger.warning("Failed to read cache entry %s: %s", key, e)
            return None

        if record.is_expired(self._clock()):
            path.unlink(missing_ok=True)
            return None
        return record.value

    async def set(self, key: str, value: dict[str, Any], ttl_seconds: float) -> None:
        """Store a cache value."""
        record = CacheRecord(
            key=key, value=value, expires_at=self._clock() + ttl_seconds
        )
        path = self._entry_path(key)
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(record.model_dump_json(indent=2), encoding="utf-8")

    async def delete(self, key: str) -> None:
        """Remove a cache entry."""
        self._entry_path(key).unlink(missing_ok=True)

    def _entry_path(self, key: str) -> Path:
        """Return file path for a cache key."""
        digest = hashlib.sha256(key.encode("utf-8")).hexdigest()
        return self._root / f"{digest}.json"
