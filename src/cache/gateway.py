# src/cache/gateway.py — v1
"""README cache gateway: entity-ref keys, one TTL, sentinel negatives.

A confirmed absence is stored with the same {name, type, content} shape as
a real README, using NOT_FOUND_PLACEHOLDER as the name, so any backend that
can hold a document can hold a negative result. lookup() hands the sentinel
back as-is; callers check ReadmeFile.is_not_found.
"""

from __future__ import annotations

import logging
from typing import Any

from pydantic import ValidationError

from readmekit.cache.base_cache_store import BaseCacheStore
from readmekit.core.entity_ref import EntityRef, parse_entity_ref
from readmekit.core.models import ReadmeFile

logger = logging.getLogger(__name__)

_KEY_PREFIX = "readme:"
DEFAULT_CACHE_TTL_SECONDS = 3600.0


def cache_key(entity_ref: str | EntityRef) -> str:
    """Canonical cache key, so equivalent references share one slot."""
    ref = entity_ref if isinstance(entity_ref, EntityRef) else parse_entity_ref(entity_ref)
    return f"{_KEY_PREFIX}{ref.cache_key}"


def to_cached(readme: ReadmeFile) -> dict[str, Any]:
    return readme.model_dump()


def from_cached(value: dict[str, Any]) -> ReadmeFile:
    return ReadmeFile.model_validate(value)


class ReadmeCacheGateway:
    """Read-through cache for resolved READMEs."""

    def __init__(
        self, store: BaseCacheStore, ttl_seconds: float = DEFAULT_CACHE_TTL_SECONDS
    ) -> None:
        self._store = store
        self._ttl = ttl_seconds

    @property
    def ttl_seconds(self) -> float:
        return self._ttl

    async def lookup(self, entity_ref: str | EntityRef) -> ReadmeFile | None:
        """Cached README or sentinel for entity_ref; None on a miss."""
        key = cache_key(entity_ref)
        value = await self._store.get(key)
        if value is None:
            return None
        try:
            readme = from_cached(value)
        except ValidationError as e:
            logger.warning("Ignoring malformed cache entry %s: %s", key, e)
            return None
        if not readme.is_not_found and not readme.content:
            logger.warning("Ignoring cache entry %s with empty content", key)
            return None
        return readme

    async def store_found(
        self,
        entity_ref: str | EntityRef,
        readme: ReadmeFile,
        ttl_seconds: float | None = None,
    ) -> None:
        """Cache a resolved README."""
        if readme.is_not_found or not readme.content:
            raise ValueError("store_found requires a README with content")
        await self._store.set(
            cache_key(entity_ref), to_cached(readme), self._ttl_or_default(ttl_seconds)
        )

    async def store_not_found(
        self, entity_ref: str | EntityRef, ttl_seconds: float | None = None
    ) -> None:
        """Cache the absence of a README."""
        await self._store.set(
            cache_key(entity_ref),
            to_cached(ReadmeFile.not_found()),
            self._ttl_or_default(ttl_seconds),
        )

    async def invalidate(self, entity_ref: str | EntityRef) -> None:
        await self._store.delete(cache_key(entity_ref))

    def _ttl_or_default(self, ttl_seconds: float | None) -> float:
        return self._ttl if ttl_seconds is None else ttl_seconds
