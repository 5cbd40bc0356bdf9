# tests/unit/cache/test_unit_gateway.py — v1
"""Tests for cache/gateway.py — entity-ref keys, TTL and sentinel."""

from __future__ import annotations

import pytest

from readmekit.cache.gateway import (
    ReadmeCacheGateway,
    cache_key,
    from_cached,
    to_cached,
)
from readmekit.core.entity_ref import parse_entity_ref
from readmekit.core.models import NOT_FOUND_PLACEHOLDER, ReadmeFile

README = ReadmeFile(name="README.md", type="text/markdown", content="# Service")


class TestCacheKey:
    def test_equivalent_refs_share_key(self):
        assert cache_key("Component:default/Service") == cache_key("service")
        assert cache_key(parse_entity_ref("service")) == "readme:component:default/service"

    def test_different_kinds_differ(self):
        assert cache_key("api:default/x") != cache_key("component:default/x")


class TestStorageShape:
    def test_sentinel_keeps_document_shape(self):
        assert to_cached(ReadmeFile.not_found()) == {
            "name": NOT_FOUND_PLACEHOLDER, "type": "", "content": "",
        }

    def test_from_cached(self):
        assert from_cached(to_cached(README)) == README


class TestReadmeCacheGateway:
    @pytest.mark.asyncio
    async def test_miss(self, gateway):
        assert await gateway.lookup("component:default/service") is None

    @pytest.mark.asyncio
    async def test_store_found_then_lookup(self, gateway):
        await gateway.store_found("component:default/service", README)
        assert await gateway.lookup("Component:Default/Service") == README

    @pytest.mark.asyncio
    async def test_store_not_found_returns_sentinel(self, gateway):
        await gateway.store_not_found("component:default/service")
        cached = await gateway.lookup("service")
        assert cached is not None
        assert cached.is_not_found

    @pytest.mark.asyncio
    async def test_ttl_applies_to_both(self, gateway, clock):
        await gateway.store_found("component:default/a", README)
        await gateway.store_not_found("component:default/b")
        clock.advance(gateway.ttl_seconds)
        assert await gateway.lookup("a") is None
        assert await gateway.lookup("b") is None

    @pytest.mark.asyncio
    async def test_explicit_ttl(self, gateway, clock):
        await gateway.store_found("a", README, ttl_seconds=5)
        clock.advance(5)
        assert await gateway.lookup("a") is None

    @pytest.mark.asyncio
    async def test_store_found_rejects_empty(self, gateway):
        with pytest.raises(ValueError):
            await gateway.store_found("a", ReadmeFile(name="README", type="text/plain", content=""))
        with pytest.raises(ValueError):
            await gateway.store_found("a", ReadmeFile.not_found())

    @pytest.mark.asyncio
    async def test_malformed_entry_is_miss(self, gateway, cache_store):
        await cache_store.set(cache_key("a"), {"unexpected": True}, 60)
        assert await gateway.lookup("a") is None

    @pytest.mark.asyncio
    async def test_invalidate(self, gateway):
        await gateway.store_found("a", README)
        await gateway.invalidate("a")
        assert await gateway.lookup("a") is None

    def test_default_ttl(self, cache_store):
        assert ReadmeCacheGateway(cache_store).ttl_seconds == 3600.0
