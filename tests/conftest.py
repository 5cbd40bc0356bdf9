# tests/conftest.py — v2
"""Shared test fixtures for unit tests.

Provides a scripted URL reader, a fake clock, sample entities and a fully
wired ReadmeService. No network access: all I/O is faked in memory.
"""

from __future__ import annotations

import pytest

from readmekit.api.service import ReadmeService
from readmekit.cache.gateway import ReadmeCacheGateway
from readmekit.cache.memory_store import MemoryCacheStore
from readmekit.catalog.memory_catalog import InMemoryCatalogClient
from readmekit.catalog.models import Entity, EntityMetadata
from readmekit.core.candidates import build_candidates
from readmekit.core.errors import NotFoundError
from readmekit.core.resolver import ReadmeResolver
from readmekit.reader.base_reader import BaseUrlReader
from readmekit.scm.github_integration import GitHubIntegration
from readmekit.scm.integrations import ScmIntegrations

SOURCE_URL = "https://github.com/acme/service/tree/main/"


class FakeUrlReader(BaseUrlReader):
    """Serves scripted bodies; unknown URLs raise NotFoundError."""

    def __init__(self, files: dict[str, bytes | Exception] | None = None) -> None:
        self.files: dict[str, bytes | Exception] = dict(files or {})
        self.calls: list[str] = []

    async def read_url(self, url: str) -> bytes:
        self.calls.append(url)
        item = self.files.get(url)
        if item is None:
            raise NotFoundError(f"{url} not found")
        if isinstance(item, Exception):
            raise item
        return item


class FakeClock:
    """Manually advanced clock for TTL tests."""

    def __init__(self, start: float = 1000.0) -> None:
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


def make_entity(
    name: str = "service",
    kind: str = "Component",
    namespace: str = "default",
    source: str | None = f"url:{SOURCE_URL}",
    title: str | None = None,
) -> Entity:
    annotations = {}
    if source is not None:
        annotations["backstage.io/source-location"] = source
    return Entity(
        kind=kind,
        metadata=EntityMetadata(
            name=name, namespace=namespace, title=title, annotations=annotations
        ),
    )


# === FIXTURES ===


@pytest.fixture
def github() -> GitHubIntegration:
    return GitHubIntegration()


@pytest.fixture
def reader() -> FakeUrlReader:
    return FakeUrlReader()


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def cache_store(clock: FakeClock) -> MemoryCacheStore:
    return MemoryCacheStore(clock=clock)


@pytest.fixture
def gateway(cache_store: MemoryCacheStore) -> ReadmeCacheGateway:
    return ReadmeCacheGateway(cache_store, ttl_seconds=60)


@pytest.fixture
def catalog() -> InMemoryCatalogClient:
    return InMemoryCatalogClient([make_entity()])


@pytest.fixture
def service(
    catalog: InMemoryCatalogClient,
    reader: FakeUrlReader,
    gateway: ReadmeCacheGateway,
) -> ReadmeService:
    resolver = ReadmeResolver(reader, build_candidates())
    return ReadmeService(
        catalog, ScmIntegrations([GitHubIntegration()]), resolver, gateway
    )


@pytest.fixture
def entity_factory():
    """Build catalog entities: entity_factory(name=..., source=...)."""
    return make_entity
