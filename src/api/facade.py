# src/api/facade.py — v2
"""Public API facade: builds the README components from settings.

Usage:
    from readmekit.api.facade import create_app
    app = create_app(settings)
    output = await app.actions.invoke(
        "get-readme-content", {"entityRef": "component:default/my-service"}
    )
    await app.close()
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from readmekit.api.actions import ActionRegistry, GetReadmeAction
from readmekit.api.service import ReadmeService
from readmekit.cache.base_cache_store import BaseCacheStore
from readmekit.cache.cache_factory import create_cache_store
from readmekit.cache.gateway import ReadmeCacheGateway
from readmekit.catalog.base_catalog import BaseCatalogClient
from readmekit.catalog.http_catalog import HttpCatalogClient
from readmekit.config.settings import Settings
from readmekit.core.candidates import build_candidates
from readmekit.core.resolver import ReadmeResolver
from readmekit.reader.base_reader import BaseUrlReader
from readmekit.reader.http_reader import HttpUrlReader
from readmekit.scm.integrations import ScmIntegrations
from readmekit.search.collator import ReadmeCollator
from readmekit.search.scheduler import SearchSchedule

logger = logging.getLogger(__name__)


@dataclass
class ReadmeApp:
    """Wired components shared by the HTTP handler, actions and search job."""

    settings: Settings
    service: ReadmeService
    cache: ReadmeCacheGateway
    actions: ActionRegistry
    collator: ReadmeCollator
    schedule: SearchSchedule
    catalog: BaseCatalogClient
    reader: BaseUrlReader
    cache_store: BaseCacheStore

    async def close(self) -> None:
        await self.reader.close()
        await self.catalog.close()
        await self.cache_store.close()


def create_app(
    settings: Settings | None = None,
    catalog: BaseCatalogClient | None = None,
    reader: BaseUrlReader | None = None,
    cache_store: BaseCacheStore | None = None,
) -> ReadmeApp:
    """Build every component from settings.

    Args:
        settings: Global settings. Loaded from .env if None.
        catalog: Entity directory. Defaults to the HTTP catalog client.
        reader: Content fetcher. Defaults to the httpx reader.
        cache_store: Cache backend. Defaults to the configured backend.
    """
    settings = settings or Settings()

    integrations = ScmIntegrations.from_settings(settings)
    catalog = catalog or HttpCatalogClient(
        settings.catalog_base_url, timeout=settings.catalog_timeout
    )
    reader = reader or HttpUrlReader(integrations, timeout=settings.http_timeout)
    cache_store = cache_store or create_cache_store(settings)

    candidates = build_candidates(settings.readme_file_names_list)
    resolver = ReadmeResolver(
        reader, candidates, symlink_max_length=settings.symlink_max_length
    )
    cache = ReadmeCacheGateway(cache_store, ttl_seconds=settings.cache_ttl_seconds)
    service = ReadmeService(catalog, integrations, resolver, cache)

    actions = ActionRegistry()
    actions.register(GetReadmeAction(service))

    collator = ReadmeCollator(service, catalog, kinds=settings.search_kinds_list)
    schedule = SearchSchedule.from_strings(
        settings.search_frequency,
        settings.search_timeout,
        settings.search_initial_delay,
    )

    logger.info(
        "README service initialized (cache=%s, ttl=%ss, candidates=%s)",
        settings.cache_backend,
        settings.cache_ttl_seconds,
        ", ".join(c.name for c in candidates),
    )
    return ReadmeApp(
        settings=settings,
        service=service,
        cache=cache,
        actions=actions,
        collator=collator,
        schedule=schedule,
        catalog=catalog,
        reader=reader,
        cache_store=cache_store,
    )
