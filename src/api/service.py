# src/api/service.py — v1
"""README lookup shared by every entry point.

Flow: cache lookup → catalog → source location → SCM integration →
resolver → cache store. Every NotFoundError raised while resolving an
entity is cached as the negative sentinel, so repeat lookups within the TTL
short-circuit. Any other error propagates and nothing is cached.
"""

from __future__ import annotations

import logging

from pydantic import BaseModel

from readmekit.cache.gateway import ReadmeCacheGateway
from readmekit.catalog.base_catalog import BaseCatalogClient
from readmekit.catalog.models import get_entity_source_location
from readmekit.core.entity_ref import EntityRef, parse_entity_ref
from readmekit.core.errors import (
    EntityNotFoundError,
    IntegrationNotFoundError,
    NotFoundError,
    ReadmeNotFoundError,
    SourceLocationError,
)
from readmekit.core.models import Found, ReadmeFile
from readmekit.core.resolver import ReadmeResolver
from readmekit.scm.integrations import ScmIntegrations

logger = logging.getLogger(__name__)


class ReadmeResult(BaseModel):
    """A README together with the canonical reference of its entity."""

    entity_ref: str
    readme: ReadmeFile


class ReadmeService:
    """Resolves and caches entity READMEs."""

    def __init__(
        self,
        catalog: BaseCatalogClient,
        integrations: ScmIntegrations,
        resolver: ReadmeResolver,
        cache: ReadmeCacheGateway,
    ) -> None:
        self._catalog = catalog
        self._integrations = integrations
        self._resolver = resolver
        self._cache = cache

    @property
    def candidate_names(self) -> list[str]:
        return [c.name for c in self._resolver.candidates]

    async def get_readme(self, entity_ref: str) -> ReadmeResult:
        """Return the README for entity_ref.

        Raises:
            InvalidEntityRefError: If entity_ref cannot be parsed.
            NotFoundError: If the entity or its README cannot be found.
            FetchError: On infrastructure failures (not cached).
        """
        ref = parse_entity_ref(entity_ref)

        cached = await self._cache.lookup(ref)
        if cached is not None:
            if cached.is_not_found:
                logger.debug("Cached negative result for %s", ref)
                raise ReadmeNotFoundError(str(ref))
            logger.debug("Loading README for %s from cache", ref)
            return ReadmeResult(entity_ref=str(ref), readme=cached)

        try:
            return await self._resolve(ref)
        except NotFoundError as exc:
            logger.info("README not found for %s: %s", ref, exc)
            await self._cache.store_not_found(ref)
            raise

    async def _resolve(self, ref: EntityRef) -> ReadmeResult:
        entity = await self._catalog.get_entity_by_ref(str(ref))
        if entity is None:
            raise EntityNotFoundError(str(ref))

        canonical = entity.ref
        source = get_entity_source_location(entity)
        if source is None or source.type != "url":
            raise SourceLocationError(canonical)

        integration = self._integrations.by_url(source.target)
        if integration is None:
            raise IntegrationNotFoundError(source.target)

        outcome = await self._resolver.resolve(source.target, integration)
        if not isinstance(outcome, Found):
            raise ReadmeNotFoundError(canonical, outcome.tried)

        await self._cache.store_found(canonical, outcome.readme)
        return ReadmeResult(entity_ref=canonical, readme=outcome.readme)
