# src/search/collator.py — v1
"""Collate READMEs of catalog entities into search documents.

Uses the same ReadmeService as the interactive entry points, so indexing
fills and reuses the README cache. An entity that fails for any reason is
logged and skipped; one broken repository must not abort a whole run.
"""

from __future__ import annotations

import logging
from typing import AsyncIterator, Sequence

from readmekit.api.service import ReadmeService
from readmekit.catalog.base_catalog import BaseCatalogClient
from readmekit.catalog.models import Entity
from readmekit.core.candidates import MARKDOWN
from readmekit.core.errors import NotFoundError
from readmekit.core.markdown import strip_markdown
from readmekit.logging.context import set_request_context
from readmekit.search.models import ReadmeDocument

logger = logging.getLogger(__name__)


def entity_location(entity: Entity) -> str:
    """Catalog page path of an entity."""
    meta = entity.metadata
    return f"/catalog/{meta.namespace}/{entity.kind.lower()}/{meta.name}"


class ReadmeCollator:
    """Yields one ReadmeDocument per entity that has a README."""

    def __init__(
        self,
        service: ReadmeService,
        catalog: BaseCatalogClient,
        kinds: Sequence[str] | None = None,
    ) -> None:
        self._service = service
        self._catalog = catalog
        self._kinds = list(kinds) if kinds else None

    async def collate(self) -> AsyncIterator[ReadmeDocument]:
        entities = await self._catalog.list_entities(self._kinds)
        logger.info("Collating READMEs for %d entities", len(entities))

        indexed = 0
        for entity in entities:
            document = await self._collate_entity(entity)
            if document is not None:
                indexed += 1
                yield document

        logger.info("Collated %d README documents", indexed)

    async def _collate_entity(self, entity: Entity) -> ReadmeDocument | None:
        ref = entity.ref
        set_request_context(ref)
        try:
            result = await self._service.get_readme(ref)
        except NotFoundError:
            logger.debug("No README for %s", ref)
            return None
        except Exception as e:
            logger.warning("Failed to collate README for %s: %s", ref, e)
            return None

        readme = result.readme
        text = readme.content
        if readme.type == MARKDOWN:
            text = strip_markdown(text)

        meta = entity.metadata
        return ReadmeDocument(
            title=f"{meta.title or meta.name} README",
            text=text,
            location=entity_location(entity),
            entity_ref=result.entity_ref,
            kind=entity.kind,
            namespace=meta.namespace,
            name=meta.name,
            file_name=readme.name,
            content_type=readme.type,
        )
