# src/catalog/memory_catalog.py — v1
"""In-memory catalog, for tests and static deployments."""

from __future__ import annotations

from typing import Iterable, Sequence

from readmekit.catalog.base_catalog import BaseCatalogClient
from readmekit.catalog.models import Entity
from readmekit.core.entity_ref import parse_entity_ref


class InMemoryCatalogClient(BaseCatalogClient):
    """Catalog backed by a list of entities held in memory."""

    def __init__(self, entities: Iterable[Entity] = ()) -> None:
        self._entities: dict[str, Entity] = {}
        for entity in entities:
            self.add(entity)

    def add(self, entity: Entity) -> None:
        self._entities[entity.ref.lower()] = entity

    async def get_entity_by_ref(self, ref: str) -> Entity | None:
        return self._entities.get(parse_entity_ref(ref).cache_key)

    async def list_entities(self, kinds: Sequence[str] | None = None) -> list[Entity]:
        wanted = {k.lower() for k in kinds} if kinds else None
        return [
            e for e in self._entities.values()
            if wanted is None or e.kind.lower() in wanted
        ]
