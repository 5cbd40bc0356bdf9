# src/catalog/base_catalog.py — v1
"""Abstract catalog client: the entity directory lookup."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Sequence

from readmekit.catalog.models import Entity


class BaseCatalogClient(ABC):
    """Unified interface for entity directories."""

    @abstractmethod
    async def get_entity_by_ref(self, ref: str) -> Entity | None:
        """Return the entity for a reference, or None if unknown."""

    @abstractmethod
    async def list_entities(self, kinds: Sequence[str] | None = None) -> list[Entity]:
        """List entities, optionally restricted to some kinds."""

    async def close(self) -> None:
        """Release any underlying connections."""
