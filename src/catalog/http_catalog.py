# src/catalog/http_catalog.py — v1
"""Catalog client for the HTTP catalog API (httpx)."""

from __future__ import annotations

import logging
from typing import Sequence
from urllib.parse import quote

import httpx

from readmekit.catalog.base_catalog import BaseCatalogClient
from readmekit.catalog.models import Entity
from readmekit.core.entity_ref import parse_entity_ref
from readmekit.core.errors import FetchError

logger = logging.getLogger(__name__)


class HttpCatalogClient(BaseCatalogClient):
    """Reads entities from {base_url}/entities."""

    def __init__(
        self,
        base_url: str,
        timeout: float = 30.0,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        self._base_url = base_url.rstrip("/")
        self._client = client or httpx.AsyncClient(timeout=timeout)

    async def get_entity_by_ref(self, ref: str) -> Entity | None:
        parsed = parse_entity_ref(ref)
        url = (
            f"{self._base_url}/entities/by-name/"
            f"{quote(parsed.kind, safe='')}/{quote(parsed.namespace, safe='')}/"
            f"{quote(parsed.name, safe='')}"
        )
        data = await self._get_json(url)
        if data is None:
            return None
        return Entity.model_validate(data)

    async def list_entities(self, kinds: Sequence[str] | None = None) -> list[Entity]:
        params = [("filter", f"kind={kind}") for kind in kinds or ()]
        data = await self._get_json(f"{self._base_url}/entities", params=params)
        entities: list[Entity] = []
        for item in data or []:
            try:
                entities.append(Entity.model_validate(item))
            except ValueError as e:
                logger.warning("Skipping malformed catalog entity: %s", e)
        return entities

    async def _get_json(self, url: str, params: list[tuple[str, str]] | None = None):
        """GET url and decode JSON. None on 404."""
        try:
            response = await self._client.get(url, params=params)
        except httpx.HTTPError as exc:
            raise FetchError(url, f"Catalog request failed: {exc}") from exc

        if response.status_code == 404:
            return None
        if response.is_error:
            raise FetchError(
                url,
                f"Catalog request failed with status {response.status_code}",
                status_code=response.status_code,
            )
        return response.json()

    async def close(self) -> None:
        await self._client.aclose()
