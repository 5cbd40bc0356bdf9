# src/reader/http_reader.py — v1
"""HTTP URL reader backed by httpx.

Browse URLs are translated to raw-content URLs by the matching SCM
integration before the request. Hosts without a configured integration are
never contacted.
"""

from __future__ import annotations

import logging

import httpx

from readmekit.core.errors import FetchError, NotFoundError
from readmekit.reader.base_reader import BaseUrlReader
from readmekit.scm.integrations import ScmIntegrations

logger = logging.getLogger(__name__)


class HttpUrlReader(BaseUrlReader):
    """Reads files over HTTP(S)."""

    def __init__(
        self,
        integrations: ScmIntegrations | None = None,
        timeout: float = 30.0,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        self._integrations = integrations or ScmIntegrations.from_settings()
        self._client = client or httpx.AsyncClient(
            timeout=timeout, follow_redirects=True
        )

    def raw_url(self, url: str) -> str:
        """Raw-content URL for url.

        Raises:
            FetchError: If no integration serves the host of url.
        """
        integration = self._integrations.by_url(url)
        if integration is None:
            raise FetchError(url, f"No SCM integration configured for {url}")
        return integration.to_raw_url(url)

    async def read_url(self, url: str) -> bytes:
        target = self.raw_url(url)
        try:
            response = await self._client.get(target)
        except httpx.InvalidURL as exc:
            raise FetchError(url, f"Invalid URL {url!r}: {exc}") from exc
        except httpx.HTTPError as exc:
            raise FetchError(url, f"Request to {target} failed: {exc}") from exc

        if response.status_code == 404:
            raise NotFoundError(f"{url} not found")
        if response.is_error:
            raise FetchError(
                url,
                f"Request to {target} failed with status {response.status_code}",
                status_code=response.status_code,
            )
        return response.content

    async def close(self) -> None:
        await self._client.aclose()
