# src/reader/base_reader.py — v1
"""Abstract URL reader: the content-fetch capability."""

from __future__ import annotations

from abc import ABC, abstractmethod


class BaseUrlReader(ABC):
    """Unified interface for fetching file content by URL."""

    @abstractmethod
    async def read_url(self, url: str) -> bytes:
        """Return the raw bytes at url.

        Raises:
            NotFoundError: If nothing exists at url.
            FetchError: On network, auth or other unexpected failures.
        """

    async def close(self) -> None:
        """Release any underlying connections."""
