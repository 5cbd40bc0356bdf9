# src/scm/base_integration.py — v1
"""Abstract SCM integration interface.

An integration knows the URL conventions of one hosting provider: how a
relative path resolves against a browse URL, and where the raw bytes of a
file are served from.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from urllib.parse import urljoin, urlsplit, urlunsplit


def is_absolute_url(url: str) -> bool:
    parts = urlsplit(url)
    return bool(parts.scheme and parts.netloc)


class BaseScmIntegration(ABC):
    """Unified interface for SCM hosting providers."""

    def __init__(self, host: str) -> None:
        self._host = host.strip().lower()

    @property
    @abstractmethod
    def provider(self) -> str:
        """Provider identifier (e.g. 'github')."""

    @abstractmethod
    def repo_root_path(self, path: str) -> str:
        """Return the part of a browse URL path that addresses the repo root.

        For providers that embed the ref in the path this includes the ref,
        e.g. '/org/repo/blob/main'.
        """

    @abstractmethod
    def to_raw_url(self, url: str) -> str:
        """Map a browse URL to the URL that serves the raw file."""

    @property
    def host(self) -> str:
        return self._host

    def matches(self, url: str) -> bool:
        """Whether this integration handles the given URL."""
        try:
            hostname = urlsplit(url).hostname
        except ValueError:
            return False
        return hostname is not None and hostname.lower() == self._host

    def resolve_url(self, url: str, base: str) -> str:
        """Resolve url against base using this provider's conventions.

        Absolute URLs are returned verbatim. Paths starting with '/' are
        taken from the repository root. Other paths are joined the way a
        browser would, so the last segment of base counts as a file unless
        base ends with '/'. The query string of base is kept.
        """
        if is_absolute_url(url):
            return url

        base_parts = urlsplit(base)
        if url.startswith("/"):
            root = self.repo_root_path(base_parts.path).rstrip("/")
            resolved = base_parts._replace(path=f"{root}{url}", fragment="")
        else:
            resolved = urlsplit(urljoin(base, url))._replace(
                query=base_parts.query, fragment=""
            )
        return urlunsplit(resolved)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(host={self._host!r})"
