# src/scm/integrations.py — v1
"""Lookup of the SCM integration responsible for a URL.

The provider set is closed: GitHub and GitLab. Any other host yields None,
which callers report as "no SCM integration".
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Iterator

from readmekit.scm.base_integration import BaseScmIntegration
from readmekit.scm.github_integration import GitHubIntegration
from readmekit.scm.gitlab_integration import GitLabIntegration

if TYPE_CHECKING:
    from readmekit.config.settings import Settings

logger = logging.getLogger(__name__)

_PROVIDERS: dict[str, type[BaseScmIntegration]] = {
    "github": GitHubIntegration,
    "gitlab": GitLabIntegration,
}


class ScmIntegrations:
    """Ordered collection of configured integrations."""

    def __init__(self, integrations: list[BaseScmIntegration] | None = None) -> None:
        self._integrations = list(integrations or [])

    @classmethod
    def from_settings(cls, settings: Settings | None = None) -> ScmIntegrations:
        """Build integrations for every configured host.

        Args:
            settings: Application settings. Defaults to github.com and
                gitlab.com only.
        """
        hosts: dict[str, list[str]] = {
            "github": ["github.com"] if settings is None else settings.scm_github_hosts_list,
            "gitlab": ["gitlab.com"] if settings is None else settings.scm_gitlab_hosts_list,
        }
        integrations: list[BaseScmIntegration] = []
        for provider, provider_hosts in hosts.items():
            for host in provider_hosts:
                integrations.append(_PROVIDERS[provider](host))
        logger.debug("Configured SCM integrations: %s", integrations)
        return cls(integrations)

    def by_url(self, url: str) -> BaseScmIntegration | None:
        """Return the integration whose host serves url, or None."""
        for integration in self._integrations:
            if integration.matches(url):
                return integration
        return None

    def __iter__(self) -> Iterator[BaseScmIntegration]:
        return iter(self._integrations)

    def __len__(self) -> int:
        return len(self._integrations)


def supported_providers() -> list[str]:
    """Return the names of all supported providers."""
    return sorted(_PROVIDERS)
