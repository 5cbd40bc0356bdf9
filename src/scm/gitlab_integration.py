# src/scm/gitlab_integration.py — v1
"""GitLab integration.

Browse URLs look like
https://gitlab.com/<group>/<subgroup>/<project>/-/(blob|tree)/<ref>/<path>.
Group nesting is arbitrary; the '-' segment marks where the project ends.
"""

from __future__ import annotations

from urllib.parse import urlsplit, urlunsplit

from readmekit.scm.base_integration import BaseScmIntegration

_BROWSE_SEGMENTS = ("blob", "tree")


def _split_path(path: str) -> list[str]:
    return [p for p in path.split("/") if p]


def _separator_index(segments: list[str]) -> int | None:
    for i, segment in enumerate(segments):
        if (
            segment == "-"
            and i + 2 < len(segments)
            and segments[i + 1] in _BROWSE_SEGMENTS
        ):
            return i
    return None


class GitLabIntegration(BaseScmIntegration):
    """URL conventions for GitLab (SaaS and self-managed)."""

    def __init__(self, host: str = "gitlab.com") -> None:
        super().__init__(host)

    @property
    def provider(self) -> str:
        return "gitlab"

    def repo_root_path(self, path: str) -> str:
        segments = _split_path(path)
        idx = _separator_index(segments)
        if idx is None:
            return "/" + "/".join(segments)
        return "/" + "/".join(segments[: idx + 3])

    def to_raw_url(self, url: str) -> str:
        parts = urlsplit(url)
        segments = _split_path(parts.path)
        idx = _separator_index(segments)
        if idx is None:
            return url
        segments[idx + 1] = "raw"
        return urlunsplit(
            (parts.scheme, parts.netloc, "/" + "/".join(segments), parts.query, "")
        )
