# src/scm/github_integration.py — v1
"""GitHub and GitHub Enterprise integration.

Browse URLs look like https://github.com/<owner>/<repo>/(blob|tree)/<ref>/<path>.
"""

from __future__ import annotations

from urllib.parse import urlsplit, urlunsplit

from readmekit.scm.base_integration import BaseScmIntegration

_PUBLIC_HOST = "github.com"
_PUBLIC_RAW_HOST = "raw.githubusercontent.com"
_BROWSE_SEGMENTS = ("blob", "tree")


def _split_path(path: str) -> list[str]:
    return [p for p in path.split("/") if p]


class GitHubIntegration(BaseScmIntegration):
    """URL conventions for GitHub."""

    def __init__(self, host: str = _PUBLIC_HOST) -> None:
        super().__init__(host)

    @property
    def provider(self) -> str:
        return "github"

    def repo_root_path(self, path: str) -> str:
        parts = _split_path(path)
        if len(parts) >= 4 and parts[2] in _BROWSE_SEGMENTS:
            return "/" + "/".join(parts[:4])
        return "/" + "/".join(parts[:2])

    def to_raw_url(self, url: str) -> str:
        parts = urlsplit(url)
        segments = _split_path(parts.path)
        if len(segments) < 5 or segments[2] not in _BROWSE_SEGMENTS:
            return url

        owner, repo, _, ref, *file_path = segments
        raw_path = "/".join([owner, repo, ref, *file_path])
        if self.host == _PUBLIC_HOST:
            return urlunsplit(
                ("https", _PUBLIC_RAW_HOST, f"/{raw_path}", parts.query, "")
            )
        return urlunsplit(
            (parts.scheme, parts.netloc, f"/raw/{raw_path}", parts.query, "")
        )
