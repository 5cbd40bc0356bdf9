# src/core/resolver.py — v1
"""README resolution: probe candidates in order and return the first hit.

Candidates are fetched strictly one after another and the loop stops at the
first success, keeping the number of calls against rate-limited SCM APIs to a
minimum. Only NotFoundError moves on to the next candidate; any other error
aborts the resolution unchanged.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Awaitable, Callable, Sequence

from readmekit.core.errors import DanglingSymlinkError, NotFoundError
from readmekit.core.models import (
    CandidateFile,
    Found,
    NotFound,
    ReadmeFile,
    ResolutionOutcome,
)
from readmekit.core.symlink import DEFAULT_SYMLINK_MAX_LENGTH, is_symlink
from readmekit.scm.base_integration import is_absolute_url

if TYPE_CHECKING:
    from readmekit.reader.base_reader import BaseUrlReader
    from readmekit.scm.base_integration import BaseScmIntegration

logger = logging.getLogger(__name__)

FetchContent = Callable[[str], Awaitable[bytes]]


async def resolve_readme(
    source_url: str,
    candidates: Sequence[CandidateFile],
    integration: BaseScmIntegration,
    fetch: FetchContent,
    symlink_max_length: int = DEFAULT_SYMLINK_MAX_LENGTH,
) -> ResolutionOutcome:
    """Find the first existing README candidate below source_url.

    A symlink body that is an absolute URL is not followed; the body is kept
    as the README content, so symlinks never leave the source repository.

    Args:
        source_url: Browse URL of the entity's source location.
        candidates: File names to try, in priority order.
        integration: SCM integration used to resolve relative names.
        fetch: Content-fetch capability; raises NotFoundError for a
            missing resource.
        symlink_max_length: Length bound for symlink detection.

    Returns:
        Found with the README, or NotFound listing the tried names.

    Raises:
        DanglingSymlinkError: If a symlink README points at a missing file.
        Exception: Any non-NotFound error from fetch, unchanged.
    """
    for candidate in candidates:
        url = integration.resolve_url(candidate.name, base=source_url)
        logger.debug("Trying README location: %s", url)

        try:
            body = await fetch(url)
        except NotFoundError:
            continue

        content = body.decode("utf-8", errors="replace")

        target = content.strip()
        if is_symlink(content, max_length=symlink_max_length) and not is_absolute_url(
            target
        ):
            target_url = integration.resolve_url(target, base=source_url)
            logger.debug("README %s is a symlink to %s", url, target_url)
            try:
                body = await fetch(target_url)
            except NotFoundError as exc:
                raise DanglingSymlinkError(url, target) from exc
            content = body.decode("utf-8", errors="replace")

        if not content.strip():
            logger.debug("Skipping empty README at %s", url)
            continue

        logger.info("Found README %s (%s)", url, candidate.content_type)
        return Found(
            ReadmeFile(
                name=candidate.name,
                type=candidate.content_type,
                content=content,
            )
        )

    return NotFound(tried=tuple(c.name for c in candidates))


class ReadmeResolver:
    """Resolver bound to a reader and a candidate list."""

    def __init__(
        self,
        reader: BaseUrlReader,
        candidates: Sequence[CandidateFile],
        symlink_max_length: int = DEFAULT_SYMLINK_MAX_LENGTH,
    ) -> None:
        self._reader = reader
        self._candidates = tuple(candidates)
        self._symlink_max_length = symlink_max_length

    @property
    def candidates(self) -> tuple[CandidateFile, ...]:
        return self._candidates

    async def resolve(
        self, source_url: str, integration: BaseScmIntegration
    ) -> ResolutionOutcome:
        """Resolve the README for a source URL."""
        return await resolve_readme(
            source_url,
            self._candidates,
            integration,
            self._reader.read_url,
            symlink_max_length=self._symlink_max_length,
        )
