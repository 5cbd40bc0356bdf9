# src/core/errors.py — v1
"""Error taxonomy for README resolution.

Only NotFoundError (and its subclasses) means "absent". Every other error
surfaces to the caller untouched and is never cached.
"""

from __future__ import annotations

from typing import Sequence


class ReadmeError(Exception):
    """Base class for all readmekit errors."""


class InvalidEntityRefError(ReadmeError, ValueError):
    """Raised when an entity reference string cannot be parsed."""


class NotFoundError(ReadmeError):
    """A resource does not exist at the requested location."""


class EntityNotFoundError(NotFoundError):
    """The entity is unknown to the catalog."""

    def __init__(self, entity_ref: str) -> None:
        self.entity_ref = entity_ref
        super().__init__(f"Entity {entity_ref} not found in catalog")


class SourceLocationError(NotFoundError):
    """The entity has no url-type source location."""

    def __init__(self, entity_ref: str) -> None:
        self.entity_ref = entity_ref
        super().__init__(
            f"Entity {entity_ref} does not have a valid source location"
        )


class IntegrationNotFoundError(NotFoundError):
    """No SCM integration handles the source URL."""

    def __init__(self, url: str) -> None:
        self.url = url
        super().__init__(f"No SCM integration found for {url}")


class ReadmeNotFoundError(NotFoundError):
    """No README candidate resolved for the entity."""

    def __init__(self, entity_ref: str, tried: Sequence[str] = ()) -> None:
        self.entity_ref = entity_ref
        self.tried = tuple(tried)
        message = (
            f"README not found for entity {entity_ref}. "
            "This entity does not have a README file."
        )
        if self.tried:
            message = (
                f"README not found for entity {entity_ref}. "
                f"Tried files: {', '.join(self.tried)}"
            )
        super().__init__(message)


class FetchError(ReadmeError):
    """Network, auth or unexpected failure while fetching a URL."""

    def __init__(
        self, url: str, message: str, status_code: int | None = None
    ) -> None:
        self.url = url
        self.status_code = status_code
        super().__init__(message)


class DanglingSymlinkError(ReadmeError):
    """A symlink README points at a file that does not exist."""

    def __init__(self, url: str, target: str) -> None:
        self.url = url
        self.target = target
        super().__init__(f"Symlink target {target!r} not found at {url}")
