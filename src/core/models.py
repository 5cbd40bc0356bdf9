# src/core/models.py — v2
"""Shared domain models: CandidateFile, ReadmeFile and resolution outcomes.

ReadmeFile is both the cache payload and the API response body (minus the
entity reference). A confirmed absence is stored as a ReadmeFile whose name
is NOT_FOUND_PLACEHOLDER with empty type and content.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Union

from pydantic import BaseModel, ConfigDict

NOT_FOUND_PLACEHOLDER = "__README_NOT_FOUND__"


class CandidateFile(BaseModel):
    """A file name to probe and the content type it is served as."""

    model_config = ConfigDict(frozen=True)

    name: str
    content_type: str


class ReadmeFile(BaseModel):
    """A resolved README, or the negative-result sentinel."""

    model_config = ConfigDict(frozen=True)

    name: str
    type: str
    content: str

    @classmethod
    def not_found(cls) -> ReadmeFile:
        """Build the sentinel stored in place of a missing README."""
        return cls(name=NOT_FOUND_PLACEHOLDER, type="", content="")

    @property
    def is_not_found(self) -> bool:
        return self.name == NOT_FOUND_PLACEHOLDER


@dataclass(frozen=True)
class Found:
    """Resolution succeeded with the first matching candidate."""

    readme: ReadmeFile


@dataclass(frozen=True)
class NotFound:
    """Every candidate was tried and none exists."""

    tried: tuple[str, ...] = field(default_factory=tuple)


ResolutionOutcome = Union[Found, NotFound]
