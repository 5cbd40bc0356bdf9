# src/core/candidates.py — v1
"""README candidate list: which file names to probe, in which order."""

from __future__ import annotations

from pathlib import PurePosixPath
from typing import Sequence

from readmekit.core.models import CandidateFile

MARKDOWN = "text/markdown"
RESTRUCTURED_TEXT = "text/x-rst"
PLAIN_TEXT = "text/plain"

_TYPES_BY_SUFFIX: dict[str, str] = {
    ".md": MARKDOWN,
    ".markdown": MARKDOWN,
    ".rst": RESTRUCTURED_TEXT,
    ".txt": PLAIN_TEXT,
}

DEFAULT_FILE_NAMES: tuple[str, ...] = (
    "README.md",
    "README.MD",
    "readme.md",
    "README",
    "README.rst",
    "README.txt",
)


def infer_content_type(file_name: str) -> str:
    """Content type for a file name, from its extension."""
    suffix = PurePosixPath(file_name).suffix.lower()
    return _TYPES_BY_SUFFIX.get(suffix, PLAIN_TEXT)


def build_candidates(
    file_names: Sequence[str] | None = None,
) -> tuple[CandidateFile, ...]:
    """Build the ordered candidate list.

    Args:
        file_names: Configured names, used verbatim and in order. None or an
            empty sequence selects DEFAULT_FILE_NAMES.
    """
    names = tuple(file_names) if file_names else DEFAULT_FILE_NAMES
    return tuple(
        CandidateFile(name=name, content_type=infer_content_type(name))
        for name in names
    )
