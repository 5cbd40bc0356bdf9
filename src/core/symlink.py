# src/core/symlink.py — v1
"""Detect README bodies that are git symlinks rendered as plain text.

When a hosting provider serves a symlink through its raw endpoint the body is
just the target path, e.g. "docs/README.md". The check is a heuristic: a
README whose whole body is one such token is misread as a symlink, and links
to files without one of SYMLINK_EXTENSIONS are not followed.
"""

from __future__ import annotations

DEFAULT_SYMLINK_MAX_LENGTH = 256
SYMLINK_EXTENSIONS: tuple[str, ...] = (".md", ".markdown", ".rst", ".txt")


def is_symlink(content: str, max_length: int = DEFAULT_SYMLINK_MAX_LENGTH) -> bool:
    """Return True if content looks like a bare file path, not prose."""
    token = content.strip()
    if not token or len(token) >= max_length:
        return False
    if any(ch.isspace() for ch in token):
        return False
    return token.lower().endswith(SYMLINK_EXTENSIONS)
