# src/core/markdown.py — v1
"""Markdown to plain text, for search indexing and LLM consumption."""

from __future__ import annotations

import re

# Stage order matters: fences before inline code, links and images before
# emphasis.
_STAGES: tuple[tuple[re.Pattern[str], str], ...] = (
    (re.compile(r"```.*?```", re.DOTALL), ""),
    (re.compile(r"`([^`]+)`"), r"\1"),
    (re.compile(r"(?<!!)\[([^\]]+)\]\([^)]+\)"), r"\1"),
    (re.compile(r"!\[([^\]]*)\]\([^)]+\)"), ""),
    (re.compile(r"^#+\s+", re.MULTILINE), ""),
    (re.compile(r"[*_]{1,2}([^*_]+)[*_]{1,2}"), r"\1"),
    (re.compile(r"^[-*_]{3,}$", re.MULTILINE), ""),
    (re.compile(r"\s+"), " "),
)


def _strip_once(text: str) -> str:
    for pattern, replacement in _STAGES:
        text = pattern.sub(replacement, text)
    return text.strip()


def strip_markdown(text: str) -> str:
    """Remove markdown syntax and collapse whitespace.

    The pipeline repeats until the output is stable, so nested markers such
    as "***x***" or "## # Title" are fully removed and the function is
    idempotent. After the first pass every further change shortens the text,
    which bounds the loop.
    """
    previous = None
    while text != previous:
        previous = text
        text = _strip_once(text)
    return text
