# src/search/models.py — v1
"""Search document shape produced by the README collator."""

from __future__ import annotations

from pydantic import BaseModel


class ReadmeDocument(BaseModel):
    """One README, flattened for a search index."""

    title: str
    text: str
    location: str
    entity_ref: str
    kind: str
    namespace: str
    name: str
    file_name: str
    content_type: str
