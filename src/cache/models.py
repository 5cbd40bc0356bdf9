# src/cache/models.py — v2
"""Cache domain models: CacheRecord.

A record wraps an opaque JSON-compatible value with its absolute expiry
time, for backends that have no native TTL.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel


class CacheRecord(BaseModel):
    """Single stored value and the wall-clock time it expires at."""

    key: str
    value: dict[str, Any]
    expires_at: float

    def is_expired(self, now: float) -> bool:
        return now >= self.expires_at
