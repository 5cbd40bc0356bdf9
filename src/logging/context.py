# src/logging/context.py — v2
"""Contextual logging support: attach entity_ref, request_id and job to records."""

from __future__ import annotations

import contextvars
import uuid
from dataclasses import dataclass
from typing import Any

# Set per request (HTTP, action) or per collated entity.
_entity_ref: contextvars.ContextVar[str | None] = contextvars.ContextVar(
    "entity_ref", default=None
)
_request_id: contextvars.ContextVar[str | None] = contextvars.ContextVar(
    "request_id", default=None
)
_job: contextvars.ContextVar[str | None] = contextvars.ContextVar(
    "job", default=None
)


@dataclass
class LogContext:
    """Immutable snapshot of current logging context."""

    entity_ref: str | None = None
    request_id: str | None = None
    job: str | None = None

    def as_dict(self) -> dict[str, Any]:
        """Return non-None fields as dict for JSON log injection."""
        return {k: v for k, v in self.__dict__.items() if v is not None}


def get_context() -> LogContext:
    """Snapshot current context variables."""
    return LogContext(
        entity_ref=_entity_ref.get(),
        request_id=_request_id.get(),
        job=_job.get(),
    )


def set_request_context(entity_ref: str, request_id: str | None = None) -> str:
    """Set request-level context. Returns the request id in use."""
    rid = request_id or uuid.uuid4().hex[:12]
    _entity_ref.set(entity_ref)
    _request_id.set(rid)
    return rid


def set_job_context(job: str) -> None:
    """Set the name of the background job emitting logs."""
    _job.set(job)


def clear_context() -> None:
    """Reset all context variables."""
    _entity_ref.set(None)
    _request_id.set(None)
    _job.set(None)
