# src/api/http_handler.py — v1
"""HTTP response adapter for README requests.

Maps a lookup to a status, content type and body. Routing is left to the
hosting web framework; infrastructure errors propagate to it unchanged.
"""

from __future__ import annotations

import json
import logging

from readmekit.api.models import HttpResponse
from readmekit.api.service import ReadmeService
from readmekit.core.entity_ref import stringify_entity_ref
from readmekit.core.errors import InvalidEntityRefError, NotFoundError
from readmekit.logging.context import set_request_context

logger = logging.getLogger(__name__)


def error_response(status: int, error: Exception) -> HttpResponse:
    body = {"error": {"name": type(error).__name__, "message": str(error)}}
    return HttpResponse(
        status=status,
        headers={"Content-Type": "application/json"},
        body=json.dumps(body),
    )


async def handle_readme_request(
    service: ReadmeService, kind: str, namespace: str, name: str
) -> HttpResponse:
    """Serve GET /{kind}/{namespace}/{name}."""
    entity_ref = stringify_entity_ref(kind, namespace, name)
    set_request_context(entity_ref)
    try:
        result = await service.get_readme(entity_ref)
    except InvalidEntityRefError as exc:
        return error_response(400, exc)
    except NotFoundError as exc:
        return error_response(404, exc)

    return HttpResponse(
        status=200,
        headers={"Content-Type": result.readme.type},
        body=result.readme.content,
    )
