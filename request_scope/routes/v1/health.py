"""
request_scope.routes.v1.health

Purpose:
    Versioned health endpoint for API clients; also reports how long the bound
    context has been alive when the handler runs.

Created:
    2026-10-19
"""

from __future__ import annotations

from fastapi import APIRouter

from request_scope.context.globals import current_context
from request_scope.contracts.api_paths import ApiPaths

_paths = ApiPaths()

router = APIRouter(tags=["health"])


@router.get(_paths.health)
async def health() -> dict:
    context = current_context()
    return {
        "status": "ok",
        "request_id": context.request_id,
        "elapsed_ms": round(context.elapsed_time * 1000, 3),
    }
