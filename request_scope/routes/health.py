"""
request_scope.routes.health

Purpose:
    Health endpoint for container/orchestrator checks. Reports the request id in
    effect so health checks can confirm the context middleware is wired in.

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
    return {"ok": True, "request_id": current_context().request_id}
