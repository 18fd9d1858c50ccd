"""
request_scope.routes.v1.context

Purpose:
    Endpoints that read and write request-scoped state purely through the global
    accessors; nothing is passed down explicitly.

Notes:
    - Handlers are async so they run on the event loop inside the bound chain.
    - POST /v1/context/metadata fans writes out to child tasks; each task inherits
      the request's binding when it is created.

Created:
    2026-10-19
"""

from __future__ import annotations

import asyncio
from typing import Any, Dict

from fastapi import APIRouter, Body

from request_scope.context.globals import (
    current_config,
    current_context,
    current_logger,
    current_request,
    current_response,
)
from request_scope.contracts.api_paths import ApiPaths

_paths = ApiPaths()

router = APIRouter(tags=["context"])


def _describe() -> dict:
    context = current_context()
    request = current_request()
    return {
        "request_id": context.request_id,
        "method": request.method,
        "path": request.url.path,
        "config": dict(current_config()),
        "metadata": context.get_all_metadata(),
    }


@router.get(_paths.context)
async def read_context() -> dict:
    current_logger().info("context read")
    current_response().headers["X-Elapsed-Ms"] = f"{current_context().elapsed_time * 1000:.3f}"
    return _describe()


async def _store(key: str, value: Any) -> None:
    await asyncio.sleep(0)
    current_context().set_metadata(key, value)


@router.post(_paths.context_metadata)
async def write_metadata(payload: Dict[str, Any] = Body(...)) -> dict:
    await asyncio.gather(*(asyncio.create_task(_store(k, v)) for k, v in payload.items()))
    current_logger().info("metadata stored", {"keys": sorted(payload)})
    return _describe()
