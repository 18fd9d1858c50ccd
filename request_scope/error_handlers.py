"""
request_scope.error_handlers

Purpose:
    Register global exception handlers that return stable ErrorResponse objects.
    Ensures request_id is always included.

Notes:
    - The context middleware never catches anything; these handlers are the host's
      error path.
    - Handlers for Exception run in ServerErrorMiddleware, outside the bound chain,
      so request_id is read from request.state first.

Created:
    2026-10-19
"""

from __future__ import annotations

import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from request_scope.context.storage import current
from request_scope.contracts.error_contract import ErrorCode, ErrorResponse
from request_scope.errors import ContextAbsentError

logger = logging.getLogger(__name__)


def _get_request_id(request: Request) -> str:
    rid = getattr(getattr(request, "state", None), "request_id", None)
    if isinstance(rid, str) and rid:
        return rid

    context = current()
    if context is not None:
        return context.request_id

    return "-"


def register_error_handlers(app: FastAPI) -> None:
    """
    Register global exception handlers on the FastAPI app.
    """

    @app.exception_handler(ContextAbsentError)
    async def handle_context_absent(request: Request, exc: ContextAbsentError) -> JSONResponse:
        logger.error("Ambient request state read outside a request context: %s", exc)

        payload = ErrorResponse(
            request_id=_get_request_id(request),
            error_code=ErrorCode.CONTEXT_ABSENT,
            message=str(exc),
            details={"accessor": exc.accessor},
        )
        return JSONResponse(status_code=500, content=payload.model_dump(mode="json"))

    @app.exception_handler(Exception)
    async def handle_unhandled_error(request: Request, exc: Exception) -> JSONResponse:
        logger.exception("Unhandled exception in API request", exc_info=exc)

        payload = ErrorResponse(
            request_id=_get_request_id(request),
            error_code=ErrorCode.INTERNAL_ERROR,
            message="Internal server error",
            details=None,
        )
        return JSONResponse(status_code=500, content=payload.model_dump(mode="json"))
