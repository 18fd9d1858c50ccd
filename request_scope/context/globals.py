"""
request_scope.context.globals

Purpose:
    Global accessors for request-scoped state. Each one reads the current
    RequestContext and raises ContextAbsentError outside a bound request chain.
    None of them ever falls back to a default.

Created:
    2026-10-19
"""

from __future__ import annotations

from typing import Any, Mapping

from starlette.requests import Request
from starlette.responses import Response

from request_scope.context.request_context import RequestContext
from request_scope.context.storage import current
from request_scope.errors import ContextAbsentError
from request_scope.logging.request_logger import RequestLogger


def _require(accessor: str) -> RequestContext:
    context = current()
    if context is None:
        raise ContextAbsentError(accessor)
    return context


def current_context() -> RequestContext:
    return _require("current_context")


def current_app() -> Any:
    return _require("current_app").app


def current_request() -> Request:
    return _require("current_request").req


def current_response() -> Response:
    """Ambient response; headers and cookies set here are merged into the real response."""
    return _require("current_response").res


def current_config() -> Mapping[str, Any]:
    return _require("current_config").config


def current_logger() -> RequestLogger:
    return _require("current_logger").logger
