"""
request_scope

Request-scoped context propagation for asyncio/ASGI services.
"""

from request_scope.context.globals import (
    current_app,
    current_config,
    current_context,
    current_logger,
    current_request,
    current_response,
)
from request_scope.context.request_context import RequestContext
from request_scope.context.storage import bound, current, run
from request_scope.errors import ContextAbsentError
from request_scope.logging.request_logger import RequestLogger, create_logger
from request_scope.middleware.async_context import (
    AsyncContextMiddleware,
    async_context,
    generate_request_id,
)

__all__ = [
    "AsyncContextMiddleware",
    "ContextAbsentError",
    "RequestContext",
    "RequestLogger",
    "async_context",
    "bound",
    "create_logger",
    "current",
    "current_app",
    "current_config",
    "current_context",
    "current_logger",
    "current_request",
    "current_response",
    "generate_request_id",
    "run",
]
