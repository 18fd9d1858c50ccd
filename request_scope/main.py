"""
request_scope.main

Purpose:
    Demo FastAPI host that composes the request-context layer.

Created:
    2026-10-19
"""

from __future__ import annotations

from typing import Any, Mapping

from fastapi import FastAPI

from request_scope.contracts.request_id_policy import RequestIdPolicy
from request_scope.error_handlers import register_error_handlers
from request_scope.logging.logging_config import configure_logging
from request_scope.middleware.async_context import AsyncContextMiddleware
from request_scope.routes.health import router as health_router
from request_scope.routes.v1 import v1_router
from request_scope.settings import Settings, get_settings


def create_app(
    config: Mapping[str, Any] | None = None,
    settings: Settings | None = None,
) -> FastAPI:
    settings = settings or get_settings()

    configure_logging(settings.log_level)

    app = FastAPI(title=settings.service_name, version=settings.service_version)

    app.add_middleware(
        AsyncContextMiddleware,
        config=config,
        policy=RequestIdPolicy(),
        settings=settings,
    )

    register_error_handlers(app)

    app.include_router(health_router)
    app.include_router(v1_router)

    return app
