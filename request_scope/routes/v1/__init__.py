from fastapi import APIRouter

from request_scope.contracts.api_paths import ApiPaths
from request_scope.routes.v1.context import router as context_router
from request_scope.routes.v1.health import router as health_router

v1_router = APIRouter(prefix=ApiPaths().v1_prefix)

v1_router.include_router(health_router)
v1_router.include_router(context_router)
