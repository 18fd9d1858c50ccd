"""
tests.conftest

Shared fixtures for building Starlette requests and RequestContexts without a server.
"""

from __future__ import annotations

import pytest
from starlette.requests import Request
from starlette.responses import Response

from request_scope.context.request_context import RequestContext


@pytest.fixture()
def make_request():
    def _make(
        method: str = "GET",
        path: str = "/",
        query: bytes = b"",
        headers: dict[str, str] | None = None,
        client: tuple[str, int] | None = ("10.0.0.1", 50000),
    ) -> Request:
        scope = {
            "type": "http",
            "method": method,
            "scheme": "http",
            "server": ("testserver", 80),
            "path": path,
            "root_path": "",
            "query_string": query,
            "headers": [
                (k.lower().encode("latin-1"), v.encode("latin-1")) for k, v in (headers or {}).items()
            ],
            "client": client,
        }
        return Request(scope)

    return _make


@pytest.fixture()
def make_context(make_request):
    def _make(request_id: str = "req-test", config: dict | None = None, request: Request | None = None) -> RequestContext:
        return RequestContext(
            app=object(),
            req=request or make_request(),
            res=Response(),
            config={} if config is None else config,
            request_id=request_id,
        )

    return _make
