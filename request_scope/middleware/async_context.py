"""
request_scope.middleware.async_context

Purpose:
    Entry-point binding: builds a RequestContext per inbound request and runs the
    rest of the handling chain with it bound as current.

Notes:
    - Request id comes from the request-id header, then the correlation-id header,
      and is adopted verbatim; otherwise one is generated.
    - Exceptions from downstream propagate unchanged; this layer only scopes.
    - Headers/cookies set on the ambient response (current_response()) are merged
      into the real response on the way out.

Created:
    2026-10-19
"""

from __future__ import annotations

import random
import string
import time
from typing import Any, Awaitable, Callable, Mapping

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response

from request_scope.context.request_context import RequestContext
from request_scope.context.storage import run
from request_scope.contracts.request_id_policy import RequestIdPolicy
from request_scope.settings import Settings, get_settings

CallNext = Callable[[Request], Awaitable[Response]]

_SUFFIX_ALPHABET = string.digits + string.ascii_lowercase

# Set by Response() itself; never copied onto the real response.
_AMBIENT_SKIP_HEADERS = {b"content-length", b"content-type"}


def generate_request_id(policy: RequestIdPolicy | None = None) -> str:
    """
    req_<epoch-ms>_<random [0-9a-z] suffix>.

    Unique enough for log grepping; not a UUID and not meant to be unguessable.
    """
    policy = policy or RequestIdPolicy()
    millis = int(time.time() * 1000)
    suffix = "".join(random.choices(_SUFFIX_ALPHABET, k=policy.suffix_length))
    return f"{policy.generated_prefix}_{millis}_{suffix}"


def resolve_request_id(request: Request, policy: RequestIdPolicy) -> str:
    incoming = (
        request.headers.get(policy.request_id_header)
        or request.headers.get(policy.correlation_id_header)
    )
    return incoming if incoming else generate_request_id(policy)


def _merge_ambient(ambient: Response, response: Response) -> None:
    """Ambient headers win over the endpoint's; set-cookie accumulates."""
    replaced: set[bytes] = set()
    for key, value in ambient.raw_headers:
        if key in _AMBIENT_SKIP_HEADERS:
            continue
        name = key.decode("latin-1")
        if key != b"set-cookie" and key not in replaced:
            if name in response.headers:
                del response.headers[name]
            replaced.add(key)
        response.headers.append(name, value.decode("latin-1"))


def async_context(
    config: Mapping[str, Any] | None = None,
    policy: RequestIdPolicy | None = None,
    settings: Settings | None = None,
) -> Callable[[Request, CallNext], Awaitable[Response]]:
    """
    Build a per-request hook for `app.middleware("http")`.

        app.middleware("http")(async_context({"feature_x": True}))
    """
    app_config: Mapping[str, Any] = {} if config is None else config
    policy = policy or RequestIdPolicy()
    trust_forwarded_for = (settings or get_settings()).trust_forwarded_for

    async def handler(request: Request, call_next: CallNext) -> Response:
        request_id = resolve_request_id(request, policy)

        # Exception handlers run outside the bound chain; they read it from here.
        request.state.request_id = request_id

        ambient = Response()
        context = RequestContext(
            request.app,
            request,
            ambient,
            app_config,
            request_id,
            trust_forwarded_for=trust_forwarded_for,
        )

        response: Response = await run(context, call_next, request)

        _merge_ambient(ambient, response)
        response.headers[policy.response_header] = request_id
        return response

    return handler


class AsyncContextMiddleware(BaseHTTPMiddleware):
    def __init__(
        self,
        app,
        config: Mapping[str, Any] | None = None,
        policy: RequestIdPolicy | None = None,
        settings: Settings | None = None,
    ) -> None:
        super().__init__(app)
        self._handler = async_context(config, policy, settings)

    async def dispatch(self, request: Request, call_next: CallNext) -> Response:
        return await self._handler(request, call_next)
