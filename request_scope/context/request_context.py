"""
request_scope.context.request_context

Purpose:
    Per-request state object: identity, ambient host handles, config, the
    request-bound logger, start time and a mutable metadata store.

Created:
    2026-10-19
"""

from __future__ import annotations

import time
from typing import Any, Mapping

from starlette.requests import Request
from starlette.responses import Response

from request_scope.logging.request_logger import RequestLogger, create_logger


class RequestContext:
    """
    State for one inbound request chain.

    app/req/res/config are held by reference and never reassigned; they belong to
    the surrounding request lifecycle. request_id and start_time are fixed at
    construction. The metadata dict is the only thing this object mutates.

    Concurrency:
        The metadata store has no lock. That is safe only because every step of a
        chain runs on one event-loop thread and steps never overlap (cooperative
        scheduling). If a context is ever shared with worker threads
        (run_in_executor, to_thread), metadata access from those threads must be
        synchronized by the caller.
    """

    def __init__(
        self,
        app: Any,
        req: Request,
        res: Response,
        config: Mapping[str, Any],
        request_id: str,
        *,
        trust_forwarded_for: bool = False,
    ) -> None:
        self._app = app
        self._req = req
        self._res = res
        self._config = config
        self._request_id = request_id
        self._logger = create_logger(request_id, req, trust_forwarded_for=trust_forwarded_for)
        self._start_time = time.monotonic()
        self._metadata: dict[str, Any] = {}

    def __repr__(self) -> str:
        return f"RequestContext(request_id={self._request_id!r}, metadata_keys={sorted(self._metadata)!r})"

    @property
    def app(self) -> Any:
        return self._app

    @property
    def req(self) -> Request:
        return self._req

    @property
    def res(self) -> Response:
        return self._res

    @property
    def config(self) -> Mapping[str, Any]:
        return self._config

    @property
    def logger(self) -> RequestLogger:
        return self._logger

    @property
    def request_id(self) -> str:
        return self._request_id

    @property
    def start_time(self) -> float:
        """time.monotonic() reading taken at construction."""
        return self._start_time

    @property
    def elapsed_time(self) -> float:
        """Seconds since construction; recomputed on every access."""
        return time.monotonic() - self._start_time

    # ------------------------------------------------------------------
    # Metadata
    # ------------------------------------------------------------------

    def set_metadata(self, key: str, value: Any) -> None:
        self._metadata[key] = value

    def get_metadata(self, key: str, default: Any = None) -> Any:
        """
        Return the stored value, or `default` when absent.

        No runtime type checks; annotate the result at the call site if needed.
        """
        return self._metadata.get(key, default)

    def has_metadata(self, key: str) -> bool:
        return key in self._metadata

    def delete_metadata(self, key: str) -> bool:
        """Remove `key`; return True if an entry existed."""
        if key not in self._metadata:
            return False
        del self._metadata[key]
        return True

    def get_all_metadata(self) -> dict[str, Any]:
        """Snapshot of the store; mutating it does not touch the live metadata."""
        return dict(self._metadata)

    def clear_metadata(self) -> None:
        self._metadata.clear()
