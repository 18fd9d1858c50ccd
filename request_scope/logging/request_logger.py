"""
request_scope.logging.request_logger

Purpose:
    Request-bound logger factory. Every entry is enriched with the request id and
    the originating request's method, url and client address.

Notes:
    - Emission is synchronous through stdlib logging; the sink is whatever handlers
      the host configured (see request_scope.logging.logging_config).
    - Caller-supplied meta keys override the standard keys on collision.
    - The structured record rides on the LogRecord as `record.context`.
"""

from __future__ import annotations

import json
import logging
from datetime import datetime, timezone
from typing import Any, Mapping

from starlette.requests import Request

REQUEST_LOGGER_NAME = "request_scope.request"

_sink = logging.getLogger(REQUEST_LOGGER_NAME)


def _request_url(req: Request) -> str:
    url = req.url
    return f"{url.path}?{url.query}" if url.query else url.path


def _client_ip(req: Request, *, trust_forwarded_for: bool) -> str:
    if trust_forwarded_for:
        forwarded = req.headers.get("x-forwarded-for")
        if forwarded:
            return forwarded.split(",")[0].strip()

    # Transport-level peer address.
    if req.client is not None and req.client.host:
        return req.client.host
    return "unknown"


class RequestLogger:
    """
    Leveled logger bound to one request.

    Stateless beyond the captured request id and request-derived fields.
    """

    def __init__(
        self,
        request_id: str,
        req: Request,
        *,
        trust_forwarded_for: bool = False,
        logger: logging.Logger | None = None,
    ) -> None:
        self._request_id = request_id
        self._req = req
        self._logger = logger or _sink
        self._trust_forwarded_for = trust_forwarded_for

    @property
    def request_id(self) -> str:
        return self._request_id

    def _emit(self, level: int, label: str, message: str, meta: Mapping[str, Any] | None) -> dict[str, Any]:
        timestamp = datetime.now(timezone.utc).isoformat()
        record: dict[str, Any] = {
            "timestamp": timestamp,
            "requestId": self._request_id,
            "method": self._req.method,
            "url": _request_url(self._req),
            "ip": _client_ip(self._req, trust_forwarded_for=self._trust_forwarded_for),
        }
        if meta:
            record.update(meta)

        line = f"[{timestamp}] [{label}] [{self._request_id}] {message}"
        self._logger.log(
            level,
            "%s\n%s",
            line,
            json.dumps(record, indent=2, default=str),
            extra={"context": record},
        )
        return record

    def debug(self, message: str, meta: Mapping[str, Any] | None = None) -> None:
        self._emit(logging.DEBUG, "DEBUG", message, meta)

    def info(self, message: str, meta: Mapping[str, Any] | None = None) -> None:
        self._emit(logging.INFO, "INFO", message, meta)

    def warn(self, message: str, meta: Mapping[str, Any] | None = None) -> None:
        self._emit(logging.WARNING, "WARN", message, meta)

    # stdlib spelling
    warning = warn

    def error(self, message: str, meta: Mapping[str, Any] | None = None) -> None:
        self._emit(logging.ERROR, "ERROR", message, meta)


def create_logger(request_id: str, req: Request, *, trust_forwarded_for: bool = False) -> RequestLogger:
    return RequestLogger(request_id, req, trust_forwarded_for=trust_forwarded_for)
