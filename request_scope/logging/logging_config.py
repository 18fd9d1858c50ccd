"""
request_scope.logging.logging_config

Purpose:
    Central logging configuration for the host.
    Ensures request_id is present in logs (including uvicorn.access and uvicorn.error).

Created:
    2026-10-19
"""

from __future__ import annotations

import logging

from request_scope.logging.request_id_filter import RequestIdFilter

LOG_FORMAT = "%(asctime)s | %(levelname)s | request_id=%(request_id)s | %(name)s | %(message)s"


def _make_handler(level: int) -> logging.Handler:
    handler = logging.StreamHandler()
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(fmt=LOG_FORMAT))
    handler.addFilter(RequestIdFilter())
    return handler


def _configure_logger(logger_name: str, handler: logging.Handler, level: int, *, clear_handlers: bool) -> None:
    logger = logging.getLogger(logger_name)
    logger.setLevel(level)

    if clear_handlers:
        logger.handlers.clear()

    logger.addHandler(handler)
    logger.propagate = False


def configure_logging(level: str = "INFO") -> None:
    numeric_level = logging.getLevelName(level.upper())
    if not isinstance(numeric_level, int):
        numeric_level = logging.INFO

    handler = _make_handler(numeric_level)

    # Root/app logs (don't clear root handlers to avoid surprising other libs)
    root = logging.getLogger()
    root.setLevel(numeric_level)
    if not any(isinstance(f, RequestIdFilter) for h in root.handlers for f in h.filters):
        root.addHandler(handler)

    # Uvicorn uses these loggers; clear their handlers so our formatter/filter wins.
    _configure_logger("uvicorn", handler, numeric_level, clear_handlers=True)
    _configure_logger("uvicorn.error", handler, numeric_level, clear_handlers=True)
    _configure_logger("uvicorn.access", handler, numeric_level, clear_handlers=True)
