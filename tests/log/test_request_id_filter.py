"""
tests.log.test_request_id_filter

Purpose:
    RequestIdFilter stamps records with the bound request id, or "-" outside one.
"""

from __future__ import annotations

import logging

from request_scope.context.storage import run
from request_scope.logging.request_id_filter import RequestIdFilter


def _record() -> logging.LogRecord:
    return logging.LogRecord("t", logging.INFO, __file__, 1, "msg", None, None)


def test_filter_outside_context_uses_dash() -> None:
    record = _record()

    assert RequestIdFilter().filter(record) is True
    assert record.request_id == "-"


def test_filter_inside_context_uses_request_id(make_context) -> None:
    record = _record()

    run(make_context("req-77"), RequestIdFilter().filter, record)

    assert record.request_id == "req-77"
