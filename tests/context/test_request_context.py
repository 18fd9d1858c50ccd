"""
tests.context.test_request_context

Purpose:
    RequestContext fields and the metadata store contract.
"""

from __future__ import annotations

import time

from starlette.responses import Response

from request_scope.context.request_context import RequestContext
from request_scope.logging.request_logger import RequestLogger


def test_construction_holds_references_without_copying(make_request) -> None:
    app = object()
    req = make_request()
    res = Response()
    config = {"feature": True}

    ctx = RequestContext(app, req, res, config, "req-1")

    assert ctx.app is app
    assert ctx.req is req
    assert ctx.res is res
    assert ctx.config is config
    assert ctx.request_id == "req-1"
    assert isinstance(ctx.logger, RequestLogger)
    assert ctx.logger.request_id == "req-1"
    assert ctx.get_all_metadata() == {}


def test_metadata_round_trip(make_context) -> None:
    ctx = make_context()

    ctx.set_metadata("user", {"id": 7})
    assert ctx.get_metadata("user") == {"id": 7}
    assert ctx.has_metadata("user") is True

    ctx.set_metadata("user", "overwritten")
    assert ctx.get_metadata("user") == "overwritten"

    assert ctx.delete_metadata("user") is True
    assert ctx.has_metadata("user") is False
    assert ctx.delete_metadata("missing") is False


def test_get_metadata_absent_returns_default(make_context) -> None:
    ctx = make_context()

    assert ctx.get_metadata("nope") is None
    assert ctx.get_metadata("nope", 0) == 0

    ctx.set_metadata("none_value", None)
    assert ctx.has_metadata("none_value") is True


def test_snapshot_is_independent_of_live_store(make_context) -> None:
    ctx = make_context()
    ctx.set_metadata("a", 1)

    snapshot = ctx.get_all_metadata()
    snapshot["a"] = 999
    snapshot["b"] = 2

    assert ctx.get_metadata("a") == 1
    assert ctx.has_metadata("b") is False


def test_clear_metadata(make_context) -> None:
    ctx = make_context()
    ctx.clear_metadata()

    ctx.set_metadata("a", 1)
    ctx.set_metadata("b", 2)
    ctx.clear_metadata()

    assert ctx.get_all_metadata() == {}


def test_elapsed_time_is_monotonic(make_context) -> None:
    ctx = make_context()

    first = ctx.elapsed_time
    time.sleep(0.01)
    second = ctx.elapsed_time

    assert first >= 0
    assert second >= first
    assert ctx.start_time <= time.monotonic()


def test_contexts_do_not_share_metadata(make_context) -> None:
    a = make_context("A")
    b = make_context("B")

    a.set_metadata("k", "a")

    assert b.has_metadata("k") is False


def test_repr_shows_id_and_keys(make_context) -> None:
    ctx = make_context("req-9")
    ctx.set_metadata("b", 1)
    ctx.set_metadata("a", 2)

    assert repr(ctx) == "RequestContext(request_id='req-9', metadata_keys=['a', 'b'])"
