"""
tests.api.test_health

Purpose:
    Health endpoints run inside the bound request context and report its id.
"""

from __future__ import annotations


def test_health_root_reports_bound_request_id(client) -> None:
    r = client.get("/health", headers={"X-Request-Id": "hc-1"})
    assert r.status_code == 200
    assert r.json() == {"ok": True, "request_id": "hc-1"}
    assert r.headers["x-request-id"] == "hc-1"


def test_health_v1_reports_generated_id_and_elapsed(client) -> None:
    r = client.get("/v1/health")
    assert r.status_code == 200

    body = r.json()
    assert body["status"] == "ok"
    assert body["request_id"] == r.headers["x-request-id"]
    assert body["request_id"].startswith("req_")
    assert body["elapsed_ms"] >= 0
