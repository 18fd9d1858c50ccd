"""
request_scope.contracts.request_id_policy

Purpose:
    Central policy for request/correlation IDs (header names, response echo and
    the shape of generated ids).

Created:
    2026-10-19
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class RequestIdPolicy:
    request_id_header: str = "X-Request-Id"
    correlation_id_header: str = "X-Correlation-Id"
    response_header: str = "X-Request-Id"

    # Generated ids look like: req_<epoch-ms>_<suffix>
    generated_prefix: str = "req"
    suffix_length: int = 9
