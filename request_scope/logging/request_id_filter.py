"""
request_scope.logging.request_id_filter

Purpose:
    Logging filter that injects the current request id into log records.

Created:
    2026-10-19
"""

from __future__ import annotations

import logging

from request_scope.context.storage import current


class RequestIdFilter(logging.Filter):
    def filter(self, record: logging.LogRecord) -> bool:
        context = current()
        record.request_id = context.request_id if context is not None else "-"
        return True
