"""
request_scope.errors

Purpose:
    Exception raised when ambient request state is read outside a bound request chain.

Created:
    2026-10-19
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(eq=False)
class ContextAbsentError(RuntimeError):
    """
    Raised by the global accessors when no RequestContext is bound.

    This is a usage error: ambient-context code ran outside the scoping middleware
    (for example at import time or during startup). It is never recovered internally.

    `args` holds just the accessor name, so the error pickles and re-raises intact;
    `str()` renders the full message.
    """

    accessor: str

    @property
    def message(self) -> str:
        return f"{self.accessor}() can only be called within a request context"

    def __str__(self) -> str:
        return self.message
