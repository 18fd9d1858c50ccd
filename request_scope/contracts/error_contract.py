"""
request_scope.contracts.error_contract

Purpose:
    Stable error contract for the host API (codes + response model).
    Used by global exception handlers to ensure consistent client responses.

Created:
    2026-10-19
"""

from __future__ import annotations

from enum import Enum
from typing import Any

from pydantic import BaseModel, Field


class ErrorCode(str, Enum):
    INTERNAL_ERROR = "INTERNAL_ERROR"
    CONTEXT_ABSENT = "CONTEXT_ABSENT"


class ErrorResponse(BaseModel):
    request_id: str = Field(..., description="Request correlation id for debugging")
    error_code: ErrorCode = Field(..., description="Machine-readable error code")
    message: str = Field(..., description="Human-readable error message")
    details: dict[str, Any] | None = Field(default=None, description="Optional structured details")
