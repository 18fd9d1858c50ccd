"""
request_scope.settings

Purpose:
    Centralized service settings for the context layer and its demo host.
    The per-request application config mapping is separate and opaque; see
    request_scope.middleware.async_context.

Created:
    2026-10-19
"""

from __future__ import annotations

from pydantic import BaseModel, Field


class Settings(BaseModel):
    service_name: str = Field(default="request-scope")
    service_version: str = Field(default="0.1.0")

    log_level: str = Field(default="INFO")

    # Only honour X-Forwarded-For when a trusted proxy sits in front of the app.
    trust_forwarded_for: bool = Field(default=False)


def get_settings() -> Settings:
    return Settings()
