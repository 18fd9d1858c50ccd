"""
request_scope.contracts.api_paths

Purpose:
    Central definition of the demo host's route paths and versioning.

Created:
    2026-10-19
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ApiPaths:
    v1_prefix: str = "/v1"
    health: str = "/health"
    context: str = "/context"
    context_metadata: str = "/context/metadata"
