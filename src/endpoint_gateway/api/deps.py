"""
endpoint_gateway.api.deps

FastAPI dependency wiring for the API layer.

Responsibilities:
- Provide dependency functions for settings and the shared dispatcher.
- Encapsulate app.state access patterns.
"""

from __future__ import annotations

from fastapi import Request

from endpoint_gateway.core.dispatcher import Dispatcher
from endpoint_gateway.settings import Settings


def settings_from_app(request: Request) -> Settings:
    return request.app.state.settings  # type: ignore[attr-defined]


def dispatcher_from_app(request: Request) -> Dispatcher:
    # Built once in `endpoint_gateway.api.app.create_app`.
    return request.app.state.dispatcher  # type: ignore[attr-defined]
