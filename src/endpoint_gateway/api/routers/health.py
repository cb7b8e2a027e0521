"""
endpoint_gateway.api.routers.health

Health and readiness endpoints.

Responsibilities:
- Provide liveness probe (`/healthz`).
- Provide readiness probe (`/readyz`) reporting the loaded endpoint registry.
"""

from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Depends

from endpoint_gateway.api.deps import dispatcher_from_app
from endpoint_gateway.core.dispatcher import Dispatcher

router = APIRouter()


@router.get("/healthz")
async def healthz() -> dict[str, str]:
    return {"status": "ok"}


@router.get("/readyz")
async def readyz(dispatcher: Dispatcher = Depends(dispatcher_from_app)) -> dict[str, Any]:
    # Ready once the registry has been resolved and the dispatcher built.
    return {"status": "ready", "endpoints": len(dispatcher.endpoints)}
