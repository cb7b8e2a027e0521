"""
tests.test_smoke

Minimal smoke tests to validate the service can boot and serve its probes.
"""

from __future__ import annotations

import httpx
import pytest

from endpoint_gateway.api.app import create_app
from endpoint_gateway.demo import ENDPOINTS


@pytest.mark.asyncio
async def test_health_endpoints(settings) -> None:
    app = create_app(settings=settings)

    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(transport=transport, base_url="http://test") as client:
        r = await client.get("/healthz")
        assert r.status_code == 200
        assert r.json()["status"] == "ok"

        r = await client.get("/readyz")
        assert r.status_code == 200
        assert r.json() == {"status": "ready", "endpoints": len(ENDPOINTS)}


# --- Module Notes -----------------------------------------------------------
# The registry comes from `Settings.endpoints`, i.e. the demo registry by default.
