"""
endpoint_gateway.api.routers.gateway

HTTP entry points in front of the dispatcher.

Responsibilities:
- GET: query-style adapter (`?endpoint=...&token=...&data=<json>`).
- POST: body-style adapter (`{"endpoint": ..., "token": ..., "data": ...}`).
- Render every outcome as a JSON envelope.
"""

from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse
from starlette.concurrency import run_in_threadpool
from starlette.responses import Response
from starlette.status import HTTP_200_OK, HTTP_204_NO_CONTENT

from endpoint_gateway.api.adapters import handle_get, handle_post, render_payload, status_of
from endpoint_gateway.api.deps import dispatcher_from_app, settings_from_app
from endpoint_gateway.core.dispatcher import Dispatcher
from endpoint_gateway.settings import Settings

router = APIRouter()


def _to_response(result: Any, settings: Settings) -> Response:
    if not settings.propagate_status_code:
        return JSONResponse(content=render_payload(result), status_code=HTTP_200_OK)

    status = status_of(result)
    if status == HTTP_204_NO_CONTENT:
        # 204 responses cannot carry a body.
        return Response(status_code=HTTP_204_NO_CONTENT)
    return JSONResponse(content=render_payload(result), status_code=status)


@router.get("")
async def gateway_get(
    request: Request,
    dispatcher: Dispatcher = Depends(dispatcher_from_app),
    settings: Settings = Depends(settings_from_app),
) -> Response:
    # Handlers are plain sync callables; keep them off the event loop.
    result = await run_in_threadpool(handle_get, dict(request.query_params), dispatcher)
    return _to_response(result, settings)


@router.post("")
async def gateway_post(
    request: Request,
    dispatcher: Dispatcher = Depends(dispatcher_from_app),
    settings: Settings = Depends(settings_from_app),
) -> Response:
    raw = await request.body()
    result = await run_in_threadpool(handle_post, raw, dispatcher)
    return _to_response(result, settings)
