"""
endpoint_gateway.api.app

FastAPI app factory for the endpoint gateway.

Responsibilities:
- Build the FastAPI application and register routers/middleware.
- Resolve the endpoint registry and build the shared dispatcher once.
- Provide a single composition root where cross-cutting concerns live.
"""

from __future__ import annotations

from fastapi import FastAPI

from endpoint_gateway import __version__
from endpoint_gateway.api.routers.dev_auth import router as dev_auth_router
from endpoint_gateway.api.routers.gateway import router as gateway_router
from endpoint_gateway.api.routers.health import router as health_router
from endpoint_gateway.auth.authenticator import JwtAuthenticator
from endpoint_gateway.auth.jwt import JwtConfig
from endpoint_gateway.core.dispatcher import Dispatcher, create_dispatcher
from endpoint_gateway.core.endpoints import load_endpoints
from endpoint_gateway.observability.logging import configure_logging, get_logger
from endpoint_gateway.observability.middleware import RequestContextMiddleware
from endpoint_gateway.settings import Settings

log = get_logger(__name__)


def build_dispatcher(settings: Settings) -> Dispatcher:
    return create_dispatcher(
        load_endpoints(settings.endpoints),
        JwtAuthenticator(JwtConfig.from_settings(settings)),
    )


def create_app(*, settings: Settings, dispatcher: Dispatcher | None = None) -> FastAPI:
    configure_logging(
        service_name=settings.service_name,
        level=settings.log_level,
        debug_endpoints=settings.debug_endpoints,
    )

    app = FastAPI(
        title="Endpoint Gateway",
        version=__version__,
        docs_url="/docs",
        openapi_url="/openapi.json",
    )
    app.state.settings = settings
    app.state.dispatcher = dispatcher if dispatcher is not None else build_dispatcher(settings)

    app.add_middleware(RequestContextMiddleware)
    app.include_router(health_router, tags=["health"])
    app.include_router(dev_auth_router)
    app.include_router(gateway_router, prefix=settings.gateway_path, tags=["gateway"])

    log.info(
        "app_created",
        env=settings.env,
        endpoints=sorted(app.state.dispatcher.endpoints),
    )
    return app


# --- Module Notes -----------------------------------------------------------
# Pass `dispatcher=` to serve a registry built in code instead of the import string.
