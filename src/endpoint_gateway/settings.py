"""
endpoint_gateway.settings

Central configuration model (Pydantic Settings).

Responsibilities:
- Provide strongly-typed, env-driven settings (prefix `GATEWAY_`).
- Hide secrets from repr/logging (e.g., JWT secret).
- Offer a cached settings instance for dependency injection.
"""

from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="GATEWAY_", case_sensitive=False)

    # `prod` disables the dev token endpoint.
    env: Literal["dev", "test", "prod"] = "dev"
    service_name: str = "endpoint-gateway"
    log_level: str = "INFO"
    # Endpoint names whose DEBUG dispatch logs are emitted regardless of `log_level`.
    debug_endpoints: list[str] = Field(default_factory=list)

    api_host: str = "0.0.0.0"
    api_port: int = 8080

    # Auth
    jwt_alg: str = "HS256"
    jwt_issuer: str = "endpoint-gateway"
    jwt_audience: str = "endpoint-gateway-api"
    jwt_secret: str = Field(default="dev-secret-change-me-before-any-real-deploy", repr=False)

    # Dispatch
    gateway_path: str = "/exec"
    endpoints: str = "endpoint_gateway.demo:ENDPOINTS"
    # False: always HTTP 200 and the envelope carries the outcome.
    propagate_status_code: bool = False


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()


# --- Module Notes -----------------------------------------------------------
# `endpoints` is a `module:attribute` import string resolved by `core.endpoints.load_endpoints`.
