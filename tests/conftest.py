"""
tests.conftest

Shared fixtures: settings, JWT config and a small endpoint registry.
"""

from __future__ import annotations

from typing import Any

import pytest

from endpoint_gateway.auth.jwt import JwtConfig, issue_token
from endpoint_gateway.core.endpoints import Endpoint, create_endpoint
from endpoint_gateway.core.envelope import create_response
from endpoint_gateway.settings import Settings

TEST_SECRET = "test-secret-0123456789-abcdefghijklmnop"


@pytest.fixture
def settings() -> Settings:
    return Settings(env="test", jwt_secret=TEST_SECRET, log_level="DEBUG")


@pytest.fixture
def jwt_cfg(settings: Settings) -> JwtConfig:
    return JwtConfig.from_settings(settings)


@pytest.fixture
def make_token(jwt_cfg: JwtConfig):
    def _make(subject: str = "alice", role: str = "user") -> str:
        return issue_token(cfg=jwt_cfg, subject=subject, role=role)

    return _make


class RecordingHandler:
    """Records the payloads it was called with and answers with a 200 envelope."""

    def __init__(self) -> None:
        self.calls: list[Any] = []

    def __call__(self, data: Any):
        self.calls.append(data)
        return create_response(200, "Success", "handled")


@pytest.fixture
def handler() -> RecordingHandler:
    return RecordingHandler()


@pytest.fixture
def registry(handler: RecordingHandler) -> dict[str, Endpoint]:
    return {
        "public": create_endpoint(handler, "GET"),
        "submit": create_endpoint(handler, "POST"),
        "private": create_endpoint(handler, "GET", auth_required=True),
        "admin": create_endpoint(handler, "GET", auth_required=True, roles=["admin"]),
        "unimplemented": create_endpoint(None, "GET"),
    }
