"""
tests.test_endpoints

Registry entry factory and import-string loading.
"""

from __future__ import annotations

import pytest

from endpoint_gateway.core.endpoints import Endpoint, create_endpoint, load_endpoints
from endpoint_gateway.demo import ENDPOINTS


def test_create_endpoint_defaults() -> None:
    entry = create_endpoint(print, "GET")

    assert entry == Endpoint(handler=print, method="GET", auth_required=False, roles=None)


def test_create_endpoint_normalizes_roles() -> None:
    entry = create_endpoint(None, "POST", auth_required=True, roles=["admin", "ops"])

    assert entry.handler is None
    assert entry.auth_required is True
    assert entry.roles == ("admin", "ops")


def test_load_endpoints_from_import_string() -> None:
    assert load_endpoints("endpoint_gateway.demo:ENDPOINTS") is ENDPOINTS


def test_load_endpoints_rejects_non_mapping() -> None:
    with pytest.raises(TypeError):
        load_endpoints("endpoint_gateway.demo:ping")
