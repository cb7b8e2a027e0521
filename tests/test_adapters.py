"""
tests.test_adapters

Query/body adapters and payload rendering, without the HTTP layer.
"""

from __future__ import annotations

import json

from endpoint_gateway.api.adapters import (
    handle_get,
    handle_post,
    render_payload,
    request_from_body,
    request_from_query,
    status_of,
)
from endpoint_gateway.auth.models import Principal
from endpoint_gateway.core.dispatcher import create_dispatcher
from endpoint_gateway.core.endpoints import create_endpoint
from endpoint_gateway.core.envelope import create_response
from endpoint_gateway.core.responses import NO_CONTENT


def test_request_from_query() -> None:
    request = request_from_query({"endpoint": "public", "token": "t", "data": '{"a": [1, 2]}'})

    assert request.method == "GET"
    assert request.endpoint == "public"
    assert request.token == "t"
    assert request.data == {"a": [1, 2]}


def test_request_from_query_without_data() -> None:
    request = request_from_query({"endpoint": "public"})

    assert request.data is None
    assert request.token is None


def test_request_from_body() -> None:
    raw = json.dumps({"endpoint": "submit", "token": "t", "data": {"x": 1}, "other": True})
    request = request_from_body(raw)

    assert request.method == "POST"
    assert request.endpoint == "submit"
    assert request.token == "t"
    assert request.data == {"x": 1}


def test_handle_get_dispatches(registry, handler) -> None:
    result = handle_get({"endpoint": "public", "data": '{"q": "x"}'}, create_dispatcher(registry))

    assert result.status_code == 200
    assert handler.calls == [{"q": "x"}]


def test_handle_get_malformed_data_is_internal_error(registry, handler) -> None:
    result = handle_get({"endpoint": "public", "data": "{oops"}, create_dispatcher(registry))

    assert result.status_code == 500
    assert result.reason == "Internal Server Error"
    assert "Invalid JSON" in result.description
    assert handler.calls == []


def test_handle_post_dispatches(registry, handler) -> None:
    raw = json.dumps({"endpoint": "submit", "data": {"x": 1}}).encode()
    result = handle_post(raw, create_dispatcher(registry))

    assert result.status_code == 200
    assert handler.calls == [{"x": 1}]


def test_handle_post_wrong_method(registry) -> None:
    raw = json.dumps({"endpoint": "public"})
    assert handle_post(raw, create_dispatcher(registry)).status_code == 405


def test_handle_post_invalid_body_is_internal_error(registry) -> None:
    for raw in (b"not json", b"[1, 2]"):
        result = handle_post(raw, create_dispatcher(registry))
        assert result.status_code == 500
        assert result.description


def test_handle_post_without_endpoint_is_bad_request(registry) -> None:
    assert handle_post(b"{}", create_dispatcher(registry)).status_code == 400


def test_render_payload() -> None:
    env = create_response(200, "Success", "ok", {"user": Principal(subject="a", role="user")})

    assert render_payload(env) == {
        "statusCode": 200,
        "reason": "Success",
        "description": "ok",
        "user": {"subject": "a", "role": "user"},
    }
    assert render_payload({"statusCode": 201, "reason": "Created"}) == {
        "statusCode": 201,
        "reason": "Created",
    }


def test_status_of() -> None:
    assert status_of(NO_CONTENT) == 204
    assert status_of({"statusCode": 418}) == 418
    assert status_of("anything") == 200


def test_handle_get_scalar_data_on_protected_endpoint(registry, handler) -> None:
    dispatcher = create_dispatcher(registry, lambda token: {"role": "user"})

    result = handle_get({"endpoint": "private", "token": "t", "data": '"abc"'}, dispatcher)

    assert result.status_code == 200
    assert handler.calls == ["abc"]


def test_request_from_body_accepts_numeric_token_and_endpoint() -> None:
    request = request_from_body(json.dumps({"endpoint": 7, "token": 12345}))

    assert request.endpoint == "7"
    assert request.token == "12345"


def test_handle_post_numeric_token_is_authenticated(registry) -> None:
    seen = []

    def authenticate(token):
        seen.append(token)
        return None

    raw = json.dumps({"endpoint": "private", "token": 12345})
    assert handle_post(raw, create_dispatcher(registry, authenticate)).status_code == 405

    registry["private_post"] = create_endpoint(
        registry["private"].handler, "POST", auth_required=True
    )
    raw = json.dumps({"endpoint": "private_post", "token": 12345})
    result = handle_post(raw, create_dispatcher(registry, authenticate))

    assert result.status_code == 401
    assert seen == ["12345"]
