"""
endpoint_gateway.demo

Demo endpoint registry served by default (`GATEWAY_ENDPOINTS`).

Responsibilities:
- Show the handler contract: payload mapping in, response envelope out.
- Cover public, authenticated, role-restricted and unimplemented endpoints.
"""

from __future__ import annotations

from typing import Any

from endpoint_gateway.core.endpoints import Endpoint, create_endpoint
from endpoint_gateway.core.envelope import ResponseEnvelope, create_response
from endpoint_gateway.core.responses import SUCCESS


def ping(_: Any) -> ResponseEnvelope:
    return SUCCESS


def echo(data: Any) -> ResponseEnvelope:
    if data is None:
        return create_response(200, "Success", "Nothing to echo")
    return create_response(200, "Success", "Echo", {"echo": data})


def whoami(data: dict[str, Any]) -> ResponseEnvelope:
    user = data["loggedUser"]
    return create_response(
        200,
        "Success",
        "Authenticated",
        {"subject": user.subject, "role": user.role},
    )


def stats(data: dict[str, Any]) -> ResponseEnvelope:
    return create_response(
        200,
        "Success",
        "Endpoint statistics",
        {"endpoints": sorted(ENDPOINTS), "requestedBy": data["loggedUser"].subject},
    )


ENDPOINTS: dict[str, Endpoint] = {
    "ping": create_endpoint(ping, "GET"),
    "echo": create_endpoint(echo, "POST"),
    "whoami": create_endpoint(whoami, "GET", auth_required=True),
    "stats": create_endpoint(stats, "GET", auth_required=True, roles=["admin"]),
    "todo": create_endpoint(None, "GET"),
}
