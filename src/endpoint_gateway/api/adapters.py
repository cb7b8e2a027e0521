"""
endpoint_gateway.api.adapters

Inbound adapters between HTTP-shaped input and the dispatcher `Request`.

Responsibilities:
- Query-style adapter (GET): endpoint/token/data taken from query parameters.
- Body-style adapter (POST): endpoint/token/data taken from a JSON object body.
- Convert parse failures into 500 envelopes carrying the raw error message.
- Serialize envelope-shaped results into JSON-compatible payloads.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from fastapi.encoders import jsonable_encoder
from pydantic import BaseModel, ConfigDict, TypeAdapter, field_validator

from endpoint_gateway.core.dispatcher import Dispatcher, Request
from endpoint_gateway.core.envelope import ResponseEnvelope, create_response
from endpoint_gateway.observability.logging import get_logger

log = get_logger(__name__)

_json_value: TypeAdapter[Any] = TypeAdapter(Any)


class GatewayBody(BaseModel):
    # Unknown top-level keys are ignored, like the query adapter ignores unknown params.
    model_config = ConfigDict(extra="ignore")

    endpoint: str | None = None
    token: str | None = None
    data: Any = None

    @field_validator("endpoint", "token", mode="before")
    @classmethod
    def numbers_as_text(cls, value: Any) -> Any:
        # `{"token": 12345}` is looked up / authenticated as "12345".
        if isinstance(value, (int, float)) and not isinstance(value, bool):
            return str(value)
        return value


def request_from_query(params: Mapping[str, str]) -> Request:
    raw_data = params.get("data")
    return Request(
        method="GET",
        endpoint=params.get("endpoint"),
        token=params.get("token"),
        data=_json_value.validate_json(raw_data) if raw_data else None,
    )


def request_from_body(raw: str | bytes) -> Request:
    body = GatewayBody.model_validate_json(raw)
    return Request(method="POST", endpoint=body.endpoint, token=body.token, data=body.data)


def handle_get(params: Mapping[str, str], dispatcher: Dispatcher) -> Any:
    try:
        request = request_from_query(params)
    except Exception as e:
        log.warning("query_parse_failed", error=str(e))
        return create_response(500, "Internal Server Error", str(e))
    return dispatcher.handle_request(request)


def handle_post(raw: str | bytes, dispatcher: Dispatcher) -> Any:
    try:
        request = request_from_body(raw)
    except Exception as e:
        log.warning("body_parse_failed", error=str(e))
        return create_response(500, "Internal Server Error", str(e))
    return dispatcher.handle_request(request)


def render_payload(result: Any) -> Any:
    if isinstance(result, ResponseEnvelope):
        return jsonable_encoder(result.to_dict())
    return jsonable_encoder(result)


def status_of(result: Any) -> int:
    if isinstance(result, ResponseEnvelope):
        return result.status_code
    if isinstance(result, Mapping) and isinstance(result.get("statusCode"), int):
        return result["statusCode"]
    return 200


# --- Module Notes -----------------------------------------------------------
# Extra fields may hold dataclasses such as `Principal`; `jsonable_encoder` turns
# them into plain dicts.
