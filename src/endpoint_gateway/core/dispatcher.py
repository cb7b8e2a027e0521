"""
endpoint_gateway.core.dispatcher

Request dispatcher: the decision sequence between an inbound request and a handler.

Responsibilities:
- Reject malformed, unknown and wrong-method requests with canned envelopes.
- Authenticate and authorize requests to protected endpoints.
- Inject the authenticated identity into the handler payload as `loggedUser`.
- Convert any unexpected failure into a 500 envelope.
"""

from __future__ import annotations

import traceback
from collections.abc import Mapping, MutableMapping
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any

from endpoint_gateway.core.auth_result import (
    Allowed,
    Authenticator,
    Denied,
    coerce_auth_result,
    identity_role,
)
from endpoint_gateway.core.endpoints import Endpoint
from endpoint_gateway.core.envelope import ResponseEnvelope, create_response
from endpoint_gateway.core.responses import BAD_REQUEST, METHOD_NOT_ALLOWED, NOT_FOUND
from endpoint_gateway.observability.logging import get_logger

log = get_logger(__name__)


class DispatcherConfigError(ValueError):
    pass


@dataclass(slots=True)
class Request:
    """
    Internal request shape built by the adapters, one per call.
    """

    method: str | None
    endpoint: str | None
    token: str | None = None
    data: Any = None


class Dispatcher:
    """
    Routes a `Request` to the registered handler.

    The registry and the authenticator are read-only after construction, so a
    single instance can serve concurrent calls.
    """

    def __init__(
        self,
        endpoints: Mapping[str, Endpoint] | None,
        authenticate: Authenticator | None = None,
    ) -> None:
        if endpoints is None:
            raise DispatcherConfigError("Endpoints are required")
        self._endpoints: Mapping[str, Endpoint] = MappingProxyType(dict(endpoints))
        self._authenticate = authenticate

    @property
    def endpoints(self) -> Mapping[str, Endpoint]:
        return self._endpoints

    def handle_request(self, request: Request) -> Any:
        try:
            return self._dispatch(request)
        except Exception as e:
            log.exception("dispatch_failed", endpoint=request.endpoint, method=request.method)
            return _internal_error(e)

    def _dispatch(self, request: Request) -> Any:
        if not request.method or not request.endpoint:
            return BAD_REQUEST

        entry = self._endpoints.get(request.endpoint)
        if entry is None:
            log.debug("endpoint_not_found", endpoint=request.endpoint)
            return NOT_FOUND

        if entry.method != request.method:
            log.debug("method_not_allowed", endpoint=request.endpoint, method=request.method)
            return METHOD_NOT_ALLOWED

        if entry.handler is None:
            return NOT_FOUND

        if entry.auth_required:
            rejection = self._authorize(entry, request)
            if rejection is not None:
                return rejection

        return entry.handler(request.data)

    def _authorize(self, entry: Endpoint, request: Request) -> ResponseEnvelope | None:
        if self._authenticate is None:
            raise DispatcherConfigError(
                f"Endpoint {request.endpoint!r} requires auth but no authenticator is configured"
            )

        result = coerce_auth_result(self._authenticate(request.token))
        match result:
            case Denied(reason=None) | Denied(reason=""):
                log.debug("auth_denied", endpoint=request.endpoint)
                return create_response(401, "Unauthorized", "Invalid token")
            case Denied(reason=reason):
                log.debug("auth_denied", endpoint=request.endpoint, reason=reason)
                return create_response(401, "Unauthorized", reason, "none")
            case Allowed(identity=identity):
                role = identity_role(identity)
                if entry.roles is not None and role not in entry.roles:
                    log.debug("role_not_allowed", endpoint=request.endpoint, role=role)
                    return create_response(
                        403,
                        "Forbidden",
                        "Role not allowed",
                        {"allowedRoles": list(entry.roles), "role": role},
                    )

                if not request.data:
                    request.data = {"loggedUser": identity}
                elif isinstance(request.data, MutableMapping):
                    request.data["loggedUser"] = identity
                else:
                    # Lists and scalars reach the handler unchanged, without the identity.
                    log.debug("identity_not_injected", endpoint=request.endpoint)
                return None


def _internal_error(error: Exception) -> ResponseEnvelope:
    frames = traceback.extract_tb(error.__traceback__)
    origin = frames[-1] if frames else None
    description = (
        f"Name: {type(error).__name__}. Message: {error}. "
        f"File: {origin.filename if origin else None}. "
        f"Line: {origin.lineno if origin else None}."
    )
    return create_response(500, "Internal Server Error", description)


def create_dispatcher(
    endpoints: Mapping[str, Endpoint] | None,
    authenticate: Authenticator | None = None,
) -> Dispatcher:
    return Dispatcher(endpoints, authenticate)


# --- Module Notes -----------------------------------------------------------
# Handler results are returned as-is: handlers are trusted to build envelopes
# themselves (usually via `create_response` or the canned catalog).
