"""
endpoint_gateway.core

Transport-independent dispatch core.

Responsibilities:
- Response envelope model and canned responses.
- Endpoint registry entries and the tagged authentication result.
- The dispatcher decision sequence.
"""

from endpoint_gateway.core.auth_result import Allowed, AuthResult, Denied, coerce_auth_result
from endpoint_gateway.core.dispatcher import (
    Dispatcher,
    DispatcherConfigError,
    Request,
    create_dispatcher,
)
from endpoint_gateway.core.endpoints import Endpoint, create_endpoint, load_endpoints
from endpoint_gateway.core.envelope import EnvelopeError, ResponseEnvelope, create_response

__all__ = [
    "Allowed",
    "AuthResult",
    "Denied",
    "Dispatcher",
    "DispatcherConfigError",
    "Endpoint",
    "EnvelopeError",
    "Request",
    "ResponseEnvelope",
    "coerce_auth_result",
    "create_dispatcher",
    "create_endpoint",
    "create_response",
    "load_endpoints",
]


# --- Module Notes -----------------------------------------------------------
# Nothing in this package imports FastAPI; the HTTP surface lives in `endpoint_gateway.api`.
