"""
endpoint_gateway.core.endpoints

Endpoint registry entries.

Responsibilities:
- Describe one routable endpoint (handler, method, auth flag, allowed roles).
- Resolve a registry from a `module:attribute` import string for configuration.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Mapping
from dataclasses import dataclass
from typing import Any

from uvicorn.importer import import_from_string

Handler = Callable[[Any], Any]


@dataclass(frozen=True, slots=True)
class Endpoint:
    # `handler=None` registers a name that is not callable yet.
    handler: Handler | None
    method: str
    auth_required: bool = False
    roles: tuple[str, ...] | None = None


def create_endpoint(
    handler: Handler | None,
    method: str,
    auth_required: bool = False,
    roles: Iterable[str] | None = None,
) -> Endpoint:
    return Endpoint(
        handler=handler,
        method=method,
        auth_required=auth_required,
        roles=tuple(roles) if roles is not None else None,
    )


def load_endpoints(import_str: str) -> Mapping[str, Endpoint]:
    registry = import_from_string(import_str)
    if not isinstance(registry, Mapping):
        raise TypeError(f"{import_str!r} must resolve to a mapping of endpoint name -> Endpoint")
    return registry


# --- Module Notes -----------------------------------------------------------
# The registry itself is a plain mapping owned by the caller (see `endpoint_gateway.demo`).
