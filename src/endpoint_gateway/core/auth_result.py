"""
endpoint_gateway.core.auth_result

Tagged result of an authentication callback.

Responsibilities:
- Model the two outcomes explicitly: `Allowed(identity)` and `Denied(reason)`.
- Adapt callbacks that still return falsy / str / identity values.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass
from typing import Any, TypeAlias


@dataclass(frozen=True, slots=True)
class Allowed:
    identity: Any


@dataclass(frozen=True, slots=True)
class Denied:
    # None means the token was simply invalid; a string is shown to the caller.
    reason: str | None = None


AuthResult: TypeAlias = Allowed | Denied

Authenticator = Callable[[str | None], Any]


def coerce_auth_result(value: Any) -> AuthResult:
    if isinstance(value, (Allowed, Denied)):
        return value
    if not value:
        return Denied()
    if isinstance(value, str):
        return Denied(reason=value)
    return Allowed(identity=value)


def identity_role(identity: Any) -> Any:
    if isinstance(identity, Mapping):
        return identity.get("role")
    return getattr(identity, "role", None)
