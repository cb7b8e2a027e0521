"""
endpoint_gateway.auth.authenticator

Default authentication callback for the dispatcher.

Responsibilities:
- Turn an opaque bearer token into `Allowed(Principal)` or `Denied(reason)`.
"""

from __future__ import annotations

from endpoint_gateway.auth.jwt import JwtConfig, JwtValidationError, decode_and_validate
from endpoint_gateway.auth.models import Principal
from endpoint_gateway.core.auth_result import Allowed, AuthResult, Denied


class JwtAuthenticator:
    def __init__(self, cfg: JwtConfig) -> None:
        self._cfg = cfg

    def __call__(self, token: str | None) -> AuthResult:
        if not token:
            return Denied()

        try:
            payload = decode_and_validate(cfg=self._cfg, token=token)
        except JwtValidationError as e:
            return Denied(f"Invalid token: {e}")

        subject = str(payload.get("sub", ""))
        role = payload.get("role")
        if not subject:
            return Denied("Invalid token subject")
        if not isinstance(role, str) or not role:
            return Denied("Invalid token role")

        return Allowed(Principal(subject=subject, role=role))


# --- Module Notes -----------------------------------------------------------
# Any callable `token -> Allowed | Denied` (or a legacy falsy/str/identity value)
# can replace this class; see `core.auth_result.coerce_auth_result`.
