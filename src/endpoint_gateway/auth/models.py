"""
endpoint_gateway.auth.models

Auth domain models.

Responsibilities:
- Define the authenticated identity (`Principal`) injected into handler payloads
  under `loggedUser`.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Principal:
    """
    Authenticated caller identity; `role` is matched against `Endpoint.roles`.
    """

    subject: str
    role: str
