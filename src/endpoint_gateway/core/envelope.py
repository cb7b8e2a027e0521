"""
endpoint_gateway.core.envelope

Uniform response envelope returned by every dispatch path.

Responsibilities:
- Validate the mandatory envelope fields at construction time.
- Merge caller-supplied data into the envelope (flatten mappings, wrap scalars).
- Produce the JSON wire shape (`statusCode`, `reason`, `description`, extras).
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from dataclasses import dataclass, field, replace
from types import MappingProxyType
from typing import Any

RESERVED_FIELDS = frozenset({"statusCode", "reason", "description"})


class EnvelopeError(ValueError):
    pass


@dataclass(frozen=True, slots=True)
class ResponseEnvelope:
    """
    Normalized outcome of a request.

    Extra fields are kept apart from the mandatory ones and only merged into
    the top level by `to_dict`; they are also readable as attributes.
    """

    status_code: int
    reason: str
    description: str
    extra: Mapping[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        if isinstance(self.status_code, bool) or not isinstance(self.status_code, int):
            raise EnvelopeError("Response should have a status code of type 'int'.")
        if self.status_code <= 0:
            raise EnvelopeError("Response status code must be a positive integer.")
        if not self.reason or not self.description:
            raise EnvelopeError("Response should have a reason and description.")

        clashes = RESERVED_FIELDS.intersection(self.extra)
        if clashes:
            raise EnvelopeError(f"Extra fields clash with envelope fields: {sorted(clashes)}")
        # Freeze a private copy so callers cannot mutate the envelope through their dict.
        object.__setattr__(self, "extra", MappingProxyType(dict(self.extra)))

    def __hash__(self) -> int:
        # Raises TypeError when an extra value is itself unhashable.
        items = frozenset(self.extra.items())
        return hash((self.status_code, self.reason, self.description, items))

    def __getattr__(self, name: str) -> Any:
        # Only reached for names that are not slots; `extra` itself must not recurse.
        if name.startswith("_") or name == "extra":
            raise AttributeError(name)
        try:
            return self.extra[name]
        except KeyError:
            raise AttributeError(name) from None

    def __getitem__(self, key: str) -> Any:
        return self.to_dict()[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self.to_dict())

    def with_data(self, data: Any) -> ResponseEnvelope:
        """Return a copy of this envelope with `data` merged into its extra fields."""
        return replace(self, extra={**self.extra, **_extra_from(data)})

    def to_dict(self) -> dict[str, Any]:
        return {
            "statusCode": self.status_code,
            "reason": self.reason,
            "description": self.description,
            **self.extra,
        }


def _extra_from(data: Any) -> dict[str, Any]:
    # Mappings are flattened onto the envelope; any other truthy value lands under `data`.
    if not data:
        return {}
    if isinstance(data, Mapping):
        return {str(k): v for k, v in data.items()}
    return {"data": data}


def create_response(
    status_code: int,
    reason: str,
    description: str,
    data: Any = None,
) -> ResponseEnvelope:
    return ResponseEnvelope(
        status_code=status_code,
        reason=reason,
        description=description,
        extra=_extra_from(data),
    )


# --- Module Notes -----------------------------------------------------------
# Envelopes are values: there is no mutator, `with_data` always builds a new instance.
