"""Decoded JSON response envelope.

The dog API wraps every payload in the same top-level object::

    {"status": "success" | "error", "message": ..., "code": 404}

``Envelope`` holds that object read-only for the duration of one case
(fields are handed out as deep copies, so nested values cannot be changed in
place either) and turns missing fields into ``MalformedResponse`` instead of
``KeyError``.
"""

import copy
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Dict, Mapping

import httpx

from .errors import MalformedResponse

_MISSING = object()


class Envelope:
    """Read-only view over a decoded response body."""

    def __init__(self, payload: Mapping[str, Any]):
        if not isinstance(payload, Mapping):
            raise MalformedResponse(
                f"Response envelope must be a JSON object, got {type(payload).__name__}"
            )
        self._payload = MappingProxyType(copy.deepcopy(dict(payload)))

    @classmethod
    def from_response(cls, response: httpx.Response) -> "Envelope":
        """Decode an HTTP response body, failing fast on invalid JSON."""
        try:
            payload = response.json()
        except ValueError as e:
            preview = response.text[:200]
            raise MalformedResponse(
                f"Response body from {response.request.url} is not valid JSON: {e}; body={preview!r}"
            ) from e
        return cls(payload)

    def field(self, name: str) -> Any:
        """Return a top-level field or raise ``MalformedResponse``."""
        value = self._payload.get(name, _MISSING)
        if value is _MISSING:
            raise MalformedResponse(
                f"Response envelope is missing field {name!r}; fields present: {sorted(self._payload)}"
            )
        return copy.deepcopy(value)

    def get(self, name: str, default: Any = None) -> Any:
        return copy.deepcopy(self._payload.get(name, default))

    @property
    def status(self) -> Any:
        return self.field("status")

    @property
    def message(self) -> Any:
        return self.field("message")

    @property
    def code(self) -> Any:
        return self.field("code")

    def as_dict(self) -> Dict[str, Any]:
        return copy.deepcopy(dict(self._payload))

    def __contains__(self, name: object) -> bool:
        return name in self._payload

    def __repr__(self) -> str:
        return f"Envelope({dict(self._payload)!r})"


@dataclass(frozen=True)
class ContractOutcome:
    """What one executed call captured."""

    status_code: int
    envelope: Envelope
    url: str
    elapsed_ms: float
