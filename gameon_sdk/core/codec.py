"""Request/response body codecs."""

from __future__ import annotations

import json
import math
from typing import Any, Protocol

from pydantic import BaseModel


class BodyCodec(Protocol):
    """Serializes request bodies and decodes response bodies."""

    def encode(self, value: Any) -> str: ...

    def decode(self, text: str) -> Any: ...


def _reject_constant(token: str) -> Any:
    raise ValueError(f"Invalid JSON token: {token}")


def _finite_or_none(value: Any) -> Any:
    """Replace NaN and infinities with ``None`` throughout a JSON-ready value."""

    if isinstance(value, float):
        return value if math.isfinite(value) else None
    if isinstance(value, dict):
        return {key: _finite_or_none(item) for key, item in value.items()}
    if isinstance(value, (list, tuple)):
        return [_finite_or_none(item) for item in value]
    return value


class JsonCodec:
    """Strict compact JSON, matching what the service endpoints expect."""

    def encode(self, value: Any) -> str:
        if isinstance(value, BaseModel):
            value = value.model_dump(mode="json", by_alias=True)
        return json.dumps(
            _finite_or_none(value),
            separators=(",", ":"),
            ensure_ascii=False,
            allow_nan=False,
        )

    def decode(self, text: str) -> Any:
        # json.JSONDecodeError is a ValueError subclass
        return json.loads(text, parse_constant=_reject_constant)
