"""Conversion between OrtValue and JSON text."""

from __future__ import annotations

import json
import math
from typing import Any

from .model import OrtValue


def from_json(text: str) -> OrtValue:
    """Parse JSON text into an OrtValue (key order is kept)."""
    return OrtValue(json.loads(text))


def to_json(value: OrtValue, indent: int | None = 2) -> str:
    """Serialize *value* as JSON.

    Integral numbers are written as JSON integers; NaN and infinities have
    no JSON spelling and become ``null``.
    """
    return json.dumps(_jsonable(value.to_native()), indent=indent, ensure_ascii=False)


def _jsonable(data: Any) -> Any:
    if isinstance(data, float):
        if not math.isfinite(data):
            return None
        if data.is_integer():
            return int(data)
        return data
    if isinstance(data, list):
        return [_jsonable(v) for v in data]
    if isinstance(data, dict):
        return {k: _jsonable(v) for k, v in data.items()}
    return data
