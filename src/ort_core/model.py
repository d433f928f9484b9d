"""Value model for ORT Core."""

from __future__ import annotations

from enum import Enum, auto
from typing import Any, Union

from .errors import OrtIndexError, OrtKeyError, OrtTypeError


# ---------------------------------------------------------------------------
# ValueKind
# ---------------------------------------------------------------------------

class ValueKind(Enum):
    Null = auto()
    Bool = auto()
    Number = auto()
    String = auto()
    Array = auto()
    Object = auto()


Native = Union[None, bool, float, str, list, dict]


# ---------------------------------------------------------------------------
# Normalization
# ---------------------------------------------------------------------------

def _normalize(value: Any) -> tuple[ValueKind, Any]:
    """Return ``(kind, payload)`` for *value*, converting containers deeply."""
    if isinstance(value, OrtValue):
        return _normalize(value.to_native())
    if value is None:
        return ValueKind.Null, None
    # bool before int: bool is an int subclass
    if isinstance(value, bool):
        return ValueKind.Bool, value
    if isinstance(value, (int, float)):
        return ValueKind.Number, float(value)
    if isinstance(value, str):
        return ValueKind.String, value
    if isinstance(value, (list, tuple)):
        return ValueKind.Array, [OrtValue(v) for v in value]
    if isinstance(value, dict):
        entries: dict[str, OrtValue] = {}
        for k, v in value.items():
            if not isinstance(k, str):
                raise OrtTypeError(
                    f"Object keys must be strings, got {type(k).__name__}"
                )
            entries[k] = OrtValue(v)
        return ValueKind.Object, entries
    raise OrtTypeError(f"Unsupported type for OrtValue: {type(value).__name__}")


# ---------------------------------------------------------------------------
# OrtValue
# ---------------------------------------------------------------------------

class OrtValue:
    """A normalized ORT value: null, bool, number, string, array or object.

    Arrays hold ``OrtValue`` children; objects hold an insertion-ordered
    ``dict[str, OrtValue]``. Indexing is explicit through :meth:`get` and
    :meth:`set`::

        v = OrtValue({"people": [{"name": "Alice"}]})
        v.get("people").get(0).get("name").as_string()   # "Alice"
        v.get("people").get(0).set("age", 30)
    """

    __slots__ = ("_kind", "_data")

    def __init__(self, value: Any = None) -> None:
        self._kind, self._data = _normalize(value)

    # -- Type tests -----------------------------------------------------

    @property
    def kind(self) -> ValueKind:
        return self._kind

    def is_null(self) -> bool:
        return self._kind is ValueKind.Null

    def is_bool(self) -> bool:
        return self._kind is ValueKind.Bool

    def is_number(self) -> bool:
        return self._kind is ValueKind.Number

    def is_string(self) -> bool:
        return self._kind is ValueKind.String

    def is_array(self) -> bool:
        return self._kind is ValueKind.Array

    def is_object(self) -> bool:
        return self._kind is ValueKind.Object

    # -- Typed extraction -----------------------------------------------

    def as_bool(self) -> bool | None:
        return self._data if self._kind is ValueKind.Bool else None

    def as_number(self) -> float | None:
        return self._data if self._kind is ValueKind.Number else None

    def as_string(self) -> str | None:
        return self._data if self._kind is ValueKind.String else None

    def as_array(self) -> list[OrtValue] | None:
        if self._kind is not ValueKind.Array:
            return None
        return list(self._data)

    def as_object(self) -> dict[str, OrtValue] | None:
        if self._kind is not ValueKind.Object:
            return None
        return dict(self._data)

    # -- Indexed access -------------------------------------------------

    def get(self, key: str | int) -> OrtValue:
        """Return the child at *key* (object key or array index)."""
        if isinstance(key, str):
            if self._kind is not ValueKind.Object:
                raise OrtTypeError(f"Cannot index non-object with string key: {key}")
            if key not in self._data:
                raise OrtKeyError(f"Key not found: {key}")
            return self._data[key]
        index = self._check_index(key)
        return self._data[index]

    def set(self, key: str | int, value: Any) -> None:
        """Store a normalized copy of *value* at *key*.

        Objects may gain new keys; arrays only accept existing indices.
        """
        if isinstance(key, str):
            if self._kind is not ValueKind.Object:
                raise OrtTypeError(f"Cannot set key on non-object: {key}")
            self._data[key] = OrtValue(value)
            return
        index = self._check_index(key, "Cannot set index on non-array")
        self._data[index] = OrtValue(value)

    def get_or_default(self, key: str, default: Any = None) -> OrtValue:
        if self._kind is not ValueKind.Object or key not in self._data:
            return OrtValue(default)
        return self._data[key]

    def _check_index(
        self, index: object, non_array: str = "Cannot index non-array with number"
    ) -> int:
        if isinstance(index, bool) or not isinstance(index, int):
            raise OrtTypeError(
                f"Key must be str or int, got {type(index).__name__}"
            )
        if self._kind is not ValueKind.Array:
            raise OrtTypeError(f"{non_array}: {index}")
        if index < 0 or index >= len(self._data):
            raise OrtIndexError(f"Index out of bounds: {index}")
        return index

    # -- Conversion -----------------------------------------------------

    def to_native(self) -> Native:
        """Deep-convert to plain Python data (dicts keep their key order)."""
        if self._kind is ValueKind.Array:
            return [v.to_native() for v in self._data]
        if self._kind is ValueKind.Object:
            return {k: v.to_native() for k, v in self._data.items()}
        return self._data

    def __len__(self) -> int:
        if self._kind in (ValueKind.Array, ValueKind.Object):
            return len(self._data)
        raise OrtTypeError(f"Value of kind {self._kind.name} has no length")

    def __bool__(self) -> bool:
        # Null, empty containers, false, zero and "" are falsy
        return bool(self._data)

    # -- Comparison -----------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, OrtValue):
            try:
                other = OrtValue(other)
            except OrtTypeError:
                return NotImplemented
        # dict equality ignores key order, list equality does not
        return self._kind is other._kind and self._data == other._data

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"OrtValue({self.to_native()!r})"
