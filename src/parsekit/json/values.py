"""JSON value types produced by the demonstration grammar.

All values are immutable dataclasses sharing dot-path lookup:

    >>> doc = parse_json('{"a": [10, {"b": null}]}')
    >>> doc.get("a.1.b")
    JsonNull()
    >>> doc.get("a.0").to_python()
    Decimal('10')
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from decimal import Decimal
from typing import Any

from parsekit.diagnostics import ErrorTemplate, JsonPathError

__all__ = [
    "JSON_NULL",
    "JsonArray",
    "JsonBool",
    "JsonNull",
    "JsonNumber",
    "JsonObject",
    "JsonString",
    "JsonValue",
]


class JsonValue:
    """Base class for all JSON values."""

    __slots__ = ()

    def get(self, path: str) -> JsonValue:
        """Follow a dot-separated path of object keys and array indexes.

        Raises:
            JsonPathError: If a segment is missing or applied to a scalar
        """
        value: JsonValue = self
        for segment in path.split("."):
            value = value.get_value(segment)
        return value

    def get_value(self, key: str) -> JsonValue:
        """Look up a single path segment. Scalars have no children."""
        raise JsonPathError(ErrorTemplate.path_through_scalar(key, type(self).__name__))

    def to_python(self) -> Any:
        """Convert to plain Python objects (dict, list, str, Decimal, bool, None)."""
        raise NotImplementedError


@dataclass(frozen=True, slots=True)
class JsonString(JsonValue):
    value: str

    def to_python(self) -> str:
        return self.value


@dataclass(frozen=True, slots=True)
class JsonNumber(JsonValue):
    """Number kept as Decimal so that ``2.0`` and ``123.45`` stay exact."""

    value: Decimal

    def to_python(self) -> Decimal:
        return self.value


@dataclass(frozen=True, slots=True)
class JsonBool(JsonValue):
    value: bool

    def to_python(self) -> bool:
        return self.value


@dataclass(frozen=True, slots=True)
class JsonNull(JsonValue):
    def to_python(self) -> None:
        return None


JSON_NULL = JsonNull()


@dataclass(frozen=True, slots=True)
class JsonArray(JsonValue):
    values: tuple[JsonValue, ...]

    def get_value(self, key: str) -> JsonValue:
        """Index by a non-negative integer segment."""
        if key.isascii() and key.isdigit() and int(key) < len(self.values):
            return self.values[int(key)]
        raise JsonPathError(ErrorTemplate.path_not_found(key, "JsonArray"))

    def to_python(self) -> list[Any]:
        return [value.to_python() for value in self.values]


@dataclass(frozen=True, slots=True)
class JsonObject(JsonValue):
    """Object members. Duplicate keys keep the last value."""

    values: Mapping[str, JsonValue]

    def __hash__(self) -> int:
        return hash(frozenset(self.values.items()))

    def get_value(self, key: str) -> JsonValue:
        try:
            return self.values[key]
        except KeyError:
            raise JsonPathError(ErrorTemplate.path_not_found(key, "JsonObject")) from None

    def to_python(self) -> dict[str, Any]:
        return {key: value.to_python() for key, value in self.values.items()}
