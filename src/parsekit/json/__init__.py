"""Demonstration JSON grammar built from the core combinators.

Not a full JSON parser: no escape sequences, no exponents, no Unicode
validation.

Python 3.13+.
"""

from .grammar import build_document_parser, build_value_parser
from .parser import JsonParser, parse_json
from .values import (
    JSON_NULL,
    JsonArray,
    JsonBool,
    JsonNull,
    JsonNumber,
    JsonObject,
    JsonString,
    JsonValue,
)

__all__ = [
    "JSON_NULL",
    "JsonArray",
    "JsonBool",
    "JsonNull",
    "JsonNumber",
    "JsonObject",
    "JsonParser",
    "JsonString",
    "JsonValue",
    "build_document_parser",
    "build_value_parser",
    "parse_json",
]
