"""JSON-like grammar assembled from the core combinators.

Deliberately small: strings have no escape sequences, numbers have no
exponent, and there is no Unicode validation. It exists to exercise the
combinator algebra, including a self-referential grammar.

Grammar:
    value   ::= string | number | object | array | "null" | "true" | "false"
    string  ::= '"' [^"]* '"'
    number  ::= "-"? [0-9]+ ("." [0-9]+)?
    object  ::= "{" ws (member ("," member)*)? ws "}"
    member  ::= ws string ws ":" ws value ws
    array   ::= "[" ws (element ("," element)*)? ws "]"
    element ::= ws value ws
"""

from decimal import Decimal

from parsekit.constants import MAX_DEPTH
from parsekit.core import (
    Parser,
    both,
    chain,
    guarded,
    lazy,
    many0_separated,
    map_,
    one_of,
    optional,
    preceded,
    sequence,
    terminated,
)
from parsekit.json.values import (
    JSON_NULL,
    JsonArray,
    JsonBool,
    JsonNumber,
    JsonObject,
    JsonString,
    JsonValue,
)
from parsekit.text import Cursor, any_chars, any_except, char_range, eof, exact_match, exact_match_string

__all__ = [
    "build_document_parser",
    "build_value_parser",
    "json_bool",
    "json_float",
    "json_int",
    "json_null",
    "json_number",
    "json_string",
    "string_literal",
]

# JSON insignificant whitespace also allows carriage returns.
_blank = optional(any_chars(" \t\n\r"))

_digits = char_range("0", "9")

_sign = map_(optional(exact_match("-")), lambda sign: sign or "")

_comma = chain(_blank, exact_match(","), _blank, mapper=lambda values: values[1])

string_literal: Parser[Cursor, str] = chain(
    exact_match('"'),
    any_except('"'),
    exact_match('"'),
    mapper=lambda values: values[1],
)

json_string: Parser[Cursor, JsonValue] = map_(string_literal, JsonString)

json_int: Parser[Cursor, JsonValue] = map_(
    sequence(_sign, _digits),
    lambda parts: JsonNumber(Decimal("".join(parts))),
)

json_float: Parser[Cursor, JsonValue] = map_(
    sequence(_sign, _digits, exact_match("."), _digits),
    lambda parts: JsonNumber(Decimal("".join(parts))),
)

# Float first: json_int would stop at the decimal point.
json_number: Parser[Cursor, JsonValue] = one_of(json_float, json_int)

json_null: Parser[Cursor, JsonValue] = map_(exact_match_string("null"), lambda _: JSON_NULL)

json_bool: Parser[Cursor, JsonValue] = one_of(
    map_(exact_match_string("true"), lambda _: JsonBool(True)),
    map_(exact_match_string("false"), lambda _: JsonBool(False)),
)


def build_value_parser(max_nesting_depth: int = MAX_DEPTH) -> Parser[Cursor, JsonValue]:
    """Build the recursive JSON value parser.

    Objects and arrays refer back to the value parser through lazy(); the
    whole value parser is wrapped in guarded() so nesting beyond
    ``max_nesting_depth`` fails instead of exhausting the stack.
    """
    member = chain(
        _blank,
        string_literal,
        _blank,
        exact_match(":"),
        _blank,
        lazy(lambda: value),
        _blank,
        mapper=lambda values: (values[1], values[5]),
    )
    json_object = chain(
        exact_match("{"),
        _blank,
        many0_separated(member, _comma),
        _blank,
        exact_match("}"),
        mapper=lambda values: JsonObject(dict(values[2])),
    )

    element = chain(_blank, lazy(lambda: value), _blank, mapper=lambda values: values[1])
    json_array = chain(
        exact_match("["),
        _blank,
        many0_separated(element, _comma),
        _blank,
        exact_match("]"),
        mapper=lambda values: JsonArray(tuple(values[2])),
    )

    value: Parser[Cursor, JsonValue] = guarded(
        one_of(json_string, json_number, json_object, json_array, json_null, json_bool),
        max_nesting_depth,
    )
    return value


def build_document_parser(max_nesting_depth: int = MAX_DEPTH) -> Parser[Cursor, JsonValue]:
    """A single value surrounded by optional whitespace, then end of input."""
    return terminated(
        preceded(_blank, build_value_parser(max_nesting_depth)),
        both(_blank, eof()),
    )
