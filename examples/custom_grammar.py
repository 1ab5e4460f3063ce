"""Custom Grammar Example - Building parsers from combinators.

Demonstrates writing a small grammar with parsekit.core and the text
primitives:

1. key=value configuration lines with many0_separated
2. Arithmetic with a self-referential grammar (lazy + guarded)
3. Context-sensitive parsing with flat_map
4. The core over a non-text input (a token tuple)

Python 3.13+.
"""

from __future__ import annotations

from collections.abc import Callable

from parsekit.core import (
    Failure,
    Parser,
    Success,
    chain,
    flat_map,
    guarded,
    lazy,
    many0,
    many0_separated,
    many1,
    map2,
    map_,
    one_of,
    optional,
    preceded,
    run,
    sequence,
    terminated,
)
from parsekit.text import (
    Cursor,
    any_chars,
    any_except,
    char_range,
    eof,
    exact_match,
    run as run_text,
    whitespace,
)


def example_1_config_lines() -> None:
    """Parse "key=value" pairs separated by newlines."""
    print("=" * 60)
    print("Example 1: Configuration Lines")
    print("=" * 60)

    key = any_chars("abcdefghijklmnopqrstuvwxyz_")
    pair = chain(key, exact_match("="), any_except("\n"), mapper=lambda v: (v[0], v[2]))
    config = terminated(
        map_(many0_separated(pair, exact_match("\n")), dict),
        preceded(optional(whitespace()), eof()),
    )

    print(run_text("host=localhost\nport=8080\nmode=debug\n", config))
    # Output: {'host': 'localhost', 'port': '8080', 'mode': 'debug'}


def example_2_arithmetic() -> None:
    """Sum and product expressions with parentheses."""
    print("\n" + "=" * 60)
    print("Example 2: Arithmetic")
    print("=" * 60)

    number = map_(char_range("0", "9"), int)
    atom = one_of(
        number,
        chain(exact_match("("), lazy(lambda: expr), exact_match(")"), mapper=lambda v: v[1]),
    )
    product = map2(
        atom,
        many0(preceded(exact_match("*"), atom)),
        lambda first, rest: _fold(first, rest, lambda a, b: a * b),
    )
    expr: Parser[Cursor, int] = guarded(
        map2(
            product,
            many0(preceded(exact_match("+"), product)),
            lambda first, rest: _fold(first, rest, lambda a, b: a + b),
        ),
        max_depth=32,
    )

    for source in ("1+2*3", "(1+2)*3", "2*(3+(4*5))"):
        print(f"{source} = {run_text(source, terminated(expr, eof()))}")


def _fold(first: int, rest: list[int], op: Callable[[int, int], int]) -> int:
    total = first
    for value in rest:
        total = op(total, value)
    return total


def example_3_length_prefixed() -> None:
    """Read a count, then exactly that many comma separated digits."""
    print("\n" + "=" * 60)
    print("Example 3: Length-Prefixed Lists")
    print("=" * 60)

    digit = map_(char_range("0", "9"), int)
    counted = flat_map(
        terminated(digit, exact_match(":")),
        lambda n: sequence(*([terminated(digit, optional(exact_match(",")))] * n)),
    )

    print(run_text("3:7,8,9", counted))
    # Output: [7, 8, 9]


def example_4_tokens() -> None:
    """The core parses any input type, here a tuple of tokens."""
    print("\n" + "=" * 60)
    print("Example 4: Token Input")
    print("=" * 60)

    type Tokens = tuple[str, ...]

    def token(expected: str) -> Parser[Tokens, str]:
        def token_impl(tokens: Tokens) -> Success[Tokens, str] | Failure[Tokens]:
            if tokens and tokens[0] == expected:
                return Success(tokens[1:], expected)
            return Failure(tokens, 0)

        return token_impl

    greeting = many1(one_of(token("hello"), token("world")))
    print(run(("hello", "world", "hello"), greeting))
    # Output: ['hello', 'world', 'hello']
    print(run(("hello", "there"), map_(greeting, len)))
    # Output: 1


if __name__ == "__main__":
    example_1_config_lines()
    example_2_arithmetic()
    example_3_length_prefixed()
    example_4_tokens()
