"""Parse outcome types shared by every parser.

A parser is a plain callable from an input value to a ParseOutcome. The
core never looks inside the input: it only threads the remainder of a
Success into the next parser, or hands the input of a Failure back to the
caller for error reporting.

Pattern:
    Every parser has signature:
        def parse_foo(inp: I) -> ParseOutcome[I, Foo]:
            ...
            return Success(remaining, value)   # or Failure(inp, location)

Python 3.13+. Zero external dependencies.
"""

from collections.abc import Callable
from dataclasses import dataclass

__all__ = ["Failure", "ParseOutcome", "Parser", "Success"]


@dataclass(frozen=True, slots=True)
class Success[I, T]:
    """Successful parse: unconsumed remainder plus the produced value.

    Example:
        >>> from parsekit.text import Cursor
        >>> outcome = Success(Cursor("hello", 1), "h")
        >>> outcome.value
        'h'
        >>> outcome.remaining.rest
        'ello'
    """

    remaining: I
    value: T


@dataclass(frozen=True, slots=True)
class Failure[I]:
    """Failed parse.

    Attributes:
        input: Input handed to the parser that detected the mismatch
        location: Offset into ``input`` of the first non-matching position,
            or 0 for zero-width mismatches
    """

    input: I
    location: int


type ParseOutcome[I, T] = Success[I, T] | Failure[I]

type Parser[I, T] = Callable[[I], ParseOutcome[I, T]]
