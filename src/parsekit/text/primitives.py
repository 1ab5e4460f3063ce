"""Primitive text parsers.

These are the only parsers that look at characters; everything else is
composed from them with :mod:`parsekit.core`.

Failure locations:
    - any_chars, char_range, eof: 0 (zero-width mismatch)
    - exact_match_string: matched leading characters + 1
    - any_except: never fails, even when nothing is consumed
"""

from collections.abc import Callable, Iterable

from parsekit.constants import WHITESPACE_CHARS
from parsekit.core import Failure, ParseOutcome, Parser, Success
from parsekit.text.cursor import Cursor

__all__ = [
    "any_chars",
    "any_except",
    "char_range",
    "eof",
    "exact_match",
    "exact_match_string",
    "whitespace",
]


def _char_set(chars: Iterable[str]) -> frozenset[str]:
    charset = frozenset(chars)
    for ch in charset:
        if len(ch) != 1:
            msg = f"Expected single characters, got {ch!r}"
            raise ValueError(msg)
    return charset


def _scan_while(cursor: Cursor, predicate: Callable[[str], bool]) -> int:
    """End offset of the longest run of characters satisfying ``predicate``."""
    source = cursor.source
    end = cursor.pos
    limit = len(source)
    while end < limit and predicate(source[end]):
        end += 1
    return end


def _take_while(predicate: Callable[[str], bool], *, allow_empty: bool) -> Parser[Cursor, str]:
    def take_while_impl(cursor: Cursor) -> ParseOutcome[Cursor, str]:
        end = _scan_while(cursor, predicate)
        if end == cursor.pos and not allow_empty:
            return Failure(cursor, 0)
        return Success(cursor.advance(end - cursor.pos), cursor.slice_to(end))

    return take_while_impl


def any_chars(chars: Iterable[str]) -> Parser[Cursor, str]:
    """Match one or more characters from ``chars``.

    Example:
        >>> outcome = any_chars("abc")(Cursor("abcaFF"))
        >>> outcome.value, outcome.remaining.rest
        ('abca', 'FF')
    """
    charset = _char_set(chars)
    return _take_while(charset.__contains__, allow_empty=False)


def any_except(chars: Iterable[str]) -> Parser[Cursor, str]:
    """Match zero or more characters NOT in ``chars``. Never fails.

    Used for "everything up to the next delimiter".
    """
    charset = _char_set(chars)
    return _take_while(lambda ch: ch not in charset, allow_empty=True)


def char_range(low: str, high: str) -> Parser[Cursor, str]:
    """Match one or more characters in the inclusive range ``low``..``high``.

    Raises:
        ValueError: If the bounds are not single characters or low > high
    """
    if len(low) != 1 or len(high) != 1:
        msg = f"char_range() bounds must be single characters, got {low!r} and {high!r}"
        raise ValueError(msg)
    if low > high:
        msg = f"char_range() lower bound {low!r} is above upper bound {high!r}"
        raise ValueError(msg)
    return _take_while(lambda ch: low <= ch <= high, allow_empty=False)


def exact_match_string(literal: str) -> Parser[Cursor, str]:
    """Match ``literal`` exactly.

    On mismatch the location is the number of matching leading characters
    plus one, which is the 1-based position of the first wrong character.

    Example:
        >>> exact_match_string("AB")(Cursor("AXCD")).location
        2
    """
    size = len(literal)

    def exact_match_string_impl(cursor: Cursor) -> ParseOutcome[Cursor, str]:
        source = cursor.source
        if source.startswith(literal, cursor.pos):
            return Success(cursor.advance(size), literal)

        matched = 0
        for expected, actual in zip(literal, source[cursor.pos : cursor.pos + size], strict=False):
            if expected != actual:
                break
            matched += 1
        return Failure(cursor, matched + 1)

    return exact_match_string_impl


def exact_match(char: str) -> Parser[Cursor, str]:
    """Match a single character."""
    return exact_match_string(char)


def whitespace() -> Parser[Cursor, str]:
    """Match one or more spaces, tabs or newlines."""
    return any_chars(WHITESPACE_CHARS)


def eof() -> Parser[Cursor, None]:
    """Succeed only at end of input."""

    def eof_impl(cursor: Cursor) -> ParseOutcome[Cursor, None]:
        if cursor.is_eof:
            return Success(cursor, None)
        return Failure(cursor, 0)

    return eof_impl
