"""Combinator algebra over an abstract input type.

Every function here takes zero or more parsers and returns a new parser.
Nothing runs until the returned parser is invoked with an input. No
combinator inspects the input itself: inputs are only passed along,
compared for progress, or returned inside a Failure.

Failure policy:
    Combinators propagate the first Failure they see verbatim (same input,
    same location). The one exception is one_of(), which reports the
    failure that got farthest (largest location) when every alternative
    fails.

Python 3.13+.
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Callable
from typing import Any

from parsekit.constants import FRAMES_PER_LEVEL, MAX_DEPTH
from parsekit.core.depth_guard import DepthGuard, depth_clamp
from parsekit.core.outcome import Failure, ParseOutcome, Parser, Success

__all__ = [
    "both",
    "chain",
    "fail",
    "flat_map",
    "guarded",
    "lazy",
    "many0",
    "many0_separated",
    "many1",
    "map2",
    "map_",
    "one_of",
    "optional",
    "preceded",
    "sequence",
    "succeed",
    "terminated",
]

logger = logging.getLogger(__name__)


# ============================================================================
# Mapping
# ============================================================================


def map_[I, T, R](parser: Parser[I, T], mapper: Callable[[T], R]) -> Parser[I, R]:
    """Apply ``mapper`` to the value of a successful parse.

    The remainder is kept as is; failures pass through unchanged.
    """

    def map_impl(inp: I) -> ParseOutcome[I, R]:
        outcome = parser(inp)
        if isinstance(outcome, Failure):
            return outcome
        return Success(outcome.remaining, mapper(outcome.value))

    return map_impl


def flat_map[I, T, R](
    parser: Parser[I, T], factory: Callable[[T], Parser[I, R]]
) -> Parser[I, R]:
    """Build the next parser from the value of the previous one.

    This is what makes context-sensitive grammars possible: the grammar of
    the second step depends on what the first step produced.

    Example:
        >>> # "3:xxx" -> read a count, then exactly that many "x"
        >>> counted = flat_map(
        ...     terminated(char_range("0", "9"), exact_match(":")),
        ...     lambda n: sequence(*[exact_match("x")] * int(n)),
        ... )
    """

    def flat_map_impl(inp: I) -> ParseOutcome[I, R]:
        outcome = parser(inp)
        if isinstance(outcome, Failure):
            return outcome
        return factory(outcome.value)(outcome.remaining)

    return flat_map_impl


# ============================================================================
# Sequencing
# ============================================================================


def both[I, T1, T2](parser1: Parser[I, T1], parser2: Parser[I, T2]) -> Parser[I, tuple[T1, T2]]:
    """Run two parsers in order and pair their values."""
    return flat_map(parser1, lambda first: map_(parser2, lambda second: (first, second)))


def map2[I, T1, T2, R](
    parser1: Parser[I, T1],
    parser2: Parser[I, T2],
    mapper: Callable[[T1, T2], R],
) -> Parser[I, R]:
    """Run two parsers in order and combine their values with ``mapper``."""
    return map_(both(parser1, parser2), lambda pair: mapper(*pair))


def preceded[I, T](parser1: Parser[I, Any], parser2: Parser[I, T]) -> Parser[I, T]:
    """Run both parsers, keep the value of the second."""
    return map2(parser1, parser2, lambda _, second: second)


def terminated[I, T](parser1: Parser[I, T], parser2: Parser[I, Any]) -> Parser[I, T]:
    """Run both parsers, keep the value of the first."""
    return map2(parser1, parser2, lambda first, _: first)


def sequence[I, T](*parsers: Parser[I, T]) -> Parser[I, list[T]]:
    """Run parsers in order on successive remainders.

    Returns:
        Parser producing the list of values, in order. Fails with the first
        sub-parser failure.
    """

    def sequence_impl(inp: I) -> ParseOutcome[I, list[T]]:
        values: list[T] = []
        remaining = inp
        for parser in parsers:
            outcome = parser(remaining)
            if isinstance(outcome, Failure):
                return outcome
            values.append(outcome.value)
            remaining = outcome.remaining
        return Success(remaining, values)

    return sequence_impl


def chain[I, R](*parsers: Parser[I, Any], mapper: Callable[[list[Any]], R]) -> Parser[I, R]:
    """Like sequence() over parsers of mixed value types.

    ``mapper`` receives the full list of values, one per parser.

    Example:
        >>> pair = chain(key, exact_match(":"), value, mapper=lambda v: (v[0], v[2]))
    """
    return map_(sequence(*parsers), mapper)


# ============================================================================
# Alternation
# ============================================================================


def one_of[I, T](*parsers: Parser[I, T]) -> Parser[I, T]:
    """Try each parser on the same input and return the first success.

    When every alternative fails, the Failure with the largest location is
    returned: the alternative that progressed farthest is usually the most
    informative. Ties go to the parser supplied first.

    Raises:
        ValueError: If no parsers are given
    """
    if not parsers:
        msg = "one_of() requires at least one parser"
        raise ValueError(msg)

    first, *rest = parsers

    def one_of_impl(inp: I) -> ParseOutcome[I, T]:
        farthest = first(inp)
        if isinstance(farthest, Success):
            return farthest
        for parser in rest:
            outcome = parser(inp)
            if isinstance(outcome, Success):
                return outcome
            if outcome.location > farthest.location:
                farthest = outcome
        return farthest

    return one_of_impl


def optional[I, T](parser: Parser[I, T]) -> Parser[I, T | None]:
    """Make a parser optional.

    On failure the attempt is undone: the result is a Success holding None
    and the original, unconsumed input. Never fails.
    """

    def optional_impl(inp: I) -> ParseOutcome[I, T | None]:
        outcome = parser(inp)
        if isinstance(outcome, Failure):
            return Success(inp, None)
        return outcome

    return optional_impl


# ============================================================================
# Repetition
# ============================================================================


def _repeat[I, T](parser: Parser[I, T], minimum: int) -> Parser[I, list[T]]:
    """Apply ``parser`` until it fails, requiring ``minimum`` matches.

    An application that succeeds without advancing the input ends the loop
    (its value is kept); otherwise a zero-width parser would repeat forever.
    """

    def repeat_impl(inp: I) -> ParseOutcome[I, list[T]]:
        values: list[T] = []
        remaining = inp
        while True:
            outcome = parser(remaining)
            if isinstance(outcome, Failure):
                if len(values) < minimum:
                    return outcome
                return Success(remaining, values)
            values.append(outcome.value)
            if outcome.remaining == remaining:
                return Success(remaining, values)
            remaining = outcome.remaining

    return repeat_impl


def many0[I, T](parser: Parser[I, T]) -> Parser[I, list[T]]:
    """Zero or more repetitions. Never fails."""
    return _repeat(parser, 0)


def many1[I, T](parser: Parser[I, T]) -> Parser[I, list[T]]:
    """One or more repetitions.

    Fails with the first attempt's Failure when nothing matches.
    """
    return _repeat(parser, 1)


def many0_separated[I, T](parser: Parser[I, T], separator: Parser[I, Any]) -> Parser[I, list[T]]:
    """Zero or more ``parser`` matches separated by ``separator``. Never fails.

    A separator is only consumed together with the element after it: for
    ``"1,2,3,"`` the values are ``["1", "2", "3"]`` and the trailing ``","``
    is left in the remainder.
    """

    def many0_separated_impl(inp: I) -> ParseOutcome[I, list[T]]:
        values: list[T] = []
        committed = inp
        cursor = inp
        while True:
            item = parser(cursor)
            if isinstance(item, Failure):
                return Success(committed, values)
            values.append(item.value)
            committed = item.remaining

            sep = separator(committed)
            if isinstance(sep, Failure) or sep.remaining == cursor:
                return Success(committed, values)
            cursor = sep.remaining

    return many0_separated_impl


# ============================================================================
# Constants, forward references and depth limiting
# ============================================================================


def succeed[I, T](value: T) -> Parser[I, T]:
    """Parser that always succeeds with ``value`` and consumes nothing."""

    def succeed_impl(inp: I) -> ParseOutcome[I, T]:
        return Success(inp, value)

    return succeed_impl


def fail[I](location: int = 0) -> Parser[I, Any]:
    """Parser that always fails at ``location``."""

    def fail_impl(inp: I) -> ParseOutcome[I, Any]:
        return Failure(inp, location)

    return fail_impl


def lazy[I, T](thunk: Callable[[], Parser[I, T]]) -> Parser[I, T]:
    """Defer parser lookup until invocation.

    Self-referential grammars need to mention a parser before it exists.
    ``thunk`` is called on every invocation and should return an already
    built parser (a module attribute, a closure variable), not build a new
    one.

    Example:
        >>> value = one_of(number, map_(sequence(open_, lazy(lambda: value), close), ...))
    """

    def lazy_impl(inp: I) -> ParseOutcome[I, T]:
        return thunk()(inp)

    return lazy_impl


def guarded[I, T](
    parser: Parser[I, T],
    max_depth: int = MAX_DEPTH,
    frames_per_level: int = FRAMES_PER_LEVEL,
) -> Parser[I, T]:
    """Limit how deeply ``parser`` may nest within itself.

    Wrap the recursive entry point of a grammar with this. Once ``max_depth``
    invocations are active on the current thread, the next one returns
    ``Failure(inp, 0)`` instead of recursing further, so deeply nested input
    fails cleanly rather than raising RecursionError.

    ``max_depth`` is clamped so that ``max_depth * frames_per_level`` stack
    frames fit under the interpreter recursion limit. If the stack still
    runs out (a caller already deep in the stack, a grammar costlier than
    ``frames_per_level``), the RecursionError is turned into the same
    Failure.

    Thread Safety:
        Each thread tracks its own depth.
    """
    limit = depth_clamp(max_depth, frames_per_level=frames_per_level)
    local = threading.local()

    def guarded_impl(inp: I) -> ParseOutcome[I, T]:
        guard: DepthGuard | None = getattr(local, "guard", None)
        if guard is None:
            guard = DepthGuard(max_depth=limit)
            local.guard = guard
        if guard.is_exceeded():
            logger.debug("Nesting depth limit (%d) reached", guard.max_depth)
            return Failure(inp, 0)
        with guard:
            try:
                return parser(inp)
            except RecursionError:
                logger.debug("Stack exhausted at nesting depth %d", guard.current_depth)
                return Failure(inp, 0)

    return guarded_impl
