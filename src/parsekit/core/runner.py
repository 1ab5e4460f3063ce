"""Top-level entry point for running a parser.

run() is the only place where a parse failure becomes an exception. The
core does not know how to display its inputs, so the caller supplies a
``render`` function (and optionally ``locate`` for a source span); input
adapters such as :mod:`parsekit.text` wrap run() with their own.

Python 3.13+.
"""

from __future__ import annotations

import logging
from collections.abc import Callable

from parsekit.core.outcome import Failure, Parser
from parsekit.diagnostics import ErrorTemplate, ParseFailedError, SourceSpan

__all__ = ["default_render", "run"]

logger = logging.getLogger(__name__)


def default_render(inp: object, location: int) -> str:
    """Fallback renderer for inputs without a text representation."""
    return f"Parse failed at location {location}"


def run[I, T](
    inp: I,
    parser: Parser[I, T],
    *,
    render: Callable[[I, int], str] = default_render,
    locate: Callable[[I, int], SourceSpan] | None = None,
) -> T:
    """Invoke ``parser`` once on ``inp`` and return its value.

    Args:
        inp: Input to parse
        parser: Top-level parser
        render: Builds the error message from the failing input and location
        locate: Optional source span lookup for the diagnostic

    Returns:
        The value produced by a successful parse

    Raises:
        ParseFailedError: If the parser returns a Failure
    """
    outcome = parser(inp)
    if isinstance(outcome, Failure):
        rendered = render(outcome.input, outcome.location)
        span = locate(outcome.input, outcome.location) if locate is not None else None
        logger.debug("Parse failed at location %d: %s", outcome.location, rendered)
        raise ParseFailedError(
            ErrorTemplate.parse_failed(rendered, span),
            input=outcome.input,
            location=outcome.location,
        )
    return outcome.value
