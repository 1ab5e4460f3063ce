"""Text-aware wrapper around the core run() entry point."""

from parsekit.core import Parser
from parsekit.core import run as run_parser
from parsekit.text.cursor import Cursor
from parsekit.text.render import locate, render

__all__ = ["run"]


def run[T](source: str | Cursor, parser: Parser[Cursor, T]) -> T:
    """Parse ``source`` with ``parser``, rendering failures as text.

    Args:
        source: Raw text (parsed from offset 0) or a positioned Cursor
        parser: Top-level parser

    Returns:
        The parsed value

    Raises:
        ParseFailedError: With a rendered message and a SourceSpan
    """
    cursor = source if isinstance(source, Cursor) else Cursor(source)
    return run_parser(cursor, parser, render=render, locate=locate)
