"""Text input adapter.

Instantiates the core's abstract input as an immutable Cursor over a
string, and provides the primitive parsers that need to look at
individual characters.

Python 3.13+.
"""

from .cursor import Cursor, advance
from .primitives import (
    any_chars,
    any_except,
    char_range,
    eof,
    exact_match,
    exact_match_string,
    whitespace,
)
from .render import locate, render
from .runner import run

__all__ = [
    "Cursor",
    "advance",
    "any_chars",
    "any_except",
    "char_range",
    "eof",
    "exact_match",
    "exact_match_string",
    "locate",
    "render",
    "run",
    "whitespace",
]
