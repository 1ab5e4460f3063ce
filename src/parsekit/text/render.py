"""Human-readable rendering of text parse failures.

A Failure carries the cursor handed to the failing parser and an offset
relative to it. The marked character is the one at the failure position:
for a positive location that is ``location - 1`` past the cursor (the
first character that did not match), for location 0 it is the character
under the cursor.
"""

from parsekit.constants import RENDER_CONTEXT_CHARS
from parsekit.diagnostics import SourceSpan
from parsekit.text.cursor import Cursor

__all__ = ["locate", "mark_offset", "render"]

_ESCAPES = str.maketrans({"\n": "\\n", "\r": "\\r", "\t": "\\t"})


def mark_offset(inp: Cursor, location: int) -> int:
    """Absolute source offset of the character a failure points at.

    Clamped to ``[inp.pos, len(inp.source)]``.
    """
    offset = inp.pos + location - 1 if location > 0 else inp.pos
    return min(max(offset, inp.pos), len(inp.source))


def _escape(text: str) -> str:
    return text.translate(_ESCAPES)


def render(inp: Cursor, location: int) -> str:
    """Render a one-line error message for a failure at ``location``.

    Example:
        >>> render(Cursor("AXCD"), 2)
        '1:2: A[X]CD'
        >>> render(Cursor("ab"), 7)
        '1:3: ab[<EOF>]'
    """
    source = inp.source
    mark = mark_offset(inp, location)
    line, col = Cursor(source, mark).compute_line_col()

    start = max(mark - RENDER_CONTEXT_CHARS, 0)
    end = min(mark + 1 + RENDER_CONTEXT_CHARS, len(source))
    before = ("..." if start > 0 else "") + _escape(source[start:mark])
    marked = _escape(source[mark]) if mark < len(source) else "<EOF>"
    after = _escape(source[mark + 1 : end]) + ("..." if end < len(source) else "")
    return f"{line}:{col}: {before}[{marked}]{after}"


def locate(inp: Cursor, location: int) -> SourceSpan:
    """Source span of the character a failure points at."""
    mark = mark_offset(inp, location)
    line, col = Cursor(inp.source, mark).compute_line_col()
    return SourceSpan(start=mark, end=min(mark + 1, len(inp.source)), line=line, column=col)
