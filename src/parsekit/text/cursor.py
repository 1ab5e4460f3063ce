"""Immutable cursor over a string: the text adapter's input type.

Design Philosophy:
    - Cursor is immutable (frozen dataclass)
    - advance() shares the source string and returns a NEW cursor with a
      larger offset: O(1), no copying of the remaining text
    - EOF is a state (is_eof), not a return value
    - Line:column computed on-demand (O(n), only for errors)

Line Ending Support:
    \\n is the line delimiter. CRLF input works because the \\n is still
    present; CR-only input reports everything on line 1.

Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass

__all__ = ["Cursor", "advance"]


@dataclass(frozen=True, slots=True)
class Cursor:
    """Immutable source position tracker.

    Example:
        >>> cursor = Cursor("hello")
        >>> cursor.current
        'h'
        >>> cursor.advance(2).rest
        'llo'
        >>> cursor.rest  # Original unchanged (immutability)
        'hello'
        >>> Cursor("hi", 2).is_eof
        True
    """

    source: str
    pos: int = 0

    @property
    def is_eof(self) -> bool:
        """True if position >= source length."""
        return self.pos >= len(self.source)

    @property
    def current(self) -> str:
        """Get current character.

        Raises:
            EOFError: If at end of input
        """
        if self.is_eof:
            msg = f"Unexpected EOF at position {self.pos}"
            raise EOFError(msg)
        return self.source[self.pos]

    @property
    def length(self) -> int:
        """Number of unconsumed characters."""
        return max(len(self.source) - self.pos, 0)

    @property
    def rest(self) -> str:
        """Unconsumed text.

        Note:
            Copies the remaining text. Meant for tests and display; parsers
            index into ``source`` directly.
        """
        return self.source[self.pos :]

    def peek(self, offset: int = 0) -> str | None:
        """Character at position + offset, or None if beyond EOF."""
        target_pos = self.pos + offset
        if target_pos >= len(self.source):
            return None
        return self.source[target_pos]

    def advance(self, count: int = 1) -> "Cursor":
        """Return new cursor advanced by count positions.

        The new position is clamped to the end of the source.

        Example:
            >>> cursor = Cursor("hello")
            >>> cursor.advance().pos
            1
            >>> cursor.advance(99).pos
            5
        """
        new_pos = min(self.pos + count, len(self.source))
        return Cursor(self.source, new_pos)

    def slice_to(self, end_pos: int) -> str:
        """Extract source slice from current position to end_pos (exclusive)."""
        return self.source[self.pos : end_pos]

    def compute_line_col(self) -> tuple[int, int]:
        """Compute line and column for current position.

        Returns:
            (line, column) tuple (1-indexed, like text editors)

        Example:
            >>> Cursor("line1\\nline2", 8).compute_line_col()
            (2, 3)
        """
        pos = min(self.pos, len(self.source))
        line = self.source.count("\n", 0, pos) + 1
        last_newline = self.source.rfind("\n", 0, pos)
        col = pos - last_newline if last_newline >= 0 else pos + 1
        return (line, col)


def advance(inp: Cursor, amount: int) -> Cursor:
    """Drop the first ``amount`` characters of ``inp``."""
    return inp.advance(amount)
