"""JSON document parser built on the demonstration grammar.

Security:
    Includes a configurable input size limit and a nesting depth limit so
    that oversized or deeply nested input fails cleanly.
"""

import logging

from parsekit.constants import FRAMES_PER_LEVEL, MAX_DEPTH, MAX_SOURCE_SIZE
from parsekit.core.depth_guard import depth_clamp
from parsekit.diagnostics import ErrorTemplate
from parsekit.json.grammar import build_document_parser
from parsekit.json.values import JsonValue
from parsekit.text import run

__all__ = ["JsonParser", "parse_json"]

logger = logging.getLogger(__name__)


class JsonParser:
    """Parse JSON-like text into :class:`~parsekit.json.values.JsonValue` trees.

    The grammar is built once in the constructor and reused by every call
    to parse(); a JsonParser can be shared between threads.

    Attributes:
        max_source_size: Maximum allowed source size in characters (default: 10 MiB)
        max_nesting_depth: Maximum allowed object/array nesting depth (default: 64)
    """

    __slots__ = ("_document", "_max_nesting_depth", "_max_source_size")

    def __init__(
        self,
        *,
        max_source_size: int | None = None,
        max_nesting_depth: int | None = None,
    ) -> None:
        """Initialize parser with optional size and nesting depth limits.

        Args:
            max_source_size: Maximum source size in characters (default: 10 MiB).
                            Set to 0 to disable the size limit (not recommended).
            max_nesting_depth: Maximum nesting depth (default: 64). Values that
                            would not fit under the interpreter recursion limit
                            are lowered; see the max_nesting_depth property.
        """
        self._max_source_size = (
            max_source_size if max_source_size is not None else MAX_SOURCE_SIZE
        )
        self._max_nesting_depth = depth_clamp(
            max_nesting_depth if max_nesting_depth is not None else MAX_DEPTH,
            frames_per_level=FRAMES_PER_LEVEL,
        )
        self._document = build_document_parser(self._max_nesting_depth)

    @property
    def max_source_size(self) -> int:
        """Maximum allowed source size in characters."""
        return self._max_source_size

    @property
    def max_nesting_depth(self) -> int:
        """Effective nesting depth limit, after clamping to the recursion limit."""
        return self._max_nesting_depth

    def parse(self, source: str) -> JsonValue:
        """Parse a complete JSON document.

        Surrounding whitespace is allowed; anything else after the value is
        an error.

        Raises:
            ValueError: If source exceeds max_source_size
            ParseFailedError: If the source does not match the grammar

        Example:
            >>> JsonParser().parse('{"key": [1, 2.5]}').get("key.1")
            JsonNumber(value=Decimal('2.5'))
        """
        if self._max_source_size > 0 and len(source) > self._max_source_size:
            diagnostic = ErrorTemplate.source_too_large(len(source), self._max_source_size)
            raise ValueError(diagnostic.message)

        value = run(source, self._document)
        logger.debug("Parsed JSON document (%d characters)", len(source))
        return value


_DEFAULT_PARSER = JsonParser()


def parse_json(source: str) -> JsonValue:
    """Parse ``source`` with the default limits."""
    return _DEFAULT_PARSER.parse(source)
