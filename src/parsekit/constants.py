"""Shared constants for parsekit.

Single source of truth for defaults used across the core algebra, the text
adapter and the JSON grammar. Placing constants here avoids circular imports.

Constants are grouped by domain:
- Depth limits: Recursion protection for self-referential grammars
- Input limits: DoS prevention via size constraints
- Rendering: Error message layout

Python 3.13+. Zero external dependencies.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Depth limits
    "MAX_DEPTH",
    "RESERVE_FRAMES",
    "FRAMES_PER_LEVEL",
    # Input limits
    "MAX_SOURCE_SIZE",
    # Rendering
    "RENDER_CONTEXT_CHARS",
    # Character classes
    "WHITESPACE_CHARS",
]

# ============================================================================
# DEPTH LIMITS
# ============================================================================
#
# Recursive-descent grammars recurse on the host call stack. One level of
# JSON nesting costs roughly eight Python frames (guard, alternation, chain,
# separated repetition, key/value chain, lazy reference, ...), so with the
# default recursion limit of 1000 the nesting limit has to stay well below
# 1000 / 8.
#
# ============================================================================

# Maximum active nestings of a guarded parser before it reports a Failure.
MAX_DEPTH: int = 64

# Stack frames kept free for the caller when clamping requested depths.
RESERVE_FRAMES: int = 50

# Python frames budgeted for one nesting level of a guarded grammar. The JSON
# grammar uses eight; the rest is headroom for leaf parsers.
FRAMES_PER_LEVEL: int = 10

# ============================================================================
# INPUT LIMITS
# ============================================================================

# Maximum source size in characters accepted by JsonParser (10 MiB).
MAX_SOURCE_SIZE: int = 10 * 1024 * 1024

# ============================================================================
# RENDERING
# ============================================================================

# Number of characters shown on each side of the failure position in rendered errors.
RENDER_CONTEXT_CHARS: int = 20

# ============================================================================
# CHARACTER CLASSES
# ============================================================================

# Characters matched by the whitespace() primitive.
WHITESPACE_CHARS: str = " \t\n"
