"""Depth limiting for self-referential grammars.

Recursive-descent parsers recurse on the interpreter stack, so deeply
nested input can exhaust it. DepthGuard counts active nestings and refuses
to go past a limit, which lets the guarded() combinator report a Failure
instead of raising RecursionError.

Thread-safe: guarded() keeps one DepthGuard per thread.
Python 3.13+.
"""

from __future__ import annotations

import logging
import sys
from dataclasses import dataclass, field

from parsekit.constants import MAX_DEPTH, RESERVE_FRAMES
from parsekit.diagnostics import DepthLimitExceededError, ErrorTemplate

__all__ = ["DepthGuard", "depth_clamp"]

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class DepthGuard:
    """Context manager for tracking and limiting recursion depth.

    Usage:
        guard = DepthGuard(max_depth=32)
        with guard:
            outcome = parser(inp)

    Mutability Note:
        Intentionally mutable (not frozen=True): current_depth is
        incremented/decremented on __enter__/__exit__.

    Attributes:
        max_depth: Maximum allowed depth (default: MAX_DEPTH)
        current_depth: Current nesting depth
    """

    max_depth: int = MAX_DEPTH
    current_depth: int = field(default=0, init=False)

    def __post_init__(self) -> None:
        """Clamp max_depth against Python recursion limit."""
        self.max_depth = depth_clamp(self.max_depth)

    def __enter__(self) -> DepthGuard:
        """Enter guarded section, increment depth.

        Validates the limit BEFORE incrementing: __exit__ is not called when
        __enter__ raises, so incrementing first would leave current_depth
        permanently elevated.
        """
        if self.current_depth >= self.max_depth:
            raise DepthLimitExceededError(ErrorTemplate.depth_exceeded(self.max_depth))
        self.current_depth += 1
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: object,
    ) -> None:
        """Exit guarded section, decrement depth."""
        self.current_depth -= 1

    def is_exceeded(self) -> bool:
        """Check if depth limit has been reached."""
        return self.current_depth >= self.max_depth


def depth_clamp(
    requested_depth: int,
    reserve_frames: int = RESERVE_FRAMES,
    frames_per_level: int = 1,
) -> int:
    """Clamp requested depth against Python recursion limit.

    Depth is counted in nesting levels; each level may cost several stack
    frames. Logs a warning if clamping occurs.

    Args:
        requested_depth: Desired maximum depth
        reserve_frames: Stack frames to reserve for call overhead
        frames_per_level: Stack frames consumed by one nesting level

    Returns:
        Safe depth value, clamped if necessary

    Example:
        >>> import sys
        >>> sys.setrecursionlimit(200)
        >>> depth_clamp(100)
        100
        >>> depth_clamp(500)
        150
        >>> depth_clamp(100, frames_per_level=10)
        15
    """
    max_safe_depth = (sys.getrecursionlimit() - reserve_frames) // max(frames_per_level, 1)
    if requested_depth > max_safe_depth:
        logger.warning(
            "Requested depth %d exceeds Python recursion limit (%d). "
            "Clamping to %d to prevent RecursionError.",
            requested_depth,
            sys.getrecursionlimit(),
            max_safe_depth,
        )
        return max_safe_depth
    return requested_depth
