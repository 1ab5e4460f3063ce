"""parsekit exception hierarchy with structured diagnostics.

Ordinary match failures are never exceptions; they are Failure values.
Exceptions here surface only at the run() boundary or from explicit
limit and value-access checks.

Python 3.13+. Zero external dependencies.
"""

from typing import Any

from .codes import Diagnostic


class ParsekitError(Exception):
    """Base exception for all parsekit errors.

    Attributes:
        diagnostic: Structured diagnostic information (optional)
    """

    def __init__(self, message: str | Diagnostic) -> None:
        """Initialize ParsekitError.

        Args:
            message: Error message string OR Diagnostic object
        """
        if isinstance(message, Diagnostic):
            self.diagnostic: Diagnostic | None = message
            super().__init__(message.message)
        else:
            self.diagnostic = None
            super().__init__(message)


class ParseFailedError(ParsekitError):
    """Top-level parser returned a Failure.

    Raised only by run(). There is no partial result: the whole parse is
    considered failed.

    Attributes:
        input: Input value carried by the Failure
        location: Offset into ``input`` where the mismatch was detected
    """

    def __init__(
        self,
        message: str | Diagnostic,
        *,
        input: Any = None,  # noqa: A002 - mirrors Failure.input
        location: int = 0,
    ) -> None:
        """Initialize ParseFailedError.

        Args:
            message: Rendered message string OR Diagnostic object
            input: Input value at the point of failure
            location: Offset of the mismatch within ``input``
        """
        super().__init__(message)
        self.input = input
        self.location = location


class DepthLimitExceededError(ParsekitError):
    """Raised when a DepthGuard is entered beyond its limit."""


class JsonPathError(ParsekitError):
    """Dot path lookup on a JSON value could not be resolved.

    Example:
        >>> parse_json('{"a": 1}').get("a.b")
        Traceback (most recent call last):
        ...
        JsonPathError: Cannot look up 'b' on JsonNumber
    """
