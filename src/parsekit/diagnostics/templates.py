"""Error message templates.

Centralized error message templates for testable, consistent error messages.
Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode, SourceSpan


class ErrorTemplate:
    """Centralized error message templates.

    All error messages are created here. NO f-strings in exception constructors!
    This keeps messages testable and documents every error case in one place.
    """

    @staticmethod
    def parse_failed(rendered: str, span: SourceSpan | None = None) -> Diagnostic:
        """Top-level parser returned a Failure.

        Args:
            rendered: Human-readable rendering of the failure position
            span: Source location, when the input type knows one

        Returns:
            Diagnostic for PARSE_FAILED
        """
        return Diagnostic(
            code=DiagnosticCode.PARSE_FAILED,
            message=rendered,
            span=span,
            hint="Check the input near the marked character",
        )

    @staticmethod
    def depth_exceeded(max_depth: int) -> Diagnostic:
        """Maximum nesting depth exceeded.

        Args:
            max_depth: The configured limit

        Returns:
            Diagnostic for MAX_DEPTH_EXCEEDED
        """
        msg = f"Maximum nesting depth ({max_depth}) exceeded"
        return Diagnostic(
            code=DiagnosticCode.MAX_DEPTH_EXCEEDED,
            message=msg,
            hint="Reduce nesting or raise max_nesting_depth",
        )

    @staticmethod
    def source_too_large(size: int, max_size: int) -> Diagnostic:
        """Input exceeds the configured size limit.

        Args:
            size: Actual source size in characters
            max_size: Configured limit in characters

        Returns:
            Diagnostic for SOURCE_TOO_LARGE
        """
        msg = f"Source size ({size:,} characters) exceeds maximum ({max_size:,} characters)"
        return Diagnostic(
            code=DiagnosticCode.SOURCE_TOO_LARGE,
            message=msg,
            hint="Configure max_source_size in the JsonParser constructor to increase limit",
        )

    @staticmethod
    def path_not_found(segment: str, kind: str) -> Diagnostic:
        """Dot path segment missing from a container.

        Args:
            segment: The key or index that was not found
            kind: Type name of the container

        Returns:
            Diagnostic for PATH_NOT_FOUND
        """
        msg = f"'{segment}' not found in {kind}"
        return Diagnostic(code=DiagnosticCode.PATH_NOT_FOUND, message=msg)

    @staticmethod
    def path_through_scalar(segment: str, kind: str) -> Diagnostic:
        """Dot path continues through a scalar value.

        Args:
            segment: The segment that could not be applied
            kind: Type name of the scalar

        Returns:
            Diagnostic for PATH_THROUGH_SCALAR
        """
        msg = f"Cannot look up '{segment}' on {kind}"
        return Diagnostic(code=DiagnosticCode.PATH_THROUGH_SCALAR, message=msg)
