"""Diagnostic system for parsekit errors.

Provides structured error diagnostics with codes, spans and hints.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode, SourceSpan
from .errors import (
    DepthLimitExceededError,
    JsonPathError,
    ParseFailedError,
    ParsekitError,
)
from .templates import ErrorTemplate

__all__ = [
    "DepthLimitExceededError",
    "Diagnostic",
    "DiagnosticCode",
    "ErrorTemplate",
    "JsonPathError",
    "ParseFailedError",
    "ParsekitError",
    "SourceSpan",
]
