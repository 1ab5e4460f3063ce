"""parsekit - Parser combinators over an abstract input type.

Build recursive-descent parsers by composing small parsing functions. A
parser is a plain callable from an input to a ParseOutcome (Success or
Failure); ordinary mismatches are values, never exceptions.

Public API:
    parsekit.core - Combinator algebra (map_, flat_map, sequence, one_of, ...)
    parsekit.text - Cursor input and character-level primitives
    parsekit.json - Demonstration JSON grammar
    parse_json - Parse a JSON document with default limits

Exceptions:
    ParsekitError - Base exception class
    ParseFailedError - Top-level parse failure raised by run()

Known limitation:
    Recursion uses the interpreter stack. Wrap recursive entry points with
    parsekit.core.guarded() to turn excessive nesting into a Failure.
"""

from .core import Failure, ParseOutcome, Parser, Success
from .diagnostics import ParseFailedError, ParsekitError
from .json import parse_json

# Version information - Auto-populated from package metadata
# SINGLE SOURCE OF TRUTH: pyproject.toml [project] version
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _get_version

try:
    __version__ = _get_version("parsekit")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__all__ = [
    "Failure",
    "ParseFailedError",
    "ParseOutcome",
    "Parser",
    "ParsekitError",
    "Success",
    "__version__",
    "parse_json",
]
