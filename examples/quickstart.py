"""Quickstart example for parsekit.

Demonstrates:

1. Parsing a JSON document and reading values by dot path
2. Rendered parse errors with line/column and a marker
3. Parser limits (source size, nesting depth)

Python 3.13+.
"""

from __future__ import annotations


def example_1_parse_json() -> None:
    """Parse a document and look values up by path."""
    from parsekit import parse_json

    print("=" * 60)
    print("Example 1: Parse JSON")
    print("=" * 60)

    document = parse_json("""
    {
        "name": "parsekit",
        "tags": ["parsing", "combinators"],
        "release": {"major": 0, "minor": 1.5, "stable": false},
        "license": null
    }
    """)

    print(document.get("name"))
    # Output: JsonString(value='parsekit')
    print(document.get("tags.1").to_python())
    # Output: combinators
    print(document.get("release.minor").to_python())
    # Output: 1.5
    print(document.to_python())


def example_2_errors() -> None:
    """Show how a parse failure is reported."""
    from parsekit import ParseFailedError, parse_json

    print("\n" + "=" * 60)
    print("Example 2: Parse Errors")
    print("=" * 60)

    for source in ('{"a": 1,}', "[1, 2] extra", '{"key" "value"}'):
        try:
            parse_json(source)
        except ParseFailedError as error:
            print(f"{source!r} -> {error}")
            if error.diagnostic is not None:
                print(error.diagnostic.format_error())


def example_3_limits() -> None:
    """Configure source size and nesting depth limits."""
    from parsekit import ParseFailedError
    from parsekit.json import JsonParser

    print("\n" + "=" * 60)
    print("Example 3: Limits")
    print("=" * 60)

    parser = JsonParser(max_source_size=1024, max_nesting_depth=4)
    print(parser.parse("[[[1]]]").to_python())
    # Output: [[[Decimal('1')]]]

    try:
        parser.parse("[[[[[1]]]]]")
    except ParseFailedError as error:
        print(f"Too deep: {error}")

    try:
        parser.parse(" " * 2048)
    except ValueError as error:
        print(f"Too large: {error}")


if __name__ == "__main__":
    example_1_parse_json()
    example_2_errors()
    example_3_limits()
