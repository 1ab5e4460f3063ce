"""Hypothesis strategies for parsekit property-based testing.

Strategies are organized by domain:

- text: Source text, cursors, character sets, separated lists
- documents: JSON-like documents paired with their plain Python values

Usage:
    from tests.strategies import cursors, literals
    from tests.strategies.documents import json_documents
"""

from .documents import dump, json_documents, json_plain_values
from .text import (
    SMALL_ALPHABET,
    char_sets,
    cursors,
    literals,
    separated_digits,
    small_source_text,
    source_text,
)

__all__ = [
    "SMALL_ALPHABET",
    "char_sets",
    "cursors",
    "dump",
    "json_documents",
    "json_plain_values",
    "literals",
    "separated_digits",
    "small_source_text",
    "source_text",
]
