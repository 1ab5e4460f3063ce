"""Core combinator algebra, generic over the input type.

This package knows nothing about strings, bytes or JSON. Input adapters
(see :mod:`parsekit.text`) provide the primitive parsers; everything here
composes them.

    core <- text <- json

Exports:
    Success, Failure, ParseOutcome, Parser: Outcome shape and parser type
    map_, flat_map, both, map2, sequence, chain, one_of, optional,
    many0, many1, many0_separated: Combinators
    succeed, fail, preceded, terminated, lazy, guarded: Helpers
    run: Top-level entry point
    DepthGuard: Context manager for recursion depth limiting

Python 3.13+.
"""

from .combinators import (
    both,
    chain,
    fail,
    flat_map,
    guarded,
    lazy,
    many0,
    many0_separated,
    many1,
    map2,
    map_,
    one_of,
    optional,
    preceded,
    sequence,
    succeed,
    terminated,
)
from .depth_guard import DepthGuard, depth_clamp
from .outcome import Failure, ParseOutcome, Parser, Success
from .runner import default_render, run

__all__ = [
    "DepthGuard",
    "Failure",
    "ParseOutcome",
    "Parser",
    "Success",
    "both",
    "chain",
    "default_render",
    "depth_clamp",
    "fail",
    "flat_map",
    "guarded",
    "lazy",
    "many0",
    "many0_separated",
    "many1",
    "map2",
    "map_",
    "one_of",
    "optional",
    "preceded",
    "run",
    "sequence",
    "succeed",
    "terminated",
]
