"""Template functions.

- introspect: kind/type labels and emptiness of arbitrary values
- defaults: fallback resolution for empty values
- containers: tuples and ordinal-keyed split results
- randomness: random strings over fixed alphabets
- strings, dates, env, encoding: thin helpers over the standard library
- registry/builtin: the name to callable mapping given to the host engine
"""
from __future__ import annotations

from .builtin import build_registry
from .containers import Segments, Tuple, index, make_tuple, split
from .defaults import coalesce, default_value, empty, ternary
from .introspect import (
    Kind,
    Ref,
    classify,
    is_empty,
    kind_is,
    kind_of,
    make_ref,
    type_is,
    type_is_like,
    type_of,
)
from .randomness import Alphabet, RandomStringGenerator
from .registry import FunctionRegistry

__all__ = [
    # Registry
    "FunctionRegistry",
    "build_registry",
    # Introspection
    "Kind",
    "Ref",
    "classify",
    "is_empty",
    "kind_is",
    "kind_of",
    "make_ref",
    "type_is",
    "type_is_like",
    "type_of",
    # Defaults
    "coalesce",
    "default_value",
    "empty",
    "ternary",
    # Containers
    "Segments",
    "Tuple",
    "index",
    "make_tuple",
    "split",
    # Random strings
    "Alphabet",
    "RandomStringGenerator",
]
