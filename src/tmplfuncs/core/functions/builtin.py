"""Standard template function set.

``build_registry`` assembles the core functions (introspection, defaults,
containers, random strings) and, optionally, the string/date/environment/
encoding helpers into a fresh :class:`FunctionRegistry`.
"""
from __future__ import annotations

import logging
from typing import Iterable, Optional

from . import dates, encoding, env, strings
from .containers import index, make_tuple, split
from .defaults import coalesce, default_value, empty, ternary
from .introspect import kind_is, kind_of, make_ref, type_is, type_is_like, type_of
from .randomness import RandomStringGenerator
from .registry import FunctionRegistry

logger = logging.getLogger(__name__)

COLLABORATOR_MODULES = (strings, dates, env, encoding)


def build_registry(
    generator: Optional[RandomStringGenerator] = None,
    *,
    include_collaborators: bool = True,
    disabled: Iterable[str] = (),
) -> FunctionRegistry:
    """Create a registry holding the standard template functions.

    Args:
        generator: Random string generator to bind (default: a new one with its own source)
        include_collaborators: Also register string, date, env and encoding helpers
        disabled: Names to leave out of the registry

    Returns:
        Populated FunctionRegistry
    """
    registry = FunctionRegistry()
    rand = generator or RandomStringGenerator()

    registry.add("kindof", kind_of)
    registry.add("kindis", kind_is)
    registry.add("typeof", type_of)
    registry.add("typeis", type_is)
    registry.add("typeislike", type_is_like)
    registry.add("ref", make_ref)

    registry.add("default", default_value)
    registry.add("empty", empty)
    registry.add("coalesce", coalesce)
    registry.add("ternary", ternary)

    registry.add("tuple", make_tuple)
    registry.add("index", index)
    registry.add("split", split)

    registry.add("randalpha", rand.alpha)
    registry.add("randalphanum", rand.alphanumeric)
    registry.add("randnumeric", rand.numeric)
    registry.add("randascii", rand.ascii)

    if include_collaborators:
        for module in COLLABORATOR_MODULES:
            registry.add_module(module)

    for name in disabled:
        if name in registry:
            registry.remove(name)
        else:
            logger.warning("Cannot disable unknown template function %r", name)

    logger.debug("Built function registry with %d functions", len(registry))
    return registry


__all__ = ["build_registry", "COLLABORATOR_MODULES"]
