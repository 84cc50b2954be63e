"""Value introspection for template functions.

Every value a template hands to a function is classified into exactly one
:class:`Kind` by :func:`classify`. All other helpers in this module
(``kind_of``, ``type_of``, ``is_empty`` ...) are derived from that single
classification, so supporting a new shape means extending ``Kind`` and
``classify`` and nothing else.

Python has no pointers. A reference is modelled explicitly with :class:`Ref`
(``weakref.ref`` objects are references too). Type labels of references are
``*``-prefixed and are never dereferenced for comparison:

    >>> type_of(Ref(Point(1, 2)))
    '*Point'
    >>> type_is("Point", Ref(Point(1, 2)))
    False
    >>> type_is_like("Point", Ref(Point(1, 2)))
    True

None of the functions here raise.
"""
from __future__ import annotations

import asyncio
import dataclasses
import inspect
import queue
import weakref
from collections.abc import AsyncIterator, Iterator, Mapping, Sequence, Set
from dataclasses import dataclass
from enum import Enum
from functools import partial
from numbers import Integral, Number
from types import ModuleType
from typing import Any, Optional

from jinja2 import Undefined
from jinja2.runtime import Macro


class Kind(str, Enum):
    """Closed set of value shapes understood by the introspector."""

    BOOL = "bool"
    INT = "int"
    FLOAT = "float"
    STRING = "string"
    SLICE = "slice"
    MAP = "map"
    STRUCT = "struct"
    PTR = "ptr"
    NIL = "nil"
    FUNC = "func"
    UNSUPPORTED = "unsupported"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class Ref:
    """Explicit reference to a value.

    ``of`` names the referent type of a nil reference, so ``Ref(None, of=Foo)``
    still carries the label ``*Foo``.
    """

    target: Any = None
    of: Optional[type] = None

    @property
    def is_nil(self) -> bool:
        return self.target is None


# Shapes that cannot be inspected without consuming or blocking on them.
_OPAQUE_TYPES = (Iterator, AsyncIterator, queue.Queue, asyncio.Queue, ModuleType, type)


def _deref(value: Any) -> Any:
    if isinstance(value, Ref):
        return value.target
    return value()


def classify(value: Any) -> Kind:
    """Return the :class:`Kind` of ``value``. Total over all Python objects."""
    if value is None or isinstance(value, Undefined):
        return Kind.NIL
    if isinstance(value, bool):
        return Kind.BOOL
    if isinstance(value, Integral):
        return Kind.INT
    if isinstance(value, Number):
        return Kind.FLOAT
    if isinstance(value, str):
        return Kind.STRING
    if isinstance(value, (Ref, weakref.ReferenceType)):
        return Kind.PTR
    if isinstance(value, Mapping):
        return Kind.MAP
    if isinstance(value, (Sequence, Set, bytearray)):
        return Kind.SLICE
    if inspect.isroutine(value) or isinstance(value, (partial, Macro)):
        return Kind.FUNC
    if isinstance(value, _OPAQUE_TYPES) or inspect.isawaitable(value):
        return Kind.UNSUPPORTED
    if dataclasses.is_dataclass(value) or hasattr(value, "__dict__") or hasattr(value, "__slots__"):
        return Kind.STRUCT
    return Kind.UNSUPPORTED


def kind_of(value: Any) -> str:
    """Return the kind label of ``value`` (e.g. ``"int"``, ``"map"``)."""
    return classify(value).value


def kind_is(expected: str, value: Any) -> bool:
    return kind_of(value) == expected


def type_of(value: Any) -> str:
    """Return the display label of ``value``'s concrete type.

    References yield ``*`` followed by the referent's label; absent values
    yield ``nil``.
    """
    kind = classify(value)
    if kind is Kind.PTR:
        target = _deref(value)
        if target is None:
            of = value.of if isinstance(value, Ref) else None
            return "*" + (of.__qualname__ if of is not None else Kind.NIL.value)
        return "*" + type_of(target)
    if kind is Kind.NIL:
        return Kind.NIL.value
    return type(value).__qualname__


def type_is(expected: str, value: Any) -> bool:
    """Strict label comparison; ``*Foo`` never matches ``Foo``."""
    return type_of(value) == expected


def type_is_like(expected: str, value: Any) -> bool:
    """True for ``expected`` itself or a reference to it."""
    label = type_of(value)
    return label == expected or label == "*" + expected


def is_empty(value: Any) -> bool:
    """Decide whether ``value`` is empty for its kind.

    Structs are never empty; kinds that cannot be inspected are reported as
    not empty.
    """
    kind = classify(value)
    if kind is Kind.NIL:
        return True
    if kind is Kind.PTR:
        return _deref(value) is None
    if kind is Kind.BOOL:
        return not value
    if kind in (Kind.INT, Kind.FLOAT):
        try:
            return value == 0
        except ArithmeticError:
            # Signaling NaN refuses comparison; it is not zero.
            return False
    if kind in (Kind.STRING, Kind.SLICE, Kind.MAP):
        try:
            return len(value) == 0
        except OverflowError:
            # Length past sys.maxsize, e.g. range(10**20).
            return False
    return False


def make_ref(value: Any) -> Ref:
    """Wrap ``value`` in a :class:`Ref` (registered as ``ref``)."""
    return Ref(value)


__all__ = [
    "Kind",
    "Ref",
    "classify",
    "kind_of",
    "kind_is",
    "type_of",
    "type_is",
    "type_is_like",
    "is_empty",
    "make_ref",
]
