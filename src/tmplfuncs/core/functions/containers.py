"""Structured containers built inside templates.

- :class:`Tuple`: immutable, position-indexed sequence of call arguments
- :class:`Segments`: immutable mapping of ``_0, _1, ...`` to split segments
"""
from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any, Dict, Iterator, Tuple as _TupleT

from tmplfuncs.core.exceptions import InvalidArgumentError, OutOfRangeError


class Tuple(Sequence):
    """Fixed-length, read-only sequence of heterogeneous values."""

    __slots__ = ("_items",)

    def __init__(self, items: _TupleT[Any, ...] = ()) -> None:
        self._items = tuple(items)

    def __getitem__(self, position):  # type: ignore[no-untyped-def]
        return self._items[position]

    def __len__(self) -> int:
        return len(self._items)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Tuple):
            return self._items == other._items
        if isinstance(other, tuple):
            return self._items == other
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._items)

    def __repr__(self) -> str:
        return f"Tuple{self._items!r}"


class Segments(Mapping):
    """Mapping of ordinal keys (``_0``, ``_1``, ...) to string segments.

    Keys follow segment order. Lookups are by key; Jinja2 attribute access
    (``parts._1``) falls back to item lookup and works as well.
    """

    __slots__ = ("_segments",)

    def __init__(self, segments: Sequence[str] = ()) -> None:
        self._segments: Dict[str, str] = {
            ordinal_key(position): segment for position, segment in enumerate(segments)
        }

    def __getitem__(self, key: str) -> str:
        return self._segments[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._segments)

    def __len__(self) -> int:
        return len(self._segments)

    def __repr__(self) -> str:
        return f"Segments({self._segments!r})"


def ordinal_key(position: int) -> str:
    return f"_{position}"


def make_tuple(*items: Any) -> Tuple:
    """Capture the argument list, in order, as a :class:`Tuple`."""
    return Tuple(items)


def index(seq: Sequence, position: Any) -> Any:
    """Return ``seq[position]`` for ``position`` within ``[0, len(seq))``.

    Raises:
        InvalidArgumentError: If ``seq`` is not a sequence or ``position`` is not an integer
        OutOfRangeError: If ``position`` is negative or past the end
    """
    if not isinstance(seq, Sequence):
        raise InvalidArgumentError(
            f"index needs a sequence, got {type(seq).__name__}",
            context={"argument": "seq", "value": repr(seq)},
        )
    if isinstance(position, bool) or not isinstance(position, int):
        raise InvalidArgumentError(
            f"index must be an integer, got {type(position).__name__}",
            context={"argument": "position", "value": repr(position)},
        )
    length = len(seq)
    if not 0 <= position < length:
        raise OutOfRangeError(
            f"index {position} out of range [0, {length})",
            context={"index": position, "length": length},
        )
    return seq[position]


def split(separator: Any, subject: Any) -> Segments:
    """Split ``subject`` on every literal occurrence of ``separator``.

    Empty segments are kept. An empty separator does not split: the whole
    subject becomes ``_0``.

    Examples:
        >>> dict(split("/", "foo/bar/baz"))
        {'_0': 'foo', '_1': 'bar', '_2': 'baz'}
        >>> dict(split("", "abc"))
        {'_0': 'abc'}
    """
    sep = "" if separator is None else str(separator)
    text = "" if subject is None else str(subject)
    if not sep:
        return Segments([text])
    return Segments(text.split(sep))


__all__ = ["Tuple", "Segments", "ordinal_key", "make_tuple", "index", "split"]
