"""Tests for value introspection: kinds, type labels and emptiness."""
from __future__ import annotations

import gc
import weakref
from dataclasses import dataclass
from decimal import Decimal
from fractions import Fraction

import pytest
from jinja2 import ChainableUndefined, Undefined

from tmplfuncs.core.functions.containers import Segments, make_tuple, split
from tmplfuncs.core.functions.introspect import (
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


@dataclass
class Point:
    x: int = 0
    y: int = 0


class Record:
    """Plain class without fields."""


class Slotted:
    __slots__ = ("value",)

    def __init__(self) -> None:
        self.value = 0


def _gen():
    yield 1


class TestKindOf:
    """Every value is classified into exactly one kind."""

    @pytest.mark.parametrize(
        "value, expected",
        [
            (True, "bool"),
            (False, "bool"),
            (0, "int"),
            (-7, "int"),
            (1.5, "float"),
            (Decimal("2.5"), "float"),
            (Fraction(1, 3), "float"),
            (2j, "float"),
            ("text", "string"),
            ("", "string"),
            ([1, 2], "slice"),
            ((), "slice"),
            ({1}, "slice"),
            (frozenset(), "slice"),
            (b"raw", "slice"),
            (bytearray(), "slice"),
            ({"a": 1}, "map"),
            (Point(), "struct"),
            (Record(), "struct"),
            (Slotted(), "struct"),
            (Ref(Point()), "ptr"),
            (None, "nil"),
            (Undefined(), "nil"),
            (ChainableUndefined(), "nil"),
            (len, "func"),
            (lambda: None, "func"),
            (iter([]), "unsupported"),
            (_gen(), "unsupported"),
            (Point, "unsupported"),
            (pytest, "unsupported"),
            (object(), "unsupported"),
        ],
    )
    def test_kind_labels(self, value, expected) -> None:
        """kind_of returns the expected label for each shape."""
        assert kind_of(value) == expected

    def test_bool_is_not_int(self) -> None:
        """Booleans are their own kind even though bool subclasses int."""
        assert classify(True) is Kind.BOOL
        assert not kind_is("int", True)

    def test_containers_from_this_package(self) -> None:
        """Tuples are sequences and split results are mappings."""
        assert kind_of(make_tuple(1, "a")) == "slice"
        assert kind_of(split("/", "a/b")) == "map"

    def test_kind_is_accepts_enum_members(self) -> None:
        """Kind members compare equal to their labels."""
        assert kind_is(Kind.MAP, {})
        assert kind_is("map", {})
        assert str(Kind.MAP) == "map"

    def test_kind_is_false_on_mismatch(self) -> None:
        assert kind_is("string", 1) is False


class TestTypeOf:
    """Type labels and reference prefixes."""

    def test_plain_labels(self) -> None:
        """Concrete values use their class name."""
        assert type_of(1) == "int"
        assert type_of("a") == "str"
        assert type_of({}) == "dict"
        assert type_of(Point()) == "Point"
        assert type_of(make_tuple()) == "Tuple"

    def test_absent_value_label(self) -> None:
        """Absent values fall back to the kind name."""
        assert type_of(None) == "nil"
        assert type_of(Undefined()) == "nil"

    def test_reference_label_is_prefixed(self) -> None:
        """A reference to T is labelled *T."""
        assert type_of(Ref(Point())) == "*Point"
        assert type_of(make_ref(3)) == "*int"

    def test_nested_references_stack_prefixes(self) -> None:
        assert type_of(Ref(Ref(Point()))) == "**Point"

    def test_typed_nil_reference(self) -> None:
        """A nil reference keeps its declared referent type."""
        assert type_of(Ref(None, of=Point)) == "*Point"
        assert type_of(Ref(None)) == "*nil"

    def test_weakref_is_a_reference(self) -> None:
        point = Point()
        assert type_of(weakref.ref(point)) == "*Point"

    def test_type_is_is_strict(self) -> None:
        """A reference label never matches its referent's bare label."""
        ref = Ref(Point())
        assert type_is("*Point", ref)
        assert not type_is("Point", ref)
        assert type_is("Point", Point())
        assert not type_is("*Point", Point())

    def test_type_is_like_accepts_value_or_reference(self) -> None:
        assert type_is_like("Point", Ref(Point()))
        assert type_is_like("Point", Point())
        assert not type_is_like("Record", Point())
        assert not type_is_like("Point", Ref(Ref(Point())))


class TestIsEmpty:
    """Shape-dependent emptiness."""

    @pytest.mark.parametrize(
        "value",
        [
            None,
            Undefined(),
            False,
            0,
            0.0,
            Decimal("0"),
            Fraction(0),
            0j,
            "",
            [],
            (),
            {},
            set(),
            b"",
            make_tuple(),
            Segments(),
            Ref(None),
            Ref(None, of=Point),
        ],
    )
    def test_zero_values_are_empty(self, value) -> None:
        """Zero value of every introspectable kind is empty."""
        assert is_empty(value) is True

    @pytest.mark.parametrize(
        "value",
        [True, 1, -1, 0.1, " ", [0], (None,), {"": None}, make_tuple(None), Ref(0), Ref(False)],
    )
    def test_non_zero_values_are_not_empty(self, value) -> None:
        assert is_empty(value) is False

    @pytest.mark.parametrize("value", [Decimal("sNaN"), Decimal("NaN"), float("nan"), range(10**20)])
    def test_values_that_resist_inspection_are_not_empty(self, value) -> None:
        """Uncomparable numbers and oversized ranges never raise."""
        assert is_empty(value) is False

    @pytest.mark.parametrize("record", [Point(), Point(0, 0), Record(), Slotted()])
    def test_structs_are_never_empty(self, record) -> None:
        """Records are not empty even when every field holds a zero value."""
        assert is_empty(record) is False

    @pytest.mark.parametrize("value", [len, lambda: None, iter([]), _gen(), object(), Point])
    def test_uninspectable_kinds_are_not_empty(self, value) -> None:
        assert is_empty(value) is False

    def test_dead_weakref_is_empty(self) -> None:
        """A reference whose referent is gone behaves like a nil reference."""
        point = Point()
        ref = weakref.ref(point)
        assert is_empty(ref) is False
        del point
        gc.collect()
        assert is_empty(ref) is True
        assert type_of(ref) == "*nil"

    def test_split_result_is_never_empty(self) -> None:
        """Even splitting an empty string yields one segment."""
        assert is_empty(split("/", "")) is False
