"""Tests for FunctionRegistry and the standard function set."""
from __future__ import annotations

import logging
import random

import pytest

from tmplfuncs.core.exceptions import RegistryError
from tmplfuncs.core.functions import strings
from tmplfuncs.core.functions.builtin import build_registry
from tmplfuncs.core.functions.randomness import RandomStringGenerator
from tmplfuncs.core.functions.registry import FunctionRegistry

CORE_NAMES = {
    "kindof", "kindis", "typeof", "typeis", "typeislike", "ref",
    "default", "empty", "coalesce", "ternary",
    "tuple", "index", "split",
    "randalpha", "randalphanum", "randnumeric", "randascii",
}

COLLABORATOR_NAMES = {
    "upper", "lower", "title", "untitle", "trim", "trimall", "trimprefix", "trimsuffix",
    "repeat", "substr", "contains", "hasprefix", "hassuffix", "quote", "squote", "cat",
    "indent", "replace", "plural", "wrap", "wrapwith", "join",
    "now", "date", "dateinzone", "htmldate", "htmldateinzone", "datemodify",
    "env", "expandenv",
    "b64enc", "b64dec", "b32enc", "b32dec",
}


class TestFunctionRegistry:
    """Test function registration and lookup."""

    def test_register_function_simple(self) -> None:
        """Can register a simple function."""
        registry = FunctionRegistry()

        @registry.register("hello")
        def hello_func() -> str:
            return "Hello, World!"

        assert "hello" in registry
        assert registry.get("hello")() == "Hello, World!"

    def test_register_function_with_args(self) -> None:
        registry = FunctionRegistry()
        registry.add("greet", lambda name: f"Hello, {name}!")
        assert registry.get("greet")("tmplfuncs") == "Hello, tmplfuncs!"

    def test_missing_function_returns_none(self) -> None:
        """Getting a missing function returns None."""
        assert FunctionRegistry().get("nonexistent") is None

    @pytest.mark.parametrize("name", ["typeOf", "Upper", "", "1st", "with-dash", "has space", None])
    def test_invalid_names_rejected(self, name) -> None:
        """Names are lowercase identifiers."""
        with pytest.raises(RegistryError):
            FunctionRegistry().add(name, len)  # type: ignore[arg-type]

    def test_duplicate_name_rejected(self) -> None:
        registry = FunctionRegistry()
        registry.add("dup", len)
        with pytest.raises(RegistryError) as excinfo:
            registry.add("dup", str)
        assert excinfo.value.context == {"name": "dup"}
        assert registry.get("dup") is len

    def test_non_callable_rejected(self) -> None:
        with pytest.raises(RegistryError):
            FunctionRegistry().add("value", 42)  # type: ignore[arg-type]

    def test_list_functions_sorted(self) -> None:
        registry = FunctionRegistry()
        registry.add("zeta", len)
        registry.add("alpha", len)
        assert registry.list_functions() == ["alpha", "zeta"]

    def test_as_dict_is_a_copy(self) -> None:
        registry = FunctionRegistry()
        registry.add("f", len)
        mapping = registry.as_dict()
        mapping["g"] = len
        assert "g" not in registry

    def test_add_module_uses_dunder_all(self) -> None:
        registry = FunctionRegistry()
        count = registry.add_module(strings)
        assert count == len(strings.__all__)
        assert "_text" not in registry
        assert registry.get("upper")("x") == "X"

    def test_remove(self) -> None:
        registry = FunctionRegistry()
        registry.add("f", len)
        registry.remove("f")
        registry.remove("never-there")
        assert "f" not in registry


class TestBuildRegistry:
    def test_contains_core_and_collaborators(self) -> None:
        names = set(build_registry().list_functions())
        assert names == CORE_NAMES | COLLABORATOR_NAMES

    def test_core_only(self) -> None:
        names = set(build_registry(include_collaborators=False).list_functions())
        assert names == CORE_NAMES

    def test_disabled_names_are_left_out(self) -> None:
        registry = build_registry(disabled=["randascii", "env"])
        assert "randascii" not in registry
        assert "env" not in registry
        assert "randalpha" in registry

    def test_disabling_unknown_name_warns(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.WARNING, logger="tmplfuncs"):
            build_registry(disabled=["nosuch"])
        assert "nosuch" in caplog.text

    def test_random_functions_use_injected_generator(self) -> None:
        first = build_registry(RandomStringGenerator(random.Random(5)))
        second = build_registry(RandomStringGenerator(random.Random(5)))
        assert first.get("randalphanum")(20) == second.get("randalphanum")(20)

    def test_registered_functions_behave(self) -> None:
        registry = build_registry()
        assert registry.get("default")("fb", "") == "fb"
        assert registry.get("index")(registry.get("tuple")(1, "a", "foo"), 2) == "foo"
        assert dict(registry.get("split")("/", "a/b")) == {"_0": "a", "_1": "b"}
        assert registry.get("typeislike")("int", registry.get("ref")(3))
        assert registry.get("kindof")([]) == "slice"
