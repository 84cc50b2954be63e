"""Function registry handed to the host template engine.

Functions are registered under fixed, lowercase, unique names:

    registry = FunctionRegistry()

    @registry.register("greet")
    def greet(name: str) -> str:
        return f"Hello, {name}!"

The registry must be fully populated before any template referencing these
names is parsed. Registration mistakes (bad or duplicate names) are setup
errors and raise :class:`RegistryError`; lookups never raise.
"""
from __future__ import annotations

import logging
import re
from types import ModuleType
from typing import Any, Callable, Dict, Iterable, List, Optional

from tmplfuncs.core.exceptions import RegistryError

logger = logging.getLogger(__name__)

# Type for registered functions
FunctionType = Callable[..., Any]

NAME_PATTERN = re.compile(r"^[a-z][a-z0-9_]*$")


class FunctionRegistry:
    """Name to callable mapping for template functions."""

    def __init__(self) -> None:
        """Initialize empty registry."""
        self._functions: Dict[str, FunctionType] = {}

    def register(self, name: str) -> Callable[[FunctionType], FunctionType]:
        """Decorator to register a function.

        Args:
            name: Name to register the function under

        Returns:
            Decorator that registers the function
        """
        def decorator(func: FunctionType) -> FunctionType:
            self.add(name, func)
            return func
        return decorator

    def add(self, name: str, func: FunctionType) -> None:
        """Add a function to the registry.

        Args:
            name: Lowercase identifier to register the function under
            func: The function to register

        Raises:
            RegistryError: If the name is invalid, already taken, or func is not callable
        """
        if not isinstance(name, str) or not NAME_PATTERN.match(name):
            raise RegistryError(
                f"Invalid function name {name!r}: names must be lowercase identifiers",
                context={"name": name},
            )
        if name in self._functions:
            raise RegistryError(f"Function '{name}' is already registered", context={"name": name})
        if not callable(func):
            raise RegistryError(f"Function '{name}' is not callable", context={"name": name})
        self._functions[name] = func
        logger.debug("Registered template function %s -> %s", name, getattr(func, "__qualname__", func))

    def add_module(self, module: ModuleType, names: Optional[Iterable[str]] = None) -> int:
        """Register public functions of ``module`` under their own names.

        Args:
            module: Module to take functions from
            names: Names to register (default: the module's ``__all__``)

        Returns:
            Number of functions registered
        """
        count = 0
        for name in names if names is not None else getattr(module, "__all__", ()):
            obj = getattr(module, name)
            if callable(obj) and not isinstance(obj, type):
                self.add(name, obj)
                count += 1
        return count

    def remove(self, name: str) -> None:
        """Drop ``name`` from the registry if present."""
        self._functions.pop(name, None)

    def get(self, name: str) -> Optional[FunctionType]:
        """Get a function by name.

        Args:
            name: Function name

        Returns:
            The function or None if not found
        """
        return self._functions.get(name)

    def __contains__(self, name: object) -> bool:
        """Check if a function is registered."""
        return name in self._functions

    def __len__(self) -> int:
        return len(self._functions)

    def list_functions(self) -> List[str]:
        """List all registered function names, sorted."""
        return sorted(self._functions)

    def as_dict(self) -> Dict[str, FunctionType]:
        """Return a copy of the name to callable mapping."""
        return dict(self._functions)


__all__ = ["FunctionRegistry", "FunctionType", "NAME_PATTERN"]
