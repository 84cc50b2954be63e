"""Default resolution for template values.

Templates never abort on missing or empty data: a fallback is substituted
instead. "Absent" (no argument at all) and "present but empty" are treated
the same way.
"""
from __future__ import annotations

from typing import Any

from .introspect import is_empty


def default_value(fallback: Any, *given: Any) -> Any:
    """Return ``given[0]`` unless it is missing or empty, else ``fallback``.

    Examples:
        >>> default_value("n/a")
        'n/a'
        >>> default_value("n/a", "")
        'n/a'
        >>> default_value("n/a", 0)
        'n/a'
        >>> default_value("n/a", "tmplfuncs")
        'tmplfuncs'
    """
    if not given or is_empty(given[0]):
        return fallback
    return given[0]


def empty(value: Any) -> bool:
    """Template-facing alias of :func:`is_empty`."""
    return is_empty(value)


def coalesce(*values: Any) -> Any:
    """Return the first non-empty value, or None when every value is empty."""
    for value in values:
        if not is_empty(value):
            return value
    return None


def ternary(if_true: Any, if_false: Any, condition: Any) -> Any:
    # The condition comes last so it can be piped in.
    return if_false if is_empty(condition) else if_true


__all__ = ["default_value", "empty", "coalesce", "ternary"]
