from __future__ import annotations

from typing import Any, Dict, Mapping


class TmplfuncsError(Exception):
    """Base exception for tmplfuncs."""

    context: Dict[str, Any]

    def __init__(self, message: str = "", *, context: Mapping[str, Any] | None = None) -> None:
        super().__init__(message)
        if context is not None:
            # Store a shallow copy to avoid accidental mutation.
            self.context = dict(context)
        else:
            self.context = {}

    def to_json_error(self) -> Dict[str, Any]:
        """Return a JSON-serializable error payload."""
        return {
            "message": str(self),
            "code": self.__class__.__name__,
            "context": self.context,
        }


class OutOfRangeError(TmplfuncsError, IndexError):
    """Raised when a position lies outside ``[0, len)`` of a sequence."""

    def __init__(self, message: str = "", *, context: Mapping[str, Any] | None = None) -> None:
        TmplfuncsError.__init__(self, message, context=context)
        IndexError.__init__(self, message)


class InvalidArgumentError(TmplfuncsError, ValueError):
    """Raised when a template function receives an argument it cannot accept."""

    def __init__(self, message: str = "", *, context: Mapping[str, Any] | None = None) -> None:
        TmplfuncsError.__init__(self, message, context=context)
        ValueError.__init__(self, message)


class RegistryError(TmplfuncsError, ValueError):
    """Raised when a function cannot be registered under the requested name."""

    def __init__(self, message: str = "", *, context: Mapping[str, Any] | None = None) -> None:
        TmplfuncsError.__init__(self, message, context=context)
        ValueError.__init__(self, message)


class ConfigError(TmplfuncsError, ValueError):
    """Raised when configuration cannot be loaded or fails validation."""

    def __init__(
        self,
        message: str,
        *,
        path: str | None = None,
        details: str | None = None,
        context: Mapping[str, Any] | None = None,
    ) -> None:
        ctx = dict(context or {})
        if path:
            ctx["path"] = path
        if details:
            ctx["details"] = details
        TmplfuncsError.__init__(self, message, context=ctx)
        ValueError.__init__(self, message)


__all__ = [
    "TmplfuncsError",
    "OutOfRangeError",
    "InvalidArgumentError",
    "RegistryError",
    "ConfigError",
]
