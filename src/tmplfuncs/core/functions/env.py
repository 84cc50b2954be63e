"""Environment variable helpers exposed to templates."""
from __future__ import annotations

import os
from typing import Any


def env(name: Any) -> str:
    """Return the value of environment variable ``name``, or ``""``."""
    return os.environ.get(str(name), "")


def expandenv(s: Any) -> str:
    """Expand ``$VAR`` and ``${VAR}`` references; unknown names are left as-is."""
    return os.path.expandvars("" if s is None else str(s))


__all__ = ["env", "expandenv"]
