"""Domain-specific configuration accessors.

- RenderingConfig: Jinja2 environment options and filter installation
- RandomConfig: entropy source for random strings
- FunctionsConfig: which template functions are registered
- LoggingConfig: log level and destination
"""
from __future__ import annotations

from .functions import FunctionsConfig
from .logging import LoggingConfig
from .random import RandomConfig
from .rendering import RenderingConfig

__all__ = [
    "FunctionsConfig",
    "LoggingConfig",
    "RandomConfig",
    "RenderingConfig",
]
