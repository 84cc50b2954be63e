"""tmplfuncs configuration system.

Usage:
    from tmplfuncs.core.config import ConfigManager, RenderingConfig

    config = ConfigManager(repo_root=Path("/path/to/project")).load_config()
    rendering = RenderingConfig(repo_root=Path("/path/to/project"))
    rendering.register_filters
"""
from __future__ import annotations

from .base import BaseDomainConfig
from .cache import clear_all_caches, get_cached_config, is_cached
from .domains import FunctionsConfig, LoggingConfig, RandomConfig, RenderingConfig
from .manager import ConfigManager

__all__ = [
    # Core
    "ConfigManager",
    "BaseDomainConfig",
    # Caching
    "get_cached_config",
    "clear_all_caches",
    "is_cached",
    # Domain configs
    "FunctionsConfig",
    "LoggingConfig",
    "RandomConfig",
    "RenderingConfig",
]
