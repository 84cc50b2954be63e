"""Shared shape of the per-section configuration accessors."""
from __future__ import annotations

from abc import ABC, abstractmethod
from functools import cached_property
from pathlib import Path
from typing import Any, Dict, Optional

from .cache import get_cached_config


class BaseDomainConfig(ABC):
    """Read-only view over one top-level section of the merged configuration.

    Subclasses name their section and expose typed settings as cached
    properties, falling back to the bundled default when a key is absent:

        class RandomConfig(BaseDomainConfig):
            def _config_section(self) -> str:
                return "random"

            @cached_property
            def source(self) -> str:
                return str(self.section.get("source", "pseudo"))

    Passing ``config`` uses that dict as the whole configuration and skips
    file and environment lookup.
    """

    def __init__(self, repo_root: Optional[Path] = None, *, config: Optional[Dict[str, Any]] = None) -> None:
        self._repo_root = repo_root
        if config is None:
            config = get_cached_config(repo_root=repo_root)
        self._config = config

    @abstractmethod
    def _config_section(self) -> str:
        ...

    @cached_property
    def section(self) -> Dict[str, Any]:
        return self._config.get(self._config_section()) or {}


__all__ = ["BaseDomainConfig"]
