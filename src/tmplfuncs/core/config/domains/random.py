"""Domain-specific configuration for random string generation."""
from __future__ import annotations

from functools import cached_property

from ..base import BaseDomainConfig


class RandomConfig(BaseDomainConfig):
    def _config_section(self) -> str:
        return "random"

    @cached_property
    def source(self) -> str:
        """Entropy source name: ``pseudo`` or ``system``."""
        return str(self.section.get("source", "pseudo"))
