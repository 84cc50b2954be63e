"""Domain-specific configuration for the registered function set."""
from __future__ import annotations

from functools import cached_property
from typing import List

from ..base import BaseDomainConfig


class FunctionsConfig(BaseDomainConfig):
    def _config_section(self) -> str:
        return "functions"

    @cached_property
    def collaborators(self) -> bool:
        """Whether string/date/env/encoding helpers are registered."""
        return bool(self.section.get("collaborators", True))

    @cached_property
    def disabled(self) -> List[str]:
        return [str(name) for name in self.section.get("disabled") or []]
