"""Domain-specific configuration for the Jinja2 host environment."""
from __future__ import annotations

from functools import cached_property
from typing import Any, Dict

from jinja2 import ChainableUndefined, Undefined

from ..base import BaseDomainConfig


class RenderingConfig(BaseDomainConfig):
    def _config_section(self) -> str:
        return "rendering"

    @cached_property
    def register_filters(self) -> bool:
        return bool(self.section.get("register_filters", True))

    @cached_property
    def override_builtin_filters(self) -> bool:
        return bool(self.section.get("override_builtin_filters", False))

    @cached_property
    def chainable_undefined(self) -> bool:
        return bool(self.section.get("chainable_undefined", True))

    @cached_property
    def environment_options(self) -> Dict[str, Any]:
        """Keyword arguments for ``jinja2.Environment``."""
        return {
            "trim_blocks": bool(self.section.get("trim_blocks", True)),
            "lstrip_blocks": bool(self.section.get("lstrip_blocks", True)),
            "keep_trailing_newline": bool(self.section.get("keep_trailing_newline", False)),
            "undefined": ChainableUndefined if self.chainable_undefined else Undefined,
        }
