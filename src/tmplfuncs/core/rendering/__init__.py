"""Jinja2 host environment wiring for tmplfuncs functions."""
from __future__ import annotations

from .environment import (
    build_environment,
    install_functions,
    pipeline_filter,
    registry_from_config,
    render_template_text,
)

__all__ = [
    "build_environment",
    "install_functions",
    "pipeline_filter",
    "registry_from_config",
    "render_template_text",
]
