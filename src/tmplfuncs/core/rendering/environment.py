"""Install template functions into a Jinja2 environment.

Every registered function becomes a global (``{{ default("n/a", name) }}``).
When filters are enabled, functions are also installed as filters using
pipeline argument order: the piped value is passed as the LAST argument,
so ``{{ name | default("n/a") }}`` calls ``default("n/a", name)``.

Functions are installed before any template is parsed; the environment is
ready to use as soon as :func:`build_environment` returns.
"""
from __future__ import annotations

import functools
import logging
from pathlib import Path
from typing import Any, Dict, Mapping, Optional

from jinja2 import Environment

from tmplfuncs.core.config import FunctionsConfig, RandomConfig, RenderingConfig
from tmplfuncs.core.functions.builtin import build_registry
from tmplfuncs.core.functions.randomness import RandomStringGenerator, build_source
from tmplfuncs.core.functions.registry import FunctionRegistry, FunctionType

logger = logging.getLogger(__name__)

# Functions whose subject is already the first argument; installed as filters unchanged.
VALUE_FIRST_FILTERS = frozenset({"index"})


def pipeline_filter(func: FunctionType) -> FunctionType:
    """Adapt ``func`` so a Jinja2 filter's piped value becomes its last argument."""

    @functools.wraps(func)
    def _filter(value: Any, *args: Any) -> Any:
        return func(*args, value)

    return _filter


def install_functions(
    env: Environment,
    registry: FunctionRegistry,
    *,
    register_filters: bool = True,
    override_builtin_filters: bool = False,
) -> Environment:
    """Expose ``registry`` to templates rendered by ``env``.

    Args:
        env: Target Jinja2 environment
        registry: Functions to install
        register_filters: Also install functions as pipeline-ordered filters
            (names in ``VALUE_FIRST_FILTERS`` keep their own argument order)
        override_builtin_filters: Replace Jinja2 filters sharing a name

    Returns:
        The same environment, for chaining
    """
    functions = registry.as_dict()
    env.globals.update(functions)
    if register_filters:
        for name, func in functions.items():
            if name in env.filters and not override_builtin_filters:
                logger.debug("Keeping Jinja2 built-in filter %r", name)
                continue
            env.filters[name] = func if name in VALUE_FIRST_FILTERS else pipeline_filter(func)
    return env


def registry_from_config(
    repo_root: Optional[Path] = None,
    *,
    config: Optional[Dict[str, Any]] = None,
) -> FunctionRegistry:
    """Build the standard registry with settings from configuration."""
    functions = FunctionsConfig(repo_root, config=config)
    random_cfg = RandomConfig(repo_root, config=config)
    generator = RandomStringGenerator(build_source(random_cfg.source))
    return build_registry(
        generator,
        include_collaborators=functions.collaborators,
        disabled=functions.disabled,
    )


def build_environment(
    registry: Optional[FunctionRegistry] = None,
    *,
    repo_root: Optional[Path] = None,
    config: Optional[Dict[str, Any]] = None,
    **options: Any,
) -> Environment:
    """Create a Jinja2 environment with template functions installed.

    Args:
        registry: Functions to install (default: built from configuration)
        repo_root: Project root used to locate configuration
        config: Pre-loaded configuration dict (skips file loading)
        **options: Extra ``jinja2.Environment`` keyword arguments

    Returns:
        Configured Environment
    """
    rendering = RenderingConfig(repo_root, config=config)
    if registry is None:
        registry = registry_from_config(repo_root, config=config)
    env = Environment(**{**rendering.environment_options, **options})
    return install_functions(
        env,
        registry,
        register_filters=rendering.register_filters,
        override_builtin_filters=rendering.override_builtin_filters,
    )


def render_template_text(
    text: str,
    context: Mapping[str, Any],
    *,
    environment: Optional[Environment] = None,
) -> str:
    """Render ``text`` with ``context`` using ``environment`` (or a default one)."""
    env = environment or build_environment()
    return env.from_string(text).render(**context)


__all__ = [
    "VALUE_FIRST_FILTERS",
    "pipeline_filter",
    "install_functions",
    "registry_from_config",
    "build_environment",
    "render_template_text",
]
