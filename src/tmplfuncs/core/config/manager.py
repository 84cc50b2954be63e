"""
tmplfuncs configuration management (YAML layers + environment overrides).
"""
from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Any, Dict, Iterator, List, Optional, Tuple

import yaml
from jsonschema import Draft202012Validator

from tmplfuncs.core.exceptions import ConfigError
from tmplfuncs.data import bundled_path, load_bundled_yaml

logger = logging.getLogger(__name__)

ENV_PREFIX = "TMPLFUNCS_"
PROJECT_CONFIG_NAMES = ("tmplfuncs.yaml", "tmplfuncs.yml")
SCHEMA_NAME = "config.schema.yaml"


def merge_layers(lower: Dict[str, Any], upper: Dict[str, Any]) -> Dict[str, Any]:
    """Overlay ``upper`` on ``lower``. Nested mappings merge key by key; anything
    else in ``upper`` (lists included) replaces the lower value. Inputs are not
    modified.
    """
    merged = dict(lower)
    for key, value in upper.items():
        below = merged.get(key)
        merged[key] = merge_layers(below, value) if isinstance(below, dict) and isinstance(value, dict) else value
    return merged


class ConfigManager:
    """Load, merge, and validate tmplfuncs configuration.

    Configuration sources (highest to lowest priority):
    1. Environment variables: TMPLFUNCS_<SECTION>__<KEY>
    2. Project config: <repo_root>/tmplfuncs.yaml (or .yml)
    3. Bundled defaults: tmplfuncs.data/config/defaults.yaml
    """

    def __init__(self, repo_root: Optional[Path] = None) -> None:
        self.repo_root = Path(repo_root) if repo_root is not None else Path.cwd()
        self.defaults_path = bundled_path("config", "defaults.yaml")

    @property
    def project_config_path(self) -> Optional[Path]:
        """First existing project config file, if any."""
        for name in PROJECT_CONFIG_NAMES:
            candidate = self.repo_root / name
            if candidate.is_file():
                return candidate
        return None

    def load_yaml(self, path: Path) -> Dict[str, Any]:
        try:
            data = yaml.safe_load(Path(path).read_text(encoding="utf-8"))
        except (OSError, yaml.YAMLError) as exc:
            raise ConfigError(f"Cannot read config file {path}", path=str(path), details=str(exc)) from exc
        if data is None:
            return {}
        if not isinstance(data, dict):
            raise ConfigError(
                f"Config file {path} must contain a mapping, got {type(data).__name__}",
                path=str(path),
            )
        return data

    def _coerce_type(self, value: str) -> Any:
        """Type an override the way YAML types a scalar.

        Booleans, numbers and null become Python values and ``[...]`` or
        ``{...}`` parse as flow collections; anything else stays a string.
        """
        text = value.strip()
        try:
            parsed = yaml.safe_load(text)
        except yaml.YAMLError:
            return text
        if parsed is None or isinstance(parsed, (bool, int, float)):
            return parsed
        if isinstance(parsed, (list, dict)) and text[:1] in ("[", "{"):
            return parsed
        return text

    def _parse_env_key(self, raw: str) -> List[str]:
        """``RENDERING__TRIM_BLOCKS`` -> ``["rendering", "trim_blocks"]``; empty segments reject the key."""
        parts = [part.lower() for part in raw.split("__")]
        if "" in parts:
            logger.warning("Ignoring malformed override %s%s", ENV_PREFIX, raw)
            return []
        return parts

    def _iter_env_overrides(self) -> Iterator[Tuple[List[str], Any]]:
        for key in sorted(k for k in os.environ if k.startswith(ENV_PREFIX)):
            path = self._parse_env_key(key[len(ENV_PREFIX):])
            if path:
                yield path, self._coerce_type(os.environ[key])

    def apply_env_overrides(self, cfg: Dict[str, Any]) -> Dict[str, Any]:
        """Return ``cfg`` with TMPLFUNCS_* environment overrides applied."""
        result = dict(cfg)
        for path, value in self._iter_env_overrides():
            nested: Any = value
            for part in reversed(path):
                nested = {part: nested}
            result = merge_layers(result, nested)
        return result

    def validate_schema(self, config: Dict[str, Any]) -> None:
        """Validate ``config`` against the bundled JSON schema.

        Raises:
            ConfigError: Listing every violation found
        """
        schema = load_bundled_yaml("schemas", SCHEMA_NAME)
        validator = Draft202012Validator(schema)
        errors = sorted(validator.iter_errors(config), key=lambda e: list(e.path))
        if errors:
            details = "; ".join(
                f"{'.'.join(str(p) for p in err.path) or '<root>'}: {err.message}" for err in errors
            )
            raise ConfigError("Invalid tmplfuncs configuration", details=details)

    def load_config(self, validate: bool = True) -> Dict[str, Any]:
        """Return the merged configuration (cached per root and environment)."""
        from .cache import get_cached_config

        return get_cached_config(self.repo_root, validate=validate)

    def _load_config_uncached(self, validate: bool = True) -> Dict[str, Any]:
        cfg = self.load_yaml(self.defaults_path)
        project_path = self.project_config_path
        if project_path is not None:
            logger.debug("Merging project config %s", project_path)
            cfg = merge_layers(cfg, self.load_yaml(project_path))
        cfg = self.apply_env_overrides(cfg)
        if validate:
            self.validate_schema(cfg)
        return cfg


__all__ = ["ConfigManager", "ENV_PREFIX", "PROJECT_CONFIG_NAMES", "merge_layers"]
