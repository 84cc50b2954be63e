"""Files shipped inside the package: default configuration and the config schema."""
from __future__ import annotations

from functools import lru_cache
from importlib import resources
from pathlib import Path
from typing import Any, Dict

import yaml

PACKAGE = "tmplfuncs.data"


def bundled_path(folder: str, name: str = "") -> Path:
    """Filesystem path of ``folder/name`` under ``tmplfuncs/data``."""
    root = Path(str(resources.files(PACKAGE).joinpath(folder)))
    return root / name if name else root


@lru_cache(maxsize=None)
def load_bundled_yaml(folder: str, name: str) -> Dict[str, Any]:
    """Parse a bundled YAML file once per process; an empty file gives ``{}``."""
    text = bundled_path(folder, name).read_text(encoding="utf-8")
    return yaml.safe_load(text) or {}


def clear_caches() -> None:
    load_bundled_yaml.cache_clear()


__all__ = ["PACKAGE", "bundled_path", "load_bundled_yaml", "clear_caches"]
