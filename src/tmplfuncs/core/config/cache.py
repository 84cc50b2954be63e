"""Process-wide cache of merged configuration.

One merged dict is kept per project root, stored with a fingerprint of every
TMPLFUNCS_* variable and the size and mtime of the project config file.
When either changes, the next lookup reloads and replaces the entry.
"""
from __future__ import annotations

import hashlib
import os
import threading
from pathlib import Path
from typing import Any, Dict, Optional, Tuple

# (root, validate) -> (fingerprint, config); a changed fingerprint replaces the entry.
_cache: Dict[Tuple[str, bool], Tuple[str, Dict[str, Any]]] = {}
_lock = threading.Lock()


def _resolve_root(repo_root: Optional[Path]) -> Path:
    return (Path(repo_root).expanduser() if repo_root is not None else Path.cwd()).resolve()


def _fingerprint(parts: Any) -> str:
    return hashlib.sha256(repr(parts).encode("utf-8")).hexdigest()[:12]


def _inputs_fingerprint(root: Path) -> str:
    from .manager import ENV_PREFIX, PROJECT_CONFIG_NAMES

    env = sorted((k, v) for k, v in os.environ.items() if k.startswith(ENV_PREFIX))
    stats = []
    for name in PROJECT_CONFIG_NAMES:
        try:
            st = (root / name).stat()
        except OSError:
            continue
        stats.append((name, st.st_mtime_ns, st.st_size))
    return _fingerprint((env, stats))


def get_cached_config(repo_root: Optional[Path] = None, validate: bool = True) -> Dict[str, Any]:
    """Merged configuration for ``repo_root``, reloaded only when its inputs change.

    Every caller shares the returned dict; do not modify it.
    """
    root = _resolve_root(repo_root)
    key = (str(root), validate)
    fingerprint = _inputs_fingerprint(root)
    with _lock:
        entry = _cache.get(key)
        if entry is not None and entry[0] == fingerprint:
            return entry[1]
        from .manager import ConfigManager

        config = ConfigManager(root)._load_config_uncached(validate=validate)
        _cache[key] = (fingerprint, config)
        return config


def is_cached(repo_root: Optional[Path] = None, validate: bool = True) -> bool:
    root = _resolve_root(repo_root)
    entry = _cache.get((str(root), validate))
    return entry is not None and entry[0] == _inputs_fingerprint(root)


def clear_all_caches() -> None:
    with _lock:
        _cache.clear()


__all__ = ["get_cached_config", "clear_all_caches", "is_cached"]
