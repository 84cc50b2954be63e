"""Shared CLI utilities."""
from __future__ import annotations

import argparse
from pathlib import Path

from tmplfuncs.core.config import LoggingConfig
from tmplfuncs.core.stdlib_logging import configure_logging


def get_repo_root(args: argparse.Namespace) -> Path:
    """Get project root from ``--repo-root`` or fall back to the current directory."""
    if getattr(args, "repo_root", None):
        return Path(args.repo_root).resolve()
    return Path.cwd().resolve()


def configure_logging_from_config(args: argparse.Namespace, repo_root: Path) -> None:
    """Apply ``logging`` config unless ``--log-level`` was given explicitly."""
    if getattr(args, "log_level", None):
        return
    cfg = LoggingConfig(repo_root)
    configure_logging(level=cfg.level, log_path=cfg.file)


__all__ = ["get_repo_root", "configure_logging_from_config"]
