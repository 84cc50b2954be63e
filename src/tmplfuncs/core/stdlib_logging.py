from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Optional

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

_CONFIGURED_TARGET: str | None = None
_TMPLFUNCS_HANDLER: logging.Handler | None = None


def _level_from_name(name: str) -> int:
    level = logging.getLevelName(str(name).upper())
    return level if isinstance(level, int) else logging.WARNING


def configure_logging(*, level: str = "WARNING", log_path: Optional[Path] = None) -> None:
    """Route the ``tmplfuncs`` logger to stderr, or to ``log_path`` when given.

    Idempotent per-process: calling again with the same target only updates
    the level.
    """
    global _CONFIGURED_TARGET, _TMPLFUNCS_HANDLER

    target = str(Path(log_path).resolve()) if log_path is not None else "<stderr>"
    logger = logging.getLogger("tmplfuncs")
    logger.setLevel(_level_from_name(level))

    if _CONFIGURED_TARGET == target and _TMPLFUNCS_HANDLER is not None:
        _TMPLFUNCS_HANDLER.setLevel(_level_from_name(level))
        return

    # Replace the previously installed handler when switching targets.
    if _TMPLFUNCS_HANDLER is not None:
        logger.removeHandler(_TMPLFUNCS_HANDLER)
        _TMPLFUNCS_HANDLER.close()
        _TMPLFUNCS_HANDLER = None

    if log_path is not None:
        Path(target).parent.mkdir(parents=True, exist_ok=True)
        handler: logging.Handler = logging.FileHandler(target, encoding="utf-8")
    else:
        handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(_level_from_name(level))
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(handler)

    _TMPLFUNCS_HANDLER = handler
    _CONFIGURED_TARGET = target


def reset_logging_for_tests() -> None:
    """Test-only: remove the handler installed by :func:`configure_logging`."""
    global _CONFIGURED_TARGET, _TMPLFUNCS_HANDLER
    logger = logging.getLogger("tmplfuncs")
    logger.setLevel(logging.NOTSET)
    if _TMPLFUNCS_HANDLER is not None:
        logger.removeHandler(_TMPLFUNCS_HANDLER)
        _TMPLFUNCS_HANDLER.close()
    _CONFIGURED_TARGET = None
    _TMPLFUNCS_HANDLER = None


__all__ = ["LOG_FORMAT", "configure_logging", "reset_logging_for_tests"]
