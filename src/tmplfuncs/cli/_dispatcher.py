"""
Entry point for the ``tmplfuncs`` console script.

Every public module in ``tmplfuncs.cli.commands`` becomes a subcommand named
after the module. A command module provides ``SUMMARY``,
``register_args(parser)`` and ``main(args) -> int``.
"""

from __future__ import annotations

import argparse
import importlib
import pkgutil
import sys
from functools import lru_cache
from types import ModuleType
from typing import Dict, List, Optional

from tmplfuncs import __version__
from tmplfuncs.cli import commands as commands_pkg
from tmplfuncs.core.stdlib_logging import configure_logging

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


@lru_cache(maxsize=1)
def discover_commands() -> Dict[str, ModuleType]:
    """Import every command module, keyed by subcommand name."""
    found: Dict[str, ModuleType] = {}
    for info in sorted(pkgutil.iter_modules(commands_pkg.__path__), key=lambda i: i.name):
        if info.name.startswith("_") or info.ispkg:
            continue
        module = importlib.import_module(f"{commands_pkg.__name__}.{info.name}")
        if not callable(getattr(module, "main", None)):
            continue
        found[info.name.replace("_", "-")] = module
    return found


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="tmplfuncs",
        description="Render Jinja2 templates with the tmplfuncs template functions.",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument(
        "--log-level",
        choices=LOG_LEVELS,
        help="Log to stderr at this level (default: from configuration)",
    )

    subparsers = parser.add_subparsers(dest="command", title="commands", metavar="<command>")
    for name, module in discover_commands().items():
        summary = getattr(module, "SUMMARY", name)
        sub = subparsers.add_parser(name, help=summary, description=summary)
        register_args = getattr(module, "register_args", None)
        if register_args is not None:
            register_args(sub)
        sub.set_defaults(_func=module.main)
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Parse ``argv`` (default ``sys.argv[1:]``), run the command, return its exit code."""
    parser = build_parser()
    args = parser.parse_args(sys.argv[1:] if argv is None else argv)

    handler = getattr(args, "_func", None)
    if handler is None:
        parser.print_help()
        return 0

    if args.log_level:
        configure_logging(level=args.log_level)
    return int(handler(args) or 0)


if __name__ == "__main__":
    sys.exit(main())
