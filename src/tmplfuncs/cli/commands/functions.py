"""
tmplfuncs functions command.

SUMMARY: List registered template functions
"""

from __future__ import annotations

import argparse

from tmplfuncs.cli import CommandOutput, add_common_flags, get_repo_root
from tmplfuncs.core.exceptions import TmplfuncsError
from tmplfuncs.core.rendering import registry_from_config

SUMMARY = "List registered template functions"


def register_args(parser: argparse.ArgumentParser) -> None:
    add_common_flags(parser)


def _first_doc_line(func) -> str:
    doc = (getattr(func, "__doc__", None) or "").strip()
    return doc.splitlines()[0] if doc else ""


def main(args: argparse.Namespace) -> int:
    out = CommandOutput(json_mode=args.json)

    try:
        registry = registry_from_config(get_repo_root(args))
    except TmplfuncsError as e:
        out.failure(e)
        return 1

    names = registry.list_functions()
    width = max((len(n) for n in names), default=0)
    lines = [f"{n.ljust(width)}  {_first_doc_line(registry.get(n))}".rstrip() for n in names]
    out.result({"functions": names, "count": len(names)}, "\n".join(lines))
    return 0
