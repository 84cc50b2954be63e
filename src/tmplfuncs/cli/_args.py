"""Flags shared by every command."""
from __future__ import annotations

import argparse


def add_common_flags(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--json", action="store_true", help="Print the result as JSON")
    parser.add_argument(
        "--repo-root",
        metavar="DIR",
        help="Directory holding tmplfuncs.yaml (default: current directory)",
    )


__all__ = ["add_common_flags"]
