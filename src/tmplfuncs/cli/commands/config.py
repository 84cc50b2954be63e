"""
tmplfuncs config command.

SUMMARY: Show current configuration

Prints the configuration merged from the bundled defaults, the project
tmplfuncs.yaml and TMPLFUNCS_* environment variables, or a single section
or dotted key of it.
"""

from __future__ import annotations

import argparse

import yaml

from tmplfuncs.cli import CommandOutput, add_common_flags, get_repo_root
from tmplfuncs.core.config import ConfigManager
from tmplfuncs.core.exceptions import ConfigError

SUMMARY = "Show current configuration"


def register_args(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "key",
        nargs="?",
        help="Section or dotted key to show (e.g. 'random.source')",
    )
    add_common_flags(parser)


def main(args: argparse.Namespace) -> int:
    out = CommandOutput(json_mode=args.json)

    try:
        value = ConfigManager(get_repo_root(args)).load_config()
    except ConfigError as e:
        out.failure(e)
        return 1

    for part in args.key.split(".") if args.key else ():
        if not isinstance(value, dict) or part not in value:
            out.failure(KeyError(args.key), f"Unknown configuration key: {args.key}")
            return 1
        value = value[part]

    if isinstance(value, (dict, list)):
        out.result(value, yaml.safe_dump(value, sort_keys=False).rstrip())
    else:
        out.result(value)
    return 0
