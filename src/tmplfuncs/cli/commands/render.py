"""
tmplfuncs render command.

SUMMARY: Render a Jinja2 template with the template functions installed
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import Any, Dict, List

import yaml
from jinja2 import TemplateError

from tmplfuncs.cli import CommandOutput, add_common_flags, configure_logging_from_config, get_repo_root
from tmplfuncs.core.exceptions import TmplfuncsError
from tmplfuncs.core.rendering import build_environment, render_template_text

SUMMARY = "Render a Jinja2 template with the template functions installed"


def register_args(parser: argparse.ArgumentParser) -> None:
    """Register command-specific arguments."""
    parser.add_argument(
        "template",
        help="Template file to render ('-' reads from stdin)",
    )
    parser.add_argument(
        "--var",
        action="append",
        default=[],
        metavar="KEY=VALUE",
        help="Context variable; VALUE is parsed as a YAML scalar (repeatable)",
    )
    parser.add_argument(
        "--vars-file",
        help="YAML file with a mapping of context variables",
    )
    add_common_flags(parser)


def parse_vars(pairs: List[str]) -> Dict[str, Any]:
    """Parse ``KEY=VALUE`` pairs; values are typed as YAML scalars."""
    context: Dict[str, Any] = {}
    for pair in pairs:
        key, sep, raw = pair.partition("=")
        if not sep or not key.strip():
            raise ValueError(f"Expected KEY=VALUE, got {pair!r}")
        try:
            context[key.strip()] = yaml.safe_load(raw) if raw else ""
        except yaml.YAMLError:
            context[key.strip()] = raw
    return context


def _load_vars_file(path: str) -> Dict[str, Any]:
    data = yaml.safe_load(Path(path).read_text(encoding="utf-8"))
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ValueError(f"Vars file {path} must contain a mapping")
    return data


def main(args: argparse.Namespace) -> int:
    """Render the template and print the result."""
    out = CommandOutput(json_mode=args.json)

    try:
        repo_root = get_repo_root(args)
        configure_logging_from_config(args, repo_root)

        context: Dict[str, Any] = {}
        if args.vars_file:
            context.update(_load_vars_file(args.vars_file))
        context.update(parse_vars(args.var))

        if args.template == "-":
            text = sys.stdin.read()
        else:
            text = Path(args.template).read_text(encoding="utf-8")

        env = build_environment(repo_root=repo_root)
        output = render_template_text(text, context, environment=env)
    except (TmplfuncsError, TemplateError, OSError, ValueError, yaml.YAMLError) as e:
        out.failure(e)
        return 1

    out.result({"template": args.template, "output": output}, output)
    return 0
