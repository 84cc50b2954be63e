"""tmplfuncs command line.

Each module in ``cli/commands`` is one subcommand; the dispatcher finds them
at startup.
"""
from ._args import add_common_flags
from ._output import CommandOutput
from ._utils import configure_logging_from_config, get_repo_root

__all__ = [
    "CommandOutput",
    "add_common_flags",
    "configure_logging_from_config",
    "get_repo_root",
]
