"""CLI command handlers."""

from .format_files import cmd_format
from .format_stdin import cmd_stdin
from .list_formatters import cmd_list

__all__ = [
    "cmd_format",
    "cmd_list",
    "cmd_stdin",
]
