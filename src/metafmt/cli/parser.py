"""Argument parser construction for the metafmt CLI."""

from __future__ import annotations

import argparse
from collections.abc import Sequence

STDIN_ARGUMENT = "-"


def build_parser() -> argparse.ArgumentParser:
    """Build and return the CLI parser."""
    parser = argparse.ArgumentParser(
        prog="metafmt",
        description=(
            "Format source files by piping them through external formatters "
            "chosen by extension or editor mode"
        ),
    )
    parser.add_argument(
        "paths",
        nargs="*",
        help="Files or directories to format, or '-' to read standard input",
    )
    parser.add_argument(
        "--emacs",
        "--mode",
        dest="mode",
        default="",
        metavar="MODE",
        help="Editor major mode selecting the formatter (only with '-')",
    )
    parser.add_argument(
        "--write",
        "-w",
        action="store_true",
        help="Write the result back to each file instead of standard output",
    )
    parser.add_argument(
        "--list",
        action="store_true",
        help="List registered formatters and exit",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable debug logging on standard error",
    )
    return parser


def reads_stdin(args: argparse.Namespace) -> bool:
    """Whether the parsed arguments request formatting standard input."""
    return list(args.paths) == [STDIN_ARGUMENT]


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    """Parse CLI arguments from argv (or sys.argv when omitted)."""
    parser = build_parser()
    if argv is None:
        return parser.parse_args()
    return parser.parse_args(list(argv))
