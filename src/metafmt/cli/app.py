"""CLI orchestration and command routing."""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Callable, Sequence

from metafmt.cli.commands import cmd_format, cmd_list, cmd_stdin
from metafmt.cli.parser import parse_args, reads_stdin
from metafmt.dispatch import Dispatcher
from metafmt.errors import MetafmtError
from metafmt.formatters import build_registry

logger = logging.getLogger(__name__)


def dispatch(args: argparse.Namespace, dispatcher: Dispatcher) -> int:
    """Route parsed args to the correct command handler."""
    if args.list:
        return cmd_list(args, dispatcher)

    if not args.paths:
        return 0

    if reads_stdin(args):
        return cmd_stdin(args, dispatcher)

    return cmd_format(args, dispatcher)


def run(
    argv: Sequence[str] | None = None,
    *,
    configure_logging: Callable[[bool], None] | None = None,
    dispatcher: Dispatcher | None = None,
) -> int:
    """Parse args, apply shared CLI setup, and execute command.

    Any formatter or I/O failure ends the run with exit status 1.
    """
    args = parse_args(argv)

    if configure_logging is not None:
        configure_logging(args.verbose)

    if dispatcher is None:
        dispatcher = Dispatcher(build_registry())

    try:
        return dispatch(args, dispatcher)
    except (MetafmtError, OSError) as e:
        logger.debug("Run aborted", exc_info=True)
        print(f"Error: {e}", file=sys.stderr)
        return 1
