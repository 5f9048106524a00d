"""Format command for standard input."""

from __future__ import annotations

import argparse

from metafmt.dispatch import Dispatcher


def cmd_stdin(args: argparse.Namespace, dispatcher: Dispatcher) -> int:
    """Format standard input with the formatter for ``--emacs``."""
    dispatcher.format_stdin(args.mode)
    return 0
