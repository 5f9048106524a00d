"""Format command for files and directory trees."""

from __future__ import annotations

import argparse
import logging

from metafmt.dispatch import Dispatcher
from metafmt.walker import expand_paths

logger = logging.getLogger(__name__)


def cmd_format(args: argparse.Namespace, dispatcher: Dispatcher) -> int:
    """Format every path argument, stopping at the first failure."""
    formatted = 0
    skipped = 0
    for path in expand_paths(args.paths):
        if dispatcher.format_path(path, write=args.write):
            formatted += 1
        else:
            skipped += 1

    logger.info("Formatted %d file(s), skipped %d", formatted, skipped)
    return 0
