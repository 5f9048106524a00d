"""Main module for metafmt."""

import logging
import os
import sys

from metafmt.cli.app import run as run_cli

LOG_LEVEL_ENV = "METAFMT_LOG_LEVEL"


def setup_logging(verbose: bool = False) -> None:
    """Configure logging to stderr; stdout carries formatted output."""
    # Set level from env var, default to WARNING
    level = os.environ.get(LOG_LEVEL_ENV, "WARNING").upper()
    if verbose:
        level = "DEBUG"

    logging.basicConfig(
        level=logging.getLevelNamesMapping().get(level, logging.WARNING),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


def main() -> None:
    """Entry point for the metafmt command."""
    sys.exit(run_cli(configure_logging=setup_logging))


if __name__ == "__main__":
    main()
