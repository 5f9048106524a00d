"""List command showing the registered formatter table."""

from __future__ import annotations

import argparse
import shlex

from rich.console import Console
from rich.table import Table

from metafmt.dispatch import Dispatcher


def cmd_list(args: argparse.Namespace, dispatcher: Dispatcher) -> int:
    """Print each formatter with its modes, extensions and command chain."""
    table = Table(title="Registered formatters")
    table.add_column("Name", style="bold")
    table.add_column("Modes")
    table.add_column("Extensions")
    table.add_column("Commands")

    for formatter in dispatcher.registry.formatters:
        table.add_row(
            formatter.name,
            ", ".join(sorted(formatter.modes)),
            ", ".join(sorted(formatter.extensions)),
            " | ".join(shlex.join(command) for command in formatter.commands),
        )

    Console().print(table)
    return 0
