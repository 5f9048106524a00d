"""Process execution primitives shared by the dispatch layer."""

from metafmt.runtime.chain import run_chain
from metafmt.runtime.command_runner import (
    CommandEvent,
    CommandResult,
    CommandRunner,
    get_command_runner,
)

__all__ = [
    "CommandEvent",
    "CommandResult",
    "CommandRunner",
    "get_command_runner",
    "run_chain",
]
