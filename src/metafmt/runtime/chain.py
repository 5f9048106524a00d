"""Sequential composition of formatter commands over byte buffers."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import BinaryIO

from metafmt.runtime.command_runner import CommandRunner, get_command_runner

logger = logging.getLogger(__name__)


def run_chain(
    commands: Sequence[Sequence[str]],
    source: bytes | bytearray | memoryview | BinaryIO,
    runner: CommandRunner | None = None,
) -> bytes:
    """Pipe ``source`` through each command in order and return the result.

    Every stage's output is read in full before the next stage starts, so a
    failure partway through never leaks partial output to the caller. The
    first failing stage raises and no later stage runs.
    """
    if not commands:
        raise ValueError("Command chain must not be empty")

    runner = runner or get_command_runner()
    if isinstance(source, (bytes, bytearray, memoryview)):
        data = bytes(source)
    else:
        data = source.read()

    total = len(commands)
    for index, command in enumerate(commands, start=1):
        logger.debug("Chain stage %d/%d: %s", index, total, command[0])
        data = runner.run(command, data).stdout

    return data
