"""Route files and standard input to their formatter chains."""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import BinaryIO

from metafmt.errors import UnresolvedModeError
from metafmt.formatters.models import Formatter
from metafmt.formatters.registry import FormatterRegistry
from metafmt.runtime.chain import run_chain
from metafmt.runtime.command_runner import CommandRunner, get_command_runner

logger = logging.getLogger(__name__)


class Dispatcher:
    """Resolves a formatter chain and directs its output.

    Path-based operations return False, without touching the file, when no
    formatter matches the extension. Every other failure propagates.
    """

    def __init__(
        self,
        registry: FormatterRegistry,
        *,
        runner: CommandRunner | None = None,
        stdin: BinaryIO | None = None,
        stdout: BinaryIO | None = None,
    ) -> None:
        self.registry = registry
        self._runner = runner or get_command_runner()
        self._stdin = stdin
        self._stdout = stdout

    @property
    def stdin(self) -> BinaryIO:
        return self._stdin if self._stdin is not None else sys.stdin.buffer

    @property
    def stdout(self) -> BinaryIO:
        return self._stdout if self._stdout is not None else sys.stdout.buffer

    def format_path(self, path: str | Path, *, write: bool = False) -> bool:
        """Format one file in place or to stdout."""
        if write:
            return self.format_in_place(path)
        return self.format_to_stdout(path)

    def format_to_stdout(self, path: str | Path) -> bool:
        """Write the formatted content of ``path`` to stdout."""
        formatter = self._resolve(path)
        if formatter is None:
            return False

        with open(path, "rb") as source:
            result = run_chain(formatter.commands, source, self._runner)

        self._emit(result)
        return True

    def format_in_place(self, path: str | Path) -> bool:
        """Rewrite ``path`` with its formatted content.

        The file is only truncated after the whole chain has succeeded.
        """
        formatter = self._resolve(path)
        if formatter is None:
            return False

        with open(path, "r+b") as target:
            result = run_chain(formatter.commands, target.read(), self._runner)
            target.truncate(0)
            target.seek(0)
            target.write(result)

        logger.info("Formatted %s with %s", path, formatter.name)
        return True

    def format_stdin(self, mode: str | None) -> None:
        """Format standard input using the formatter for an editor mode."""
        formatter = self.registry.for_mode(mode)
        if formatter is None:
            raise UnresolvedModeError(mode)

        result = run_chain(formatter.commands, self.stdin, self._runner)
        self._emit(result)

    def _resolve(self, path: str | Path) -> Formatter | None:
        formatter = self.registry.for_path(path)
        if formatter is None:
            logger.debug("No formatter for %s, skipping", path)
            return None
        logger.debug(
            "Formatting %s with %s (%s)",
            path,
            formatter.name,
            " | ".join(formatter.programs),
        )
        return formatter

    def _emit(self, data: bytes) -> None:
        stream = self.stdout
        stream.write(data)
        stream.flush()
