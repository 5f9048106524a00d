"""Subprocess runner for external formatter programs."""

from __future__ import annotations

import logging
import shlex
import subprocess
import time
from collections.abc import Callable, Sequence
from dataclasses import dataclass

from metafmt.errors import FormatterFailedError, FormatterUnavailableError

logger = logging.getLogger(__name__)

# Lines of formatter stderr kept in warning logs.
_STDERR_TAIL_LINES = 20


@dataclass(frozen=True, slots=True)
class CommandEvent:
    """Lifecycle event emitted while running a command."""

    event_type: str
    command: str
    input_size: int
    exit_code: int | None = None
    duration_seconds: float = 0.0


@dataclass(frozen=True, slots=True)
class CommandResult:
    """Result of one successful command run."""

    command: str
    exit_code: int
    stdout: bytes
    stderr: bytes
    duration_seconds: float


class CommandRunner:
    """Runs one formatter command over an in-memory input buffer."""

    def __init__(
        self,
        *,
        on_event: Callable[[CommandEvent], None] | None = None,
    ) -> None:
        self._on_event = on_event

    def run(self, command: Sequence[str], input_bytes: bytes) -> CommandResult:
        """Run ``command`` with ``input_bytes`` on stdin and capture stdout.

        Raises FormatterUnavailableError when the program cannot be started
        and FormatterFailedError when it exits non-zero or is killed. Output
        from a failed run is never returned.
        """
        if not command:
            raise ValueError("Command must name a program")

        command_text = _format_command(command)
        _emit_event(
            self._on_event,
            CommandEvent(
                event_type="start",
                command=command_text,
                input_size=len(input_bytes),
            ),
        )
        logger.debug("Running %s (%d bytes in)", command_text, len(input_bytes))
        started_at = time.perf_counter()

        try:
            process = subprocess.Popen(
                list(command),
                stdin=subprocess.PIPE,
                stdout=subprocess.PIPE,
                stderr=subprocess.PIPE,
            )
        except OSError as e:
            reason = e.strerror or str(e)
            logger.debug("Could not start %s: %s", command_text, reason)
            raise FormatterUnavailableError(command_text, reason) from e

        with process:
            stdout, stderr = process.communicate(input_bytes)
        duration_seconds = time.perf_counter() - started_at
        exit_code = process.returncode

        _emit_event(
            self._on_event,
            CommandEvent(
                event_type="finish",
                command=command_text,
                input_size=len(input_bytes),
                exit_code=exit_code,
                duration_seconds=duration_seconds,
            ),
        )

        if exit_code != 0:
            stderr_text = _decode_stream(stderr)
            logger.warning(
                "%s exited with %d after %.2fs%s",
                command_text,
                exit_code,
                duration_seconds,
                _stderr_tail(stderr_text),
            )
            raise FormatterFailedError(command_text, exit_code, stderr_text)

        logger.debug(
            "%s finished in %.2fs (%d bytes out)",
            command_text,
            duration_seconds,
            len(stdout),
        )
        return CommandResult(
            command=command_text,
            exit_code=exit_code,
            stdout=stdout,
            stderr=stderr,
            duration_seconds=duration_seconds,
        )


def _decode_stream(data: bytes | None) -> str:
    if data is None:
        return ""
    return data.decode(errors="replace")


def _stderr_tail(stderr_text: str) -> str:
    lines = stderr_text.strip().splitlines()
    if not lines:
        return ""
    return ":\n" + "\n".join(lines[-_STDERR_TAIL_LINES:])


def _format_command(command: Sequence[str]) -> str:
    return shlex.join([str(part) for part in command])


def _emit_event(
    on_event: Callable[[CommandEvent], None] | None,
    event: CommandEvent,
) -> None:
    if on_event is None:
        return
    on_event(event)


_DEFAULT_COMMAND_RUNNER = CommandRunner()


def get_command_runner() -> CommandRunner:
    """Return shared command runner instance."""
    return _DEFAULT_COMMAND_RUNNER
