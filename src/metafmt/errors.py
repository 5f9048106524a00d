"""Exception types raised by the formatter pipeline."""

from __future__ import annotations

import signal


class MetafmtError(Exception):
    """Base class for metafmt errors."""


class FormatterUnavailableError(MetafmtError):
    """The formatter program could not be located or started."""

    def __init__(self, command: str, reason: str) -> None:
        self.command = command
        self.reason = reason
        super().__init__(f"Formatter unavailable: {command}: {reason}")


class FormatterFailedError(MetafmtError):
    """The formatter program exited non-zero or was killed."""

    def __init__(self, command: str, exit_code: int, stderr: str = "") -> None:
        self.command = command
        self.exit_code = exit_code
        self.stderr = stderr
        message = f"Formatter failed: {command}: {self._describe_exit()}"
        detail = stderr.strip()
        if detail:
            message = f"{message}\n{detail}"
        super().__init__(message)

    @property
    def signal_name(self) -> str | None:
        """Name of the signal that killed the process, if any."""
        if self.exit_code >= 0:
            return None
        try:
            return signal.Signals(-self.exit_code).name
        except ValueError:
            return f"signal {-self.exit_code}"

    def _describe_exit(self) -> str:
        name = self.signal_name
        if name is not None:
            return f"killed by {name}"
        return f"exit status {self.exit_code}"


class UnresolvedModeError(MetafmtError):
    """Standard input was given without a usable editor mode."""

    def __init__(self, mode: str | None) -> None:
        self.mode = mode
        if mode:
            message = f"Unrecognized editor mode: {mode!r}"
        else:
            message = "Must be given an editor mode when reading standard input"
        super().__init__(message)


class DuplicateFormatterKeyError(MetafmtError):
    """Two formatters claim the same extension or mode."""

    def __init__(self, kind: str, key: str, first: str, second: str) -> None:
        self.kind = kind
        self.key = key
        self.first = first
        self.second = second
        super().__init__(
            f"Duplicate {kind} {key!r}: claimed by both {first!r} and {second!r}"
        )
