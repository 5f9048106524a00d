"""Formatter definition."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Formatter:
    """An ordered chain of external commands plus the keys that select it."""

    name: str
    commands: tuple[tuple[str, ...], ...]
    modes: frozenset[str] = frozenset()
    extensions: frozenset[str] = frozenset()

    def __post_init__(self) -> None:
        commands = _freeze_commands(self.commands)
        if not commands:
            raise ValueError(f"Formatter {self.name!r} has no commands")
        for command in commands:
            if not command or not command[0]:
                raise ValueError(f"Formatter {self.name!r} has an empty command")

        for extension in self.extensions:
            if not extension.startswith("."):
                raise ValueError(
                    f"Formatter {self.name!r} extension {extension!r} "
                    "must start with '.'"
                )

        object.__setattr__(self, "commands", commands)
        object.__setattr__(self, "modes", frozenset(self.modes))
        object.__setattr__(self, "extensions", frozenset(self.extensions))

    @property
    def programs(self) -> tuple[str, ...]:
        """Program names in chain order."""
        return tuple(command[0] for command in self.commands)


def _freeze_commands(
    commands: Iterable[Sequence[str]],
) -> tuple[tuple[str, ...], ...]:
    return tuple(tuple(str(part) for part in command) for command in commands)
