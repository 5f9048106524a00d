"""Lookup of formatters by file extension and editor mode."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from pathlib import PurePath
from types import MappingProxyType

from metafmt.errors import DuplicateFormatterKeyError
from metafmt.formatters.defaults import default_formatters
from metafmt.formatters.models import Formatter

logger = logging.getLogger(__name__)


class FormatterRegistry:
    """Read-only extension and mode lookups derived from a formatter table.

    When two formatters claim the same key the later one wins. Pass
    ``strict=True`` to raise DuplicateFormatterKeyError instead.
    """

    def __init__(
        self,
        formatters: Iterable[Formatter],
        *,
        strict: bool = False,
    ) -> None:
        self._formatters = tuple(formatters)
        by_extension: dict[str, Formatter] = {}
        by_mode: dict[str, Formatter] = {}

        for formatter in self._formatters:
            for extension in sorted(formatter.extensions):
                _insert(by_extension, "extension", extension, formatter, strict)
            for mode in sorted(formatter.modes):
                _insert(by_mode, "mode", mode, formatter, strict)

        self._by_extension = MappingProxyType(by_extension)
        self._by_mode = MappingProxyType(by_mode)

    @property
    def formatters(self) -> tuple[Formatter, ...]:
        """Formatters in registration order."""
        return self._formatters

    @property
    def extensions(self) -> Mapping[str, Formatter]:
        return self._by_extension

    @property
    def modes(self) -> Mapping[str, Formatter]:
        return self._by_mode

    def for_path(self, path: str | PurePath) -> Formatter | None:
        """Return the formatter for a path's extension, if any."""
        extension = extension_of(path)
        if not extension:
            return None
        return self._by_extension.get(extension)

    def for_mode(self, mode: str | None) -> Formatter | None:
        """Return the formatter for an editor mode name, if any."""
        if not mode:
            return None
        return self._by_mode.get(mode)


def extension_of(path: str | PurePath) -> str:
    """Return the final path component from its last '.' onward, or ''."""
    name = PurePath(path).name
    index = name.rfind(".")
    if index < 0:
        return ""
    return name[index:]


def _insert(
    table: dict[str, Formatter],
    kind: str,
    key: str,
    formatter: Formatter,
    strict: bool,
) -> None:
    existing = table.get(key)
    if existing is not None and existing is not formatter:
        if strict:
            raise DuplicateFormatterKeyError(kind, key, existing.name, formatter.name)
        logger.debug(
            "%s %r reassigned from %s to %s", kind, key, existing.name, formatter.name
        )
    table[key] = formatter


def build_registry(
    formatters: Iterable[Formatter] | None = None,
    *,
    strict: bool = False,
) -> FormatterRegistry:
    """Build a registry from ``formatters`` (default: the built-in table)."""
    if formatters is None:
        formatters = default_formatters()
    return FormatterRegistry(formatters, strict=strict)
