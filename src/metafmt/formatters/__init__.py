"""Formatter table and lookups."""

from metafmt.formatters.defaults import default_formatters
from metafmt.formatters.models import Formatter
from metafmt.formatters.registry import FormatterRegistry, build_registry, extension_of

__all__ = [
    "Formatter",
    "FormatterRegistry",
    "build_registry",
    "default_formatters",
    "extension_of",
]
