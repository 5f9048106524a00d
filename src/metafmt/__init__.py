"""Dispatch source files to external formatter chains."""

__version__ = "0.1.0"
