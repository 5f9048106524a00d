"""Recursive file discovery with a directory skip-set."""

from __future__ import annotations

import os
from collections.abc import Iterable, Iterator
from pathlib import Path

VCS_DIRS: frozenset[str] = frozenset({".git", ".hg", ".svn", ".bzr", "_darcs", "CVS"})

DEPENDENCY_DIRS: frozenset[str] = frozenset(
    {"node_modules", "bower_components", "vendor", "Godeps"}
)

DEFAULT_EXCLUDED_DIRS: frozenset[str] = VCS_DIRS | DEPENDENCY_DIRS


def iter_files(
    root: str | Path,
    excluded_dirs: Iterable[str] = DEFAULT_EXCLUDED_DIRS,
) -> Iterator[Path]:
    """Yield every file under ``root``, pruning excluded directory names.

    Output order is sorted per directory so runs are repeatable.
    """
    skip = frozenset(excluded_dirs)
    for dirpath, dirnames, filenames in os.walk(root):
        dirnames[:] = sorted(name for name in dirnames if name not in skip)
        base = Path(dirpath)
        for filename in sorted(filenames):
            yield base / filename


def expand_paths(
    paths: Iterable[str | Path],
    excluded_dirs: Iterable[str] = DEFAULT_EXCLUDED_DIRS,
) -> Iterator[Path]:
    """Yield files for each argument, walking the ones that are directories."""
    for raw in paths:
        path = Path(raw)
        if path.is_dir():
            yield from iter_files(path, excluded_dirs)
        else:
            yield path
