"""Tests for recursive file discovery."""

from __future__ import annotations

from pathlib import Path

from metafmt.walker import DEFAULT_EXCLUDED_DIRS, expand_paths, iter_files


def _make_tree(root: Path) -> None:
    for relative in [
        "main.py",
        "pkg/module.py",
        "pkg/sub/deep.json",
        ".git/config",
        ".git/objects/ab/cdef",
        "node_modules/left-pad/index.js",
        "web/node_modules/dep/index.js",
        "web/app.js",
        "vendor/lib.go",
        ".hg/store",
    ]:
        path = root / relative
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text("x", encoding="utf-8")


def test_iter_files_skips_vcs_and_dependency_dirs(tmp_path: Path) -> None:
    _make_tree(tmp_path)

    found = [path.relative_to(tmp_path).as_posix() for path in iter_files(tmp_path)]

    assert found == [
        "main.py",
        "pkg/module.py",
        "pkg/sub/deep.json",
        "web/app.js",
    ]


def test_iter_files_accepts_custom_exclusions(tmp_path: Path) -> None:
    _make_tree(tmp_path)

    found = {
        path.relative_to(tmp_path).as_posix()
        for path in iter_files(tmp_path, excluded_dirs={"pkg"})
    }

    assert "pkg/module.py" not in found
    assert ".git/config" in found
    assert "vendor/lib.go" in found


def test_default_exclusions_cover_vcs_and_dependencies() -> None:
    assert {".git", ".hg", ".svn", "node_modules", "vendor"} <= DEFAULT_EXCLUDED_DIRS


def test_expand_paths_walks_directories_and_passes_files_through(
    tmp_path: Path,
) -> None:
    _make_tree(tmp_path)
    missing = tmp_path / "not-there.py"

    found = list(expand_paths([tmp_path / "pkg", tmp_path / "main.py", missing]))

    assert found == [
        tmp_path / "pkg" / "module.py",
        tmp_path / "pkg" / "sub" / "deep.json",
        tmp_path / "main.py",
        missing,
    ]


def test_iter_files_on_empty_directory(tmp_path: Path) -> None:
    assert list(iter_files(tmp_path)) == []
