"""Built-in formatter table."""

from __future__ import annotations

from metafmt.formatters.models import Formatter


def default_formatters() -> tuple[Formatter, ...]:
    """Return the built-in formatters in registration order."""
    return (
        Formatter(
            name="C/C++",
            commands=(("clang-format", "-style=WebKit", "-"),),
            modes=frozenset({"c-mode", "c++-mode"}),
            extensions=frozenset({".c", ".cpp", ".cxx", ".h", ".hpp", ".hxx"}),
        ),
        Formatter(
            name="CSS",
            commands=(("cssbeautify-bin", "--autosemicolon", "-f", "-"),),
            modes=frozenset({"css-mode"}),
            extensions=frozenset({".css"}),
        ),
        Formatter(
            name="Go",
            commands=(("goimports",),),
            modes=frozenset({"go-mode"}),
            extensions=frozenset({".go"}),
        ),
        Formatter(
            name="JavaScript",
            commands=(("semistandard-format", "-"),),
            modes=frozenset({"js-mode", "js2-mode", "js3-mode"}),
            extensions=frozenset({".js", ".jsx"}),
        ),
        Formatter(
            name="JSON",
            commands=(("jsonlint", "-"),),
            modes=frozenset({"json-mode"}),
            extensions=frozenset({".json"}),
        ),
        Formatter(
            name="Python",
            commands=(
                ("autopep8", "--max-line-length=98", "-"),
                ("isort", "--line-width", "98", "--multi_line", "3", "-"),
            ),
            modes=frozenset({"python-mode"}),
            extensions=frozenset({".py"}),
        ),
        Formatter(
            name="SASS",
            commands=(
                (
                    "sass-convert",
                    "--no-cache",
                    "--from",
                    "sass",
                    "--to",
                    "sass",
                    "--indent",
                    "4",
                    "--stdin",
                ),
            ),
            modes=frozenset({"sass-mode"}),
            extensions=frozenset({".sass"}),
        ),
        Formatter(
            name="SCSS",
            commands=(
                (
                    "sass-convert",
                    "--no-cache",
                    "--from",
                    "scss",
                    "--to",
                    "scss",
                    "--indent",
                    "4",
                    "--stdin",
                ),
            ),
            modes=frozenset({"scss-mode"}),
            extensions=frozenset({".scss"}),
        ),
    )
