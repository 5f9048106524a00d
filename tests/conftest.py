from __future__ import annotations

import pytest
from fake_formatters import APPEND_BANG, FAILING, JSONLINT, MISSING, UPPERCASE

from metafmt.formatters import Formatter, FormatterRegistry
from metafmt.runtime import CommandEvent, CommandRunner


@pytest.fixture
def events() -> list[CommandEvent]:
    return []


@pytest.fixture
def runner(events: list[CommandEvent]) -> CommandRunner:
    """Runner that records lifecycle events for spawn assertions."""
    return CommandRunner(on_event=events.append)


@pytest.fixture
def registry() -> FormatterRegistry:
    """Small registry of fake formatters backed by the current interpreter."""
    return FormatterRegistry(
        [
            Formatter(
                name="Upper",
                commands=(UPPERCASE,),
                modes=frozenset({"upper-mode"}),
                extensions=frozenset({".txt"}),
            ),
            Formatter(
                name="Upper then bang",
                commands=(UPPERCASE, APPEND_BANG),
                modes=frozenset({"chain-mode"}),
                extensions=frozenset({".chain"}),
            ),
            Formatter(
                name="Broken",
                commands=(UPPERCASE, FAILING, APPEND_BANG),
                modes=frozenset({"broken-mode"}),
                extensions=frozenset({".broken"}),
            ),
            Formatter(
                name="Missing",
                commands=(MISSING,),
                modes=frozenset({"missing-mode"}),
                extensions=frozenset({".missing"}),
            ),
            Formatter(
                name="JSON",
                commands=(JSONLINT,),
                modes=frozenset({"json-mode"}),
                extensions=frozenset({".json"}),
            ),
        ]
    )
