"""Tests for sequential command chains."""

from __future__ import annotations

import io

import pytest
from fake_formatters import APPEND_BANG, FAILING, MISSING, REVERSE, UPPERCASE

from metafmt.errors import FormatterFailedError, FormatterUnavailableError
from metafmt.runtime import CommandEvent, CommandRunner, run_chain


def test_single_command_chain_matches_runner_output(runner: CommandRunner) -> None:
    direct = runner.run(UPPERCASE, b"some text").stdout

    assert run_chain([UPPERCASE], b"some text", runner) == direct


def test_chain_composes_commands_in_declared_order(runner: CommandRunner) -> None:
    assert run_chain([UPPERCASE, APPEND_BANG], b"abc", runner) == b"ABC!"
    assert run_chain([APPEND_BANG, REVERSE], b"abc", runner) == b"!cba"
    assert run_chain([REVERSE, APPEND_BANG], b"abc", runner) == b"cba!"


def test_chain_reads_binary_stream_source(runner: CommandRunner) -> None:
    source = io.BytesIO(b"stream")

    assert run_chain([UPPERCASE], source, runner) == b"STREAM"


def test_chain_stops_at_first_failure(
    runner: CommandRunner,
    events: list[CommandEvent],
) -> None:
    with pytest.raises(FormatterFailedError) as excinfo:
        run_chain([UPPERCASE, FAILING, APPEND_BANG], b"abc", runner)

    assert excinfo.value.exit_code == 3
    started = [event.command for event in events if event.event_type == "start"]
    assert len(started) == 2


def test_chain_propagates_unavailable_program(
    runner: CommandRunner,
    events: list[CommandEvent],
) -> None:
    with pytest.raises(FormatterUnavailableError):
        run_chain([MISSING, UPPERCASE], b"abc", runner)

    assert len(events) == 1


def test_chain_rejects_empty_command_list(runner: CommandRunner) -> None:
    with pytest.raises(ValueError):
        run_chain([], b"abc", runner)


def test_chain_handles_empty_input(runner: CommandRunner) -> None:
    assert run_chain([UPPERCASE, APPEND_BANG], b"", runner) == b"!"


def test_chain_accepts_bytes_like_sources(runner: CommandRunner) -> None:
    assert run_chain([UPPERCASE], bytearray(b"buffer"), runner) == b"BUFFER"
    assert run_chain([UPPERCASE], memoryview(b"view"), runner) == b"VIEW"
