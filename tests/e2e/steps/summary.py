from __future__ import annotations

import io
from dataclasses import dataclass
from pathlib import Path

import pytest
from pytest_bdd import given, parsers, then, when

from app.config import reset_app_config_cache
from shared import logging_config
from smf_tools.summary import main

from tests.helpers import END_OF_TRACK, header_chunk, midi_file, tempo_event, track_chunk


@dataclass
class CommandResult:
    exit_code: int
    stdout: str
    stderr: str


@pytest.fixture
def cli_workspace(tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setenv("SMF_TOOLS_LOG_DIR", str(tmp_path / "logs"))
    logging_config._reset_for_tests()
    reset_app_config_cache()
    try:
        yield tmp_path
    finally:
        logging_config._reset_for_tests()
        reset_app_config_cache()


@given(parsers.parse('a MIDI file "{filename}" with a tempo track and a track of {count:d} notes'))
def two_track_file(cli_workspace: Path, filename: str, count: int) -> None:
    notes = bytearray()
    for index in range(count):
        pitch = 60 + 2 * index
        notes.extend([0x00, 0x90, pitch, 100])
        notes.extend([0x60, pitch, 0])
    notes.extend(END_OF_TRACK)
    data = midi_file([tempo_event(500000) + END_OF_TRACK, bytes(notes)])
    (cli_workspace / filename).write_bytes(data)


@given(parsers.parse('a MIDI file "{filename}" declaring format {format_type:d}'))
def file_with_format(cli_workspace: Path, filename: str, format_type: int) -> None:
    data = header_chunk(format_type=format_type) + track_chunk(END_OF_TRACK)
    (cli_workspace / filename).write_bytes(data)


@when(parsers.parse('I run the summary command on "{filename}"'), target_fixture="command_result")
def run_summary(cli_workspace: Path, filename: str) -> CommandResult:
    stdout = io.StringIO()
    stderr = io.StringIO()
    exit_code = main([str(cli_workspace / filename)], stdout=stdout, stderr=stderr)
    return CommandResult(exit_code=exit_code, stdout=stdout.getvalue(), stderr=stderr.getvalue())


@then(parsers.parse("the command exits with status {status:d}"))
def assert_exit_status(command_result: CommandResult, status: int) -> None:
    assert command_result.exit_code == status


@then(parsers.parse('the output contains "{text}"'))
def assert_output_contains(command_result: CommandResult, text: str) -> None:
    assert text in command_result.stdout


@then(parsers.parse('the error output contains "{text}"'))
def assert_error_output_contains(command_result: CommandResult, text: str) -> None:
    assert text in command_result.stderr
