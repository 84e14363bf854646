from __future__ import annotations

import io
import logging
from pathlib import Path

import pytest

from app.config import reset_app_config_cache
from shared import logging_config
from smf_tools.midi_import import decode_midi
from smf_tools.summary import MidiSummary, TrackSummary, build_summary, format_summary, main

from tests.helpers import END_OF_TRACK, midi_file, tempo_event, write_midi

_NOTES = (
    bytes([0x00, 0x90, 60, 100])
    + bytes([0x00, 64, 100])
    + bytes([0x60, 60, 0])
    + bytes([0x00, 0x80, 64, 0])
    + END_OF_TRACK
)


@pytest.fixture(autouse=True)
def isolated_logging(tmp_path, monkeypatch):
    monkeypatch.setenv("SMF_TOOLS_LOG_DIR", str(tmp_path / "logs"))
    logging_config._reset_for_tests()
    reset_app_config_cache()
    try:
        yield
    finally:
        logging_config._reset_for_tests()
        reset_app_config_cache()


def test_build_summary_counts_events_and_note_ons() -> None:
    midi = decode_midi(midi_file([tempo_event(500000) + END_OF_TRACK, _NOTES]))

    summary = build_summary(midi)

    assert summary == MidiSummary(
        format=1,
        num_tracks=2,
        time_division=480,
        tracks=(
            TrackSummary(event_count=2, note_on_count=0),
            TrackSummary(event_count=5, note_on_count=2),
        ),
    )


def test_format_summary_lines() -> None:
    summary = MidiSummary(
        format=0,
        num_tracks=1,
        time_division=96,
        tracks=(TrackSummary(event_count=3, note_on_count=1),),
    )

    assert format_summary(summary) == [
        "MIDI file format: 0",
        "Number of tracks: 1",
        "Time division: 96",
        "Track 0: 3 events",
        "  Contains 1 note-on events",
    ]


def test_main_prints_summary(tmp_path: Path) -> None:
    path = write_midi(tmp_path / "song.mid", [_NOTES])
    out = io.StringIO()
    err = io.StringIO()

    exit_code = main([str(path)], stdout=out, stderr=err)

    assert exit_code == 0
    assert out.getvalue().splitlines() == [
        f"Opening MIDI file: {path}",
        "MIDI file format: 0",
        "Number of tracks: 1",
        "Time division: 480",
        "Track 0: 5 events",
        "  Contains 2 note-on events",
    ]
    assert err.getvalue() == ""


def test_main_reports_decode_errors(tmp_path: Path) -> None:
    path = tmp_path / "broken.mid"
    path.write_bytes(b"MThx" + bytes(10))
    out = io.StringIO()
    err = io.StringIO()

    exit_code = main([str(path)], stdout=out, stderr=err)

    assert exit_code == 1
    assert err.getvalue().startswith("error: Expected chunk type 'MThd', found 'MThx'")


def test_main_defaults_to_configured_sample(tmp_path: Path, monkeypatch) -> None:
    monkeypatch.chdir(tmp_path)
    write_midi(tmp_path / "example.mid", [END_OF_TRACK])
    out = io.StringIO()

    exit_code = main([], stdout=out, stderr=io.StringIO())

    assert exit_code == 0
    assert out.getvalue().splitlines()[0] == "Opening MIDI file: example.mid"


def test_main_writes_failures_to_log(tmp_path: Path) -> None:
    missing = tmp_path / "missing.mid"

    exit_code = main([str(missing), "--log-level", "error"], stdout=io.StringIO(), stderr=io.StringIO())

    assert exit_code == 1
    assert logging_config.get_file_log_verbosity() == logging_config.LogVerbosity.ERROR
    log_path = tmp_path / "logs" / "smf-tools.log"
    for handler in logging.getLogger().handlers:
        handler.flush()
    assert "Failed to decode" in log_path.read_text(encoding="utf-8")


@pytest.fixture
def version_lookup(monkeypatch):
    from app import version as version_module

    version_module.get_app_version.cache_clear()
    yield version_module
    version_module.get_app_version.cache_clear()


def test_version_flag_prints_installed_version(capsys, monkeypatch, version_lookup) -> None:
    monkeypatch.setattr(version_lookup.metadata, "version", lambda name: "9.8.7")

    with pytest.raises(SystemExit) as excinfo:
        main(["--version"])

    assert excinfo.value.code == 0
    assert capsys.readouterr().out.strip() == "smf-summary 9.8.7"


def test_main_does_not_look_up_version_when_decoding(tmp_path: Path, monkeypatch, version_lookup) -> None:
    def broken(name: str) -> str:
        raise NotADirectoryError(name)

    monkeypatch.setattr(version_lookup.metadata, "version", broken)
    path = write_midi(tmp_path / "song.mid", [_NOTES])
    out = io.StringIO()

    exit_code = main([str(path)], stdout=out, stderr=io.StringIO())

    assert exit_code == 0
    assert out.getvalue().splitlines()[-1] == "  Contains 2 note-on events"


def test_app_is_a_regular_package() -> None:
    import app

    assert app.__file__ is not None
    assert Path(app.__file__).name == "__init__.py"
