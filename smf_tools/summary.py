"""Print a short summary of a Standard MIDI File."""

from __future__ import annotations

import argparse
import logging
import sys
from dataclasses import dataclass
from typing import List, Sequence, TextIO, Tuple

from app.config import get_app_config
from app.version import get_app_version
from shared.logging_config import LogVerbosity, ensure_app_logging, set_file_log_verbosity

from .midi_import import MidiError, MidiFile, NoteOn, read_midi

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TrackSummary:
    event_count: int
    note_on_count: int


@dataclass(frozen=True)
class MidiSummary:
    """Header fields and per-track counts of a decoded file."""

    format: int
    num_tracks: int
    time_division: int
    tracks: Tuple[TrackSummary, ...]


def build_summary(midi_file: MidiFile) -> MidiSummary:
    tracks = tuple(
        TrackSummary(
            event_count=len(track.events),
            note_on_count=sum(1 for event in track.events if isinstance(event.message, NoteOn)),
        )
        for track in midi_file.tracks
    )
    header = midi_file.header
    return MidiSummary(
        format=header.format,
        num_tracks=header.num_tracks,
        time_division=header.time_division,
        tracks=tracks,
    )


def format_summary(summary: MidiSummary) -> List[str]:
    lines = [
        f"MIDI file format: {summary.format}",
        f"Number of tracks: {summary.num_tracks}",
        f"Time division: {summary.time_division}",
    ]
    for index, track in enumerate(summary.tracks):
        lines.append(f"Track {index}: {track.event_count} events")
        lines.append(f"  Contains {track.note_on_count} note-on events")
    return lines


class _VersionAction(argparse.Action):
    """Print the installed version; the lookup only runs when the flag is given."""

    def __init__(self, option_strings, dest=argparse.SUPPRESS, default=argparse.SUPPRESS, help=None):
        super().__init__(option_strings=option_strings, dest=dest, default=default, nargs=0, help=help)

    def __call__(self, parser, namespace, values, option_string=None):
        print(f"{parser.prog} {get_app_version()}", file=sys.stdout)
        parser.exit()


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    config = get_app_config()
    parser = argparse.ArgumentParser(prog="smf-summary", description=__doc__)
    parser.add_argument(
        "path",
        nargs="?",
        default=config.summary.default_path,
        help=f"MIDI file to decode (default: {config.summary.default_path}).",
    )
    parser.add_argument(
        "--log-level",
        choices=[verbosity.value for verbosity in LogVerbosity],
        default=config.logging.verbosity,
        help="Minimum severity written to the log file.",
    )
    parser.add_argument(
        "--version",
        action=_VersionAction,
        help="Show the installed version and exit.",
    )
    return parser.parse_args(argv)


def main(
    argv: Sequence[str] | None = None,
    *,
    stdout: TextIO | None = None,
    stderr: TextIO | None = None,
) -> int:
    out = stdout if stdout is not None else sys.stdout
    err = stderr if stderr is not None else sys.stderr
    args = parse_args(argv)

    ensure_app_logging()
    set_file_log_verbosity(args.log_level)

    print(f"Opening MIDI file: {args.path}", file=out)
    try:
        midi_file = read_midi(args.path)
    except MidiError as exc:
        logger.error("Failed to decode %s: %s", args.path, exc)
        print(f"error: {exc}", file=err)
        return 1

    summary = build_summary(midi_file)
    logger.info(
        "Decoded %s: format=%d tracks=%d",
        args.path,
        summary.format,
        summary.num_tracks,
    )
    for line in format_summary(summary):
        print(line, file=out)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
