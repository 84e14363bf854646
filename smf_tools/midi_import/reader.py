"""Facade for decoding complete MIDI files."""
from __future__ import annotations

import logging
import os
from typing import List, Union

from .decoders import TrackDecoder, read_chunk_header
from .errors import MidiFormatError, MidiIOError
from .models import FILE_HEADER_TAG, HEADER_LENGTH, MAX_FORMAT, MidiFile, MidiHeader, MidiTrack
from .streams import SafeStream

logger = logging.getLogger(__name__)

PathLike = Union[str, "os.PathLike[str]"]


def read_header(stream: SafeStream) -> MidiHeader:
    """Decode the ``MThd`` chunk at the current stream position."""

    length = read_chunk_header(stream, FILE_HEADER_TAG)
    if length != HEADER_LENGTH:
        raise MidiFormatError(f"Invalid header length: {length}", value=length)

    format_type = stream.read_u16()
    num_tracks = stream.read_u16()
    time_division = stream.read_u16()
    if format_type > MAX_FORMAT:
        raise MidiFormatError(f"Unsupported MIDI format: {format_type}", value=format_type)
    return MidiHeader(format=format_type, num_tracks=num_tracks, time_division=time_division)


def decode_midi(data: bytes) -> MidiFile:
    """Decode an in-memory Standard MIDI File."""

    stream = SafeStream(data)
    header = read_header(stream)
    logger.debug(
        "MIDI header: format=%d tracks=%d division=%d",
        header.format,
        header.num_tracks,
        header.time_division,
    )

    tracks: List[MidiTrack] = []
    for track_index in range(header.num_tracks):
        tracks.append(TrackDecoder.decode_from(stream, track_index=track_index))
    return MidiFile(header=header, tracks=tuple(tracks))


def read_midi(path: PathLike) -> MidiFile:
    """Open ``path`` and decode it as a Standard MIDI File."""

    try:
        with open(path, "rb") as handle:
            data = handle.read()
    except OSError as exc:
        raise MidiIOError(f"Could not read MIDI file {os.fspath(path)}: {exc}", value=path) from exc
    return decode_midi(data)


__all__ = ["decode_midi", "read_header", "read_midi"]
