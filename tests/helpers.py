"""Byte builders for hand-assembled MIDI test data."""

from __future__ import annotations

import struct
from pathlib import Path
from typing import Iterable

END_OF_TRACK = bytes([0x00, 0xFF, 0x2F, 0x00])


def vlq(value: int) -> bytes:
    buffer = [value & 0x7F]
    value >>= 7
    while value:
        buffer.append((value & 0x7F) | 0x80)
        value >>= 7
    return bytes(reversed(buffer))


def meta(meta_type: int, payload: bytes, *, delta: int = 0) -> bytes:
    return vlq(delta) + bytes([0xFF, meta_type]) + vlq(len(payload)) + payload


def tempo_event(microseconds: int, *, delta: int = 0) -> bytes:
    return meta(0x51, microseconds.to_bytes(3, "big"), delta=delta)


def header_chunk(format_type: int = 0, num_tracks: int = 1, division: int = 480) -> bytes:
    return b"MThd" + struct.pack(">IHHH", 6, format_type, num_tracks, division)


def track_chunk(track_bytes: bytes, *, declared_length: int | None = None) -> bytes:
    length = len(track_bytes) if declared_length is None else declared_length
    return b"MTrk" + struct.pack(">I", length) + track_bytes


def midi_file(
    tracks: Iterable[bytes],
    *,
    format_type: int | None = None,
    division: int = 480,
) -> bytes:
    chunks = [track_chunk(track) for track in tracks]
    if format_type is None:
        format_type = 0 if len(chunks) == 1 else 1
    return header_chunk(format_type, len(chunks), division) + b"".join(chunks)


def write_midi(path: Path, tracks: Iterable[bytes], **kwargs) -> Path:
    path.write_bytes(midi_file(tracks, **kwargs))
    return path
