"""Decoding of meta events (status byte ``0xFF``)."""
from __future__ import annotations

from typing import Callable, Dict, Type

from .errors import MidiFormatError, MidiUnsupportedError
from .models import (
    CopyrightNotice,
    CuePoint,
    EndOfTrack,
    InstrumentName,
    KeySignature,
    Lyrics,
    Marker,
    MetaEvent,
    SequenceNumber,
    SequencerSpecific,
    SetTempo,
    Text,
    TimeSignature,
    TrackName,
)
from .streams import SafeStream

_TEXT_EVENTS: Dict[int, Type] = {
    0x01: Text,
    0x02: CopyrightNotice,
    0x03: TrackName,
    0x04: InstrumentName,
    0x05: Lyrics,
    0x06: Marker,
    0x07: CuePoint,
}


def _require_length(name: str, payload: bytes, expected: int) -> None:
    if len(payload) != expected:
        raise MidiFormatError(
            f"Invalid {name} length: expected {expected}, found {len(payload)}",
            value=len(payload),
        )


def _sequence_number(payload: bytes) -> MetaEvent:
    _require_length("sequence number", payload, 2)
    return SequenceNumber(int.from_bytes(payload, "big", signed=False))


def _end_of_track(payload: bytes) -> MetaEvent:
    _require_length("end of track", payload, 0)
    return EndOfTrack()


def _set_tempo(payload: bytes) -> MetaEvent:
    _require_length("tempo", payload, 3)
    return SetTempo(int.from_bytes(payload, "big", signed=False))


def _time_signature(payload: bytes) -> MetaEvent:
    _require_length("time signature", payload, 4)
    numerator, exponent, clocks, thirty_seconds = payload
    return TimeSignature(
        numerator=numerator,
        denominator=1 << exponent,
        clocks_per_metronome=clocks,
        thirty_seconds_per_quarter=thirty_seconds,
    )


def _key_signature(payload: bytes) -> MetaEvent:
    _require_length("key signature", payload, 2)
    key = int.from_bytes(payload[:1], "big", signed=True)
    return KeySignature(key=key, scale=payload[1])


def _sequencer_specific(payload: bytes) -> MetaEvent:
    return SequencerSpecific(bytes(payload))


_FIXED_EVENTS: Dict[int, Callable[[bytes], MetaEvent]] = {
    0x00: _sequence_number,
    0x2F: _end_of_track,
    0x51: _set_tempo,
    0x58: _time_signature,
    0x59: _key_signature,
    0x7F: _sequencer_specific,
}


def build_meta_event(meta_type: int, payload: bytes) -> MetaEvent:
    """Map a meta type and its payload to the matching :data:`MetaEvent` variant."""

    text_event = _TEXT_EVENTS.get(meta_type)
    if text_event is not None:
        return text_event(payload.decode("utf-8", errors="replace"))
    builder = _FIXED_EVENTS.get(meta_type)
    if builder is None:
        raise MidiUnsupportedError(
            f"Unsupported meta event type: 0x{meta_type:02X}",
            value=meta_type,
        )
    return builder(payload)


def decode_meta_event(stream: SafeStream) -> MetaEvent:
    """Read type, length and payload of a meta event positioned after ``0xFF``."""

    meta_type = stream.read_byte()
    length = stream.read_varlen()
    payload = stream.read_exact(length)
    return build_meta_event(meta_type, payload)


__all__ = ["build_meta_event", "decode_meta_event"]
