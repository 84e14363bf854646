"""Immutable data model produced by the MIDI decoder."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, Tuple, Union

FILE_HEADER_TAG = b"MThd"
TRACK_TAG = b"MTrk"
HEADER_LENGTH = 6
MAX_FORMAT = 2


@dataclass(frozen=True)
class MidiHeader:
    """Fields of the ``MThd`` chunk."""

    format: int
    num_tracks: int
    time_division: int

    @property
    def uses_smpte_timing(self) -> bool:
        return bool(self.time_division & 0x8000)

    @property
    def ticks_per_quarter(self) -> int | None:
        if self.uses_smpte_timing:
            return None
        return self.time_division


# Meta events ---------------------------------------------------------------


@dataclass(frozen=True)
class SequenceNumber:
    number: int


@dataclass(frozen=True)
class Text:
    text: str


@dataclass(frozen=True)
class CopyrightNotice:
    text: str


@dataclass(frozen=True)
class TrackName:
    text: str


@dataclass(frozen=True)
class InstrumentName:
    text: str


@dataclass(frozen=True)
class Lyrics:
    text: str


@dataclass(frozen=True)
class Marker:
    text: str


@dataclass(frozen=True)
class CuePoint:
    text: str


@dataclass(frozen=True)
class EndOfTrack:
    pass


@dataclass(frozen=True)
class SetTempo:
    """Tempo change expressed in microseconds per quarter note."""

    microseconds_per_quarter: int

    @property
    def bpm(self) -> float:
        if self.microseconds_per_quarter <= 0:
            return 0.0
        return 60_000_000.0 / float(self.microseconds_per_quarter)


@dataclass(frozen=True)
class TimeSignature:
    numerator: int
    denominator: int
    clocks_per_metronome: int
    thirty_seconds_per_quarter: int


@dataclass(frozen=True)
class KeySignature:
    """Key as sharps (positive) or flats (negative); scale 0 is major, 1 is minor."""

    key: int
    scale: int


@dataclass(frozen=True)
class SequencerSpecific:
    data: bytes


TextMetaEvent = Union[Text, CopyrightNotice, TrackName, InstrumentName, Lyrics, Marker, CuePoint]
MetaEvent = Union[
    SequenceNumber,
    Text,
    CopyrightNotice,
    TrackName,
    InstrumentName,
    Lyrics,
    Marker,
    CuePoint,
    EndOfTrack,
    SetTempo,
    TimeSignature,
    KeySignature,
    SequencerSpecific,
]


# Messages ------------------------------------------------------------------


@dataclass(frozen=True)
class NoteOn:
    channel: int
    note: int
    velocity: int


@dataclass(frozen=True)
class NoteOff:
    channel: int
    note: int
    velocity: int


@dataclass(frozen=True)
class PolyphonicKeyPressure:
    channel: int
    note: int
    pressure: int


@dataclass(frozen=True)
class ControlChange:
    channel: int
    controller: int
    value: int


@dataclass(frozen=True)
class ProgramChange:
    channel: int
    program: int


@dataclass(frozen=True)
class ChannelPressure:
    channel: int
    pressure: int


@dataclass(frozen=True)
class PitchBendChange:
    """Pitch bend centred on zero, in the range -8192..8191."""

    channel: int
    value: int


@dataclass(frozen=True)
class MetaMessage:
    event: MetaEvent


@dataclass(frozen=True)
class SysExMessage:
    data: bytes


ChannelMessage = Union[
    NoteOn,
    NoteOff,
    PolyphonicKeyPressure,
    ControlChange,
    ProgramChange,
    ChannelPressure,
    PitchBendChange,
]
MidiMessage = Union[
    NoteOn,
    NoteOff,
    PolyphonicKeyPressure,
    ControlChange,
    ProgramChange,
    ChannelPressure,
    PitchBendChange,
    MetaMessage,
    SysExMessage,
]


# Containers ----------------------------------------------------------------


@dataclass(frozen=True)
class MidiEvent:
    """A message and the ticks elapsed since the previous event of its track."""

    delta_time: int
    message: MidiMessage

    @property
    def is_end_of_track(self) -> bool:
        return isinstance(self.message, MetaMessage) and isinstance(self.message.event, EndOfTrack)


@dataclass(frozen=True)
class MidiTrack:
    """Events of one ``MTrk`` chunk in file order."""

    events: Tuple[MidiEvent, ...]

    def __len__(self) -> int:
        return len(self.events)

    def __iter__(self) -> Iterator[MidiEvent]:
        return iter(self.events)

    @property
    def ends_with_end_of_track(self) -> bool:
        return bool(self.events) and self.events[-1].is_end_of_track

    def iter_absolute(self) -> Iterator[Tuple[int, MidiEvent]]:
        """Yield ``(tick, event)`` pairs where ``tick`` is the running sum of delta-times."""

        tick = 0
        for event in self.events:
            tick += event.delta_time
            yield tick, event


@dataclass(frozen=True)
class MidiFile:
    """Fully decoded Standard MIDI File."""

    header: MidiHeader
    tracks: Tuple[MidiTrack, ...]


__all__ = [
    "FILE_HEADER_TAG",
    "HEADER_LENGTH",
    "MAX_FORMAT",
    "TRACK_TAG",
    "ChannelMessage",
    "ChannelPressure",
    "ControlChange",
    "CopyrightNotice",
    "CuePoint",
    "EndOfTrack",
    "InstrumentName",
    "KeySignature",
    "Lyrics",
    "Marker",
    "MetaEvent",
    "MetaMessage",
    "MidiEvent",
    "MidiFile",
    "MidiHeader",
    "MidiMessage",
    "MidiTrack",
    "NoteOff",
    "NoteOn",
    "PitchBendChange",
    "PolyphonicKeyPressure",
    "ProgramChange",
    "SequenceNumber",
    "SequencerSpecific",
    "SetTempo",
    "SysExMessage",
    "Text",
    "TextMetaEvent",
    "TimeSignature",
    "TrackName",
]
