"""Public facade for Standard MIDI File decoding."""

from .errors import MidiError, MidiFormatError, MidiIOError, MidiUnsupportedError
from .models import (
    FILE_HEADER_TAG,
    HEADER_LENGTH,
    MAX_FORMAT,
    TRACK_TAG,
    ChannelMessage,
    ChannelPressure,
    ControlChange,
    CopyrightNotice,
    CuePoint,
    EndOfTrack,
    InstrumentName,
    KeySignature,
    Lyrics,
    Marker,
    MetaEvent,
    MetaMessage,
    MidiEvent,
    MidiFile,
    MidiHeader,
    MidiMessage,
    MidiTrack,
    NoteOff,
    NoteOn,
    PitchBendChange,
    PolyphonicKeyPressure,
    ProgramChange,
    SequenceNumber,
    SequencerSpecific,
    SetTempo,
    SysExMessage,
    Text,
    TextMetaEvent,
    TimeSignature,
    TrackName,
)
from .streams import SafeStream
from .meta import build_meta_event, decode_meta_event
from .messages import decode_message
from .decoders import RunningStatus, TrackDecoder, decode_event, read_chunk_header
from .reader import decode_midi, read_header, read_midi

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
    "MidiError",
    "MidiEvent",
    "MidiFile",
    "MidiFormatError",
    "MidiHeader",
    "MidiIOError",
    "MidiMessage",
    "MidiTrack",
    "MidiUnsupportedError",
    "NoteOff",
    "NoteOn",
    "PitchBendChange",
    "PolyphonicKeyPressure",
    "ProgramChange",
    "RunningStatus",
    "SafeStream",
    "SequenceNumber",
    "SequencerSpecific",
    "SetTempo",
    "SysExMessage",
    "Text",
    "TextMetaEvent",
    "TimeSignature",
    "TrackDecoder",
    "TrackName",
    "build_meta_event",
    "decode_event",
    "decode_message",
    "decode_meta_event",
    "decode_midi",
    "read_chunk_header",
    "read_header",
    "read_midi",
]
