from .midi_import import (
    MidiError,
    MidiFile,
    MidiFormatError,
    MidiIOError,
    MidiUnsupportedError,
    decode_midi,
    read_midi,
)

__all__ = [
    "MidiError",
    "MidiFile",
    "MidiFormatError",
    "MidiIOError",
    "MidiUnsupportedError",
    "decode_midi",
    "read_midi",
]
