"""Exception hierarchy raised while decoding Standard MIDI Files."""
from __future__ import annotations

from typing import Any


class MidiError(Exception):
    """Base class for every failure reported by the MIDI decoder."""

    def __init__(self, message: str, *, value: Any = None):
        super().__init__(message)
        self.message = message
        self.value = value

    def __str__(self) -> str:
        return self.message


class MidiIOError(MidiError, OSError):
    """The byte source failed or ended before the requested bytes were read."""


class MidiFormatError(MidiError, ValueError):
    """The bytes violate a structural rule of the file container format."""


class MidiUnsupportedError(MidiError, ValueError):
    """The bytes are well formed but encode a feature the decoder does not model."""


__all__ = [
    "MidiError",
    "MidiFormatError",
    "MidiIOError",
    "MidiUnsupportedError",
]
