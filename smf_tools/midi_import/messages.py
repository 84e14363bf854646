"""Decoding of channel and system message bodies."""
from __future__ import annotations

from typing import Callable, Dict

from .errors import MidiFormatError, MidiUnsupportedError
from .meta import decode_meta_event
from .models import (
    ChannelPressure,
    ControlChange,
    MetaMessage,
    MidiMessage,
    NoteOff,
    NoteOn,
    PitchBendChange,
    PolyphonicKeyPressure,
    ProgramChange,
    SysExMessage,
)
from .streams import SafeStream

SYSEX_STATUS = 0xF0
SYSEX_TERMINATOR = 0xF7
META_STATUS = 0xFF
PITCH_BEND_CENTER = 8192


def _note_off(stream: SafeStream, channel: int) -> MidiMessage:
    note, velocity = stream.read_exact(2)
    return NoteOff(channel=channel, note=note, velocity=velocity)


def _note_on(stream: SafeStream, channel: int) -> MidiMessage:
    note, velocity = stream.read_exact(2)
    if velocity == 0:
        return NoteOff(channel=channel, note=note, velocity=0)
    return NoteOn(channel=channel, note=note, velocity=velocity)


def _key_pressure(stream: SafeStream, channel: int) -> MidiMessage:
    note, pressure = stream.read_exact(2)
    return PolyphonicKeyPressure(channel=channel, note=note, pressure=pressure)


def _control_change(stream: SafeStream, channel: int) -> MidiMessage:
    controller, value = stream.read_exact(2)
    return ControlChange(channel=channel, controller=controller, value=value)


def _program_change(stream: SafeStream, channel: int) -> MidiMessage:
    return ProgramChange(channel=channel, program=stream.read_byte())


def _channel_pressure(stream: SafeStream, channel: int) -> MidiMessage:
    return ChannelPressure(channel=channel, pressure=stream.read_byte())


def _pitch_bend(stream: SafeStream, channel: int) -> MidiMessage:
    lsb, msb = stream.read_exact(2)
    return PitchBendChange(channel=channel, value=((msb << 7) | lsb) - PITCH_BEND_CENTER)


_CHANNEL_MESSAGES: Dict[int, Callable[[SafeStream, int], MidiMessage]] = {
    0x80: _note_off,
    0x90: _note_on,
    0xA0: _key_pressure,
    0xB0: _control_change,
    0xC0: _program_change,
    0xD0: _channel_pressure,
    0xE0: _pitch_bend,
}


def _sysex(stream: SafeStream) -> MidiMessage:
    data = bytearray()
    while True:
        byte = stream.read_byte()
        if byte == SYSEX_TERMINATOR:
            return SysExMessage(bytes(data))
        data.append(byte)


def decode_message(stream: SafeStream, status: int) -> MidiMessage:
    """Decode the body following ``status``, consuming exactly its bytes."""

    if status < 0x80:
        raise MidiFormatError(f"Invalid status byte: 0x{status:02X}", value=status)
    if status < 0xF0:
        return _CHANNEL_MESSAGES[status & 0xF0](stream, status & 0x0F)
    if status == SYSEX_STATUS:
        return _sysex(stream)
    if status == META_STATUS:
        return MetaMessage(decode_meta_event(stream))
    raise MidiUnsupportedError(f"Unsupported MIDI message type: 0x{status:02X}", value=status)


__all__ = [
    "META_STATUS",
    "PITCH_BEND_CENTER",
    "SYSEX_STATUS",
    "SYSEX_TERMINATOR",
    "decode_message",
]
