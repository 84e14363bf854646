"""Event and track decoding, including the running-status state machine."""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List

from .errors import MidiFormatError
from .messages import decode_message
from .models import TRACK_TAG, MidiEvent, MidiTrack
from .streams import SafeStream

logger = logging.getLogger(__name__)


@dataclass
class RunningStatus:
    """Last channel status byte seen in the current track, if any."""

    status: int | None = None

    def resolve(self, stream: SafeStream) -> int:
        """Return the effective status for the next message body.

        A byte with the high bit set is consumed and, for channel messages,
        remembered.  A data byte is left in the stream for the body decoder
        and the remembered status is reused.
        """

        byte = stream.peek_byte()
        if byte & 0x80:
            stream.read_byte()
            if byte < 0xF0:
                self.status = byte
            return byte
        if self.status is None:
            raise MidiFormatError(
                f"Unexpected data byte 0x{byte:02X} without running status at offset {stream.tell()}",
                value=byte,
            )
        return self.status


def decode_event(stream: SafeStream, running_status: RunningStatus) -> MidiEvent:
    """Decode one delta-time and message pair."""

    delta_time = stream.read_varlen()
    status = running_status.resolve(stream)
    return MidiEvent(delta_time=delta_time, message=decode_message(stream, status))


def read_chunk_header(stream: SafeStream, expected: bytes) -> int:
    """Validate a chunk tag and return the declared chunk length."""

    tag = stream.read_exact(4)
    if tag != expected:
        raise MidiFormatError(
            f"Expected chunk type {_tag_text(expected)!r}, found {_tag_text(tag)!r}",
            value=tag,
        )
    return stream.read_u32()


def _tag_text(tag: bytes) -> str:
    return tag.decode("ascii", errors="replace")


class TrackDecoder:
    """Decode one ``MTrk`` chunk starting at the stream's current position."""

    def __init__(self, stream: SafeStream, *, track_index: int = 0):
        self.stream = stream
        self.track_index = track_index

    @classmethod
    def decode_from(cls, stream: SafeStream, *, track_index: int = 0) -> MidiTrack:
        return cls(stream, track_index=track_index).decode()

    def decode(self) -> MidiTrack:
        """Decode the next track chunk; running status starts empty on every call."""

        stream = self.stream
        length = read_chunk_header(stream, TRACK_TAG)
        end = stream.tell() + length
        bound = min(end, len(stream))
        running_status = RunningStatus()
        events: List[MidiEvent] = []

        while stream.tell() < bound:
            event = decode_event(stream, running_status)
            events.append(event)
            if event.is_end_of_track:
                break

        self._finish(end)
        logger.debug("Decoded track %d: %d events", self.track_index, len(events))
        return MidiTrack(tuple(events))

    def _finish(self, end: int) -> None:
        position = self.stream.tell()
        if position == end:
            return
        if position > end:
            raise MidiFormatError(
                f"Track {self.track_index} events overran the declared chunk end "
                f"(offset {position}, expected {end})",
                value=position - end,
            )
        target = min(end, len(self.stream))
        if target < end:
            logger.debug(
                "Track %d declares an end at offset %d past the data; stopping at offset %d",
                self.track_index,
                end,
                target,
            )
        else:
            logger.debug(
                "Track %d stopped %d bytes before its declared end; skipping to offset %d",
                self.track_index,
                end - position,
                end,
            )
        self.stream.seek(target)


__all__ = ["RunningStatus", "TrackDecoder", "decode_event", "read_chunk_header"]
