"""Byte cursor shared by the MIDI decoders."""
from __future__ import annotations

from .errors import MidiFormatError, MidiIOError

MAX_VARLEN_BYTES = 5
_MAX_VARLEN_VALUE = 0xFFFFFFFF


class SafeStream:
    """Read big-endian values from a byte buffer with bound checks and an absolute cursor."""

    __slots__ = ("_data", "_length", "_position")

    def __init__(self, data: bytes, *, position: int = 0):
        self._data = memoryview(data)
        self._length = len(self._data)
        self._position = 0
        self.seek(position)

    def __len__(self) -> int:
        return self._length

    @property
    def remaining(self) -> int:
        return self._length - self._position

    def tell(self) -> int:
        return self._position

    def seek(self, offset: int) -> None:
        if offset < 0 or offset > self._length:
            raise MidiIOError(
                f"Cannot seek to offset {offset}; stream holds {self._length} bytes.",
                value=offset,
            )
        self._position = offset

    def read_exact(self, size: int) -> bytes:
        if size < 0:
            raise ValueError("Size must be non-negative.")
        if self.remaining < size:
            raise MidiIOError(
                f"Unexpected end of MIDI data at offset {self._position}: "
                f"needed {size} bytes, {self.remaining} available.",
                value=self._position,
            )
        start = self._position
        self._position += size
        return bytes(self._data[start : start + size])

    def read_byte(self) -> int:
        return self.read_exact(1)[0]

    def read_u16(self) -> int:
        return int.from_bytes(self.read_exact(2), "big", signed=False)

    def read_u32(self) -> int:
        return int.from_bytes(self.read_exact(4), "big", signed=False)

    def peek_byte(self) -> int:
        if self.remaining <= 0:
            raise MidiIOError(
                f"Unexpected end of MIDI data at offset {self._position}.",
                value=self._position,
            )
        return self._data[self._position]

    def read_varlen(self, *, max_bytes: int = MAX_VARLEN_BYTES) -> int:
        """Decode one MIDI variable-length quantity.

        Each byte contributes its low seven bits, most significant group
        first; a set high bit means another byte follows.  Sequences longer
        than ``max_bytes`` or values wider than 32 bits are rejected.
        """

        start = self._position
        value = 0
        consumed = 0
        while True:
            byte = self.read_byte()
            value = (value << 7) | (byte & 0x7F)
            consumed += 1
            if byte & 0x80 == 0:
                break
            if consumed >= max_bytes:
                raise MidiFormatError(
                    f"Variable-length quantity at offset {start} exceeds {max_bytes} bytes.",
                    value=start,
                )
        if value > _MAX_VARLEN_VALUE:
            raise MidiFormatError(
                f"Variable-length quantity at offset {start} does not fit in 32 bits.",
                value=value,
            )
        return value


__all__ = ["MAX_VARLEN_BYTES", "SafeStream"]
