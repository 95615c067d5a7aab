"""
MSB-first bit stream over a fixed byte buffer.
"""

import numpy as np
from typing import Optional, Sequence, Tuple, Union

from ConsentCodec.errors import TruncatedPayloadError

MAX_WIDTH = 64


def _check_width(width: int) -> None:
    if not 1 <= width <= MAX_WIDTH:
        raise ValueError(f"width must be between 1 and {MAX_WIDTH}, got {width}")


class BitStream:
    """
    Cursor-based bit reader/writer over a fixed byte buffer.

    Multi-bit fields are stored most significant bit first, so a field
    reads back exactly as it was written. The buffer never grows: an
    encoder sizes it up front, a decoder wraps the received payload.

    A stream belongs to a single decode or encode pass and is not meant
    to be shared between threads.
    """

    __slots__ = ("_buf", "_pos")

    def __init__(self, data: Optional[bytes] = None, size: Optional[int] = None):
        """
        Creates a stream over a copy of data, or over size zeroed bytes.

        Args:
            data: Payload to read from
            size: Number of bytes to allocate for writing
        """
        if data is not None and size is not None:
            raise TypeError("BitStream takes either data or size, not both")
        if data is not None:
            self._buf = bytearray(data)
        elif size is not None:
            if size < 0:
                raise ValueError(f"size must be >= 0, got {size}")
            self._buf = bytearray(size)
        else:
            self._buf = bytearray()
        self._pos = 0

    @property
    def position(self) -> int:
        """Gets the current bit offset."""
        return self._pos

    @property
    def bit_length(self) -> int:
        """Gets the buffer capacity in bits."""
        return len(self._buf) * 8

    @property
    def remaining(self) -> int:
        """Gets the number of bits between the cursor and the end of the buffer."""
        return self.bit_length - self._pos

    def seek(self, position: int) -> None:
        """Moves the cursor to an absolute bit offset."""
        if not 0 <= position <= self.bit_length:
            raise ValueError(f"position {position} outside [0, {self.bit_length}]")
        self._pos = position

    def _span(self, width: int) -> Tuple[int, int, int]:
        """Gets (first byte, end byte, end bit) covering the next width bits."""
        end = self._pos + width
        return self._pos >> 3, (end + 7) >> 3, end

    def _require(self, width: int) -> None:
        if width > self.remaining:
            raise TruncatedPayloadError(self._pos, width, self.remaining)

    def _reserve(self, width: int) -> None:
        if width > self.remaining:
            raise IndexError(
                f"write past end of buffer: {width} bits at offset {self._pos}, "
                f"capacity {self.bit_length}"
            )

    def read_uint(self, width: int) -> int:
        """
        Reads the next width bits as an unsigned integer.

        Args:
            width: Field width in bits (1-64)

        Returns:
            Non-negative integer value of the field

        Raises:
            TruncatedPayloadError: If fewer than width bits remain
        """
        _check_width(width)
        self._require(width)
        first, last, end = self._span(width)
        chunk = int.from_bytes(self._buf[first:last], "big")
        self._pos = end
        return (chunk >> (last * 8 - end)) & ((1 << width) - 1)

    def write_uint(self, value: int, width: int) -> None:
        """
        Writes the low width bits of value at the cursor.

        Bits of value above width are dropped, negative values are written
        in two's complement. Neither case is reported.

        Args:
            value: Integer to write
            width: Field width in bits (1-64)
        """
        _check_width(width)
        self._reserve(width)
        first, last, end = self._span(width)
        shift = last * 8 - end
        mask = ((1 << width) - 1) << shift
        chunk = int.from_bytes(self._buf[first:last], "big")
        chunk = (chunk & ~mask) | ((value << shift) & mask)
        self._buf[first:last] = chunk.to_bytes(last - first, "big")
        self._pos = end

    def read_bool(self) -> bool:
        return self.read_uint(1) == 1

    def write_bool(self, value: bool) -> None:
        self.write_uint(1 if value else 0, 1)

    def read_flags(self, count: int) -> np.ndarray:
        """
        Reads a run of count single-bit flags.

        Returns:
            Boolean array of length count, in stream order
        """
        if count < 0:
            raise ValueError(f"count must be >= 0, got {count}")
        self._require(count)
        if count == 0:
            return np.zeros(0, dtype=bool)

        first, last, end = self._span(count)
        bits = np.unpackbits(np.frombuffer(bytes(self._buf[first:last]), dtype=np.uint8))
        offset = self._pos - first * 8
        self._pos = end
        return bits[offset:offset + count].astype(bool)

    def write_flags(self, flags: Union[np.ndarray, Sequence[bool]]) -> None:
        """Writes each flag as one bit, in order."""
        flags = np.asarray(flags, dtype=bool).ravel()
        count = flags.size
        self._reserve(count)
        if count == 0:
            return

        first, last, end = self._span(count)
        bits = np.unpackbits(np.frombuffer(bytes(self._buf[first:last]), dtype=np.uint8))
        offset = self._pos - first * 8
        bits[offset:offset + count] = flags
        self._buf[first:last] = np.packbits(bits).tobytes()
        self._pos = end

    def to_bytes(self) -> bytes:
        """Gets a copy of the whole buffer."""
        return bytes(self._buf)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(position={self._pos}, bit_length={self.bit_length})"
