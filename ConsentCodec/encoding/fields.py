"""
Consent string field types layered on the bit stream.
"""

from datetime import datetime, timedelta, timezone
from typing import Iterable, List, Optional

from ConsentCodec.bits.stream import BitStream
from ConsentCodec.encoding.constants import (
    BITS_PER_CHAR,
    CHAR_BASE,
    DECISECONDS_PER_SECOND,
    EPOCH,
    MICROSECONDS_PER_DECISECOND,
    TIMESTAMP_BITS,
    VENDOR_ID_BITS,
)
from ConsentCodec.encoding.idset import IdSet
from ConsentCodec.encoding.ranges import RangeEntry


def from_deciseconds(ds: int) -> datetime:
    """Converts deciseconds since the Unix epoch to an aware UTC datetime."""
    seconds, tenths = divmod(ds, DECISECONDS_PER_SECOND)
    return EPOCH + timedelta(seconds=seconds, microseconds=tenths * MICROSECONDS_PER_DECISECOND)


def to_deciseconds(dt: datetime) -> int:
    """
    Converts a datetime to whole deciseconds since the Unix epoch.

    Naive datetimes are taken to be UTC. Precision below a decisecond
    is truncated.
    """
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    delta = dt - EPOCH
    seconds = delta.days * 86400 + delta.seconds
    return seconds * DECISECONDS_PER_SECOND + delta.microseconds // MICROSECONDS_PER_DECISECOND


class ConsentStream(BitStream):
    """
    Bit stream with the field types used by the vendor consent format.

    Adds timestamps, 6-bit character strings, identifier bitfields and
    range entry lists on top of plain unsigned integers and flags.
    """

    def read_time(self) -> datetime:
        """Reads a 36-bit decisecond timestamp."""
        return from_deciseconds(self.read_uint(TIMESTAMP_BITS))

    def write_time(self, value: Optional[datetime]) -> None:
        """Writes a 36-bit decisecond timestamp; None is written as the epoch."""
        self.write_uint(0 if value is None else to_deciseconds(value), TIMESTAMP_BITS)

    def read_string(self, n: int) -> str:
        """
        Reads an n character string, 6 bits per character.

        Each character is its 6-bit code added to 'A'.
        """
        return "".join(chr(self.read_uint(BITS_PER_CHAR) + CHAR_BASE) for _ in range(n))

    def write_string(self, value: str) -> None:
        # Characters outside 'A'..'A'+63 are not checked.
        for char in value:
            self.write_uint(ord(char) - CHAR_BASE, BITS_PER_CHAR)

    def read_bitfield(self, n: int) -> IdSet:
        """
        Reads n flags as a set of identifiers.

        Args:
            n: Size of the identifier domain

        Returns:
            Set holding i + 1 for every set bit i
        """
        return IdSet.from_mask(self.read_flags(n))

    def write_bitfield(self, ids: Iterable[int], n: int) -> None:
        """Writes one flag per identifier 1..n, set when the id is a member."""
        if not isinstance(ids, IdSet):
            ids = IdSet(ids)
        self.write_flags(ids.to_mask(n))

    def read_range_entries(self, count: int) -> List[RangeEntry]:
        """
        Reads count range entries.

        Each entry is a flag bit and a 16-bit start id, followed by a 16-bit
        end id only when the flag is set.
        """
        entries = []
        for _ in range(count):
            is_range = self.read_bool()
            start = self.read_uint(VENDOR_ID_BITS)
            if is_range:
                entries.append(RangeEntry(start, self.read_uint(VENDOR_ID_BITS)))
            else:
                entries.append(RangeEntry.single(start))
        return entries

    def write_range_entries(self, entries: Iterable[RangeEntry]) -> None:
        for entry in entries:
            self.write_bool(entry.is_range)
            self.write_uint(entry.start_vendor_id, VENDOR_ID_BITS)
            if entry.is_range:
                self.write_uint(entry.end_vendor_id, VENDOR_ID_BITS)
