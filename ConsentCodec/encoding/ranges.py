"""
Inclusive vendor-id intervals used by range-encoded consent.
"""

from dataclasses import dataclass

from ConsentCodec.encoding.constants import SINGLE_ENTRY_BITS, RANGE_ENTRY_BITS


@dataclass(frozen=True)
class RangeEntry:
    """
    Inclusive range of vendor ids from start_vendor_id to end_vendor_id.

    A single vendor is written as start == end. Entries are kept in the
    order they appear on the wire and are never sorted or merged.
    """

    start_vendor_id: int
    end_vendor_id: int

    @property
    def is_range(self) -> bool:
        """True when the entry is written with a distinct end id."""
        return self.end_vendor_id > self.start_vendor_id

    @property
    def bit_length(self) -> int:
        """Gets the number of bits the entry takes on the wire."""
        return RANGE_ENTRY_BITS if self.is_range else SINGLE_ENTRY_BITS

    def __contains__(self, vendor_id: int) -> bool:
        return self.start_vendor_id <= vendor_id <= self.end_vendor_id

    @classmethod
    def single(cls, vendor_id: int) -> "RangeEntry":
        return cls(vendor_id, vendor_id)
