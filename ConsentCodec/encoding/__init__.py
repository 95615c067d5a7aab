"""
Field encoding for ConsentCodec.

Handles the consent string field types: timestamps, 6-bit strings,
identifier bitfields and vendor range entries.
"""

from ConsentCodec.encoding.fields import ConsentStream, from_deciseconds, to_deciseconds
from ConsentCodec.encoding.idset import IdSet
from ConsentCodec.encoding.ranges import RangeEntry
from ConsentCodec.encoding.constants import (
    BITFIELD_HEADER_BITS,
    RANGE_HEADER_BITS,
    PURPOSE_COUNT,
    LANGUAGE_LENGTH,
    EPOCH,
)

__all__ = [
    "ConsentStream",
    "from_deciseconds",
    "to_deciseconds",
    "IdSet",
    "RangeEntry",
    "BITFIELD_HEADER_BITS",
    "RANGE_HEADER_BITS",
    "PURPOSE_COUNT",
    "LANGUAGE_LENGTH",
    "EPOCH",
]
