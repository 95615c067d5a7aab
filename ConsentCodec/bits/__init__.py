"""
Bit-addressable stream over a byte buffer.
"""

from ConsentCodec.bits.stream import BitStream, MAX_WIDTH

__all__ = [
    "BitStream",
    "MAX_WIDTH",
]
