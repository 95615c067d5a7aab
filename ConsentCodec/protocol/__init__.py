from ConsentCodec.protocol.record import ParsedConsent
from ConsentCodec.protocol.result import ParseResult
from ConsentCodec.protocol.config import CodecConfig
from ConsentCodec.protocol.codec import (
    parse_consent,
    format_consent,
    read_consent,
    write_consent,
    bit_length,
    decode_token,
    encode_token,
)
from ConsentCodec.encoding.ranges import RangeEntry

__all__ = [
    "ParsedConsent",
    "ParseResult",
    "CodecConfig",
    "RangeEntry",
    "parse_consent",
    "format_consent",
    "read_consent",
    "write_consent",
    "bit_length",
    "decode_token",
    "encode_token",
]
