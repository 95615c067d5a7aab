"""
ConsentCodec - IAB vendor consent string codec

Parses and formats v1.1 vendor consent strings: a bit-packed record of
timestamps, CMP identifiers, allowed purposes and per-vendor consent,
carried as unpadded URL-safe base64.
"""

from ConsentCodec.version import __version__

from ConsentCodec.protocol.codec import parse_consent, format_consent
from ConsentCodec.protocol.record import ParsedConsent
from ConsentCodec.protocol.result import ParseResult
from ConsentCodec.protocol.config import CodecConfig
from ConsentCodec.encoding.ranges import RangeEntry
from ConsentCodec.encoding.idset import IdSet
from ConsentCodec.errors import ConsentError, MalformedTokenError, TruncatedPayloadError

from ConsentCodec import bits
from ConsentCodec import encoding
from ConsentCodec import protocol

__all__ = [
    "__version__",
    "parse_consent",
    "format_consent",
    "ParsedConsent",
    "ParseResult",
    "CodecConfig",
    "RangeEntry",
    "IdSet",
    "ConsentError",
    "MalformedTokenError",
    "TruncatedPayloadError",
    "bits",
    "encoding",
    "protocol",
]
