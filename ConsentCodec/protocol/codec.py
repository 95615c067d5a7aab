"""
Vendor consent string parsing and formatting.

Wire layout, most significant bit first:

    Version             6
    Created             36   deciseconds since epoch
    LastUpdated         36   deciseconds since epoch
    CmpId               12
    CmpVersion          12
    ConsentScreen       6
    ConsentLanguage     12   two 6-bit characters
    VendorListVersion   12
    PurposesAllowed     24   bitfield
    MaxVendorId         16
    EncodingType        1    0 = bitfield, 1 = ranges

    bitfield:  MaxVendorId bits, one per vendor id
    ranges:    DefaultConsent (1), NumEntries (12), entries

The payload is padded to whole bytes and carried as unpadded URL-safe
base64.
"""

import base64
import re
from contextlib import contextmanager
from typing import Optional

from ConsentCodec.encoding.constants import (
    BITFIELD_HEADER_BITS,
    CMP_ID_BITS,
    CMP_VERSION_BITS,
    CONSENT_SCREEN_BITS,
    LANGUAGE_LENGTH,
    NUM_ENTRIES_BITS,
    PURPOSE_COUNT,
    RANGE_HEADER_BITS,
    VENDOR_ID_BITS,
    VENDOR_LIST_VERSION_BITS,
    VERSION_BITS,
)
from ConsentCodec.encoding.fields import ConsentStream
from ConsentCodec.errors import MalformedTokenError, TruncatedPayloadError
from ConsentCodec.protocol.config import CodecConfig
from ConsentCodec.protocol.record import ParsedConsent
from ConsentCodec.protocol.result import ParseResult
from ConsentCodec.utils.logging import get_logger

_URLSAFE_ALPHABET = re.compile(r"[A-Za-z0-9_-]*")


def decode_token(token: str, allow_padding: bool = False) -> bytes:
    """
    Decodes unpadded URL-safe base64.

    Args:
        token: Consent string
        allow_padding: Accept trailing '=' characters

    Returns:
        Raw payload bytes

    Raises:
        MalformedTokenError: If token is not valid base64 in that alphabet
    """
    if not isinstance(token, str):
        raise MalformedTokenError(repr(token), f"expected str, got {type(token).__name__}")

    body = token
    if allow_padding:
        body = token.rstrip("=")
    if not _URLSAFE_ALPHABET.fullmatch(body):
        raise MalformedTokenError(token, "illegal character in URL-safe base64 input")

    try:
        return base64.urlsafe_b64decode(body + "=" * (-len(body) % 4))
    except ValueError as e:
        raise MalformedTokenError(token, str(e)) from e


def encode_token(payload: bytes) -> str:
    """Encodes bytes as unpadded URL-safe base64."""
    return base64.urlsafe_b64encode(payload).rstrip(b"=").decode("ascii")


@contextmanager
def _reading(field: str):
    try:
        yield
    except TruncatedPayloadError as e:
        raise e.with_field(field)


def read_consent(stream: ConsentStream, consent: ParsedConsent) -> ParsedConsent:
    """
    Reads every field of a consent string into consent, in wire order.

    Each field is assigned as soon as it is read, so when a read runs
    past the end of the payload consent keeps everything before it.

    Raises:
        TruncatedPayloadError: If the payload ends early
    """
    with _reading("Version"):
        consent.version = stream.read_uint(VERSION_BITS)
    with _reading("Created"):
        consent.created = stream.read_time()
    with _reading("LastUpdated"):
        consent.last_updated = stream.read_time()
    with _reading("CmpId"):
        consent.cmp_id = stream.read_uint(CMP_ID_BITS)
    with _reading("CmpVersion"):
        consent.cmp_version = stream.read_uint(CMP_VERSION_BITS)
    with _reading("ConsentScreen"):
        consent.consent_screen = stream.read_uint(CONSENT_SCREEN_BITS)
    with _reading("ConsentLanguage"):
        consent.consent_language = stream.read_string(LANGUAGE_LENGTH)
    with _reading("VendorListVersion"):
        consent.vendor_list_version = stream.read_uint(VENDOR_LIST_VERSION_BITS)
    with _reading("PurposesAllowed"):
        consent.purposes_allowed = stream.read_bitfield(PURPOSE_COUNT)
    with _reading("MaxVendorId"):
        consent.max_vendor_id = stream.read_uint(VENDOR_ID_BITS)
    with _reading("EncodingType"):
        consent.is_range_encoding = stream.read_bool()

    if consent.is_range_encoding:
        with _reading("DefaultConsent"):
            consent.default_consent = stream.read_bool()
        with _reading("NumEntries"):
            consent.num_entries = stream.read_uint(NUM_ENTRIES_BITS)
        with _reading("RangeEntries"):
            consent.range_entries = stream.read_range_entries(consent.num_entries)
    else:
        with _reading("BitField"):
            consent.consented_vendors = stream.read_bitfield(consent.max_vendor_id)

    return consent


def write_consent(stream: ConsentStream, consent: ParsedConsent) -> None:
    """
    Writes every field of consent, in wire order.

    Must stay in step with bit_length and read_consent.
    """
    stream.write_uint(consent.version, VERSION_BITS)
    stream.write_time(consent.created)
    stream.write_time(consent.last_updated)
    stream.write_uint(consent.cmp_id, CMP_ID_BITS)
    stream.write_uint(consent.cmp_version, CMP_VERSION_BITS)
    stream.write_uint(consent.consent_screen, CONSENT_SCREEN_BITS)
    stream.write_string(consent.consent_language)
    stream.write_uint(consent.vendor_list_version, VENDOR_LIST_VERSION_BITS)
    stream.write_bitfield(consent.purposes_allowed, PURPOSE_COUNT)
    stream.write_uint(consent.max_vendor_id, VENDOR_ID_BITS)

    stream.write_bool(consent.is_range_encoding)
    if consent.is_range_encoding:
        stream.write_bool(consent.default_consent)
        stream.write_uint(len(consent.range_entries), NUM_ENTRIES_BITS)
        stream.write_range_entries(consent.range_entries)
    else:
        stream.write_bitfield(consent.consented_vendors, consent.max_vendor_id)


def bit_length(consent: ParsedConsent) -> int:
    """Gets the exact number of bits write_consent produces for consent."""
    if consent.is_range_encoding:
        return RANGE_HEADER_BITS + sum(e.bit_length for e in consent.range_entries)
    return BITFIELD_HEADER_BITS + consent.max_vendor_id


def parse_consent(token: str, config: Optional[CodecConfig] = None) -> ParseResult:
    """
    Decodes a consent string.

    Example:
        consent, err = parse_consent("BONJ5bvONJ5bvAMAPyFRAL7AAAAMhuqKklS-gAAAAAAAAAAAAAAAAAAAAAAAAAA")

    Args:
        token: Unpadded URL-safe base64 consent string
        config: Decoding options

    Returns:
        ParseResult; on a truncated payload it carries both the error and
        the fields decoded up to the failure
    """
    config = config or CodecConfig()
    logger = get_logger()

    try:
        payload = decode_token(token, allow_padding=config.allow_padding)
    except MalformedTokenError as e:
        if config.log_failures:
            logger.decode_failure(str(token), e, partial=False)
        return ParseResult(None, e)

    consent = ParsedConsent()
    try:
        read_consent(ConsentStream(payload), consent)
    except TruncatedPayloadError as e:
        if config.log_failures:
            logger.decode_failure(token, e, partial=True)
        return ParseResult(consent, e)

    logger.debug(
        f"Decoded consent string | {len(payload)} bytes | "
        f"{'ranges' if consent.is_range_encoding else 'bitfield'} | max vendor {consent.max_vendor_id}"
    )
    return ParseResult(consent)


def format_consent(consent: ParsedConsent) -> str:
    """
    Encodes consent as an unpadded URL-safe base64 consent string.

    Field values are not validated: values wider than their field are
    truncated to fit.

    Example:
        token = format_consent(consent)
    """
    bits = bit_length(consent)
    stream = ConsentStream(size=(bits + 7) // 8)
    write_consent(stream, consent)
    get_logger().debug(f"Encoded consent string | {bits} bits")
    return encode_token(stream.to_bytes())
