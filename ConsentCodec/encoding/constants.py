from datetime import datetime, timezone

VERSION_BITS = 6
TIMESTAMP_BITS = 36
CMP_ID_BITS = 12
CMP_VERSION_BITS = 12
CONSENT_SCREEN_BITS = 6
BITS_PER_CHAR = 6
LANGUAGE_LENGTH = 2
VENDOR_LIST_VERSION_BITS = 12
PURPOSE_COUNT = 24
VENDOR_ID_BITS = 16
NUM_ENTRIES_BITS = 12

CHAR_BASE = ord('A')

DECISECONDS_PER_SECOND = 10
MICROSECONDS_PER_DECISECOND = 100_000
EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)

# Everything up to and including the encoding-type flag.
HEADER_BITS = (
    VERSION_BITS
    + 2 * TIMESTAMP_BITS
    + CMP_ID_BITS
    + CMP_VERSION_BITS
    + CONSENT_SCREEN_BITS
    + LANGUAGE_LENGTH * BITS_PER_CHAR
    + VENDOR_LIST_VERSION_BITS
    + PURPOSE_COUNT
    + VENDOR_ID_BITS
    + 1
)
BITFIELD_HEADER_BITS = HEADER_BITS
RANGE_HEADER_BITS = HEADER_BITS + 1 + NUM_ENTRIES_BITS

SINGLE_ENTRY_BITS = 1 + VENDOR_ID_BITS
RANGE_ENTRY_BITS = 1 + 2 * VENDOR_ID_BITS
