from datetime import datetime, timedelta, timezone

import pytest

from ConsentCodec import ParsedConsent, RangeEntry

BITFIELD_TOKEN = "BN5lERiOMYEdiAOAWeFRAAYAAaAAptQ"
RANGE_TOKEN = "BN5lERiOMYEdiAKAWXEND1HoSBE6CAFAApAMgBkIDIgM0AgOJxAnQA"
SMALL_RANGE_TOKEN = "BONZt-1ONZt-1AHABBENAO-AAAAHCAEAASABmADYAOAAeA"
LIVE_TOKEN = (
    "BOOd8eCOPpnYYAKABCFRBCAAAAAcQAAAgAAYEBAUKgCAwAA0KAAIABABAiAAgQ1AxAbIeGiiAAQug"
    "CFAYABAAAAADAECAAAAQFBiA6OGgA"
)


def time_from_ds(ds: int) -> datetime:
    return datetime(1970, 1, 1, tzinfo=timezone.utc) + timedelta(milliseconds=ds * 100)


@pytest.fixture
def bitfield_consent() -> ParsedConsent:
    return ParsedConsent(
        version=1,
        created=time_from_ds(14924661858),
        last_updated=time_from_ds(15240021858),
        cmp_id=14,
        cmp_version=22,
        consent_screen=30,
        consent_language="FR",
        vendor_list_version=0,
        purposes_allowed={2, 3, 20, 21, 23},
        max_vendor_id=10,
        is_range_encoding=False,
        consented_vendors={1, 2, 4, 5, 7, 9},
    )


@pytest.fixture
def range_consent() -> ParsedConsent:
    return ParsedConsent(
        version=1,
        created=time_from_ds(14924661858),
        last_updated=time_from_ds(15240021858),
        cmp_id=10,
        cmp_version=22,
        consent_screen=23,
        consent_language="EN",
        vendor_list_version=245,
        purposes_allowed={4, 5, 6, 7, 9, 14, 17, 24},
        max_vendor_id=5024,
        is_range_encoding=True,
        default_consent=False,
        num_entries=5,
        range_entries=[
            RangeEntry(20, 20),
            RangeEntry(200, 400),
            RangeEntry(401, 410),
            RangeEntry(515, 515),
            RangeEntry(5000, 5024),
        ],
    )


@pytest.fixture
def small_range_consent() -> ParsedConsent:
    return ParsedConsent(
        version=1,
        created=time_from_ds(15257231285),
        last_updated=time_from_ds(15257231285),
        cmp_id=7,
        cmp_version=1,
        consent_screen=1,
        consent_language="EN",
        vendor_list_version=14,
        purposes_allowed={1, 2, 3, 4, 5},
        max_vendor_id=112,
        is_range_encoding=True,
        default_consent=False,
        num_entries=4,
        range_entries=[
            RangeEntry(9, 9),
            RangeEntry(25, 25),
            RangeEntry(27, 28),
            RangeEntry(30, 30),
        ],
    )
