import pytest

from ConsentCodec import CodecConfig, IdSet, ParsedConsent, RangeEntry


@pytest.mark.parametrize(
    "vendor,allowed",
    [(1, True), (2, True), (3, False), (9, True), (10, False), (11, False), (0, False)],
)
def test_vendor_allowed_bitfield(bitfield_consent, vendor, allowed):
    assert bitfield_consent.vendor_allowed(vendor) is allowed


@pytest.mark.parametrize(
    "vendor,allowed",
    [
        (19, False),
        (20, True),
        (21, False),
        (199, False),
        (200, True),
        (400, True),
        (401, True),
        (410, True),
        (411, False),
        (515, True),
        (4999, False),
        (5000, True),
        (5024, True),
        (5025, False),
    ],
)
def test_vendor_allowed_ranges(range_consent, vendor, allowed):
    assert range_consent.vendor_allowed(vendor) is allowed


def test_ranges_flip_default_consent(range_consent):
    range_consent.default_consent = True
    assert range_consent.vendor_allowed(20) is False
    assert range_consent.vendor_allowed(21) is True
    assert range_consent.vendor_allowed(300) is False


def test_range_mode_ignores_bitfield():
    consent = ParsedConsent(is_range_encoding=True, consented_vendors={5})
    assert consent.vendor_allowed(5) is False


def test_purposes(bitfield_consent):
    assert bitfield_consent.purpose_allowed(2)
    assert not bitfield_consent.purpose_allowed(1)
    assert not bitfield_consent.purpose_allowed(25)
    assert bitfield_consent.every_purpose_allowed([2, 3, 23])
    assert not bitfield_consent.every_purpose_allowed([2, 4])
    assert bitfield_consent.every_purpose_allowed([])


def test_queries_are_repeatable(range_consent):
    first = [range_consent.vendor_allowed(v) for v in range(0, 600)]
    second = [range_consent.vendor_allowed(v) for v in range(0, 600)]
    assert first == second
    assert range_consent.purpose_allowed(4) == range_consent.purpose_allowed(4)


def test_constructor_coerces_collections():
    consent = ParsedConsent(purposes_allowed=[3, 1], range_entries=[(1, 4)])
    assert isinstance(consent.purposes_allowed, IdSet)
    assert list(consent.purposes_allowed) == [1, 3]
    assert consent.range_entries == [RangeEntry(1, 4)]


def test_range_entry():
    assert RangeEntry.single(5) == RangeEntry(5, 5)
    assert not RangeEntry(5, 5).is_range
    assert RangeEntry(5, 5).bit_length == 17
    assert RangeEntry(5, 6).is_range
    assert RangeEntry(5, 6).bit_length == 33
    assert 5 in RangeEntry(5, 6) and 6 in RangeEntry(5, 6)
    assert 7 not in RangeEntry(5, 6)


def test_describe(bitfield_consent):
    text = str(bitfield_consent)
    assert text == bitfield_consent.describe()
    assert "CMPID=14" in text
    assert "ConsentLanguage=FR" in text
    assert "ConsentedVendors=[1, 2, 4, 5, 7, 9]" in text


def test_config_dict_round_trip():
    config = CodecConfig(allow_padding=True)
    assert config.to_dict() == {"allow_padding": True, "log_failures": True}
    assert CodecConfig.from_dict({"allow_padding": True, "unknown": 1}) == config
