"""
Decoded vendor consent record.
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Iterable, List, Optional

from ConsentCodec.encoding.idset import IdSet
from ConsentCodec.encoding.ranges import RangeEntry


@dataclass
class ParsedConsent:
    """
    Fields of a vendor consent string, v1.1.

    Vendor consent is held in one of two forms, picked by
    is_range_encoding: consented_vendors for the bitfield form, or
    default_consent with range_entries for the range form. The unused
    form stays empty.

    A record returned alongside a decode error holds the fields read
    before the failure; the rest keep their defaults.
    """

    version: int = 0
    created: Optional[datetime] = None
    last_updated: Optional[datetime] = None
    cmp_id: int = 0
    cmp_version: int = 0
    consent_screen: int = 0
    consent_language: str = ""
    vendor_list_version: int = 0
    purposes_allowed: IdSet = field(default_factory=IdSet)
    max_vendor_id: int = 0
    is_range_encoding: bool = False
    consented_vendors: IdSet = field(default_factory=IdSet)
    default_consent: bool = False
    num_entries: int = 0
    range_entries: List[RangeEntry] = field(default_factory=list)

    def __post_init__(self):
        if not isinstance(self.purposes_allowed, IdSet):
            self.purposes_allowed = IdSet(self.purposes_allowed)
        if not isinstance(self.consented_vendors, IdSet):
            self.consented_vendors = IdSet(self.consented_vendors)
        self.range_entries = [
            e if isinstance(e, RangeEntry) else RangeEntry(*e)
            for e in self.range_entries
        ]

    def purpose_allowed(self, purpose: int) -> bool:
        """True if the purpose number is in purposes_allowed."""
        return purpose in self.purposes_allowed

    def every_purpose_allowed(self, purposes: Iterable[int]) -> bool:
        """True iff every purpose number in purposes is allowed."""
        return all(p in self.purposes_allowed for p in purposes)

    def vendor_allowed(self, vendor_id: int) -> bool:
        """
        True if the record grants consent to vendor_id.

        In range form, an id covered by any entry gets the opposite of
        default_consent and any other id gets default_consent.
        """
        if self.is_range_encoding:
            for entry in self.range_entries:
                if vendor_id in entry:
                    return not self.default_consent
            return self.default_consent

        return vendor_id in self.consented_vendors

    def to_consent_string(self) -> str:
        """Encodes the record as a consent string."""
        from ConsentCodec.protocol.codec import format_consent
        return format_consent(self)

    def describe(self) -> str:
        """Gets a single-line summary of every field."""
        return (
            f"Version={self.version}, Created={self.created}, LastUpdated={self.last_updated}, "
            f"CMPID={self.cmp_id}, CMPVersion={self.cmp_version}, "
            f"ConsentScreen={self.consent_screen}, ConsentLanguage={self.consent_language}, "
            f"VendorListVersion={self.vendor_list_version}, "
            f"PurposesAllowed={list(self.purposes_allowed)}, MaxVendorID={self.max_vendor_id}, "
            f"IsRangeEncoding={self.is_range_encoding}, "
            f"ConsentedVendors={list(self.consented_vendors)}, "
            f"RangeEntries={[(e.start_vendor_id, e.end_vendor_id) for e in self.range_entries]}, "
            f"DefaultConsent={self.default_consent}"
        )

    def __str__(self) -> str:
        return self.describe()
