"""
Outcome of decoding a consent string.
"""

from typing import NamedTuple, Optional

from ConsentCodec.errors import ConsentError
from ConsentCodec.protocol.record import ParsedConsent


class ParseResult(NamedTuple):
    """
    Decoded record together with the decode error, if any.

    Unpacks as (consent, error). On a truncated payload both are set:
    consent holds the fields read before the failure. On a malformed
    token consent is None.
    """

    consent: Optional[ParsedConsent]
    error: Optional[ConsentError] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> ParsedConsent:
        """Gets the record, raising the decode error if there was one."""
        if self.error is not None:
            raise self.error
        return self.consent
