"""
Error types raised and reported by ConsentCodec.
"""

from typing import Optional


class ConsentError(Exception):
    """Base class for consent string decoding failures."""


class MalformedTokenError(ConsentError, ValueError):
    """The token is not valid unpadded URL-safe base64."""

    def __init__(self, token: str, reason: str):
        super().__init__(f"malformed consent token: {reason}")
        self.token = token
        self.reason = reason


class TruncatedPayloadError(ConsentError, EOFError):
    """
    A field read needs more bits than the payload holds.

    Attributes:
        position: Bit offset at which the read was attempted
        width: Number of bits requested
        available: Number of bits left in the payload
        field: Name of the field being decoded, when known
    """

    def __init__(self, position: int, width: int, available: int, field: Optional[str] = None):
        self.position = position
        self.width = width
        self.available = available
        self.field = field
        super().__init__(self._message())

    def _message(self) -> str:
        msg = f"read past end: {self.width} bits requested at offset {self.position}, {self.available} available"
        if self.field:
            msg += f" (field {self.field})"
        return msg

    def with_field(self, field: str) -> "TruncatedPayloadError":
        """Returns the same error annotated with the field being decoded."""
        self.field = field
        self.args = (self._message(),)
        return self
