"""
Codec configuration for ConsentCodec.
"""

from dataclasses import dataclass


@dataclass
class CodecConfig:
    """
    Options for decoding consent strings.

    allow_padding accepts tokens with trailing '=' characters; the format
    itself never emits them.
    """

    allow_padding: bool = False
    log_failures: bool = True

    def to_dict(self) -> dict:
        """Gets a dictionary representation of the config."""
        return {
            k: v for k, v in self.__dict__.items()
            if not k.startswith("_")
        }

    @classmethod
    def from_dict(cls, d: dict) -> "CodecConfig":
        """Creates a CodecConfig from a dictionary."""
        return cls(**{k: v for k, v in d.items() if k in cls.__dataclass_fields__})
