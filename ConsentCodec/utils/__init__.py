from ConsentCodec.utils.logging import get_logger, ConsentLogger

__all__ = [
    "get_logger",
    "ConsentLogger",
]
