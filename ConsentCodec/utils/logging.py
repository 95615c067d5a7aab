import logging
import sys
from typing import Optional

class ConsentLogger:
    def __init__(self, name: str = "ConsentCodec", level: int = logging.INFO):
        self.logger = logging.getLogger(name)
        self.logger.setLevel(level)

        handler = logging.StreamHandler(sys.stdout)
        handler.setLevel(level)

        formatter = logging.Formatter(
            "%(asctime)s | %(levelname)-8s | %(message)s",
            datefmt="%H:%M:%S"
        )
        handler.setFormatter(formatter)

        if not self.logger.hasHandlers():
            self.logger.addHandler(handler)

    def debug(self, msg: str) -> None:
        self.logger.debug(msg)

    def warning(self, msg: str) -> None:
        self.logger.warning(msg)

    def decode_failure(self, token: str, error: Exception, partial: bool) -> None:
        shown = token if len(token) <= 32 else token[:29] + "..."
        msg = f"Decode failed | token: {shown} | {type(error).__name__}: {error}"
        if partial:
            msg += " | partial record returned"
        self.warning(msg)


_logger: Optional[ConsentLogger] = None

def get_logger() -> ConsentLogger:
    global _logger
    if _logger is None:
        _logger = ConsentLogger()
    return _logger
