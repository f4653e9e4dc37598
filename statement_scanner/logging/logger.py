import logging
import sys
from typing import TextIO

# Raw provider answers can run to thousands of rows.
DEFAULT_EXCERPT_LIMIT = 2000


class Log:
    """Process-wide logger for the scanner.

    Everything goes to stderr unless another stream is given, so stdout carries
    nothing but the transaction table.
    """

    _logger: logging.Logger = logging.getLogger("statement_scanner")
    _handler: logging.Handler | None = None

    @classmethod
    def configure(cls, log_level: str, stream: TextIO | None = None) -> None:
        """Set the level and (re)attach the single stream handler."""
        cls._logger.setLevel(log_level.upper())
        cls._logger.propagate = False
        if cls._handler is not None:
            cls._logger.removeHandler(cls._handler)
        cls._handler = logging.StreamHandler(stream or sys.stderr)
        cls._handler.setFormatter(
            logging.Formatter("%(asctime)s [%(levelname)s] %(message)s")
        )
        cls._logger.addHandler(cls._handler)

    @staticmethod
    def excerpt(text: str, limit: int = DEFAULT_EXCERPT_LIMIT) -> str:
        """Shorten ``text`` to ``limit`` characters, noting how much was cut."""
        if len(text) <= limit:
            return text
        return f"{text[:limit]}... [{len(text) - limit} more characters]"

    @classmethod
    def info(cls, message: str) -> None:
        cls._logger.info(message)

    @classmethod
    def error(cls, message: str) -> None:
        cls._logger.error(message)

    @classmethod
    def warning(cls, message: str) -> None:
        cls._logger.warning(message)

    @classmethod
    def debug(cls, message: str) -> None:
        cls._logger.debug(message)
