import logging
import sys
from typing import TextIO

_FORMAT = "%(asctime)s [%(levelname)s] %(message)s"


class Log:
    """Diagnostic logging for the resolver.

    stdout is reserved for the JSON document, so the handler is always
    attached to stderr (or an explicit stream).
    """

    _logger: logging.Logger = logging.getLogger("owner_resolver")

    @classmethod
    def configure(cls, log_level: str, stream: TextIO | None = None) -> None:
        """Set the level and (re)attach a single handler to the diagnostic stream.

        The handler is replaced on every call so it follows the current
        ``sys.stderr`` rather than the one seen by the first caller.
        """
        cls._logger.setLevel(log_level.upper())
        for handler in list(cls._logger.handlers):
            cls._logger.removeHandler(handler)
        handler = logging.StreamHandler(stream if stream is not None else sys.stderr)
        handler.setFormatter(logging.Formatter(_FORMAT))
        cls._logger.addHandler(handler)

    @classmethod
    def info(cls, message: str) -> None:
        cls._logger.info(message)

    @classmethod
    def warning(cls, message: str) -> None:
        cls._logger.warning(message)

    @classmethod
    def error(cls, message: str) -> None:
        cls._logger.error(message)

    @classmethod
    def debug(cls, message: str) -> None:
        cls._logger.debug(message)
