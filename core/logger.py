"""
Logging capability

RsvpRegistry never touches a module-level logger. It receives an object with
log / warn / error (and optionally debug) in its constructor, so tests and
hosts can substitute their own implementation.
"""
from abc import ABC, abstractmethod
import logging

LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"


def configure_logging(level: str = "INFO") -> None:
    logging.basicConfig(level=level.upper(), format=LOG_FORMAT)


class RsvpLogger(ABC):
    """Interface consumed by RsvpRegistry"""

    @abstractmethod
    def log(self, message: str, *context) -> None:
        ...

    @abstractmethod
    def warn(self, message: str, *context) -> None:
        ...

    @abstractmethod
    def error(self, message: str, *context) -> None:
        ...

    def debug(self, message: str, *context) -> None:
        """Optional; implementations that do not care can leave this as a no-op"""
        return None


def _render(message: str, context: tuple) -> str:
    if not context:
        return message
    return " ".join([message, *(repr(c) if isinstance(c, str) else str(c) for c in context)])


class ConsoleLogger(RsvpLogger):
    """
    RsvpLogger backed by the standard logging module

    Parameters:
        name: logger name passed to logging.getLogger
        debug_enabled: emit debug() output; off unless running in development
    """

    def __init__(self, name: str = "rsvp", debug_enabled: bool = False):
        self._logger = logging.getLogger(name)
        self.debug_enabled = debug_enabled

    def log(self, message: str, *context) -> None:
        self._logger.info(_render(message, context))

    def warn(self, message: str, *context) -> None:
        self._logger.warning(_render(message, context))

    def error(self, message: str, *context) -> None:
        self._logger.error(_render(message, context))

    def debug(self, message: str, *context) -> None:
        if self.debug_enabled:
            self._logger.debug(_render(message, context))
