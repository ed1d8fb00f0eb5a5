"""Logger backed by the standard library logging module."""
import logging
from typing import Any, Optional

from themes_core.logger.interface import Logger

LOGGER_NAME = "themes_core"


def format_context(message: str, **kwargs: Any) -> str:
    """Append keyword context to a message as key=value pairs."""
    if not kwargs:
        return message
    context = " ".join(f"{key}={value}" for key, value in kwargs.items())
    return f"{message} {context}"


class DefaultLogger(Logger):
    """Forwards to a named stdlib logger; handlers are left to the application."""

    def __init__(self, name: str = LOGGER_NAME, level: Optional[int] = None):
        self._logger = logging.getLogger(name)
        if level is not None:
            self._logger.setLevel(level)

    @property
    def name(self) -> str:
        return self._logger.name

    def debug(self, message: str, **kwargs: Any) -> None:
        self._logger.debug(format_context(message, **kwargs))

    def info(self, message: str, **kwargs: Any) -> None:
        self._logger.info(format_context(message, **kwargs))

    def warning(self, message: str, **kwargs: Any) -> None:
        self._logger.warning(format_context(message, **kwargs))

    def error(self, message: str, **kwargs: Any) -> None:
        self._logger.error(format_context(message, **kwargs))

    def critical(self, message: str, **kwargs: Any) -> None:
        self._logger.critical(format_context(message, **kwargs))
