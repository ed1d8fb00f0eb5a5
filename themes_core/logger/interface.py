"""Logger interface.

Components receive a Logger by injection so that applications can route
theme diagnostics into their own logging setup.
"""
from abc import ABC, abstractmethod
from typing import Any


class Logger(ABC):
    """Structured logger: a message plus keyword context."""

    @abstractmethod
    def debug(self, message: str, **kwargs: Any) -> None:
        pass

    @abstractmethod
    def info(self, message: str, **kwargs: Any) -> None:
        pass

    @abstractmethod
    def warning(self, message: str, **kwargs: Any) -> None:
        pass

    @abstractmethod
    def error(self, message: str, **kwargs: Any) -> None:
        pass

    @abstractmethod
    def critical(self, message: str, **kwargs: Any) -> None:
        pass
