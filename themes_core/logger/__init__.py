"""
Logger module for themes_core

Registries and themes log through the small Logger interface defined here,
so applications can drop in their own implementation.

Usage:
    from themes_core.logger import Logger, DefaultLogger

    logger = DefaultLogger()
    logger.info("Themes loaded", count=3)

    class MyCustomLogger(Logger):
        def info(self, message: str, **kwargs):
            ...
"""

from .interface import Logger
from .default_logger import DefaultLogger
from .console_logger import ConsoleLogger

__all__ = [
    "Logger",
    "DefaultLogger",
    "ConsoleLogger",
]
