"""Logger that writes to stderr."""
import logging
import sys
from typing import Optional

from themes_core.config import get_log_level
from themes_core.logger.default_logger import LOGGER_NAME, DefaultLogger

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


class ConsoleLogger(DefaultLogger):
    """DefaultLogger with its own stream handler attached."""

    def __init__(self, name: str = LOGGER_NAME, level: Optional[int] = None):
        if level is None:
            level = logging.getLevelName(get_log_level())
            if not isinstance(level, int):
                level = logging.INFO
        super().__init__(name=f"{name}.console", level=level)
        # Repeated construction must not stack handlers on the shared logger
        if not self._logger.handlers:
            handler = logging.StreamHandler(sys.stderr)
            handler.setFormatter(logging.Formatter(LOG_FORMAT))
            self._logger.addHandler(handler)
