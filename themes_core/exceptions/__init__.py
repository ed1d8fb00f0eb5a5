"""Exceptions raised while loading and querying themes.

Messages name the offending theme or path so that startup failures can be
surfaced to operators without further context.
"""

from themes_core.exceptions.base import (
    ThemesError,
    ConfigurationError,
    RegistryError,
)
from themes_core.exceptions.cycle import ParentCycleError
from themes_core.exceptions.theme import ThemeNotFoundError

__all__ = [
    "ThemesError",
    "ConfigurationError",
    "RegistryError",
    "ParentCycleError",
    "ThemeNotFoundError",
]
