"""Theme discovery with inheritance-aware resource and asset resolution."""

from themes_core.exceptions import (
    ThemesError,
    ConfigurationError,
    ParentCycleError,
    RegistryError,
    ThemeNotFoundError,
)
from themes_core.themes import (
    DEFAULT_REGIONS,
    AssetCategory,
    Theme,
    ThemeDefinition,
    ThemeListItem,
    ThemeRegistry,
)

__version__ = "0.1.0"

__all__ = [
    "ThemesError",
    "ConfigurationError",
    "ParentCycleError",
    "RegistryError",
    "ThemeNotFoundError",
    "DEFAULT_REGIONS",
    "AssetCategory",
    "Theme",
    "ThemeDefinition",
    "ThemeListItem",
    "ThemeRegistry",
]
