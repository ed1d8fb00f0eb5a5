"""Theme registry package."""
from themes_core.themes.constants import DEFAULT_REGIONS
from themes_core.themes.models import AssetCategory, ThemeDefinition, ThemeListItem
from themes_core.themes.registry import ThemeRegistry
from themes_core.themes.theme import Theme

__all__ = [
    "DEFAULT_REGIONS",
    "AssetCategory",
    "ThemeDefinition",
    "ThemeListItem",
    "ThemeRegistry",
    "Theme",
]
