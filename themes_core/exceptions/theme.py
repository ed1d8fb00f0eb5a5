"""Theme not found exception."""
from typing import List, Optional

from themes_core.exceptions.base import RegistryError


class ThemeNotFoundError(RegistryError):
    """Raised when a theme is required by name but is not loaded."""

    def __init__(self, theme: str, available_themes: Optional[List[str]] = None):
        """
        Args:
            theme: Name of the theme that was not found
            available_themes: Names of the loaded themes
        """
        self.theme = theme
        available_text = ""
        if available_themes:
            available_text = f" Available themes: {', '.join(sorted(available_themes))}."
        message = f"Theme '{theme}' not found.{available_text}"
        super().__init__(message)
