"""Parent cycle exception."""
from typing import List

from themes_core.exceptions.base import ConfigurationError


class ParentCycleError(ConfigurationError):
    """Raised when a theme's parent chain loops back on itself."""

    def __init__(self, theme: str, chain: List[str]):
        """
        Args:
            theme: Name of the theme whose lineage was being walked
            chain: Theme names visited, ending with the repeated name
        """
        self.theme = theme
        self.chain = list(chain)
        message = (
            f"Theme '{theme}' has a cyclic parent chain: {' -> '.join(self.chain)}. "
            f"Fix the 'parent' key in one of these theme definitions."
        )
        super().__init__(message)
