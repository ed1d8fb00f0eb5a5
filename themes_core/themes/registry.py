"""Theme registry: discovers themes under a root directory and tracks the selection."""

import threading
from pathlib import Path
from typing import Dict, List, Optional, Set, Union

from themes_core import config
from themes_core.exceptions import ConfigurationError, ParentCycleError
from themes_core.logger import DefaultLogger, Logger
from themes_core.themes.constants import HIDDEN_PREFIX
from themes_core.themes.models import ThemeListItem
from themes_core.themes.theme import Theme


class ThemeRegistry:
    """Loads every theme under a root directory once and answers lookups by name.

    A registry is created unconfigured and becomes usable after setup().
    Setup is idempotent: the first root path wins for the lifetime of the
    registry.
    """

    def __init__(self, logger: Optional[Logger] = None):
        """
        Args:
            logger: Logger instance (DefaultLogger if None)
        """
        self.logger = logger or DefaultLogger()
        self._root_path: Optional[Path] = None
        self._themes: Dict[str, Theme] = {}
        self._selected_theme: Optional[str] = None
        self._setup_lock = threading.Lock()
        self._selection_lock = threading.Lock()

    @classmethod
    def from_config(cls, logger: Optional[Logger] = None) -> "ThemeRegistry":
        """Build a registry set up from THEMES_DIR and THEMES_DEFAULT_THEME."""
        registry = cls(logger)
        registry.setup(config.get_themes_dir(), config.get_default_theme())
        return registry

    @property
    def root_path(self) -> Optional[Path]:
        return self._root_path

    @property
    def is_configured(self) -> bool:
        return self._root_path is not None

    def setup(self, root_path: Union[str, Path], default_theme: Optional[str] = None) -> None:
        """
        Record the themes root and load the themes under it.

        Args:
            root_path: Directory with one subdirectory per theme
            default_theme: Theme to select initially (config default if None)

        Raises:
            ConfigurationError: If the root is missing or holds no themes
            ParentCycleError: If a theme's parent chain is cyclic
        """
        with self._setup_lock:
            if self._root_path is not None:
                self.logger.debug(
                    "Theme registry already set up, ignoring",
                    root=str(self._root_path),
                    requested=str(root_path),
                )
                return

            path = Path(root_path).absolute()
            if not path.exists():
                raise ConfigurationError(f"Themes root path does not exist: {path}")
            if not path.is_dir():
                raise ConfigurationError(f"Themes root path is not a directory: {path}")

            self._themes = self._load(path)
            self._root_path = path
            self._selected_theme = self._initial_selection(default_theme)
            self.logger.info(
                "Themes loaded",
                root=str(path),
                count=len(self._themes),
                selected=self._selected_theme,
            )

    def load(self) -> None:
        """
        Rebuild the themes from the configured root.

        setup() already loads once. Calling this again replaces every Theme,
        which also drops their memoized asset lists. The selection is kept
        when the selected theme still exists.

        Raises:
            ConfigurationError: Before setup, or if the root now holds no themes
        """
        root_path = self._require_root()
        with self._setup_lock:
            themes = self._load(root_path)
            with self._selection_lock:
                self._themes = themes
                if self._selected_theme not in self._themes:
                    self._selected_theme = self._initial_selection(None)

    def _load(self, root_path: Path) -> Dict[str, Theme]:
        themes = self._scan(root_path)
        self._validate_parents(themes)
        return themes

    def _scan(self, root_path: Path) -> Dict[str, Theme]:
        """Construct a Theme for each visible subdirectory of root_path."""
        themes: Dict[str, Theme] = {}
        try:
            entries = sorted(root_path.iterdir())
        except OSError as e:
            raise ConfigurationError(f"Failed to list themes root {root_path}: {e}") from e

        for entry in entries:
            if entry.name.startswith(HIDDEN_PREFIX) or not entry.is_dir():
                continue
            themes[entry.name] = Theme(entry.name, entry, self, self.logger)
            self.logger.debug("Loaded theme", theme=entry.name, path=str(entry))

        if not themes:
            raise ConfigurationError(f"No themes found in themes root path: {root_path}")
        return themes

    def _validate_parents(self, themes: Dict[str, Theme]) -> None:
        """Reject cyclic parent chains; warn about parents that are not loaded."""
        for name, theme in themes.items():
            visited: List[str] = [name]
            parent = theme.parent
            while parent is not None:
                if parent in visited:
                    raise ParentCycleError(name, visited + [parent])
                parent_theme = themes.get(parent)
                if parent_theme is None:
                    self.logger.warning(
                        "Theme parent is not loaded; inheritance stops there",
                        theme=visited[-1],
                        parent=parent,
                    )
                    break
                visited.append(parent)
                parent = parent_theme.parent

    def _initial_selection(self, default_theme: Optional[str]) -> str:
        requested = default_theme or config.get_default_theme()
        if requested in self._themes:
            return requested
        fallback = sorted(self._themes)[0]
        self.logger.warning(
            "Default theme not found, selecting first available",
            requested=requested,
            selected=fallback,
        )
        return fallback

    def _require_root(self) -> Path:
        if self._root_path is None:
            raise ConfigurationError(
                "ThemeRegistry has not been set up. Call setup(root_path) first."
            )
        return self._root_path

    def select_theme(self, name: str) -> None:
        """Select a theme by name; unknown names leave the selection unchanged."""
        with self._selection_lock:
            if name in self._themes:
                self._selected_theme = name
                self.logger.info("Theme selected", theme=name)
            else:
                self.logger.debug("Ignoring selection of unknown theme", theme=name)

    def selected_theme(self) -> Theme:
        """The currently selected theme. Raises ConfigurationError before setup."""
        self._require_root()
        return self._themes[self._selected_theme]

    def theme(self, name: Optional[str]) -> Optional[Theme]:
        """Theme by name, or the selected theme when name is None."""
        if name is None:
            return self.selected_theme()
        return self._themes.get(name)

    def theme_names(self) -> Set[str]:
        return set(self._themes)

    def theme_exists(self, name: str) -> bool:
        return name in self._themes

    def list_themes(self) -> List[ThemeListItem]:
        """Summaries of all loaded themes, sorted by name."""
        return [self._themes[name].to_list_item() for name in sorted(self._themes)]
