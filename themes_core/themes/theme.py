"""A single theme: its declarations, resource lookup and asset composition."""

from __future__ import annotations

import os
import threading
from pathlib import Path
from typing import TYPE_CHECKING, Dict, List, Optional, Tuple

from themes_core.exceptions import ParentCycleError
from themes_core.logger import DefaultLogger, Logger
from themes_core.themes.constants import DEFAULT_REGIONS, EXTENSIONS_DIR, RESOURCE_KINDS, STATIC, TEMPLATE
from themes_core.themes.loader import load_theme_definition
from themes_core.themes.models import AssetCategory, ThemeDefinition, ThemeListItem

if TYPE_CHECKING:
    from themes_core.themes.registry import ThemeRegistry


class Theme:
    """A named bundle of templates, static files and asset declarations.

    Lookups that miss in this theme fall back to the parent theme, which is
    reached through the owning registry by name.
    """

    def __init__(
        self,
        name: str,
        root_path: Path,
        registry: ThemeRegistry,
        logger: Optional[Logger] = None,
        definition: Optional[ThemeDefinition] = None,
    ):
        """
        Initialize the theme.

        Args:
            name: Theme name, the same as its directory name
            root_path: Theme directory
            registry: Registry used to reach the parent theme
            logger: Logger instance
            definition: Parsed declarations; read from <root>/<name>.yaml if None
        """
        self.logger = logger or DefaultLogger()
        self._name = name
        self._root_path = Path(os.path.abspath(root_path))
        self._registry = registry
        if definition is None:
            definition = load_theme_definition(name, self._root_path, self.logger)
        self._definition = definition

        self._composed: Dict[AssetCategory, Tuple[str, ...]] = {}
        self._lock = threading.Lock()

    def __repr__(self) -> str:
        return f"Theme(name={self._name!r}, parent={self.parent!r})"

    @property
    def name(self) -> str:
        return self._name

    @property
    def root_path(self) -> Path:
        return self._root_path

    @property
    def description(self) -> str:
        return self._definition.description or self._name

    @property
    def regions(self) -> Tuple[str, ...]:
        if self._definition.regions is None:
            return DEFAULT_REGIONS
        return tuple(self._definition.regions)

    @property
    def parent(self) -> Optional[str]:
        return self._definition.parent or None

    # Declared lists, this theme only

    @property
    def scripts(self) -> Tuple[str, ...]:
        return self.declared(AssetCategory.SCRIPTS)

    @property
    def frontend_scripts(self) -> Tuple[str, ...]:
        return self.declared(AssetCategory.FRONTEND_SCRIPTS)

    @property
    def backoffice_scripts(self) -> Tuple[str, ...]:
        return self.declared(AssetCategory.BACKOFFICE_SCRIPTS)

    @property
    def styles(self) -> Tuple[str, ...]:
        return self.declared(AssetCategory.STYLES)

    @property
    def frontend_styles(self) -> Tuple[str, ...]:
        return self.declared(AssetCategory.FRONTEND_STYLES)

    @property
    def backoffice_styles(self) -> Tuple[str, ...]:
        return self.declared(AssetCategory.BACKOFFICE_STYLES)

    def declared(self, category: AssetCategory) -> Tuple[str, ...]:
        """Assets this theme declares itself for a category."""
        return tuple(self._definition.declared(category))

    def to_list_item(self) -> ThemeListItem:
        return ThemeListItem(name=self._name, description=self.description, parent=self.parent)

    # Inheritance

    def parent_theme(self) -> Optional[Theme]:
        """The parent Theme, or None when there is none or it is not loaded."""
        if self.parent is None:
            return None
        return self._registry.theme(self.parent)

    def lineage(self) -> List[Theme]:
        """This theme followed by its ancestors, nearest first.

        Raises:
            ParentCycleError: If the chain revisits a theme
        """
        chain: List[Theme] = []
        visited: List[str] = []
        current: Optional[Theme] = self
        while current is not None:
            if current.name in visited:
                raise ParentCycleError(self._name, visited + [current.name])
            visited.append(current.name)
            chain.append(current)
            current = current.parent_theme()
        return chain

    # Resource resolution

    def _candidate(self, resource: str, kind: str, extension: Optional[str]) -> Optional[Path]:
        """Absolute path the resource would have in this theme.

        None when the resource or extension name points outside the kind
        directory, e.g. through "..".
        """
        if extension:
            base = Path(os.path.normpath(self._root_path / EXTENSIONS_DIR / extension / kind))
        else:
            base = self._root_path / kind
        path = Path(os.path.normpath(base / resource))
        if self._root_path not in base.parents or base not in path.parents:
            self.logger.warning(
                "Resource path escapes theme root",
                theme=self._name,
                resource=resource,
                extension=extension,
            )
            return None
        return path

    def resource_path(
        self, resource: str, kind: str = TEMPLATE, extension: Optional[str] = None
    ) -> Optional[Path]:
        """
        Locate a resource file in this theme or the nearest ancestor that has it.

        Args:
            resource: Path of the resource relative to the kind directory
            kind: "template" or "static"
            extension: Extension namespace holding the resource, if any

        Returns:
            Absolute path of the file, or None if no theme in the chain has it
            or the kind is not recognised
        """
        if kind not in RESOURCE_KINDS:
            return None

        for theme in self.lineage():
            path = theme._candidate(resource, kind, extension)
            if path is not None and path.is_file():
                return path
        return None

    def template_path(self, resource: str, extension: Optional[str] = None) -> Optional[Path]:
        return self.resource_path(resource, TEMPLATE, extension)

    def static_path(self, resource: str, extension: Optional[str] = None) -> Optional[Path]:
        return self.resource_path(resource, STATIC, extension)

    # Asset composition

    def _compose(self, category: AssetCategory) -> Tuple[str, ...]:
        assets: List[str] = []
        for theme in reversed(self.lineage()):
            assets.extend(theme.declared(category))
        return tuple(assets)

    def assets(self, category: AssetCategory) -> Tuple[str, ...]:
        """
        Assets for a category across the inheritance chain.

        Ancestors come first and this theme's own declarations last. Entries
        declared at several levels are kept at each level.
        """
        category = AssetCategory(category)
        with self._lock:
            composed = self._composed.get(category)
            if composed is None:
                composed = self._compose(category)
                self._composed[category] = composed
        return composed

    def full_scripts(self) -> Tuple[str, ...]:
        return self.assets(AssetCategory.SCRIPTS)

    def full_frontend_scripts(self) -> Tuple[str, ...]:
        return self.assets(AssetCategory.FRONTEND_SCRIPTS)

    def full_backoffice_scripts(self) -> Tuple[str, ...]:
        return self.assets(AssetCategory.BACKOFFICE_SCRIPTS)

    def full_styles(self) -> Tuple[str, ...]:
        return self.assets(AssetCategory.STYLES)

    def full_frontend_styles(self) -> Tuple[str, ...]:
        return self.assets(AssetCategory.FRONTEND_STYLES)

    def full_backoffice_styles(self) -> Tuple[str, ...]:
        return self.assets(AssetCategory.BACKOFFICE_STYLES)
