"""Jinja2 integration: load templates through a theme's inheritance chain."""

import os
from typing import Callable, Optional, Tuple

from jinja2 import BaseLoader, Environment, TemplateNotFound, select_autoescape

from themes_core.exceptions import ThemeNotFoundError
from themes_core.themes.registry import ThemeRegistry
from themes_core.themes.theme import Theme


class ThemeTemplateLoader(BaseLoader):
    """Jinja2 loader that resolves template names with Theme.template_path.

    Without a theme name the registry's selected theme is used at load time,
    so changing the selection affects templates that are not cached yet.
    """

    def __init__(
        self,
        registry: ThemeRegistry,
        theme_name: Optional[str] = None,
        extension: Optional[str] = None,
    ):
        """
        Args:
            registry: Registry providing the themes
            theme_name: Theme to resolve against (selected theme if None)
            extension: Extension namespace to look templates up in
        """
        self.registry = registry
        self.theme_name = theme_name
        self.extension = extension

    def _theme(self) -> Theme:
        theme = self.registry.theme(self.theme_name)
        if theme is None:
            raise ThemeNotFoundError(self.theme_name, sorted(self.registry.theme_names()))
        return theme

    def get_source(
        self, environment: Environment, template: str
    ) -> Tuple[str, str, Callable[[], bool]]:
        path = self._theme().template_path(template, self.extension)
        if path is None:
            raise TemplateNotFound(template)

        filename = str(path)
        mtime = os.path.getmtime(filename)
        with open(filename, "r", encoding="utf-8") as f:
            source = f.read()

        def uptodate() -> bool:
            try:
                return os.path.getmtime(filename) == mtime
            except OSError:
                return False

        return source, filename, uptodate


def create_environment(
    registry: ThemeRegistry,
    theme_name: Optional[str] = None,
    extension: Optional[str] = None,
) -> Environment:
    """Jinja2 environment whose templates come from a theme chain."""
    return Environment(
        loader=ThemeTemplateLoader(registry, theme_name, extension),
        autoescape=select_autoescape(["html", "xml"]),
        trim_blocks=True,
        lstrip_blocks=True,
    )
