"""Template engine integration."""
from themes_core.rendering.loader import ThemeTemplateLoader, create_environment

__all__ = ["ThemeTemplateLoader", "create_environment"]
