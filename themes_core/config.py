"""Configuration defaults and environment lookups for theme resolution.

ENVIRONMENT VARIABLES REFERENCE

Themes
------
THEMES_DIR: Root directory containing one subdirectory per theme
  (default: ./themes)
THEMES_DEFAULT_THEME: Theme selected right after setup (default: default)
  Falls back to the alphabetically first loaded theme when absent.

Logging
-------
THEMES_LOG_LEVEL: Logging verbosity for ConsoleLogger (default: INFO)
  Values: DEBUG, INFO, WARNING, ERROR, CRITICAL
"""

import os
from pathlib import Path

# =============================================================================
# CONFIGURATION DEFAULTS
# =============================================================================

DEFAULT_THEMES_DIR = "./themes"
DEFAULT_THEME = "default"
DEFAULT_LOG_LEVEL = "INFO"


def get_themes_dir() -> Path:
    """Themes root directory, from THEMES_DIR or the default."""
    return Path(os.environ.get("THEMES_DIR") or DEFAULT_THEMES_DIR)


def get_default_theme() -> str:
    """Name of the theme to select after setup."""
    return os.environ.get("THEMES_DEFAULT_THEME") or DEFAULT_THEME


def get_log_level() -> str:
    """Upper-cased log level name."""
    return (os.environ.get("THEMES_LOG_LEVEL") or DEFAULT_LOG_LEVEL).upper()
