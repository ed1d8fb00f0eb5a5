"""Theme definition file parsing.

A definition file is optional. Anything that prevents reading it as a
mapping of the known keys is logged and treated as an empty definition, so
a broken file never stops the registry from loading.
"""

from pathlib import Path
from typing import Any, Dict, Optional

import yaml
from pydantic import ValidationError

from themes_core.logger import Logger
from themes_core.themes.constants import DEFINITION_SUFFIX
from themes_core.themes.models import ThemeDefinition


def definition_file(name: str, root_path: Path) -> Path:
    """Location of a theme's definition file: <root>/<name>.yaml."""
    return root_path / f"{name}{DEFINITION_SUFFIX}"


def _load_yaml_file(file_path: Path, logger: Logger) -> Optional[Dict[str, Any]]:
    """Load and parse a YAML file, returning None when it is not a mapping."""
    try:
        with open(file_path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except (OSError, UnicodeDecodeError, yaml.YAMLError) as e:
        logger.warning("Failed to parse theme definition", path=str(file_path), error=str(e))
        return None

    if data is None:
        return {}
    if not isinstance(data, dict):
        logger.warning(
            "Theme definition is not a mapping",
            path=str(file_path),
            found=type(data).__name__,
        )
        return None
    return data


def load_theme_definition(name: str, root_path: Path, logger: Logger) -> ThemeDefinition:
    """Read the definition for the theme rooted at root_path."""
    file_path = definition_file(name, root_path)
    if not file_path.is_file():
        logger.debug("No theme definition file, using defaults", theme=name)
        return ThemeDefinition()

    data = _load_yaml_file(file_path, logger)
    if data is None:
        return ThemeDefinition()

    values = {str(key): value for key, value in data.items()}
    try:
        return ThemeDefinition(**values)
    except ValidationError as e:
        invalid = sorted({str(error["loc"][0]) for error in e.errors() if error["loc"]})
        logger.warning(
            "Invalid keys in theme definition, ignoring them",
            path=str(file_path),
            keys=",".join(invalid),
        )

    # Only the offending keys fall back to their defaults
    values = {key: value for key, value in values.items() if key not in invalid}
    try:
        return ThemeDefinition(**values)
    except ValidationError as e:
        logger.warning(
            "Invalid theme definition, using defaults",
            path=str(file_path),
            errors=len(e.errors()),
        )
        return ThemeDefinition()
