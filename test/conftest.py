"""Pytest configuration and fixtures

Provides the bundled mock themes tree, a registry set up on it, and a
factory for building throwaway theme trees under tmp_path.
"""

import sys
from pathlib import Path
from typing import Callable, Dict, Optional

import pytest
import yaml

# Add project root to sys.path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from themes_core.logger import ConsoleLogger
from themes_core.themes import ThemeRegistry


MOCK_THEMES_DIR = Path(__file__).parent / "themes" / "mock_themes"


@pytest.fixture(autouse=True)
def _clear_theme_env(monkeypatch):
    """Keep THEMES_* variables from the developer's shell out of the tests."""
    for name in ("THEMES_DIR", "THEMES_DEFAULT_THEME", "THEMES_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def mock_themes_dir() -> Path:
    """Absolute path to the bundled mock themes directory."""
    return MOCK_THEMES_DIR


@pytest.fixture
def logger() -> ConsoleLogger:
    return ConsoleLogger()


@pytest.fixture
def registry(mock_themes_dir: Path, logger: ConsoleLogger) -> ThemeRegistry:
    """Registry set up on the mock themes, with 'default' selected."""
    registry = ThemeRegistry(logger)
    registry.setup(mock_themes_dir)
    return registry


ThemeFactory = Callable[..., Path]


@pytest.fixture
def make_theme(tmp_path: Path) -> ThemeFactory:
    """Create a theme directory under tmp_path/themes.

    Usage:
        make_theme("child", {"parent": "base"}, files={"template/page.html": "x"})

    A definition of None writes no <name>.yaml file.
    """
    root = tmp_path / "themes"
    root.mkdir(exist_ok=True)

    def _make(
        name: str,
        definition: Optional[Dict] = None,
        files: Optional[Dict[str, str]] = None,
    ) -> Path:
        theme_dir = root / name
        theme_dir.mkdir(parents=True, exist_ok=True)
        if definition is not None:
            (theme_dir / f"{name}.yaml").write_text(yaml.safe_dump(definition))
        for relative, content in (files or {}).items():
            path = theme_dir / relative
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(content)
        return theme_dir

    return _make


@pytest.fixture
def themes_root(tmp_path: Path) -> Path:
    """Root directory the make_theme factory writes into."""
    root = tmp_path / "themes"
    root.mkdir(exist_ok=True)
    return root
