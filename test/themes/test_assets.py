"""Tests for script and style composition across the parent chain."""
from __future__ import annotations

import threading
from pathlib import Path

from themes_core.themes import AssetCategory, Theme, ThemeRegistry


def test_parent_assets_come_first(registry: ThemeRegistry) -> None:
    child = registry.theme("child")

    assert child.full_scripts() == ("/js/jquery.js", "/js/site.js", "/js/child.js", "/js/site.js")
    assert child.full_styles() == ("/css/site.css", "/css/child.css")


def test_duplicates_across_levels_are_kept(make_theme, themes_root: Path, logger) -> None:
    make_theme("base", {"scripts": ["x"]})
    make_theme("child", {"parent": "base", "scripts": ["x"]})
    registry = ThemeRegistry(logger)
    registry.setup(themes_root)

    assert registry.theme("child").full_scripts() == ("x", "x")


def test_simple_two_level_order(make_theme, themes_root: Path, logger) -> None:
    make_theme("base", {"scripts": ["x"]})
    make_theme("child", {"parent": "base", "scripts": ["y"]})
    registry = ThemeRegistry(logger)
    registry.setup(themes_root)

    assert registry.theme("child").full_scripts() == ("x", "y")
    assert registry.theme("base").full_scripts() == ("x",)


def test_categories_are_composed_independently(registry: ThemeRegistry) -> None:
    child = registry.theme("child")

    assert child.full_frontend_scripts() == ("/js/front.js",)
    assert child.full_backoffice_scripts() == ("/js/admin.js",)
    assert child.full_frontend_styles() == ("/css/front.css",)
    assert child.full_backoffice_styles() == ("/css/admin.css", "/css/child-admin.css")


def test_theme_without_declarations_inherits_everything(make_theme, themes_root: Path, logger) -> None:
    make_theme("base", {"styles": ["a.css", "b.css"]})
    make_theme("child", {"parent": "base"})
    registry = ThemeRegistry(logger)
    registry.setup(themes_root)

    child = registry.theme("child")

    assert child.styles == ()
    assert child.full_styles() == ("a.css", "b.css")


def test_three_level_order(make_theme, themes_root: Path, logger) -> None:
    make_theme("root", {"styles": ["root.css"]})
    make_theme("middle", {"parent": "root", "styles": ["middle.css"]})
    make_theme("leaf", {"parent": "middle", "styles": ["leaf.css"]})
    registry = ThemeRegistry(logger)
    registry.setup(themes_root)

    assert registry.theme("leaf").full_styles() == ("root.css", "middle.css", "leaf.css")


def test_assets_accepts_category_value(registry: ThemeRegistry) -> None:
    child = registry.theme("child")

    assert child.assets("styles") == child.assets(AssetCategory.STYLES)


def test_memoized_after_first_call(registry: ThemeRegistry, monkeypatch) -> None:
    child = registry.theme("child")
    calls = []
    original = Theme._compose

    def counting_compose(self, category):
        calls.append((self.name, category))
        return original(self, category)

    monkeypatch.setattr(Theme, "_compose", counting_compose)

    first = child.full_scripts()
    second = child.full_scripts()

    assert first == second
    assert first is second
    assert calls == [("child", AssetCategory.SCRIPTS)]


def test_each_category_memoized_separately(registry: ThemeRegistry, monkeypatch) -> None:
    base = registry.theme("base")
    calls = []
    original = Theme._compose

    def counting_compose(self, category):
        calls.append(category)
        return original(self, category)

    monkeypatch.setattr(Theme, "_compose", counting_compose)

    base.full_scripts()
    base.full_styles()
    base.full_scripts()
    base.full_styles()

    assert calls == [AssetCategory.SCRIPTS, AssetCategory.STYLES]


def test_concurrent_first_access_computes_once(registry: ThemeRegistry, monkeypatch) -> None:
    child = registry.theme("child")
    calls = []
    original = Theme._compose

    def counting_compose(self, category):
        calls.append(category)
        return original(self, category)

    monkeypatch.setattr(Theme, "_compose", counting_compose)

    results = []
    barrier = threading.Barrier(8)

    def worker():
        barrier.wait()
        results.append(child.full_styles())

    threads = [threading.Thread(target=worker) for _ in range(8)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    assert len(calls) == 1
    assert len(set(results)) == 1
