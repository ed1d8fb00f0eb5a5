"""Tests for the logger implementations."""
import logging

from themes_core.logger import ConsoleLogger, DefaultLogger, Logger
from themes_core.logger.default_logger import format_context


def test_format_context_appends_key_values():
    assert format_context("Loaded theme", theme="base", count=2) == "Loaded theme theme=base count=2"


def test_format_context_without_kwargs():
    assert format_context("plain") == "plain"


def test_default_logger_forwards_to_stdlib(caplog):
    logger = DefaultLogger("themes_core.test")

    with caplog.at_level(logging.INFO, logger="themes_core.test"):
        logger.info("Theme selected", theme="child")

    assert "Theme selected theme=child" in caplog.text


def test_console_logger_is_a_logger():
    assert isinstance(ConsoleLogger(), Logger)


def test_console_logger_does_not_stack_handlers():
    first = ConsoleLogger(name="themes_core.stack")
    second = ConsoleLogger(name="themes_core.stack")

    assert first.name == second.name
    assert len(logging.getLogger(second.name).handlers) == 1


def test_console_logger_level_from_environment(monkeypatch):
    monkeypatch.setenv("THEMES_LOG_LEVEL", "WARNING")

    logger = ConsoleLogger(name="themes_core.level")

    assert logging.getLogger(logger.name).level == logging.WARNING


def test_registry_logs_selection(registry, caplog):
    with caplog.at_level(logging.DEBUG):
        registry.select_theme("child")

    assert "Theme selected theme=child" in caplog.text
