"""Tests for environment settings and logging setup."""

from __future__ import annotations

import logging

from earnings_analyser import config, logging_setup


def test_load_settings_defaults(monkeypatch) -> None:
    for name in (
        "EARNINGS_ANALYSER_MAX_DISPLAY",
        "EARNINGS_ANALYSER_MAX_DISPLAY_LIMIT",
        "EARNINGS_ANALYSER_DEFAULT_THRESHOLD_MAX",
    ):
        monkeypatch.delenv(name, raising=False)

    assert config.load_settings() == config.Settings()


def test_load_settings_reads_environment(monkeypatch) -> None:
    monkeypatch.setenv("EARNINGS_ANALYSER_MAX_DISPLAY", "5")
    monkeypatch.setenv("EARNINGS_ANALYSER_DEFAULT_THRESHOLD_MAX", "250.5")

    settings = config.load_settings()
    assert settings.max_display == 5
    assert settings.default_threshold_max == 250.5


def test_load_settings_ignores_invalid_values(monkeypatch) -> None:
    monkeypatch.setenv("EARNINGS_ANALYSER_MAX_DISPLAY", "ten")
    monkeypatch.setenv("EARNINGS_ANALYSER_DEFAULT_THRESHOLD_MAX", "-1")

    settings = config.load_settings()
    assert settings.max_display == config.DEFAULT_MAX_DISPLAY
    assert settings.default_threshold_max == config.DEFAULT_THRESHOLD_MAX


def test_max_display_raises_slider_limit(monkeypatch) -> None:
    monkeypatch.setenv("EARNINGS_ANALYSER_MAX_DISPLAY", "30")
    monkeypatch.setenv("EARNINGS_ANALYSER_MAX_DISPLAY_LIMIT", "20")

    settings = config.load_settings()
    assert settings.max_display == 30
    assert settings.max_display_limit == 30


def test_resolve_level(monkeypatch) -> None:
    monkeypatch.delenv("EARNINGS_ANALYSER_LOG_LEVEL", raising=False)
    assert logging_setup.resolve_level("debug") == logging.DEBUG
    assert logging_setup.resolve_level(logging.WARNING) == logging.WARNING
    assert logging_setup.resolve_level("15") == 15
    assert logging_setup.resolve_level(None) == logging.INFO

    monkeypatch.setenv("EARNINGS_ANALYSER_LOG_LEVEL", "ERROR")
    assert logging_setup.resolve_level(None) == logging.ERROR
    assert logging_setup.resolve_level("bogus") == logging.ERROR

    monkeypatch.setenv("EARNINGS_ANALYSER_LOG_LEVEL", "bogus")
    assert logging_setup.resolve_level(None) == logging.INFO


def test_get_logger_is_silent_until_configured() -> None:
    logger = logging_setup.get_logger("earnings_analyser.tests")
    assert logger.name == "earnings_analyser.tests"
    assert logging.getLogger("earnings_analyser").handlers


def test_configure_logging_adds_one_stream_handler() -> None:
    logging_setup.configure_logging("WARNING")
    logging_setup.configure_logging("DEBUG")

    pkg_logger = logging.getLogger("earnings_analyser")
    streams = [h for h in pkg_logger.handlers if type(h) is logging.StreamHandler]
    assert len(streams) == 1
    assert pkg_logger.level == logging.DEBUG
    assert not pkg_logger.propagate
    logging_setup.configure_logging("INFO")
