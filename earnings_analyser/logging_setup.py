"""Logging for the ``earnings_analyser`` package.

Entry points call :func:`configure_logging` once; library modules only ask for
loggers through :func:`get_logger` and never add handlers themselves.
"""

from __future__ import annotations

import logging
import os

PACKAGE_LOGGER = "earnings_analyser"
LEVEL_ENV_VAR = "EARNINGS_ANALYSER_LOG_LEVEL"
LOG_FORMAT = "%(asctime)s %(name)s %(levelname)s %(message)s"


def resolve_level(level: int | str | None = None) -> int:
    """Turn ``level`` (or ``$EARNINGS_ANALYSER_LOG_LEVEL``) into a logging level, INFO by default."""

    for candidate in (level, os.getenv(LEVEL_ENV_VAR)):
        if isinstance(candidate, int):
            return candidate
        if isinstance(candidate, str):
            name = candidate.strip().upper()
            if name.isdigit():
                return int(name)
            numeric = logging.getLevelName(name)
            if isinstance(numeric, int):
                return numeric
    return logging.INFO


def configure_logging(level: int | str | None = None) -> None:
    """Send package logs to stderr; repeated calls only adjust the level."""

    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(resolve_level(level))
    logger.propagate = False
    if not any(type(h) is logging.StreamHandler for h in logger.handlers):
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)


def get_logger(name: str) -> logging.Logger:
    """Return ``name``'s logger; silent until :func:`configure_logging` runs."""

    pkg_logger = logging.getLogger(PACKAGE_LOGGER)
    if not pkg_logger.handlers:
        pkg_logger.addHandler(logging.NullHandler())
    return logging.getLogger(name)
