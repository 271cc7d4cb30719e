"""Logging configuration helpers for gravatarkit."""

from __future__ import annotations

import logging
import os
from typing import Final

APP_LOGGER: Final[str] = "gravatarkit"
ACCESS_LOGGER: Final[str] = "gravatarkit.access"

_DEFAULT_FORMAT: Final[str] = "%(asctime)s %(levelname)s %(name)s: %(message)s"
_ACCESS_FORMAT: Final[str] = "%(asctime)s ACCESS %(message)s"
_DEFAULT_DATEFMT: Final[str] = "%Y-%m-%d %H:%M:%S"


class _ConsoleHandler(logging.StreamHandler):
    """Console handler installed by :func:`configure_logging`."""


def _resolve_level(level_name: str) -> int:
    """Translate a log level string or number into a logging level."""

    value = level_name.strip()
    if value.isdigit():
        return int(value)

    numeric = getattr(logging, value.upper(), None)
    if isinstance(numeric, int):
        return numeric

    return logging.INFO


def _install_console_handler(name: str, fmt: str, level: int) -> logging.Logger:
    logger = logging.getLogger(name)
    if not any(isinstance(h, _ConsoleHandler) for h in logger.handlers):
        handler = _ConsoleHandler()
        handler.setFormatter(logging.Formatter(fmt, _DEFAULT_DATEFMT))
        logger.addHandler(handler)
    logger.setLevel(level)
    logger.propagate = False
    return logger


def configure_logging(*, debug: bool = False) -> None:
    """Stream application and request logs to the console.

    Safe to call repeatedly; handlers are only added once. ``LOG_LEVEL``
    overrides the level picked from ``debug``.
    """

    env_level = os.getenv("LOG_LEVEL")
    level = _resolve_level(env_level or ("DEBUG" if debug else "INFO"))

    _install_console_handler(APP_LOGGER, _DEFAULT_FORMAT, level)
    _install_console_handler(ACCESS_LOGGER, _ACCESS_FORMAT, max(level, logging.INFO))
