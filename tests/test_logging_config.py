import logging

import pytest

from gravatarkit.logging_config import (
    ACCESS_LOGGER,
    APP_LOGGER,
    _ConsoleHandler,
    _resolve_level,
    configure_logging,
)


def _console_handlers(name: str) -> list[logging.Handler]:
    # pytest attaches its own capture handlers too; only count ours
    return [
        handler
        for handler in logging.getLogger(name).handlers
        if isinstance(handler, _ConsoleHandler)
    ]


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("DEBUG", logging.DEBUG),
        ("warning", logging.WARNING),
        (" 15 ", 15),
        ("nonsense", logging.INFO),
    ],
)
def test_resolve_level(raw: str, expected: int) -> None:
    assert _resolve_level(raw) == expected


def test_configure_logging_respects_env_level(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("LOG_LEVEL", "ERROR")

    configure_logging(debug=True)

    app_logger = logging.getLogger(APP_LOGGER)
    assert app_logger.level == logging.ERROR
    assert app_logger.propagate is False
    assert logging.getLogger(ACCESS_LOGGER).level == logging.ERROR


def test_configure_logging_debug_default(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("LOG_LEVEL", raising=False)

    configure_logging(debug=True)

    assert logging.getLogger(APP_LOGGER).level == logging.DEBUG
    assert logging.getLogger(ACCESS_LOGGER).level == logging.INFO

    configure_logging(debug=False)

    assert logging.getLogger(APP_LOGGER).level == logging.INFO


def test_configure_logging_is_idempotent(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("LOG_LEVEL", raising=False)

    configure_logging()
    app_before = len(_console_handlers(APP_LOGGER))
    access_before = len(_console_handlers(ACCESS_LOGGER))
    configure_logging()

    assert app_before == 1
    assert access_before == 1
    assert len(_console_handlers(APP_LOGGER)) == app_before
    assert len(_console_handlers(ACCESS_LOGGER)) == access_before


def test_access_logger_has_own_format() -> None:
    configure_logging()

    (handler,) = _console_handlers(ACCESS_LOGGER)
    assert handler.formatter is not None
    assert "ACCESS" in handler.formatter._fmt
    assert logging.getLogger(ACCESS_LOGGER).propagate is False
