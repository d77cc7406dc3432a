"""Tests for the logging setup."""

import logging

import pytest

from posts_board.app.core.logging_config import SERVER_LOGGERS, resolve_level, setup_logging


@pytest.fixture
def restore_levels():
    names = ("",) + SERVER_LOGGERS
    saved = {name: logging.getLogger(name).level for name in names}
    yield
    for name, level in saved.items():
        logging.getLogger(name).setLevel(level)


def test_resolve_level():
    assert resolve_level("debug") == logging.DEBUG
    assert resolve_level("WARNING") == logging.WARNING
    assert resolve_level("nonsense") == logging.INFO


def test_server_loggers_follow_app_level(restore_levels):
    setup_logging("WARNING")
    assert logging.getLogger().level == logging.WARNING
    for name in SERVER_LOGGERS:
        assert logging.getLogger(name).level == logging.WARNING


def test_repeated_setup_does_not_add_handlers(restore_levels):
    setup_logging("INFO")
    count = len(logging.getLogger().handlers)
    setup_logging("DEBUG")
    assert len(logging.getLogger().handlers) == count
    assert logging.getLogger("uvicorn.access").level == logging.DEBUG
