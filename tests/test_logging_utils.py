"""Tests for centralized logging helpers."""

import logging

import pytest

from common.logging_utils import configure_logging, extra_context, is_debug_enabled
from constants import Constants


@pytest.fixture
def restore_root():
    root = logging.getLogger()
    before = list(root.handlers)
    level = root.level
    yield root
    for handler in list(root.handlers):
        if handler not in before:
            root.removeHandler(handler)
            handler.close()
    root.setLevel(level)


def test_level_from_env(monkeypatch, restore_root):
    """Test the root level follows DEPCYCLE_LOG_LEVEL."""
    monkeypatch.setenv(Constants.ENV_LOG_LEVEL, "debug")
    configure_logging()
    assert restore_root.level == logging.DEBUG
    assert is_debug_enabled(logging.getLogger("depcycle.test"))


def test_unknown_level_defaults_to_info(monkeypatch, restore_root):
    """Test an unknown level name falls back to INFO."""
    monkeypatch.setenv(Constants.ENV_LOG_LEVEL, "chatty")
    configure_logging()
    assert restore_root.level == logging.INFO


def test_reconfigure_does_not_stack_handlers(monkeypatch, restore_root):
    """Test configuring twice keeps one set of handlers."""
    monkeypatch.setenv(Constants.ENV_LOG_LEVEL, "INFO")
    configure_logging()
    count = len(restore_root.handlers)
    configure_logging()
    assert len(restore_root.handlers) == count


def test_log_file(monkeypatch, tmp_path, restore_root):
    """Test records are copied to the log file."""
    monkeypatch.setenv(Constants.ENV_LOG_LEVEL, "INFO")
    log_file = tmp_path / "depcycle.log"
    configure_logging(str(log_file))
    logging.getLogger("depcycle.test").warning("written to file")
    for handler in restore_root.handlers:
        handler.flush()
    assert "[WARNING] written to file" in log_file.read_text(encoding="utf-8")


def test_extra_context_drops_none():
    """Test None fields are left out of extra context."""
    assert extra_context(event="decision", outcome=None, count=0) == {"event": "decision", "count": 0}
