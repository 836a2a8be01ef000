"""
Tests for setup_logging.
"""

import logging

import pytest

from gift_list_api.app.core.config import Settings
from gift_list_api.app.core.logging_config import _owned_handlers, setup_logging
from gift_list_api.app.main import create_app


@pytest.fixture(autouse=True)
def restore_root_logger():
    root = logging.getLogger()
    level = root.level
    yield
    for handler in _owned_handlers(root):
        root.removeHandler(handler)
        handler.close()
    root.setLevel(level)


def test_second_call_applies_new_level():
    setup_logging("DEBUG")
    assert logging.getLogger().level == logging.DEBUG

    setup_logging("WARNING")
    root = logging.getLogger()
    assert root.level == logging.WARNING
    assert len(_owned_handlers(root)) == 1


def test_unknown_level_falls_back_to_info():
    setup_logging("chatty")
    assert logging.getLogger().level == logging.INFO


def test_log_file_receives_records(tmp_path):
    logfile = tmp_path / "service.log"
    setup_logging("INFO", str(logfile))
    logging.getLogger("gift_list_api.test").info("Added gift %s", "1")
    for handler in _owned_handlers(logging.getLogger()):
        handler.flush()
    assert "Added gift 1" in logfile.read_text(encoding="utf-8")


def test_foreign_handlers_are_kept():
    root = logging.getLogger()
    foreign = logging.NullHandler()
    root.addHandler(foreign)
    try:
        setup_logging("INFO")
        setup_logging("ERROR")
        assert foreign in root.handlers
    finally:
        root.removeHandler(foreign)


def test_create_app_respects_settings_each_time(tmp_path):
    create_app(Settings(database_url=str(tmp_path / "a.db"), log_level="DEBUG"))
    assert logging.getLogger().level == logging.DEBUG

    logfile = tmp_path / "app.log"
    create_app(Settings(database_url=str(tmp_path / "b.db"), log_level="ERROR", log_file=str(logfile)))
    root = logging.getLogger()
    assert root.level == logging.ERROR
    assert any(isinstance(handler, logging.FileHandler) for handler in _owned_handlers(root))
