# tests/utilities/test_config_logging.py
from __future__ import annotations

import logging

import pytest

from journal_helper.utilities.config_logging import LOGGING, configure_logging


@pytest.fixture(autouse=True)
def _restore_console_logging():
    yield
    # closes any file handler opened by the test
    configure_logging(None)


def test_configure_logging_console_only():
    # Act
    config = configure_logging(None)

    # Assert
    assert "file" not in config["handlers"]
    assert config["loggers"][""]["handlers"] == ["console"]
    assert "file" in LOGGING["handlers"], "the module-level dict is never modified"


def test_configure_logging_writes_into_log_dir(tmp_path):
    # Arrange
    log_dir = tmp_path / "nested" / "logs"

    # Act
    config = configure_logging(log_dir)
    logging.getLogger("journal_helper.test").debug("hello from the test")
    for handler in logging.getLogger().handlers:
        handler.flush()

    # Assert
    log_file = log_dir / "journal_helper.log"
    assert config["handlers"]["file"]["filename"] == str(log_file)
    assert log_file.exists(), "log directory and file are created"
    assert "hello from the test" in log_file.read_text(encoding="utf-8")
    assert LOGGING["handlers"]["file"]["filename"] == "logs/journal_helper.log"
