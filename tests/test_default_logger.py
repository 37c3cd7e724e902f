"""Tests for the process-wide default logger"""

import pytest

from minilog import (
    ConsoleTransport,
    LogLevel,
    create_logger,
    get_default_logger,
    set_default_logger,
    reset_default_logger,
)
from minilog.formatters import SimpleFormatter


@pytest.fixture(autouse=True)
def clean_default_logger():
    reset_default_logger()
    yield
    reset_default_logger()


class TestDefaultLogger:
    """Test lazy creation, replacement and reset."""

    def test_created_once(self):
        assert get_default_logger() is get_default_logger()

    def test_default_configuration(self):
        logger = get_default_logger()
        assert logger.get_level() == LogLevel.INFO
        assert len(logger.transports) == 1
        console = logger.transports[0]
        assert isinstance(console, ConsoleTransport)
        assert isinstance(console.formatter, SimpleFormatter)

    def test_set_default_logger(self):
        custom = create_logger(level=LogLevel.ERROR, transports=[])
        set_default_logger(custom)
        assert get_default_logger() is custom

    def test_reset_default_logger(self):
        first = get_default_logger()
        reset_default_logger()
        second = get_default_logger()
        assert first is not second

    def test_reset_after_set(self):
        custom = create_logger(transports=[])
        set_default_logger(custom)
        reset_default_logger()
        assert get_default_logger() is not custom
