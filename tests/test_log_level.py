"""Tests for log levels and level parsing"""

import pytest

from minilog import LogLevel, LEVEL_NAMES, parse_level


class TestLogLevel:
    """Test log level ordering."""

    def test_log_levels(self):
        assert LogLevel.ERROR < LogLevel.WARN
        assert LogLevel.WARN < LogLevel.INFO
        assert LogLevel.INFO < LogLevel.DEBUG
        assert LogLevel.DEBUG < LogLevel.TRACE

    def test_exactly_five_levels(self):
        assert [int(level) for level in LogLevel] == [0, 1, 2, 3, 4]
        assert len(LEVEL_NAMES) == 5

    def test_str_is_canonical_name(self):
        assert str(LogLevel.WARN) == "WARN"
        assert str(LogLevel.TRACE) == "TRACE"


class TestParseLevel:
    """Test level name parsing."""

    @pytest.mark.parametrize("level", list(LogLevel))
    def test_round_trip(self, level):
        name = LEVEL_NAMES[level]
        assert parse_level(name) == level
        assert parse_level(name.lower()) == level
        assert parse_level(name.capitalize()) == level

    def test_mixed_case(self):
        assert parse_level("dEbUg") == LogLevel.DEBUG

    @pytest.mark.parametrize("name", ["WARNING", "", "2", "info ", "FATAL", "err"])
    def test_unknown_names_return_none(self, name):
        assert parse_level(name) is None

    def test_non_string_returns_none(self):
        assert parse_level(None) is None
        assert parse_level(2) is None

    def test_classmethod_alias(self):
        assert LogLevel.parse("error") == LogLevel.ERROR
        assert LogLevel.parse("WARNING") is None
