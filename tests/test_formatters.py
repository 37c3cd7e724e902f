"""Tests for the built-in formatters"""

import json
from datetime import datetime, timezone

import pytest

from minilog import LogEntry, LogLevel
from minilog.formatters import (
    BaseFormatter,
    SimpleFormatter,
    TimestampedFormatter,
    JSONFormatter,
    create_simple_formatter,
    create_timestamped_formatter,
    create_json_formatter,
)

TIMESTAMP = datetime(2024, 1, 15, 10, 30, tzinfo=timezone.utc)


def make_entry(**overrides):
    fields = {"level": LogLevel.INFO, "message": "Test message", "timestamp": TIMESTAMP}
    fields.update(overrides)
    return LogEntry(**fields)


def strict_loads(text):
    """Parse JSON, rejecting the NaN/Infinity extensions."""

    def reject(constant):
        raise ValueError(f"invalid JSON constant: {constant}")

    return json.loads(text, parse_constant=reject)


def raised_error():
    try:
        raise ValueError("Something went wrong")
    except ValueError as e:
        return e


class TestSimpleFormatter:
    """Test SimpleFormatter layout."""

    formatter = SimpleFormatter()

    def test_basic_entry(self):
        assert self.formatter.format(make_entry()) == "[INFO] Test message"

    def test_context(self):
        entry = make_entry(context="TestModule")
        assert self.formatter.format(entry) == "[INFO] [TestModule] Test message"

    def test_empty_context_omitted(self):
        assert self.formatter.format(make_entry(context="")) == "[INFO] Test message"

    def test_data(self):
        entry = make_entry(data={"userId": 123})
        assert self.formatter.format(entry) == '[INFO] Test message {"userId":123}'

    def test_empty_data_omitted(self):
        assert self.formatter.format(make_entry(data={})) == "[INFO] Test message"

    def test_error_stack(self):
        entry = make_entry(level=LogLevel.ERROR, error=raised_error())
        result = self.formatter.format(entry)
        first, rest = result.split("\n", 1)
        assert first == "[ERROR] Test message"
        assert rest.startswith("Traceback")
        assert "ValueError: Something went wrong" in rest

    def test_error_without_stack_uses_message(self):
        entry = make_entry(level=LogLevel.ERROR, error=ValueError("Something went wrong"))
        assert self.formatter.format(entry) == "[ERROR] Test message\nSomething went wrong"

    def test_data_before_error(self):
        entry = make_entry(context="ctx", data={"a": 1}, error=ValueError("boom"))
        assert self.formatter.format(entry) == '[INFO] [ctx] Test message {"a":1}\nboom'

    @pytest.mark.parametrize("level", list(LogLevel))
    def test_all_levels(self, level):
        assert self.formatter.format(make_entry(level=level)).startswith(f"[{level}]")

    def test_callable(self):
        assert self.formatter(make_entry()) == "[INFO] Test message"

    def test_unserializable_data_does_not_raise(self):
        entry = make_entry(data={"when": TIMESTAMP})
        assert "2024-01-15" in self.formatter.format(entry)

    def test_non_finite_floats_rendered_as_null(self):
        entry = make_entry(data={"x": float("nan"), "y": float("inf")})
        assert self.formatter.format(entry) == '[INFO] Test message {"x":null,"y":null}'

    def test_nested_non_string_keys(self):
        entry = make_entry(data={"k": {(1, 2): 3, 4: [float("-inf")]}})
        result = self.formatter.format(entry)
        suffix = result[len("[INFO] Test message "):]
        assert strict_loads(suffix) == {"k": {"(1, 2)": 3, "4": [None]}}


class TestTimestampedFormatter:
    """Test TimestampedFormatter layout."""

    formatter = TimestampedFormatter()

    def test_iso_timestamp(self):
        result = self.formatter.format(make_entry())
        assert result == "[2024-01-15T10:30:00.000Z] [INFO] Test message"

    def test_context_and_data(self):
        entry = make_entry(context="Mod", data={"k": "v"})
        result = self.formatter.format(entry)
        assert result == '[2024-01-15T10:30:00.000Z] [INFO] [Mod] Test message {"k":"v"}'

    def test_empty_data_omitted(self):
        result = self.formatter.format(make_entry(data={}))
        assert result == "[2024-01-15T10:30:00.000Z] [INFO] Test message"


class TestJSONFormatter:
    """Test JSONFormatter output."""

    formatter = JSONFormatter()

    def test_basic_fields(self):
        result = self.formatter.format(make_entry())
        assert "\n" not in result
        assert json.loads(result) == {
            "level": "INFO",
            "message": "Test message",
            "timestamp": "2024-01-15T10:30:00.000Z",
        }

    def test_context(self):
        parsed = json.loads(self.formatter.format(make_entry(context="TestModule")))
        assert parsed["context"] == "TestModule"

    def test_empty_data_present(self):
        result = self.formatter.format(make_entry(data={}))
        assert json.loads(result)["data"] == {}

    def test_data(self):
        parsed = json.loads(self.formatter.format(make_entry(data={"userId": 123})))
        assert parsed["data"] == {"userId": 123}

    def test_error_object(self):
        parsed = json.loads(self.formatter.format(make_entry(error=raised_error())))
        assert parsed["error"]["name"] == "ValueError"
        assert parsed["error"]["message"] == "Something went wrong"
        assert "Traceback" in parsed["error"]["stack"]

    def test_error_without_stack(self):
        parsed = json.loads(self.formatter.format(make_entry(error=KeyError("k"))))
        assert parsed["error"]["stack"] is None

    @pytest.mark.parametrize(
        "message",
        ['say "hi"', "back\\slash", "naïve ünïcödé ✓", "line\nbreak", "tab\there"],
    )
    def test_special_characters_parse(self, message):
        parsed = json.loads(self.formatter.format(make_entry(message=message)))
        assert parsed["message"] == message

    def test_unicode_kept_by_default(self):
        assert "✓" in self.formatter.format(make_entry(message="✓"))

    def test_ensure_ascii(self):
        result = JSONFormatter(ensure_ascii=True).format(make_entry(message="✓"))
        assert "✓" not in result
        assert json.loads(result)["message"] == "✓"

    def test_non_finite_floats_strictly_parseable(self):
        entry = make_entry(data={"nan": float("nan"), "inf": [float("inf"), float("-inf")]})
        parsed = strict_loads(self.formatter.format(entry))
        assert parsed["data"] == {"nan": None, "inf": [None, None]}

    def test_nested_non_string_keys(self):
        entry = make_entry(data={"k": {(1, 2): 3}, "ids": {1: "a"}})
        parsed = strict_loads(self.formatter.format(entry))
        assert parsed["data"] == {"k": {"(1, 2)": 3}, "ids": {"1": "a"}}

    def test_repr(self):
        assert "JSONFormatter" in repr(self.formatter)


class TestFormatterFactories:
    """Test factory functions."""

    def test_factories(self):
        assert isinstance(create_simple_formatter(), SimpleFormatter)
        assert isinstance(create_timestamped_formatter(), TimestampedFormatter)
        assert isinstance(create_json_formatter(), JSONFormatter)

    def test_base_formatter_is_abstract(self):
        with pytest.raises(TypeError):
            BaseFormatter()
