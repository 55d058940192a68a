"""Tests for log levels and level name lookup"""

import pytest

from minilog import (
    LEVEL_NAMES,
    LogLevel,
    LoggerError,
    UnknownLevelName,
    UnknownLevelValue,
    get_level_by_name,
    get_level_name,
)


class TestLogLevel:
    """Test log level ordering and values."""

    def test_log_levels(self):
        assert LogLevel.NOTSET < LogLevel.TRACE
        assert LogLevel.TRACE < LogLevel.DEBUG
        assert LogLevel.DEBUG < LogLevel.INFO
        assert LogLevel.INFO < LogLevel.WARN
        assert LogLevel.WARN < LogLevel.ERROR

    def test_values(self):
        assert [int(level) for level in LogLevel] == [0, 10, 20, 30, 40, 50]

    def test_str(self):
        assert str(LogLevel.WARN) == "WARN"

    def test_from_string(self):
        assert LogLevel.from_string("DEBUG") == LogLevel.DEBUG
        with pytest.raises(UnknownLevelName):
            LogLevel.from_string("debug")

    def test_level_names(self):
        assert LEVEL_NAMES == ("NOTSET", "TRACE", "DEBUG", "INFO", "WARN", "ERROR")


class TestGetLevelByName:
    """Test name -> level lookup."""

    def test_known_name(self):
        assert get_level_by_name("DEBUG") == LogLevel.DEBUG

    @pytest.mark.parametrize("name", ["unknownLevel", "info", "WARNING", "", None])
    def test_unknown_name(self, name):
        with pytest.raises(UnknownLevelName, match="no log level found") as exc_info:
            get_level_by_name(name)
        assert exc_info.value.level_name == name

    def test_error_hierarchy(self):
        with pytest.raises(ValueError):
            get_level_by_name("CRITICAL")
        with pytest.raises(LoggerError):
            get_level_by_name("CRITICAL")


class TestGetLevelName:
    """Test level -> name lookup."""

    def test_known_level(self):
        assert get_level_name(LogLevel.WARN) == "WARN"
        assert get_level_name(30) == "INFO"

    @pytest.mark.parametrize("level", [100, 15, -10, 51, "INFO", True])
    def test_unknown_level(self, level):
        with pytest.raises(UnknownLevelValue, match="no level name found") as exc_info:
            get_level_name(level)
        assert exc_info.value.level == level

    def test_round_trip(self):
        for name in LEVEL_NAMES:
            assert get_level_name(get_level_by_name(name)) == name
        for level in LogLevel:
            assert get_level_by_name(get_level_name(int(level))) == level
