"""
Core module for logger system

This module contains the fundamental classes:
- Logger: Main logger class
- LoggerBuilder: Builder pattern for logger construction
- LogRecord: Log record data structure
- LogLevel: Log level enumeration
- LoggerConfig: Configuration management
"""

from minilog.core.exceptions import LoggerError, UnknownLevelName, UnknownLevelValue
from minilog.core.log_level import LEVEL_NAMES, LogLevel, get_level_by_name, get_level_name
from minilog.core.log_record import LogRecord
from minilog.core.logger import Logger
from minilog.core.logger_config import LoggerConfig
from minilog.core.logger_builder import LoggerBuilder

__all__ = [
    "LEVEL_NAMES",
    "LogLevel",
    "LogRecord",
    "Logger",
    "LoggerBuilder",
    "LoggerConfig",
    "LoggerError",
    "UnknownLevelName",
    "UnknownLevelValue",
    "get_level_by_name",
    "get_level_name",
]
