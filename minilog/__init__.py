"""
BSD 3-Clause License

Copyright (c) 2021, 🍀☀🌕🌥 🌊
All rights reserved.

minilog - A minimal leveled logging library
Named loggers fan records out to handlers that filter, format and write them
"""

__version__ = "1.0.0"
__author__ = "kcenon"
__email__ = "kcenon@naver.com"

from minilog.core.exceptions import LoggerError, UnknownLevelName, UnknownLevelValue
from minilog.core.log_level import LEVEL_NAMES, LogLevel, get_level_by_name, get_level_name
from minilog.core.log_record import LogRecord
from minilog.core.logger import Logger
from minilog.core.logger_builder import LoggerBuilder
from minilog.core.logger_config import LoggerConfig
from minilog.handlers import BaseHandler, ConsoleHandler

# Import submodules (not all classes by default)
from minilog import formatters
from minilog import handlers

__all__ = [
    "BaseHandler",
    "ConsoleHandler",
    "LEVEL_NAMES",
    "LogLevel",
    "LogRecord",
    "Logger",
    "LoggerBuilder",
    "LoggerConfig",
    "LoggerError",
    "UnknownLevelName",
    "UnknownLevelValue",
    "formatters",
    "get_level_by_name",
    "get_level_name",
    "handlers",
]
