"""
Exceptions raised by the logger system
"""


class LoggerError(Exception):
    """Base class for all logger system errors."""


class UnknownLevelName(LoggerError, ValueError):
    """Raised when a level name is not one of the defined level names."""

    def __init__(self, level_name):
        self.level_name = level_name
        super().__init__(f'no log level found for "{level_name}"')


class UnknownLevelValue(LoggerError, ValueError):
    """Raised when a numeric level is not one of the defined level values."""

    def __init__(self, level):
        self.level = level
        super().__init__(f"no level name found for level: {level}")
