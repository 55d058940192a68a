"""
Log level enumeration and name lookup
"""

from enum import IntEnum
from typing import Dict, Tuple

from minilog.core.exceptions import UnknownLevelName, UnknownLevelValue


class LogLevel(IntEnum):
    """
    Log level enumeration.

    Gaps between values are reserved for levels added later.
    """

    NOTSET = 0
    TRACE = 10
    DEBUG = 20
    INFO = 30
    WARN = 40
    ERROR = 50

    def __str__(self) -> str:
        """String representation of log level."""
        return self.name

    @classmethod
    def from_string(cls, level_str: str) -> "LogLevel":
        """
        Convert a level name to LogLevel.

        Args:
            level_str: Level name (case-sensitive)

        Returns:
            LogLevel enum value

        Raises:
            UnknownLevelName: If level_str is not a defined level name
        """
        return get_level_by_name(level_str)


# All level names, lowest first
LEVEL_NAMES: Tuple[str, ...] = tuple(level.name for level in LogLevel)

# Mapping from level value to name
_NAME_FROM_LEVEL: Dict[int, str] = {int(level): level.name for level in LogLevel}

# Reverse mapping
_LEVEL_FROM_NAME: Dict[str, LogLevel] = {level.name: level for level in LogLevel}


def get_level_by_name(name: str) -> LogLevel:
    """
    Resolve a level name to its LogLevel.

    Raises:
        UnknownLevelName: If name is not exactly one of LEVEL_NAMES
    """
    if isinstance(name, str) and name in _LEVEL_FROM_NAME:
        return _LEVEL_FROM_NAME[name]
    raise UnknownLevelName(name)


def get_level_name(level: int) -> str:
    """
    Resolve a numeric level to its name.

    Raises:
        UnknownLevelValue: If level is not exactly one of the defined values
    """
    if isinstance(level, int) and not isinstance(level, bool):
        name = _NAME_FROM_LEVEL.get(int(level))
        if name is not None:
            return name
    raise UnknownLevelValue(level)
