"""
Log record data structure
"""

import datetime as dt
import os
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Tuple

from minilog.core.log_level import LogLevel, get_level_name


def _utc_now() -> dt.datetime:
    return dt.datetime.now(dt.timezone.utc)


@dataclass(frozen=True)
class LogRecord:
    """
    Immutable snapshot of one logging event.

    The level name, timestamp and process id are resolved when the
    record is created.
    """

    msg: str
    level: LogLevel
    logger_name: str = ""
    args: Tuple[str, ...] = ()
    level_name: str = field(init=False)
    datetime: dt.datetime = field(default_factory=_utc_now)
    pid: int = field(default_factory=os.getpid)

    def __post_init__(self):
        """Resolve derived fields after initialization."""
        # Raises UnknownLevelValue for levels outside the registry
        level_name = get_level_name(self.level)
        object.__setattr__(self, "level", LogLevel(self.level))
        object.__setattr__(self, "level_name", level_name)
        object.__setattr__(self, "args", tuple(self.args))

    def get_field(self, name: str) -> Any:
        """
        Look up a template field by name.

        Returns:
            The field value, or None if the record has no such field
        """
        accessor = RECORD_FIELDS.get(name)
        if accessor is None:
            return None
        return accessor(self)


# Template field name -> value accessor
RECORD_FIELDS: Dict[str, Callable[[LogRecord], Any]] = {
    "msg": lambda record: record.msg,
    "args": lambda record: record.args,
    "level": lambda record: record.level,
    "levelName": lambda record: record.level_name,
    "level_name": lambda record: record.level_name,
    "loggerName": lambda record: record.logger_name,
    "logger_name": lambda record: record.logger_name,
    "datetime": lambda record: record.datetime,
    "pid": lambda record: record.pid,
}


def iso_instant(value: dt.datetime) -> str:
    """Render a datetime as an ISO-8601 UTC instant with millisecond precision."""
    value = value.astimezone(dt.timezone.utc)
    return value.strftime("%Y-%m-%dT%H:%M:%S.") + f"{value.microsecond // 1000:03d}Z"
