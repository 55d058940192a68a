"""
Main Logger class
"""

from __future__ import annotations
from typing import TYPE_CHECKING, Any, Iterable, Optional, Tuple, Union

from minilog.core.log_level import LogLevel, get_level_by_name, get_level_name
from minilog.core.log_record import LogRecord
from minilog.core.stringify import to_log_string

if TYPE_CHECKING:
    from minilog.handlers.base_handler import BaseHandler


class Logger:
    """Named logger dispatching records to its handlers."""

    def __init__(
        self,
        logger_name: str,
        level_name: str,
        handlers: Optional[Union[BaseHandler, Iterable[BaseHandler]]] = None,
    ):
        """
        Initialize logger.

        Args:
            logger_name: Name stamped on every record
            level_name: Minimum level name, e.g. "DEBUG"
            handlers: A handler or an ordered collection of handlers

        Raises:
            UnknownLevelName: If level_name is not a defined level
        """
        self._logger_name = logger_name
        self._level = get_level_by_name(level_name)
        if handlers is None:
            self._handlers = []
        elif hasattr(handlers, "handle"):
            self._handlers = [handlers]
        else:
            self._handlers = list(handlers)

    def get_level(self) -> LogLevel:
        return self._level

    def get_level_name(self) -> str:
        return get_level_name(self._level)

    def get_logger_name(self) -> str:
        return self._logger_name

    def set_logger_name(self, logger_name: str) -> Logger:
        """Rename the logger. Returns self for chaining."""
        self._logger_name = logger_name
        return self

    @property
    def handlers(self) -> Tuple[BaseHandler, ...]:
        return tuple(self._handlers)

    def add_handler(self, handler: BaseHandler) -> Logger:
        """Append a handler. Returns self for chaining."""
        self._handlers.append(handler)
        return self

    def trace(self, msg: Any, *args: Any) -> None:
        """Log trace message."""
        self.log(LogLevel.TRACE, msg, *args)

    def debug(self, msg: Any, *args: Any) -> None:
        """Log debug message."""
        self.log(LogLevel.DEBUG, msg, *args)

    def info(self, msg: Any, *args: Any) -> None:
        """Log info message."""
        self.log(LogLevel.INFO, msg, *args)

    def warn(self, msg: Any, *args: Any) -> None:
        """Log warning message."""
        self.log(LogLevel.WARN, msg, *args)

    def error(self, msg: Any, *args: Any) -> None:
        """Log error message."""
        self.log(LogLevel.ERROR, msg, *args)

    def log(self, level: LogLevel, msg: Any, *args: Any) -> None:
        """
        Log a message at the given level.

        Nothing is stringified or built when level is below the
        logger's minimum level.
        """
        if self._level > level:
            return

        record = LogRecord(
            msg=to_log_string(msg),
            args=tuple(to_log_string(arg) for arg in args),
            level=level,
            logger_name=self._logger_name,
        )

        for handler in self._handlers:
            handler.handle(record)

    def __repr__(self) -> str:
        """String representation."""
        return (
            f"Logger(name='{self._logger_name}', level={self._level.name}, "
            f"handlers={len(self._handlers)})"
        )
