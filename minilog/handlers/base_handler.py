"""
Base handler: level filtering and formatting

A handler filters a LogRecord by level, formats it and writes the
text to its sink. Subclasses provide the sink by overriding write().
"""

from typing import Mapping, Optional

from minilog.core.log_level import LogLevel, get_level_by_name
from minilog.core.log_record import LogRecord
from minilog.formatters import BaseFormatter, FieldRenderer, FormatterLike, as_formatter


class BaseHandler:
    """Handler with a minimum level and a formatter, writing nowhere."""

    def __init__(self, level_name: str, formatter: Optional[FormatterLike] = None):
        """
        Initialize handler.

        Args:
            level_name: Minimum level name, e.g. "INFO"
            formatter: Template string, function of the record, or
                       BaseFormatter (default: "{levelName} {msg}")

        Raises:
            UnknownLevelName: If level_name is not a defined level
            TypeError: If formatter is not usable
        """
        self._level = get_level_by_name(level_name)
        self._formatter = as_formatter(formatter)

    @property
    def level(self) -> LogLevel:
        return self._level

    @property
    def level_name(self) -> str:
        return self._level.name

    @property
    def formatter(self) -> BaseFormatter:
        return self._formatter

    def handle(self, record: LogRecord) -> None:
        """Filter, format and write one record."""
        if self._level > record.level:
            return

        text = self.format(record)
        self.write(text, record.level)

    def format(self, record: LogRecord) -> str:
        """Render a record through this handler's formatter."""
        return self._formatter.format(record, self.field_renderers())

    def field_renderers(self) -> Mapping[str, FieldRenderer]:
        """Template field overrides; none for the base handler."""
        return {}

    def write(self, text: str, level: LogLevel) -> None:
        """Write formatted text. Override in subclasses."""

    def __repr__(self) -> str:
        """String representation."""
        return f"{type(self).__name__}(level={self.level_name}, formatter={self._formatter!r})"
