"""
Base formatter interface
"""

from abc import ABC, abstractmethod
from typing import Any, Callable, Mapping, Optional

from minilog.core.log_record import LogRecord

# Renders one present template field: (value, record) -> text
FieldRenderer = Callable[[Any, LogRecord], str]


class BaseFormatter(ABC):
    """
    Abstract base class for log formatters.

    Formatters convert LogRecord objects into formatted strings.
    """

    @abstractmethod
    def format(
        self,
        record: LogRecord,
        renderers: Optional[Mapping[str, FieldRenderer]] = None,
    ) -> str:
        """
        Format a log record into a string.

        Args:
            record: The log record to format
            renderers: Per-field rendering overrides supplied by a handler.
                       Formatters that do not interpolate fields ignore them.

        Returns:
            Formatted string representation of the log record
        """
        pass

    def __call__(self, record: LogRecord) -> str:
        """Allow formatters to be callable."""
        return self.format(record)
