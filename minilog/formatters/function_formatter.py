"""
Formatter backed by a user-supplied function
"""

from typing import Callable, Mapping, Optional

from minilog.core.log_record import LogRecord
from minilog.formatters.base_formatter import BaseFormatter, FieldRenderer


class FunctionFormatter(BaseFormatter):
    """
    Format log records with a custom function.

    The function receives the full LogRecord and its return value is
    used verbatim.
    """

    def __init__(self, func: Callable[[LogRecord], str]):
        """
        Initialize function formatter.

        Args:
            func: Function that takes a LogRecord and returns a string

        Example:
            formatter = FunctionFormatter(
                lambda record: f"{record.level_name} {record.msg}"
            )
        """
        if not callable(func):
            raise TypeError("func must be callable")

        self.func = func

    def format(
        self,
        record: LogRecord,
        renderers: Optional[Mapping[str, FieldRenderer]] = None,
    ) -> str:
        """Call the function with the record, ignoring field renderers."""
        return self.func(record)

    def __repr__(self) -> str:
        """String representation."""
        func_name = getattr(self.func, '__name__', repr(self.func))
        return f"FunctionFormatter(func={func_name})"
