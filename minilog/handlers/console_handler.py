"""Console handler with ANSI decoration"""

import sys
from typing import Mapping, Optional, TextIO

from minilog.core.log_level import LogLevel
from minilog.core.log_record import LogRecord, iso_instant
from minilog.formatters import FieldRenderer, FormatterLike
from minilog.handlers.base_handler import BaseHandler

RESET_FG = "\033[39m"
RED = "\033[31m"
YELLOW = "\033[33m"
GREEN = "\033[32m"
CYAN = "\033[36m"
DIM = "\033[2m"
RESET_DIM = "\033[22m"

LEVEL_NAME_WIDTH = 5
MAX_LOGGER_NAME_LENGTH = 32


class ConsoleHandler(BaseHandler):
    """Write records to stdout, or stderr for ERROR, with optional colors."""

    def __init__(
        self,
        level_name: str,
        formatter: Optional[FormatterLike] = None,
        use_colors: bool = True,
        stdout: Optional[TextIO] = None,
        stderr: Optional[TextIO] = None,
    ):
        """
        Initialize console handler.

        Args:
            level_name: Minimum level name
            formatter: Template string or function of the record
            use_colors: Use ANSI color codes
            stdout: Stream for non-error records (default: sys.stdout)
            stderr: Stream for ERROR records (default: sys.stderr)
        """
        super().__init__(level_name, formatter)
        self.use_colors = use_colors
        self._stdout = stdout
        self._stderr = stderr
        self._renderers = {
            "levelName": self.format_level_name,
            "level_name": self.format_level_name,
            "loggerName": self.format_logger_name,
            "logger_name": self.format_logger_name,
            "datetime": self.format_timestamp,
            "pid": self.format_pid,
        }

    def field_renderers(self) -> Mapping[str, FieldRenderer]:
        return self._renderers

    def write(self, text: str, level: LogLevel) -> None:
        """Write one line to the stream selected by level."""
        stream = self.get_stream(level)
        stream.write(text + "\n")
        stream.flush()

    def get_stream(self, level: LogLevel) -> TextIO:
        if level == LogLevel.ERROR:
            return self._stderr or sys.stderr
        return self._stdout or sys.stdout

    def format_level_name(self, value: str, record: LogRecord) -> str:
        value = value.rjust(LEVEL_NAME_WIDTH)
        if self.use_colors:
            return self.colorize(value, record.level)
        return value

    def format_logger_name(self, value: str, record: LogRecord) -> str:
        if len(value) > MAX_LOGGER_NAME_LENGTH:
            # keep the tail, mark the cut with at least one "~"
            value = value[1 - MAX_LOGGER_NAME_LENGTH:].rjust(MAX_LOGGER_NAME_LENGTH, "~")
        if self.use_colors:
            value = f"{CYAN}{value}{RESET_FG}"
        return f"{value}:"

    def format_timestamp(self, value, record: LogRecord) -> str:
        return self.dim(f"[{iso_instant(value)}]")

    def format_pid(self, value: int, record: LogRecord) -> str:
        return self.dim(f"({value})")

    def dim(self, value: str) -> str:
        if self.use_colors:
            return f"{DIM}{value}{RESET_DIM}"
        return value

    def colorize(self, value: str, level: LogLevel) -> str:
        if level == LogLevel.ERROR:
            color = RED
        elif level == LogLevel.WARN:
            color = YELLOW
        else:
            color = GREEN
        return f"{color}{value}{RESET_FG}"

    def flush(self) -> None:
        """Flush both streams."""
        (self._stdout or sys.stdout).flush()
        (self._stderr or sys.stderr).flush()
