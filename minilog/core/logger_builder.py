"""Logger builder pattern"""

from typing import List, Optional

from minilog.core.log_level import get_level_by_name
from minilog.core.logger import Logger
from minilog.core.logger_config import LoggerConfig
from minilog.handlers.base_handler import BaseHandler
from minilog.handlers.console_handler import ConsoleHandler


class LoggerBuilder:
    """Builder pattern for logger construction."""

    def __init__(self):
        self._config = LoggerConfig(console_output=False)
        self._console_level_name: Optional[str] = None
        self._custom_handlers: List[BaseHandler] = []

    @classmethod
    def from_config(cls, config: LoggerConfig) -> "LoggerBuilder":
        """Start a builder from an existing configuration."""
        builder = cls()
        builder._config = LoggerConfig(
            name=config.name,
            level_name=config.level_name,
            console_output=config.console_output,
            colored_output=config.colored_output,
            message_format=config.message_format,
        )
        return builder

    def with_name(self, name: str) -> "LoggerBuilder":
        """Set logger name."""
        self._config.name = name
        return self

    def with_level(self, level_name: str) -> "LoggerBuilder":
        """Set minimum log level."""
        get_level_by_name(level_name)
        self._config.level_name = level_name
        return self

    def with_console(
        self,
        colored: bool = True,
        message_format: Optional[str] = None,
        level_name: Optional[str] = None,
    ) -> "LoggerBuilder":
        """
        Enable console output.

        Args:
            colored: Use ANSI color codes
            message_format: Template for the console handler
            level_name: Minimum level of the console handler
                        (default: the logger's level)
        """
        if level_name is not None:
            get_level_by_name(level_name)
        self._config.console_output = True
        self._config.colored_output = colored
        if message_format is not None:
            self._config.message_format = message_format
        self._console_level_name = level_name
        return self

    def without_console(self) -> "LoggerBuilder":
        """Disable console output."""
        self._config.console_output = False
        return self

    def add_handler(self, handler: BaseHandler) -> "LoggerBuilder":
        """
        Add a custom handler.

        Args:
            handler: Handler instance

        Returns:
            Self for method chaining
        """
        self._custom_handlers.append(handler)
        return self

    def build(self) -> Logger:
        """Build and return configured logger."""
        handlers: List[BaseHandler] = []

        # Add console handler
        if self._config.console_output:
            handlers.append(ConsoleHandler(
                self._console_level_name or self._config.level_name,
                formatter=self._config.message_format,
                use_colors=self._config.colored_output,
            ))

        # Add custom handlers
        handlers.extend(self._custom_handlers)

        return Logger(self._config.name, self._config.level_name, handlers=handlers)
