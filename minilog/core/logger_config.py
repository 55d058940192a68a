"""
Logger configuration management
"""

from dataclasses import dataclass

from minilog.core.log_level import get_level_by_name
from minilog.formatters.template_formatter import DEFAULT_TEMPLATE


@dataclass
class LoggerConfig:
    """
    Logger configuration.

    Consumed by LoggerBuilder.from_config().
    """

    # Basic settings
    name: str = "logger"
    level_name: str = "INFO"

    # Console settings
    console_output: bool = True
    colored_output: bool = True

    # Format settings
    message_format: str = DEFAULT_TEMPLATE

    def __post_init__(self):
        """Validate configuration after initialization."""
        if not isinstance(self.name, str):
            raise ValueError("name must be a string")
        if not isinstance(self.message_format, str):
            raise ValueError("message_format must be a string")

        # Raises UnknownLevelName
        get_level_by_name(self.level_name)

    @classmethod
    def default(cls) -> "LoggerConfig":
        """Create default configuration."""
        return cls()

    @classmethod
    def debug_config(cls) -> "LoggerConfig":
        """Create configuration for debugging."""
        return cls(
            level_name="TRACE",
            console_output=True,
            colored_output=True,
            message_format="{datetime} {levelName} {pid} {loggerName} {msg}",
        )

    @classmethod
    def production_config(cls) -> "LoggerConfig":
        """Create configuration for production."""
        return cls(
            level_name="WARN",
            console_output=True,
            colored_output=False,
            message_format="{datetime} {levelName} {loggerName} {msg}",
        )
