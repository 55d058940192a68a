"""Handlers module - filter, format and write log records"""

from minilog.handlers.base_handler import BaseHandler
from minilog.handlers.console_handler import ConsoleHandler

__all__ = ["BaseHandler", "ConsoleHandler"]
