"""
Log formatters module

A formatter is either a template string or a function of the record.
"""

from typing import Callable, Optional, Union

from minilog.core.log_record import LogRecord
from minilog.formatters.base_formatter import BaseFormatter, FieldRenderer
from minilog.formatters.function_formatter import FunctionFormatter
from minilog.formatters.template_formatter import DEFAULT_TEMPLATE, TemplateFormatter

FormatterLike = Union[str, Callable[[LogRecord], str], BaseFormatter]


def as_formatter(formatter: Optional[FormatterLike] = None) -> BaseFormatter:
    """
    Normalize a handler's formatter argument.

    None selects the default template, a string becomes a
    TemplateFormatter and any other callable a FunctionFormatter.

    Raises:
        TypeError: If formatter is none of the accepted kinds
    """
    if formatter is None:
        return TemplateFormatter(DEFAULT_TEMPLATE)
    if isinstance(formatter, BaseFormatter):
        return formatter
    if isinstance(formatter, str):
        return TemplateFormatter(formatter)
    if callable(formatter):
        return FunctionFormatter(formatter)
    raise TypeError(
        f"formatter must be a template string or a callable, not {type(formatter).__name__}"
    )


__all__ = [
    "BaseFormatter",
    "DEFAULT_TEMPLATE",
    "FieldRenderer",
    "FormatterLike",
    "FunctionFormatter",
    "TemplateFormatter",
    "as_formatter",
]
