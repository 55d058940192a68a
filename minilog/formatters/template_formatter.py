"""
Template formatter with {field} placeholders
"""

import datetime as dt
import re
from typing import Any, Mapping, Optional

from minilog.core.log_level import LogLevel
from minilog.core.log_record import LogRecord, iso_instant
from minilog.formatters.base_formatter import BaseFormatter, FieldRenderer

DEFAULT_TEMPLATE = "{levelName} {msg}"

# A placeholder is "{" + a run without whitespace or "}" + "}"
PLACEHOLDER = re.compile(r"\{([^\s}]+)\}")


def field_to_text(value: Any) -> str:
    """Convert a present record field value to its textual form."""
    if isinstance(value, dt.datetime):
        return iso_instant(value)
    if isinstance(value, LogLevel):
        return str(int(value))
    if isinstance(value, (tuple, list)):
        return ",".join(str(item) for item in value)
    return str(value)


class TemplateFormatter(BaseFormatter):
    """
    Format log records by interpolating a template string.

    Placeholders name LogRecord fields. A placeholder whose field is
    missing or None is left in the output as-is.
    """

    def __init__(self, template: str = DEFAULT_TEMPLATE):
        """
        Initialize template formatter.

        Args:
            template: Format template with placeholders.
                     Available placeholders:
                     - {msg}: Log message
                     - {args}: Extra arguments, comma separated
                     - {level}: Numeric level
                     - {levelName}: Level name
                     - {loggerName}: Logger name
                     - {datetime}: ISO-8601 creation time
                     - {pid}: Process id

        Example:
            formatter = TemplateFormatter("{datetime} {levelName} {msg}")
        """
        if not isinstance(template, str):
            raise TypeError("template must be a string")
        self._template = template

    @property
    def template(self) -> str:
        return self._template

    def format(
        self,
        record: LogRecord,
        renderers: Optional[Mapping[str, FieldRenderer]] = None,
    ) -> str:
        """
        Format log record using the template.

        Args:
            record: Log record to format
            renderers: Optional per-field overrides, consulted only for
                       fields that are present on the record

        Returns:
            Formatted string
        """
        renderers = renderers or {}

        def substitute(match: "re.Match") -> str:
            name = match.group(1)
            value = record.get_field(name)
            if value is None:
                return match.group(0)
            renderer = renderers.get(name)
            if renderer is not None:
                return renderer(value, record)
            return field_to_text(value)

        return PLACEHOLDER.sub(substitute, self._template)

    def __repr__(self) -> str:
        """String representation."""
        return f"TemplateFormatter(template='{self._template}')"
