"""Tests for template and function formatters"""

import datetime as dt

import pytest

from minilog import LogLevel, LogRecord
from minilog.formatters import (
    DEFAULT_TEMPLATE,
    BaseFormatter,
    FunctionFormatter,
    TemplateFormatter,
    as_formatter,
)

TIMESTAMP = dt.datetime(2024, 5, 6, 7, 8, 9, 123000, tzinfo=dt.timezone.utc)


def make_record(**kwargs):
    values = dict(
        msg="Hello, world!",
        level=LogLevel.DEBUG,
        logger_name="default",
        args=("1", "2"),
        datetime=TIMESTAMP,
        pid=1234,
    )
    values.update(kwargs)
    return LogRecord(**values)


class TestTemplateFormatter:
    """Test template interpolation."""

    def test_default_template(self):
        assert TemplateFormatter().format(make_record()) == "DEBUG Hello, world!"

    def test_all_fields(self):
        formatter = TemplateFormatter(
            "{datetime}|{level}|{levelName}|{loggerName}|{pid}|{args}|{msg}"
        )
        assert formatter.format(make_record()) == (
            "2024-05-06T07:08:09.123Z|20|DEBUG|default|1234|1,2|Hello, world!"
        )

    def test_snake_case_aliases(self):
        formatter = TemplateFormatter("{level_name} {logger_name}")
        assert formatter.format(make_record()) == "DEBUG default"

    def test_empty_message(self):
        formatter = TemplateFormatter("test {levelName} {msg}")
        assert formatter.format(make_record(msg="")) == "test DEBUG "

    def test_missing_field_is_kept(self):
        formatter = TemplateFormatter("{levelName} {msg} {missing}")
        assert formatter.format(make_record()) == "DEBUG Hello, world! {missing}"

    @pytest.mark.parametrize("text", [
        "",
        "plain text",
        "{ msg }",
        "{}",
        "a { b } c",
        "unterminated {msg",
    ])
    def test_text_without_tokens_is_unchanged(self, text):
        assert TemplateFormatter(text).format(make_record()) == text

    def test_braces_around_token(self):
        # "{{msg}" is not a field, so only the inner braces stay literal
        formatter = TemplateFormatter("{{msg}}")
        assert formatter.format(make_record()) == "{{msg}}"
        assert TemplateFormatter("{ {msg}}").format(make_record()) == "{ Hello, world!}"

    def test_renderer_override(self):
        formatter = TemplateFormatter("{levelName}: {msg}")
        renderers = {"levelName": lambda value, record: value.lower()}
        assert formatter.format(make_record(), renderers) == "debug: Hello, world!"

    def test_renderer_not_used_for_missing_field(self):
        formatter = TemplateFormatter("{missing}")
        renderers = {"missing": lambda value, record: "rendered"}
        assert formatter.format(make_record(), renderers) == "{missing}"

    def test_template_must_be_string(self):
        with pytest.raises(TypeError):
            TemplateFormatter(42)

    def test_repr(self):
        assert "{msg}" in repr(TemplateFormatter("{msg}"))


class TestFunctionFormatter:
    """Test function formatters."""

    def test_result_is_verbatim(self):
        formatter = FunctionFormatter(
            lambda record: f"fn formatter {record.level_name} {record.msg}"
        )
        assert formatter.format(make_record()) == "fn formatter DEBUG Hello, world!"

    def test_receives_full_record(self):
        seen = []
        formatter = FunctionFormatter(lambda record: seen.append(record) or "{msg}")
        record = make_record()
        assert formatter.format(record, {"msg": lambda value, rec: "x"}) == "{msg}"
        assert seen == [record]

    def test_requires_callable(self):
        with pytest.raises(TypeError):
            FunctionFormatter("not callable")

    def test_callable_formatter(self):
        formatter = FunctionFormatter(lambda record: record.msg)
        assert formatter(make_record()) == "Hello, world!"


class TestAsFormatter:
    """Test formatter argument normalization."""

    def test_none_is_default_template(self):
        formatter = as_formatter(None)
        assert isinstance(formatter, TemplateFormatter)
        assert formatter.template == DEFAULT_TEMPLATE

    def test_string(self):
        assert as_formatter("{msg}").template == "{msg}"

    def test_function(self):
        assert isinstance(as_formatter(lambda record: ""), FunctionFormatter)

    def test_formatter_instance(self):
        formatter = TemplateFormatter("{msg}")
        assert as_formatter(formatter) is formatter
        assert isinstance(formatter, BaseFormatter)

    def test_invalid(self):
        with pytest.raises(TypeError, match="formatter must be"):
            as_formatter(42)
