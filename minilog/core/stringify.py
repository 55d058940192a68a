"""
Conversion of logged values to text

Every value handed to a Logger is turned into a string before a
LogRecord is built, so handlers only ever see text.
"""

import dataclasses
import json
import traceback
import types
from collections.abc import Mapping
from enum import Enum
from typing import Any, Optional, Set

CIRCULAR = '"[Circular]"'


def to_log_string(data: Any, is_property: bool = False) -> str:
    """
    Convert a value to its logged text form.

    Args:
        data: Value to convert
        is_property: True when data is a value nested inside a container,
                     in which case strings are quoted and None/bool use
                     their JSON spelling

    Returns:
        Text representation of data

    Example:
        to_log_string("abc")                          # abc
        to_log_string({"payload": "data", "n": 123})  # {"payload":"data","n":123}
        to_log_string(ValueError("Uh-oh!"))           # ValueError: Uh-oh!
    """
    return _stringify(data, is_property, None)


def _stringify(data: Any, is_property: bool, seen: Optional[Set[int]]) -> str:
    if isinstance(data, str):
        if is_property:
            return json.dumps(data, ensure_ascii=False)
        return data

    if isinstance(data, BaseException):
        return format_exception(data)

    if is_property:
        if data is None:
            return "null"
        if isinstance(data, bool):
            return "true" if data else "false"

    if isinstance(data, (Mapping, list, tuple)) or _has_fields(data):
        seen = set() if seen is None else seen
        if id(data) in seen:
            return CIRCULAR
        seen.add(id(data))
        try:
            if isinstance(data, (list, tuple)):
                return "[" + ",".join(_stringify(v, True, seen) for v in data) + "]"
            items = data.items() if isinstance(data, Mapping) else _fields(data).items()
            return "{" + ",".join(
                f"{json.dumps(str(k), ensure_ascii=False)}:{_stringify(v, True, seen)}"
                for k, v in items
            ) + "}"
        finally:
            seen.discard(id(data))

    return str(data)


def format_exception(error: BaseException) -> str:
    """
    Describe an exception as "<TypeName>: <message>" followed by its
    traceback frames, if it has been raised.
    """
    message = str(error)
    description = f"{type(error).__name__}: {message}" if message else type(error).__name__
    if error.__traceback__ is None:
        return description
    frames = "".join(traceback.format_tb(error.__traceback__)).rstrip("\n")
    return f"{description}\n{frames}"


def _has_fields(data: Any) -> bool:
    if isinstance(data, (type, Enum, types.ModuleType)):
        return False
    if dataclasses.is_dataclass(data):
        return True
    return hasattr(data, "__dict__") and not callable(data)


def _fields(data: Any) -> dict:
    if dataclasses.is_dataclass(data):
        return {f.name: getattr(data, f.name) for f in dataclasses.fields(data)}
    return {k: v for k, v in vars(data).items() if not k.startswith("_")}
