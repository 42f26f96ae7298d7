"""Typed access to JSON objects and small directory helpers."""

from __future__ import annotations

import os
from enum import Enum
from typing import Any, get_args, get_origin


class JsonFieldError(ValueError):
    """A JSON field is missing or holds a value of the wrong type."""


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _convert(value: Any, kind: Any) -> Any:
    if get_origin(kind) is list:
        if not isinstance(value, list):
            raise JsonFieldError("expected an array")
        (item_kind,) = get_args(kind)
        return [_convert(item, item_kind) for item in value]
    if isinstance(kind, type) and issubclass(kind, Enum):
        number = _convert(value, int)
        try:
            return kind(number)
        except ValueError:
            raise JsonFieldError(f"{number} is not a valid {kind.__name__}") from None
    if kind is bool:
        if not isinstance(value, bool):
            raise JsonFieldError("expected a boolean")
        return value
    if kind is int:
        if not _is_number(value):
            raise JsonFieldError("expected a number")
        if isinstance(value, float):
            # A non-integral number reads as zero.
            return int(value) if value.is_integer() else 0
        return value
    if kind is float:
        if not _is_number(value):
            raise JsonFieldError("expected a number")
        return float(value)
    if kind in (str, dict, list):
        if not isinstance(value, kind):
            raise JsonFieldError(f"expected a {kind.__name__}")
        return value
    raise TypeError(f"unsupported field kind: {kind!r}")


def read_field(obj: dict, name: str, kind: Any) -> Any:
    """Return ``obj[name]`` converted to ``kind``.

    ``kind`` is one of ``str``, ``int``, ``float``, ``bool``, ``dict``, ``list``,
    an enum class, or ``list[...]`` of those.
    """
    if name not in obj:
        raise JsonFieldError(f"missing field {name!r}")
    try:
        return _convert(obj[name], kind)
    except JsonFieldError as exc:
        raise JsonFieldError(f"field {name!r}: {exc}") from None


def to_json_value(value: Any) -> Any:
    """Convert a value (enums and lists included) to plain JSON data."""
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, (list, tuple)):
        return [to_json_value(item) for item in value]
    if isinstance(value, (str, bool, int, float, dict)):
        return value
    raise TypeError(f"cannot convert {type(value).__name__} to JSON")


def file_list(directory: str | os.PathLike) -> list[str]:
    """Names of the files (hidden ones too) in ``directory``, sorted by name."""
    try:
        with os.scandir(directory) as entries:
            names = [entry.name for entry in entries if entry.is_file()]
    except OSError:
        return []
    return sorted(names, key=lambda name: (name.casefold(), name))


def file_exists_in(directory: str | os.PathLike, file_name: str) -> bool:
    """Whether ``directory`` holds a file called ``file_name``."""
    return file_name in file_list(directory)