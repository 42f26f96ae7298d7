"""Log messages built by joining values, with debug output switched on demand."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from enum import IntEnum
from typing import Any

logger = logging.getLogger("limejudge")


class LogLevel(IntEnum):
    WARN = 0
    NORMAL = 1
    DEBUG = 2


_LEVELS = {
    LogLevel.WARN: logging.WARNING,
    LogLevel.NORMAL: logging.INFO,
    LogLevel.DEBUG: logging.DEBUG,
}

_state = {"debug": False}


def configure(debug: bool) -> None:
    """Turn debug messages on or off."""
    _state["debug"] = bool(debug)
    logger.setLevel(logging.DEBUG if debug else logging.INFO)


def format_value(value: Any) -> str:
    """Text for one logged value.

    A pair becomes ``key: value``, a mapping ``{ k: v; ... }`` in key order, a
    list its items run together, and a boolean ``1`` or ``0``.
    """
    if isinstance(value, bool):
        return "1" if value else "0"
    if isinstance(value, tuple) and len(value) == 2:
        return f"{format_value(value[0])}: {format_value(value[1])}"
    if isinstance(value, Mapping):
        body = "".join(format_value((key, value[key])) + "; " for key in sorted(value))
        return "{ " + body + "}"
    if isinstance(value, list):
        return "".join(format_value(item) for item in value)
    return str(value)


def log_concat(level: LogLevel | int, module: str, *args: Any) -> str | None:
    """Log ``[module]`` and ``args`` joined by spaces; return the message.

    Debug messages are dropped, and None returned, unless debug output is on.
    """
    level = LogLevel(level)
    message = "".join(format_value(part) + " " for part in (f"[{module}]", *args))
    if level is LogLevel.DEBUG and not _state["debug"]:
        return None
    logger.log(_LEVELS[level], message)
    return message