from __future__ import annotations

"""
Record Rendering.

Pure functions turning a populated Record into the bytes handed to a sink.
Two renderings are provided: a single-line text layout and a JSON object.
Both may be wrapped in the level's ANSI color pair; color bytes sit outside
the JSON payload, so colored JSON output is not strict JSON.
"""

import json
from datetime import datetime
from typing import Any, Dict, List, Optional

from logx.domain.constants import (
    CLOCK_FLAGS,
    END_COLOR,
    LEVEL_COLORS,
    LEVEL_NAMES,
    LogFlag,
)
from logx.domain.errors import InvalidLevelError
from logx.domain.record import Record

# -----------------------------------------------------------------------------
# FIELD HELPERS
# -----------------------------------------------------------------------------

def format_num(value: int, width: int) -> str:
    """
    Render an integer zero-padded to a fixed width.

    Values already wider than ``width`` are returned untouched.

    Args:
        value: Number to render.
        width: Minimum number of digits.

    Returns:
        str: The padded decimal representation.
    """
    return str(value).zfill(width)


def format_timestamp(now: datetime, flags: int) -> str:
    """
    Build the timestamp token selected by the date/time flags.

    Produces ``YYYY/MM/DD`` for the date flag, ``HH:MM:SS`` for the time or
    microseconds flags, and a ``.mmm`` millisecond suffix for the latter.
    """
    parts: List[str] = []
    if flags & LogFlag.DATE:
        parts.append(
            f"{format_num(now.year, 2)}/{format_num(now.month, 2)}/{format_num(now.day, 2)}"
        )
    if flags & CLOCK_FLAGS:
        clock = f"{format_num(now.hour, 2)}:{format_num(now.minute, 2)}:{format_num(now.second, 2)}"
        if flags & LogFlag.MICROSECONDS:
            clock += "." + format_num(now.microsecond // 1000, 3)
        parts.append(clock)
    return " ".join(parts)


def level_name(level: int) -> str:
    """Resolve the four-character name of a level, rejecting unknown codes."""
    if not 0 <= level < len(LEVEL_NAMES):
        raise InvalidLevelError(level)
    return LEVEL_NAMES[level]


def _color_of(level: int) -> str:
    if not 0 <= level < len(LEVEL_COLORS):
        raise InvalidLevelError(level)
    return LEVEL_COLORS[level]


def _wrap(record: Record, payload: str) -> bytes:
    if record.color:
        payload = f"{_color_of(record.level)}{payload}{END_COLOR}"
    return payload.encode("utf-8")

# -----------------------------------------------------------------------------
# RENDERERS
# -----------------------------------------------------------------------------

def render_text(record: Optional[Record]) -> bytes:
    """
    Render a record as a single text line (without the trailing newline).

    Layout: ``[prefix] time [LEVL] module file:line: message``. Every
    token is optional except the message; absent tokens leave no separator.

    Args:
        record: Populated record, or None.

    Returns:
        bytes: UTF-8 encoded line, empty for a None record.
    """
    if record is None:
        return b""

    tokens: List[str] = []
    if record.prefix:
        tokens.append(f"[{record.prefix}]")
    if record.time:
        tokens.append(record.time)
    if record.show_level:
        tokens.append(f"[{level_name(record.level)}]")
    if record.module:
        tokens.append(record.module)
    if record.file:
        tokens.append(f"{record.file}:")
    tokens.append(record.msg)

    return _wrap(record, " ".join(tokens))


def render_json(record: Optional[Record]) -> bytes:
    """
    Render a record as a JSON object (without the trailing newline).

    Keys: ``prefix``, ``time``, ``level``, ``module``, ``file``, ``msg``.
    Fields that were not populated are omitted; ``msg`` is always present.
    Non-ASCII text is emitted as-is rather than escaped.

    Args:
        record: Populated record, or None.

    Returns:
        bytes: UTF-8 encoded object, empty for a None record.
    """
    if record is None:
        return b""

    payload: Dict[str, Any] = {}
    if record.prefix:
        payload["prefix"] = record.prefix
    if record.time:
        payload["time"] = record.time
    if record.show_level:
        payload["level"] = level_name(record.level)
    if record.module:
        payload["module"] = record.module
    if record.file:
        payload["file"] = record.file
    payload["msg"] = record.msg

    return _wrap(record, json.dumps(payload, ensure_ascii=False))
