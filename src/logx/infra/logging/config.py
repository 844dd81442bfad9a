from __future__ import annotations

"""
Logging Bridge Configuration Models.

Defines the data structures used to route the standard ``logging`` package
into a logx pipeline, together with the severity mappings in both
directions.
"""

import logging
from dataclasses import dataclass
from typing import Dict

from logx.domain.constants import STD_FLAGS, Level

# Mapping of string identifiers to native logging constants
_LEVEL_MAP: Dict[str, int] = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "WARN": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL,
}


def to_logx_level(levelno: int) -> Level:
    """
    Translate a stdlib numeric level into the closest logx level.

    CRITICAL maps to ERROR: PANIC and FATAL carry control-flow side
    effects that a bridged record must never trigger.
    """
    if levelno < logging.DEBUG:
        return Level.TEST
    if levelno < logging.INFO:
        return Level.DEBUG
    if levelno < logging.WARNING:
        return Level.INFO
    if levelno < logging.ERROR:
        return Level.WARN
    return Level.ERROR


@dataclass(frozen=True)
class LoggingConfig:
    """
    Immutable configuration for the stdlib logging bridge.

    Attributes:
        level: Minimum stdlib severity captured by the root logger.
        color: Wrap bridged records in ANSI colors.
        json: Render bridged records as JSON instead of text.
        prefix: Tag prepended to every bridged record.
        flags: Field selection bitmask for bridged records.
    """
    level: str = "INFO"
    color: bool = False
    json: bool = False
    prefix: str = ""
    flags: int = STD_FLAGS
