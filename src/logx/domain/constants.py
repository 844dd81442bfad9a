from __future__ import annotations

"""
Domain Constants and Static Lookup Tables.

Centralizes the severity levels, field selection flags, output formats,
ANSI color table and storage bucket formats shared by the dispatcher,
the formatter and the rotating file sink.
"""

from enum import Enum, IntEnum, IntFlag
from typing import Dict, List

# -----------------------------------------------------------------------------
# SEVERITY LEVELS
# -----------------------------------------------------------------------------

class Level(IntEnum):
    """Ordered severity codes. The value indexes the level-name tables."""
    TEST = 0
    DEBUG = 1
    INFO = 2
    NOTICE = 3
    WARN = 4
    ERROR = 5
    PANIC = 6
    FATAL = 7


LEVEL_NAMES: List[str] = [
    "TEST",
    "DEBU",
    "INFO",
    "NOTI",
    "WARN",
    "ERRO",
    "PANI",
    "FATA",
]

# -----------------------------------------------------------------------------
# FIELD SELECTION FLAGS
# -----------------------------------------------------------------------------

class LogFlag(IntFlag):
    """Bitmask selecting which fields a record carries."""
    DATE = 1 << 0
    TIME = 1 << 1
    MICROSECONDS = 1 << 2
    LONG_FILE = 1 << 3
    SHORT_FILE = 1 << 4
    MODULE = 1 << 5
    LEVEL = 1 << 6


STD_FLAGS: int = LogFlag.DATE | LogFlag.MICROSECONDS | LogFlag.SHORT_FILE | LogFlag.LEVEL

TIME_FLAGS: int = LogFlag.DATE | LogFlag.TIME | LogFlag.MICROSECONDS
CLOCK_FLAGS: int = LogFlag.TIME | LogFlag.MICROSECONDS
FILE_FLAGS: int = LogFlag.LONG_FILE | LogFlag.SHORT_FILE

# -----------------------------------------------------------------------------
# OUTPUT FORMATS AND COLORS
# -----------------------------------------------------------------------------

class LogFormat(Enum):
    """Rendering strategy for a finished record."""
    TEXT = "text"
    JSON = "json"


END_COLOR = "\033[0m"

LEVEL_COLORS: List[str] = [
    "\033[1;37m",  # TEST: white
    "\033[1;34m",  # DEBUG: blue
    "\033[1;37m",  # INFO: white
    "\033[1;33m",  # NOTICE: yellow
    "\033[1;32m",  # WARN: green
    "\033[1;31m",  # ERROR: red
    "\033[1;35m",  # PANIC: fuchsia
    "\033[1;36m",  # FATAL: cyan
]

DEFAULT_CALL_DEPTH = 2

# -----------------------------------------------------------------------------
# FILE STORAGE
# -----------------------------------------------------------------------------

class StorageType(Enum):
    """Time granularity that decides when the file sink rotates."""
    MINUTE = "minute"
    HOUR = "hour"
    DAY = "day"
    MONTH = "month"

    @property
    def file_format(self) -> str:
        """strftime pattern producing this granularity's bucket key."""
        return STORAGE_FORMATS[self]


STORAGE_FORMATS: Dict[StorageType, str] = {
    StorageType.MINUTE: "%Y-%m-%d-%H-%M",
    StorageType.HOUR: "%Y-%m-%d-%H",
    StorageType.DAY: "%Y-%m-%d",
    StorageType.MONTH: "%Y-%m",
}

DEFAULT_MAX_DAYS = 7
DEFAULT_LOG_DIR = "./"
DEFAULT_SWEEP_INTERVAL = 3600.0
