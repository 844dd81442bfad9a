"""logx: leveled, formatted logging with a self-rotating, self-pruning file sink.

Records are rendered as text or JSON, optionally ANSI-colored, and handed to
any writer exposing ``write(bytes) -> int``. The package also exposes a
process-wide default logger through module-level helpers (``logx.info``,
``logx.infof``...).
"""

__version__ = "0.1.0"

from logx.core.logger import Logger
from logx.domain.constants import STD_FLAGS, Level, LogFlag, LogFormat, StorageType
from logx.domain.errors import InvalidLevelError, LogPanic, LogxError, SinkUnavailableError
from logx.domain.options import FileOptions
from logx.domain.record import Record, Writer
from logx.infra.network.http_writer import HttpWriter
from logx.infra.sinks.file_writer import FileWriter
from logx.infra.sinks.stream_writer import StreamWriter
from logx.std import (
    debug,
    debugf,
    error,
    errorf,
    fatal,
    fatalf,
    get_std,
    info,
    infof,
    notice,
    noticef,
    panic,
    panicf,
    set_color,
    set_flags,
    set_format,
    set_level,
    set_prefix,
    set_writer,
    test,
    testf,
    warn,
    warnf,
)

__all__ = [
    "Logger",
    "Level",
    "LogFlag",
    "LogFormat",
    "STD_FLAGS",
    "StorageType",
    "FileOptions",
    "FileWriter",
    "HttpWriter",
    "StreamWriter",
    "Record",
    "Writer",
    "LogxError",
    "InvalidLevelError",
    "LogPanic",
    "SinkUnavailableError",
    "get_std",
    "set_color",
    "set_writer",
    "set_level",
    "set_format",
    "set_prefix",
    "set_flags",
    "test",
    "debug",
    "info",
    "notice",
    "warn",
    "error",
    "panic",
    "fatal",
    "testf",
    "debugf",
    "infof",
    "noticef",
    "warnf",
    "errorf",
    "panicf",
    "fatalf",
]
