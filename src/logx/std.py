from __future__ import annotations

"""
Process-Wide Default Logger.

A convenience layer over an explicitly constructed Logger. The default
instance is built once, on first use, and lives for the rest of the
process: level TEST (show everything), color on, standard flags, writing
to stdout. It is mutated only through the setters below.

The plain functions (``info``, ``warn``...) print their arguments back to
back; the ``*f`` variants take an explicit printf-style template.
"""

import threading
from typing import Any, Optional

from logx.core.logger import Logger
from logx.domain.constants import STD_FLAGS, Level, LogFormat
from logx.domain.record import Writer
from logx.infra.sinks.stream_writer import StreamWriter

_std: Optional[Logger] = None
_std_lock = threading.Lock()


def get_std() -> Logger:
    """Return the default logger, building it on first call."""
    global _std
    if _std is None:
        with _std_lock:
            if _std is None:
                _std = (
                    Logger()
                    .set_level(Level.TEST)
                    .set_color(True)
                    .set_call_depth_plus()
                    .set_writer(StreamWriter())
                    .set_flags(STD_FLAGS)
                )
    return _std


def _template(count: int) -> str:
    return "%s" * count

# -----------------------------------------------------------------------------
# CONFIGURATION
# -----------------------------------------------------------------------------

def set_color(color: bool) -> Logger:
    return get_std().set_color(color)


def set_writer(writer: Optional[Writer]) -> Logger:
    return get_std().set_writer(writer)


def set_level(level: int) -> Logger:
    return get_std().set_level(level)


def set_format(log_format: LogFormat) -> Logger:
    return get_std().set_format(log_format)


def set_prefix(prefix: str) -> Logger:
    return get_std().set_prefix(prefix)


def set_flags(flags: int) -> Logger:
    return get_std().set_flags(flags)

# -----------------------------------------------------------------------------
# LEVEL API
# -----------------------------------------------------------------------------

def test(*values: Any) -> None:
    get_std().test(_template(len(values)), *values)


def debug(*values: Any) -> None:
    get_std().debug(_template(len(values)), *values)


def info(*values: Any) -> None:
    """
    Log the values at INFO level, concatenated without separators.

        logx.info("user ", user.name, " logged in")
    """
    get_std().info(_template(len(values)), *values)


def notice(*values: Any) -> None:
    get_std().notice(_template(len(values)), *values)


def warn(*values: Any) -> None:
    get_std().warn(_template(len(values)), *values)


def error(*values: Any) -> None:
    get_std().error(_template(len(values)), *values)


def panic(*values: Any) -> None:
    get_std().panic(_template(len(values)), *values)


def fatal(*values: Any) -> None:
    get_std().fatal(_template(len(values)), *values)


def testf(fmt: str, *args: Any) -> None:
    get_std().test(fmt, *args)


def debugf(fmt: str, *args: Any) -> None:
    get_std().debug(fmt, *args)


def infof(fmt: str, *args: Any) -> None:
    """
    Log at INFO level with an explicit template.

        logx.infof("user: %s", user.name)
    """
    get_std().info(fmt, *args)


def noticef(fmt: str, *args: Any) -> None:
    get_std().notice(fmt, *args)


def warnf(fmt: str, *args: Any) -> None:
    get_std().warn(fmt, *args)


def errorf(fmt: str, *args: Any) -> None:
    get_std().error(fmt, *args)


def panicf(fmt: str, *args: Any) -> None:
    get_std().panic(fmt, *args)


def fatalf(fmt: str, *args: Any) -> None:
    get_std().fatal(fmt, *args)
