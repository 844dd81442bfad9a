from __future__ import annotations

"""
Record Dispatcher.

The Logger owns the output configuration (threshold, field flags, format,
color, prefix, call depth and writer), gates calls by level, assembles a
pooled Record for each accepted call, renders it and hands the bytes to the
configured writer in a single call.

Sink failures are best-effort: an error raised by the writer is reported
on stderr and the record is dropped. ``SinkUnavailableError`` is the one
exception and propagates to the caller.

This module deliberately does not log through the standard ``logging``
package, so bridging stdlib logging into a Logger cannot loop back here.
"""

import os
import sys
import threading
from collections.abc import Mapping
from datetime import datetime
from typing import Any, Optional, Tuple

from logx.core.callsite import UNKNOWN_FILE, UNKNOWN_MODULE, CallSite, resolve_caller
from logx.core.formatter import format_timestamp, render_json, render_text
from logx.core.pool import ObjectPool
from logx.domain.constants import (
    DEFAULT_CALL_DEPTH,
    FILE_FLAGS,
    STD_FLAGS,
    TIME_FLAGS,
    Level,
    LogFlag,
    LogFormat,
)
from logx.domain.errors import LogPanic, SinkUnavailableError
from logx.domain.record import Record, Writer

FATAL_EXIT_CODE = 1


def _clear_buffer(buf: bytearray) -> None:
    del buf[:]


def _flush_std_streams() -> None:
    for stream in (sys.stdout, sys.stderr):
        try:
            stream.flush()
        except (OSError, ValueError, AttributeError):
            continue


def _sprintf(fmt: str, args: Tuple[Any, ...]) -> str:
    """
    Apply printf-style substitution.

    A single mapping argument is used for named placeholders. A template
    that does not match its arguments degrades to the template followed by
    the arguments instead of raising from inside a log call.
    """
    if not args:
        return fmt
    values: Any = args
    if len(args) == 1 and isinstance(args[0], Mapping):
        values = args[0]
    try:
        return fmt % values
    except (TypeError, ValueError, KeyError):
        return " ".join([fmt, *(str(a) for a in args)])


class Logger:
    """
    Leveled, configurable record dispatcher.

    Every setter returns the logger itself so configuration can be chained::

        log = Logger().set_level(Level.INFO).set_color(True).set_writer(sink)
        log.info("user %s logged in", name)

    Args:
        writer: Destination sink. Records are rendered and discarded until
            one is set.
    """

    def __init__(self, writer: Optional[Writer] = None) -> None:
        self._writer = writer
        self._level = int(Level.TEST)
        self._flags = int(STD_FLAGS)
        self._call_depth = DEFAULT_CALL_DEPTH
        self._prefix = ""
        self._color = False
        self._format = LogFormat.TEXT

        self._records: ObjectPool[Record] = ObjectPool(Record, reset=Record.reset)
        self._buffers: ObjectPool[bytearray] = ObjectPool(bytearray, reset=_clear_buffer)

    # -------------------------------------------------------------------------
    # CONFIGURATION
    # -------------------------------------------------------------------------

    def set_writer(self, writer: Optional[Writer]) -> Logger:
        self._writer = writer
        return self

    def set_prefix(self, prefix: str) -> Logger:
        self._prefix = prefix
        return self

    def set_flags(self, flags: int) -> Logger:
        self._flags = int(flags)
        return self

    def set_level(self, level: int) -> Logger:
        """Set the minimum level; calls below it are ignored without formatting."""
        self._level = int(level)
        return self

    def set_color(self, color: bool) -> Logger:
        self._color = bool(color)
        return self

    def set_format(self, log_format: LogFormat) -> Logger:
        """Select text or JSON rendering. Colored JSON is not strict JSON."""
        self._format = log_format
        return self

    def set_call_depth(self, depth: int) -> Logger:
        self._call_depth = depth
        return self

    def set_call_depth_plus(self) -> Logger:
        """Account for one extra wrapper frame between user code and this logger."""
        self._call_depth += 1
        return self

    def get_call_depth(self) -> int:
        return self._call_depth

    @property
    def writer(self) -> Optional[Writer]:
        return self._writer

    @property
    def level(self) -> int:
        return self._level

    @property
    def flags(self) -> int:
        return self._flags

    @property
    def prefix(self) -> str:
        return self._prefix

    @property
    def color(self) -> bool:
        return self._color

    @property
    def log_format(self) -> LogFormat:
        return self._format

    # -------------------------------------------------------------------------
    # LEVEL API
    # -------------------------------------------------------------------------

    def test(self, fmt: str, *args: Any) -> None:
        if Level.TEST < self._level:
            return
        self._output(Level.TEST, _sprintf(fmt, args))

    def debug(self, fmt: str, *args: Any) -> None:
        if Level.DEBUG < self._level:
            return
        self._output(Level.DEBUG, _sprintf(fmt, args))

    def info(self, fmt: str, *args: Any) -> None:
        if Level.INFO < self._level:
            return
        self._output(Level.INFO, _sprintf(fmt, args))

    def notice(self, fmt: str, *args: Any) -> None:
        if Level.NOTICE < self._level:
            return
        self._output(Level.NOTICE, _sprintf(fmt, args))

    def warn(self, fmt: str, *args: Any) -> None:
        if Level.WARN < self._level:
            return
        self._output(Level.WARN, _sprintf(fmt, args))

    def error(self, fmt: str, *args: Any) -> None:
        if Level.ERROR < self._level:
            return
        self._output(Level.ERROR, _sprintf(fmt, args))

    def panic(self, fmt: str, *args: Any) -> None:
        """
        Emit at PANIC level, then raise ``LogPanic`` carrying the message.

        Raises:
            LogPanic: Always, unless the call was filtered by level.
        """
        if Level.PANIC < self._level:
            return
        msg = _sprintf(fmt, args)
        self._output(Level.PANIC, msg)
        raise LogPanic(msg)

    def fatal(self, fmt: str, *args: Any) -> None:
        """
        Emit at FATAL level, then terminate the process.

        On the main thread this goes through ``sys.exit`` so cleanup
        handlers run. On any other thread ``SystemExit`` would only end
        that thread, so the process is ended with ``os._exit`` after
        flushing the standard streams.

        Raises:
            SystemExit: With a non-zero status on the main thread, unless
                filtered by level.
        """
        if Level.FATAL < self._level:
            return
        self._output(Level.FATAL, _sprintf(fmt, args))
        if threading.current_thread() is threading.main_thread():
            sys.exit(FATAL_EXIT_CODE)
        _flush_std_streams()
        os._exit(FATAL_EXIT_CODE)

    def log(self, level: int, fmt: str, *args: Any) -> None:
        """Emit at an arbitrary level without PANIC/FATAL side effects."""
        if level < self._level:
            return
        self._output(level, _sprintf(fmt, args))

    def emit(
            self,
            level: int,
            message: str,
            *,
            path: Optional[str] = None,
            line: int = 0,
            module: Optional[str] = None,
    ) -> None:
        """
        Emit a preformatted message with a known call site.

        Used by integrations that already captured the source location.
        When ``path`` is None the stack is walked as for the level methods.

        Args:
            level: Severity code.
            message: Final message text; no substitution is applied.
            path: Source file of the original call.
            line: Line number of the original call.
            module: Module name of the original call.
        """
        if level < self._level:
            return
        site = None
        if path is not None:
            site = CallSite(path or UNKNOWN_FILE, line, module or UNKNOWN_MODULE)
        self._output(level, message, site)

    # -------------------------------------------------------------------------
    # PIPELINE
    # -------------------------------------------------------------------------

    def _output(self, level: int, msg: str, site: Optional[CallSite] = None) -> None:
        now = datetime.now()
        flags = self._flags

        # Frame 0 is this method, 1 the level method, 2 its caller.
        if site is None and flags & (FILE_FLAGS | LogFlag.MODULE):
            site = resolve_caller(self._call_depth)

        with self._records.acquire() as record, self._buffers.acquire() as buf:
            record.color = self._color
            record.prefix = self._prefix
            record.level = level
            record.show_level = bool(flags & LogFlag.LEVEL)
            if flags & TIME_FLAGS:
                record.time = format_timestamp(now, flags)
            if site is not None:
                if flags & FILE_FLAGS:
                    record.file = site.render(short=bool(flags & LogFlag.SHORT_FILE))
                if flags & LogFlag.MODULE:
                    record.module = site.module
            record.msg = msg

            if self._format is LogFormat.JSON:
                buf += render_json(record)
            else:
                buf += render_text(record)
            buf += b"\n"
            self._write(bytes(buf))

    def _write(self, data: bytes) -> None:
        writer = self._writer
        if writer is None:
            return
        try:
            writer.write(data)
        except SinkUnavailableError:
            raise
        except Exception as e:
            sys.stderr.write(
                f"WARNING: logx writer {type(writer).__name__} dropped a record: {e}\n"
            )
