from __future__ import annotations

"""
Logging Bridge Handler and Low-Level Utilities.

Provides the ``logging.Handler`` that forwards stdlib records into a logx
Logger, plus the tagging helpers that let the configuration layer tell
its own handlers apart from handlers installed by other libraries.
"""

import logging
import threading

from logx.core.logger import Logger
from logx.infra.logging.config import to_logx_level

# Internal attribute used to tag and identify our own handlers
_HANDLER_TAG_ATTR: str = "_logx_handler"


# ==============================================================================
# BRIDGE HANDLER
# ==============================================================================

class LogxHandler(logging.Handler):
    """
    Forward stdlib log records to a logx Logger.

    The record's own source location is used as the call site. Records
    emitted while this handler is already delivering one on the same thread
    (for example HTTP client debug lines produced by a network sink) are
    dropped.

    Args:
        target: Logger receiving the bridged records.
        level: Minimum stdlib level handled.
    """

    def __init__(self, target: Logger, level: int = logging.NOTSET) -> None:
        super().__init__(level)
        self.target = target
        self._local = threading.local()

    def emit(self, record: logging.LogRecord) -> None:
        if getattr(self._local, "active", False):
            return
        self._local.active = True
        try:
            self.target.emit(
                to_logx_level(record.levelno),
                self.format(record),
                path=record.pathname,
                line=record.lineno,
                module=record.name,
            )
        except Exception:
            self.handleError(record)
        finally:
            self._local.active = False


# ==============================================================================
# INTERNAL LOGGING UTILITIES
# ==============================================================================

def _tag_handler(handler: logging.Handler) -> None:
    """
    Mark a handler as managed by this package.

    Args:
        handler: The logging handler instance to tag.
    """
    setattr(handler, _HANDLER_TAG_ATTR, True)


def _is_our_handler(handler: logging.Handler) -> bool:
    """
    Verify if a handler was installed by this package.

    Args:
        handler: The handler to inspect.

    Returns:
        bool: True if the handler carries our internal tag.
    """
    return bool(getattr(handler, _HANDLER_TAG_ATTR, False))
