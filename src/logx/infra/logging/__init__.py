from __future__ import annotations

from .config import LoggingConfig, to_logx_level
from .core import _CONFIGURED_FLAG_ATTR, configure_logging, get_logger
from .handlers import _HANDLER_TAG_ATTR, LogxHandler

__all__ = [
    "LoggingConfig",
    "LogxHandler",
    "configure_logging",
    "get_logger",
    "to_logx_level",
]
