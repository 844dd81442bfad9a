from __future__ import annotations

"""
Logging Bridge Orchestrator.

Maintains the idempotent lifecycle of the stdlib bridge: one tagged
``LogxHandler`` on the root logger, replaced only on explicit request and
never touching handlers installed by other code.
"""

import logging
import sys
from typing import Optional

from logx.core.logger import Logger
from logx.domain.constants import Level, LogFormat
from logx.domain.record import Writer
from logx.infra.logging.config import _LEVEL_MAP, LoggingConfig
from logx.infra.logging.handlers import LogxHandler, _is_our_handler, _tag_handler
from logx.infra.sinks.stream_writer import StreamWriter

# Internal state flag for idempotency tracking
_CONFIGURED_FLAG_ATTR: str = "_logx_configured"


# ==============================================================================
# PUBLIC API
# ==============================================================================

def configure_logging(
        cfg: LoggingConfig,
        writer: Optional[Writer] = None,
        *,
        force: bool = False,
) -> logging.Logger:
    """
    Route the root stdlib logger into a logx pipeline.

    Repeated calls are no-ops unless ``force`` is set, in which case only
    the handlers previously installed here are replaced.

    Args:
        cfg: Bridge configuration.
        writer: Sink for bridged records; defaults to stderr.
        force: Re-initialize even if the bridge is already installed.

    Returns:
        logging.Logger: The root logger.
    """
    root = logging.getLogger()

    already_configured = bool(getattr(root, _CONFIGURED_FLAG_ATTR, False))
    if already_configured and not force:
        return root

    level_int = _parse_level(cfg.level)
    root.setLevel(level_int)
    _remove_our_handlers(root)

    target = (
        Logger(writer or StreamWriter(sys.stderr))
        .set_level(Level.TEST)
        .set_flags(cfg.flags)
        .set_color(cfg.color)
        .set_prefix(cfg.prefix)
        .set_format(LogFormat.JSON if cfg.json else LogFormat.TEXT)
    )

    handler = LogxHandler(target, level_int)
    _tag_handler(handler)
    root.addHandler(handler)

    setattr(root, _CONFIGURED_FLAG_ATTR, True)
    return root


def get_logger(name: str) -> logging.Logger:
    """
    Acquire a named stdlib logger.

    Args:
        name: Hierarchical name for the logger (usually __name__).

    Returns:
        logging.Logger: The requested logger instance.
    """
    return logging.getLogger(name)


# ==============================================================================
# PRIVATE HELPERS
# ==============================================================================

def _parse_level(level: str) -> int:
    """Convert a string-based logging level to its numeric constant."""
    if not level:
        return logging.INFO
    return _LEVEL_MAP.get(str(level).strip().upper(), logging.INFO)


def _remove_our_handlers(root: logging.Logger) -> None:
    """Detach and close every handler this package installed on ``root``."""
    for h in list(root.handlers):
        if _is_our_handler(h):
            root.removeHandler(h)
            h.close()
