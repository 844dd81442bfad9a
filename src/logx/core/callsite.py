from __future__ import annotations

"""
Caller Frame Resolution.

Walks the interpreter stack to find the source location of a log call.
Resolution failure is not an error: it yields the ``???:0`` placeholder.
"""

import os
import sys
from dataclasses import dataclass

UNKNOWN_FILE = "???"
UNKNOWN_MODULE = "???"


@dataclass(frozen=True)
class CallSite:
    """
    Source location of a log call.

    Attributes:
        path: Absolute or interpreter-reported file path.
        line: Line number inside ``path``.
        module: ``__name__`` of the calling module.
    """
    path: str
    line: int
    module: str

    def render(self, short: bool) -> str:
        """Format as ``file:line``, with only the base name when ``short``."""
        name = self.path
        if short and name != UNKNOWN_FILE:
            name = os.path.basename(name)
        return f"{name}:{self.line}"


UNKNOWN_CALL_SITE = CallSite(UNKNOWN_FILE, 0, UNKNOWN_MODULE)


def resolve_caller(depth: int) -> CallSite:
    """
    Locate the frame ``depth`` levels above the function calling this one.

    Depth 0 is the direct caller of ``resolve_caller``.

    Args:
        depth: Number of frames to skip.

    Returns:
        CallSite: The resolved location, or the unknown placeholder.
    """
    try:
        frame = sys._getframe(depth + 1)
    except ValueError:
        return UNKNOWN_CALL_SITE
    return CallSite(
        path=frame.f_code.co_filename,
        line=frame.f_lineno,
        module=str(frame.f_globals.get("__name__", UNKNOWN_MODULE)),
    )
