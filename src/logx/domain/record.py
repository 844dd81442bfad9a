from __future__ import annotations

"""
Record Data Model and Sink Contract.

Defines the short-lived value object populated by the dispatcher for a
single log event, and the structural protocol every output sink satisfies.
"""

from dataclasses import dataclass
from typing import Protocol

# -----------------------------------------------------------------------------
# SINK CONTRACT
# -----------------------------------------------------------------------------

class Writer(Protocol):
    """Anything able to accept one finished, rendered record."""

    def write(self, data: bytes) -> int:
        ...


# -----------------------------------------------------------------------------
# RECORD
# -----------------------------------------------------------------------------

@dataclass
class Record:
    """
    One in-flight log event prior to and during rendering.

    Instances are pooled and recycled by the dispatcher; callers must not
    hold on to a record after it has been written.

    Attributes:
        prefix: Optional tag rendered in brackets before everything else.
        time: Precomputed timestamp, empty when no time flag is set.
        level: Severity code indexing the level-name table.
        show_level: Whether the level token is rendered.
        module: Caller module name, empty unless requested.
        file: Call site as "file:line", empty unless requested.
        msg: Fully formatted message.
        color: Wrap the rendered output in ANSI color codes.
    """
    prefix: str = ""
    time: str = ""
    level: int = 0
    show_level: bool = False
    module: str = ""
    file: str = ""
    msg: str = ""
    color: bool = False

    def reset(self) -> None:
        """Clear every field so a recycled record carries no stale state."""
        self.prefix = ""
        self.time = ""
        self.level = 0
        self.show_level = False
        self.module = ""
        self.file = ""
        self.msg = ""
        self.color = False
