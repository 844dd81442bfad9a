from __future__ import annotations

"""
Exception Taxonomy.

Separates programmer errors (bad level index), unrecoverable sink
acquisition failures and the deliberate control transfer raised by
``Logger.panic``. Per-write I/O failures are plain ``OSError`` and are
not represented here.
"""


class LogxError(Exception):
    """Base class for every error raised by this package."""


class InvalidLevelError(LogxError, ValueError):
    """A record carries a level outside the level-name table."""

    def __init__(self, level: int) -> None:
        super().__init__(f"Level index out of range: {level!r}")
        self.level = level


class SinkUnavailableError(LogxError, RuntimeError):
    """The log destination could not be created or opened."""

    def __init__(self, target: str, cause: BaseException) -> None:
        super().__init__(f"Log target unavailable at '{target}': {cause}")
        self.target = target


class LogPanic(LogxError, RuntimeError):
    """Raised by ``Logger.panic`` after the record has been written."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message
