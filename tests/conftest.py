from __future__ import annotations

"""
Global Pytest Configuration and Fixtures.

This module sets up the testing environment, including:
1. Path manipulation to ensure the 'src' directory is importable.
2. Shared fixtures: an in-memory writer and a controllable clock.
"""

import os
import sys
import threading
from datetime import datetime
from typing import List

import pytest

# -----------------------------------------------------------------------------
# Path Configuration
# -----------------------------------------------------------------------------
_SRC_PATH = os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "src"))
if _SRC_PATH not in sys.path:
    sys.path.insert(0, _SRC_PATH)


# -----------------------------------------------------------------------------
# Test Doubles
# -----------------------------------------------------------------------------
class MemoryWriter:
    """Collects every write in order; safe for concurrent callers."""

    def __init__(self) -> None:
        self.chunks: List[bytes] = []
        self._lock = threading.Lock()

    def write(self, data: bytes) -> int:
        with self._lock:
            self.chunks.append(data)
        return len(data)

    @property
    def lines(self) -> List[str]:
        return [c.decode("utf-8").rstrip("\n") for c in self.chunks]


class FailingWriter:
    """Raises the configured error on every write."""

    def __init__(self, error: BaseException) -> None:
        self.error = error
        self.calls = 0

    def write(self, data: bytes) -> int:
        self.calls += 1
        raise self.error


class ManualClock:
    """Clock returning a settable instant."""

    def __init__(self, now: datetime) -> None:
        self.now = now

    def __call__(self) -> datetime:
        return self.now


# -----------------------------------------------------------------------------
# Shared Fixtures
# -----------------------------------------------------------------------------
@pytest.fixture
def memory_writer() -> MemoryWriter:
    """
    Return an empty in-memory writer.

    Returns:
        MemoryWriter: Sink recording rendered records as bytes.
    """
    return MemoryWriter()


@pytest.fixture
def manual_clock() -> ManualClock:
    """
    Return a clock frozen at 2024-03-05 09:07:03.
    """
    return ManualClock(datetime(2024, 3, 5, 9, 7, 3))


@pytest.fixture
def failing_writer() -> FailingWriter:
    """
    Return a writer whose every write fails like a full disk.
    """
    return FailingWriter(OSError("No space left on device"))
