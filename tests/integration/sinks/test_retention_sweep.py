from __future__ import annotations

"""
Integration tests for the Retention Sweep.

Verifies:
1. The age cut-off relative to the retention window.
2. Every regular file is a candidate; subdirectories are never touched.
3. Per-file failures do not abort the cycle.
4. An unreadable directory ends the cycle quietly.
"""

import os
from datetime import datetime, timedelta
from pathlib import Path
from typing import Any

import pytest

from logx.domain.options import FileOptions
from logx.infra.sinks import file_writer as file_writer_module
from logx.infra.sinks.file_writer import FileWriter

NOW = datetime(2024, 3, 10, 12, 0, 0)


def _aged(path: Path, age: timedelta) -> Path:
    path.write_text("data")
    stamp = (NOW - age).timestamp()
    os.utime(path, (stamp, stamp))
    return path


def _writer(directory: Path, max_days: int = 7) -> FileWriter:
    return FileWriter(
        FileOptions(dir=str(directory), max_days=max_days),
        start_sweeper=False,
        clock=lambda: NOW,
    )


def test_files_older_than_window_are_removed(tmp_path: Path) -> None:
    """TC-01: With seven days retention an eight-day-old file goes, a five-day-old stays."""
    old = _aged(tmp_path / "app.2024-03-02.log", timedelta(days=8))
    recent = _aged(tmp_path / "app.2024-03-05.log", timedelta(days=5))

    removed = _writer(tmp_path).clear_expired()

    assert removed == 1
    assert not old.exists()
    assert recent.exists()


def test_file_exactly_on_window_edge_survives(tmp_path: Path) -> None:
    """TC-01: Removal requires the expiry instant to be strictly in the past."""
    edge = _aged(tmp_path / "edge.log", timedelta(days=6))
    past_edge = _aged(tmp_path / "past.log", timedelta(days=6, seconds=1))

    _writer(tmp_path).clear_expired()

    assert edge.exists()
    assert not past_edge.exists()


def test_explicit_reference_instant(tmp_path: Path) -> None:
    """TC-01: A caller-supplied instant overrides the writer clock."""
    target = _aged(tmp_path / "app.log", timedelta(days=2))

    assert _writer(tmp_path).clear_expired(now=NOW) == 0
    assert _writer(tmp_path).clear_expired(now=NOW + timedelta(days=10)) == 1
    assert not target.exists()


def test_any_old_file_is_removed_but_directories_stay(tmp_path: Path) -> None:
    """TC-02: Names are not filtered; subdirectories are skipped."""
    unrelated = _aged(tmp_path / "notes.txt", timedelta(days=30))
    subdir = tmp_path / "archive"
    subdir.mkdir()
    stamp = (NOW - timedelta(days=30)).timestamp()
    os.utime(subdir, (stamp, stamp))
    nested = _aged(subdir / "nested.log", timedelta(days=30))

    _writer(tmp_path).clear_expired()

    assert not unrelated.exists()
    assert subdir.is_dir()
    assert nested.exists()


def test_failed_removal_does_not_stop_sweep(
        tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    """TC-03: A file that cannot be deleted is skipped and the rest still go."""
    locked = _aged(tmp_path / "locked.log", timedelta(days=20))
    others = [_aged(tmp_path / f"old{i}.log", timedelta(days=20)) for i in range(3)]
    real_remove = os.remove

    def flaky_remove(path: Any) -> None:
        if os.path.basename(path) == "locked.log":
            raise PermissionError("in use")
        real_remove(path)

    monkeypatch.setattr(file_writer_module.os, "remove", flaky_remove)

    removed = _writer(tmp_path).clear_expired()

    assert removed == 3
    assert locked.exists()
    assert not any(p.exists() for p in others)


def test_missing_directory_ends_cycle(tmp_path: Path) -> None:
    """TC-04: An absent directory is not an error; nothing is removed."""
    assert _writer(tmp_path / "never-created").clear_expired() == 0


def test_retention_option_sets_window(tmp_path: Path) -> None:
    """TC-01: The window follows max_days."""
    target = _aged(tmp_path / "app.log", timedelta(days=2, hours=1))

    assert _writer(tmp_path, max_days=30).clear_expired() == 0
    assert _writer(tmp_path, max_days=2).clear_expired() == 1
    assert not target.exists()
