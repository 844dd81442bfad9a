from __future__ import annotations

"""
Unit tests for the Process-Wide Default Logger.

Verifies:
1. Lazy, single construction with the documented defaults.
2. Concatenating and templated level functions.
3. Call sites pointing at user code despite the extra wrapper frame.
4. Output to the live stdout.
"""

import inspect
import threading
from typing import Any, List

import pytest

import logx
from logx import std
from logx.core.logger import Logger
from logx.domain.constants import END_COLOR, LEVEL_COLORS, STD_FLAGS, Level, LogFlag
from logx.domain.errors import LogPanic
from logx.infra.sinks.stream_writer import StreamWriter


@pytest.fixture(autouse=True)
def fresh_default(monkeypatch: pytest.MonkeyPatch) -> None:
    """Each test starts without a default logger."""
    monkeypatch.setattr(std, "_std", None)


@pytest.fixture
def quiet_default(memory_writer: Any) -> Logger:
    """Default logger redirected to memory, level and message only."""
    return std.set_writer(memory_writer).set_flags(LogFlag.LEVEL).set_color(False)

# -----------------------------------------------------------------------------
# CONSTRUCTION
# -----------------------------------------------------------------------------

def test_defaults() -> None:
    """TC-01: The default logger shows everything, in color, to stdout."""
    log = std.get_std()

    assert log.level == Level.TEST
    assert log.color is True
    assert log.flags == STD_FLAGS
    assert log.get_call_depth() == 3
    assert isinstance(log.writer, StreamWriter)


def test_singleton() -> None:
    """TC-01: Every access returns the same instance."""
    assert std.get_std() is std.get_std()
    assert std.set_prefix("svc") is std.get_std()


def test_concurrent_first_use_builds_once() -> None:
    """TC-01: Racing first calls still observe a single instance."""
    seen: List[Logger] = []
    barrier = threading.Barrier(8)

    def grab() -> None:
        barrier.wait()
        seen.append(std.get_std())

    threads = [threading.Thread(target=grab) for _ in range(8)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    assert len({id(log) for log in seen}) == 1

# -----------------------------------------------------------------------------
# LEVEL FUNCTIONS
# -----------------------------------------------------------------------------

def test_plain_functions_concatenate(memory_writer: Any, quiet_default: Logger) -> None:
    """TC-02: Values are joined back to back, without separators."""
    logx.info("user ", "ana", " has ", 3, " sessions")
    logx.warn("100% literal")

    assert memory_writer.lines == ["[INFO] user ana has 3 sessions", "[WARN] 100% literal"]


def test_template_functions(memory_writer: Any, quiet_default: Logger) -> None:
    """TC-02: The *f variants apply printf-style substitution."""
    logx.infof("user: %s", "ana")
    logx.errorf("%d failures", 2)

    assert memory_writer.lines == ["[INFO] user: ana", "[ERRO] 2 failures"]


def test_test_level_functions(memory_writer: Any, quiet_default: Logger) -> None:
    """TC-02: The TEST level is reachable at package scope in both forms."""
    std.test("sample ", 1)
    std.testf("trace %s", "on")
    logx.set_level(Level.DEBUG)
    std.test("hidden")

    assert memory_writer.lines == ["[TEST] sample 1", "[TEST] trace on"]


def test_level_filter(memory_writer: Any, quiet_default: Logger) -> None:
    """TC-02: The default logger honors its minimum level."""
    logx.set_level(Level.WARN)
    logx.debug("hidden")
    logx.noticef("%s", "hidden")
    logx.error("shown")

    assert memory_writer.lines == ["[ERRO] shown"]


def test_panicf_raises(memory_writer: Any, quiet_default: Logger) -> None:
    """TC-02: The default PANIC still writes before raising."""
    with pytest.raises(LogPanic):
        logx.panicf("lost %s", "quorum")

    assert memory_writer.lines == ["[PANI] lost quorum"]


def test_fatal_exits(memory_writer: Any, quiet_default: Logger) -> None:
    """TC-02: The default FATAL writes before exiting."""
    with pytest.raises(SystemExit):
        logx.fatal("bye")

    assert memory_writer.lines == ["[FATA] bye"]

# -----------------------------------------------------------------------------
# CALL SITE AND STREAM OUTPUT
# -----------------------------------------------------------------------------

def test_call_site_points_at_user_code(memory_writer: Any, quiet_default: Logger) -> None:
    """TC-03: The extra wrapper frame is skipped when resolving the caller."""
    logx.set_flags(LogFlag.SHORT_FILE)
    expected_line = inspect.currentframe().f_lineno + 1
    logx.info("here")

    assert memory_writer.lines == [f"test_default_logger.py:{expected_line}: here"]


def test_writes_to_stdout_in_color(capsys: pytest.CaptureFixture) -> None:
    """TC-04: Without configuration records go to stdout, colored."""
    logx.set_flags(LogFlag.LEVEL)
    logx.notice("ready")

    out = capsys.readouterr().out
    assert out == f"{LEVEL_COLORS[Level.NOTICE]}[NOTI] ready{END_COLOR}\n"
