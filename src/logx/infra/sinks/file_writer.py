from __future__ import annotations

"""
Rotating File Sink.

Appends rendered records to ``<dir>/<prefix>.<bucket>.log`` where the
bucket is the current time formatted at the configured granularity. The
file handle is opened lazily and switched when the bucket changes; a single
lock serializes the (handle, bucket) pair together with the write itself.

A daemon thread sweeps the target directory once at startup and then on a
fixed interval, deleting every regular file whose modification time is
older than the retention window. The sweep runs for the lifetime of the
process and has no stop control.
"""

import logging
import os
import threading
import time
from datetime import datetime, timedelta
from typing import BinaryIO, Callable, Optional

from logx.domain.constants import DEFAULT_SWEEP_INTERVAL
from logx.domain.errors import SinkUnavailableError
from logx.domain.options import FileOptions, prepare_file_options
from logx.infra.fs import ensure_dir, list_dir_files

logger = logging.getLogger(__name__)

Clock = Callable[[], datetime]


# -----------------------------------------------------------------------------
# FILE WRITER
# -----------------------------------------------------------------------------

class FileWriter:
    """
    Time-bucketed, self-pruning file sink.

    Args:
        options: Storage granularity, retention, directory and file prefix.
        sweep_interval: Seconds between two retention sweeps.
        start_sweeper: Launch the background retention thread.
        clock: Source of "now" for bucket keys and retention checks.
    """

    def __init__(
            self,
            options: Optional[FileOptions] = None,
            *,
            sweep_interval: float = DEFAULT_SWEEP_INTERVAL,
            start_sweeper: bool = True,
            clock: Clock = datetime.now,
    ) -> None:
        self._options = prepare_file_options(options)
        self._clock = clock
        self._lock = threading.Lock()
        self._file: Optional[BinaryIO] = None
        self._bucket = ""

        self._sweeper: Optional[threading.Thread] = None
        if start_sweeper:
            self._sweeper = threading.Thread(
                target=_sweep_forever,
                args=(self.clear_expired, sweep_interval),
                name="logx-retention-sweeper",
                daemon=True,
            )
            self._sweeper.start()

    @property
    def options(self) -> FileOptions:
        return self._options

    @property
    def bucket(self) -> str:
        """Bucket key of the currently open file, empty when none is open."""
        with self._lock:
            return self._bucket if self._file is not None else ""

    @property
    def current_path(self) -> Optional[str]:
        with self._lock:
            if self._file is None:
                return None
            return self._path_for(self._bucket)

    def write(self, data: bytes) -> int:
        """
        Append one rendered record to the file of the current bucket.

        Args:
            data: Finished record bytes, newline included.

        Returns:
            int: Number of bytes written.

        Raises:
            SinkUnavailableError: If the directory or file cannot be opened.
            OSError: If the write itself fails.
        """
        with self._lock:
            handle = self._current_file()
            handle.write(data)
            handle.flush()
        return len(data)

    def close(self) -> None:
        """Release the open handle. The next write reopens the current bucket."""
        with self._lock:
            self._close_file()

    def clear_expired(self, now: Optional[datetime] = None) -> int:
        """
        Run one retention sweep over the target directory.

        Every regular file is a candidate, whatever its name. A file is
        removed when ``mod_time + (max_days - 1) days`` is strictly before
        ``now``. Failure to delete one file does not stop the sweep; failure
        to list the directory ends this cycle.

        Args:
            now: Reference instant; defaults to the writer's clock.

        Returns:
            int: Number of files removed.
        """
        now = now or self._clock()
        directory = self._options.dir
        window = timedelta(days=self._options.max_days - 1)

        try:
            files = list_dir_files(directory)
        except OSError as e:
            logger.debug(f"Retention sweep skipped, cannot list '{directory}': {e}")
            return 0

        removed = 0
        for info in files:
            if info.mod_time + window >= now:
                continue
            try:
                os.remove(info.path)
                removed += 1
            except OSError as e:
                logger.debug(f"Retention sweep could not remove '{info.path}': {e}")

        if removed:
            logger.debug(f"Retention sweep removed {removed} file(s) from '{directory}'")
        return removed

    # -------------------------------------------------------------------------
    # PRIVATE HELPERS (caller holds the lock)
    # -------------------------------------------------------------------------

    def _current_file(self) -> BinaryIO:
        bucket = self._clock().strftime(self._options.storage_type.file_format)
        if self._file is not None and self._bucket != bucket:
            self._close_file()

        if self._file is None:
            directory = self._options.dir
            try:
                ensure_dir(directory)
                self._file = open(self._path_for(bucket), "ab")
            except OSError as e:
                raise SinkUnavailableError(directory, e) from e
            self._bucket = bucket

        return self._file

    def _close_file(self) -> None:
        if self._file is None:
            return
        try:
            self._file.close()
        finally:
            self._file = None

    def _path_for(self, bucket: str) -> str:
        return os.path.join(self._options.dir, f"{self._options.prefix}.{bucket}.log")


# -----------------------------------------------------------------------------
# RETENTION SCHEDULE
# -----------------------------------------------------------------------------

def _sweep_forever(sweep: Callable[[], int], interval: float) -> None:
    """Run ``sweep`` now and then every ``interval`` seconds, one cycle at a time."""
    while True:
        try:
            sweep()
        except Exception as e:
            # A failed cycle must not end the schedule.
            logger.error(f"Retention sweep cycle failed: {e}", exc_info=True)
        time.sleep(interval)
