from __future__ import annotations

"""
Standard Stream Sink.

Adapts a text or binary stream (stdout by default) to the byte-oriented
writer contract used by the dispatcher.
"""

import io
import sys
import threading
from typing import IO, Any, Optional


class StreamWriter:
    """
    Writes rendered records to a stream.

    Text streams backed by a binary buffer receive the raw bytes through that
    buffer; text streams without one receive the UTF-8 decoded record. Any
    other stream is assumed to accept bytes.

    Args:
        stream: Target stream. When omitted, ``sys.stdout`` is looked up at
            every write so redirections made after construction are honored.
    """

    def __init__(self, stream: Optional[IO[Any]] = None) -> None:
        self._stream = stream
        self._lock = threading.Lock()

    @property
    def stream(self) -> IO[Any]:
        return self._stream if self._stream is not None else sys.stdout

    def write(self, data: bytes) -> int:
        target = self.stream
        with self._lock:
            if isinstance(target, io.TextIOBase):
                buffer = getattr(target, "buffer", None)
                if buffer is None:
                    target.write(data.decode("utf-8", errors="replace"))
                else:
                    # Pending text must reach the buffer before our bytes.
                    target.flush()
                    buffer.write(data)
                    buffer.flush()
            else:
                target.write(data)
            target.flush()
        return len(data)
