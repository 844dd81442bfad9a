from __future__ import annotations

"""
Object Pooling.

A small thread-safe free list used by the dispatcher to recycle records
and byte buffers across calls. Each pooled instance has at most one
borrower at a time: ``get`` pops under a lock and ``put`` pushes back.
"""

import threading
from contextlib import contextmanager
from typing import Callable, Generic, Iterator, List, Optional, TypeVar

T = TypeVar("T")

DEFAULT_MAX_IDLE = 64


class ObjectPool(Generic[T]):
    """
    Free list of reusable objects of a single type.

    Args:
        factory: Builds a fresh object when the free list is empty.
        reset: Clears an object's state before it re-enters the free list.
        max_idle: Upper bound on idle objects retained; extras are discarded.
    """

    def __init__(
            self,
            factory: Callable[[], T],
            reset: Optional[Callable[[T], None]] = None,
            max_idle: int = DEFAULT_MAX_IDLE,
    ) -> None:
        self._factory = factory
        self._reset = reset
        self._max_idle = max_idle
        self._free: List[T] = []
        self._lock = threading.Lock()

    def get(self) -> T:
        with self._lock:
            if self._free:
                return self._free.pop()
        return self._factory()

    def put(self, obj: T) -> None:
        if self._reset is not None:
            self._reset(obj)
        with self._lock:
            if len(self._free) < self._max_idle:
                self._free.append(obj)

    @contextmanager
    def acquire(self) -> Iterator[T]:
        """Check out one object and return it on every exit path."""
        obj = self.get()
        try:
            yield obj
        finally:
            self.put(obj)

    def idle_count(self) -> int:
        with self._lock:
            return len(self._free)
