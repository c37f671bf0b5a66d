"""Thread synchronisation primitives: wait groups, once, pools and read-write locks."""

from __future__ import annotations

import threading
from contextlib import contextmanager
from typing import Callable, Generic, Iterator, List, TypeVar

T = TypeVar("T")

Mutex = threading.Lock
Cond = threading.Condition


class WaitGroup:
    """Waits for a counted group of tasks to finish."""

    def __init__(self) -> None:
        self._cond = threading.Condition()
        self._count = 0

    def add(self, delta: int) -> None:
        """Add ``delta`` to the counter; raise ValueError if it would go negative."""
        with self._cond:
            new_count = self._count + delta
            if new_count < 0:
                raise ValueError("WaitGroup counter went negative")
            self._count = new_count
            if new_count == 0:
                self._cond.notify_all()

    def done(self) -> None:
        """Mark one task as finished."""
        self.add(-1)

    def wait(self) -> None:
        """Block until the counter reaches zero."""
        with self._cond:
            self._cond.wait_for(lambda: self._count == 0)


class Once:
    """Runs a function at most once, however many threads call it.

    If the function raises, it is not counted as run and a later call
    tries again.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._done = False

    def do(self, fn: Callable[[], object]) -> None:
        """Call ``fn`` unless a previous call has already completed."""
        if self._done:
            return
        with self._lock:
            if not self._done:
                fn()
                self._done = True


class Pool(Generic[T]):
    """A thread-safe stack of reusable objects."""

    def __init__(self, new_func: Callable[[], T]) -> None:
        self._new_func = new_func
        self._items: List[T] = []
        self._lock = threading.Lock()

    def get(self) -> T:
        """Take the most recently returned object, or create a new one."""
        with self._lock:
            if self._items:
                return self._items.pop()
        return self._new_func()

    def put(self, obj: T) -> None:
        """Return an object to the pool for later reuse."""
        with self._lock:
            self._items.append(obj)


class RWMutex:
    """A lock held by many readers at once or by a single writer.

    Waiting writers take precedence over new readers.
    """

    def __init__(self) -> None:
        self._cond = threading.Condition(threading.Lock())
        self._readers = 0
        self._writer = False
        self._waiting_writers = 0

    @contextmanager
    def read_lock(self) -> Iterator[None]:
        """Hold the lock shared for the duration of the ``with`` block."""
        with self._cond:
            while self._writer or self._waiting_writers:
                self._cond.wait()
            self._readers += 1
        try:
            yield
        finally:
            with self._cond:
                self._readers -= 1
                if self._readers == 0:
                    self._cond.notify_all()

    @contextmanager
    def write_lock(self) -> Iterator[None]:
        """Hold the lock exclusively for the duration of the ``with`` block."""
        with self._cond:
            self._waiting_writers += 1
            try:
                while self._writer or self._readers:
                    self._cond.wait()
            finally:
                self._waiting_writers -= 1
            self._writer = True
        try:
            yield
        finally:
            with self._cond:
                self._writer = False
                self._cond.notify_all()