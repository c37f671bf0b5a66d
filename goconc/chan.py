"""Thread-safe channels for passing values between threads.

A channel with capacity zero hands each value directly from a sender to a
receiver. A channel with a positive capacity buffers up to that many values.
"""

from __future__ import annotations

import threading
from collections import deque
from typing import Deque, Generic, Iterable, Iterator, List, Optional, Protocol, TypeVar

T = TypeVar("T")


class ChannelClosedError(RuntimeError):
    """Raised when sending on a closed channel or receiving from a drained one."""


class WouldBlockError(Exception):
    """Raised by a non-blocking operation that cannot complete immediately."""


class Waiter(Protocol):
    """Something that wants to hear when a channel may have become ready."""

    def notify(self) -> None:
        ...


class _Handoff(Generic[T]):
    """A value offered on an unbuffered channel, awaiting a receiver."""

    __slots__ = ("value",)

    def __init__(self, value: T) -> None:
        self.value = value


def _notify_all(waiters: Iterable[Waiter]) -> None:
    for waiter in waiters:
        waiter.notify()


class Chan(Generic[T]):
    """A channel carrying values of one type between threads."""

    def __init__(self, capacity: int = 0) -> None:
        if capacity < 0:
            raise ValueError("channel capacity must not be negative")
        self._capacity = capacity
        self._lock = threading.Lock()
        self._not_empty = threading.Condition(self._lock)
        self._not_full = threading.Condition(self._lock)
        self._closed = False
        self._queue: Deque[T] = deque()
        self._slot: Optional[_Handoff[T]] = None
        self._recv_waiters: List[Waiter] = []
        self._send_waiters: List[Waiter] = []

    @property
    def capacity(self) -> int:
        """The number of values the channel buffers; zero for unbuffered."""
        return self._capacity

    def send(self, value: T) -> None:
        """Send ``value``, blocking until it is buffered or received.

        Raises ChannelClosedError if the channel is or becomes closed before
        the value is delivered.
        """
        if self._capacity == 0:
            self._send_unbuffered(value)
            return
        with self._lock:
            while not self._closed and len(self._queue) >= self._capacity:
                self._not_full.wait()
            if self._closed:
                raise ChannelClosedError("send on closed channel")
            self._queue.append(value)
            self._not_empty.notify()
            waiters = list(self._recv_waiters)
        _notify_all(waiters)

    def _send_unbuffered(self, value: T) -> None:
        with self._lock:
            while not self._closed and self._slot is not None:
                self._not_full.wait()
            if self._closed:
                raise ChannelClosedError("send on closed channel")
            handoff = _Handoff(value)
            self._slot = handoff
            self._not_empty.notify()
            waiters = list(self._recv_waiters)
        _notify_all(waiters)
        with self._lock:
            while not self._closed and self._slot is handoff:
                self._not_full.wait()
            if self._slot is handoff:
                self._slot = None
                raise ChannelClosedError("send on closed channel")

    def recv(self) -> T:
        """Receive a value, blocking until one is available.

        Raises ChannelClosedError once the channel is closed and empty.
        """
        with self._lock:
            if self._capacity == 0:
                while not self._closed and self._slot is None:
                    self._not_empty.wait()
                if self._slot is None:
                    raise ChannelClosedError("receive on closed channel")
                value = self._slot.value
                self._slot = None
            else:
                while not self._closed and not self._queue:
                    self._not_empty.wait()
                if not self._queue:
                    raise ChannelClosedError("receive on closed channel")
                value = self._queue.popleft()
            self._not_full.notify_all()
            waiters = list(self._send_waiters)
        _notify_all(waiters)
        return value

    def try_send(self, value: T) -> None:
        """Send ``value`` without blocking.

        Raises ChannelClosedError if the channel is closed and WouldBlockError
        if the buffer is full or an unbuffered value is still pending.
        """
        with self._lock:
            if self._closed:
                raise ChannelClosedError("try_send on closed channel")
            if self._capacity == 0:
                if self._slot is not None:
                    raise WouldBlockError("channel busy")
                self._slot = _Handoff(value)
            else:
                if len(self._queue) >= self._capacity:
                    raise WouldBlockError("buffer full")
                self._queue.append(value)
            self._not_empty.notify()
            waiters = list(self._recv_waiters)
        _notify_all(waiters)

    def try_recv(self) -> T:
        """Receive a value without blocking.

        Raises ChannelClosedError if the channel is closed and empty, and
        WouldBlockError if it is open but has nothing to receive.
        """
        with self._lock:
            if self._capacity == 0:
                if self._slot is None:
                    if self._closed:
                        raise ChannelClosedError("channel closed")
                    raise WouldBlockError("no data to receive")
                value = self._slot.value
                self._slot = None
            else:
                if not self._queue:
                    if self._closed:
                        raise ChannelClosedError("channel closed")
                    raise WouldBlockError("buffer empty")
                value = self._queue.popleft()
            self._not_full.notify_all()
            waiters = list(self._send_waiters)
        _notify_all(waiters)
        return value

    def close(self) -> None:
        """Close the channel; closing twice has no further effect.

        Buffered values can still be received after closing.
        """
        with self._lock:
            if self._closed:
                return
            self._closed = True
            self._not_empty.notify_all()
            self._not_full.notify_all()
            waiters = self._recv_waiters + self._send_waiters
        _notify_all(waiters)

    def is_closed(self) -> bool:
        """Return True once the channel has been closed."""
        with self._lock:
            return self._closed

    def can_send(self) -> bool:
        """Return True if a send would not block right now."""
        with self._lock:
            if self._closed:
                return False
            if self._capacity == 0:
                return self._slot is None
            return len(self._queue) < self._capacity

    def can_recv(self) -> bool:
        """Return True if a receive would not block right now."""
        with self._lock:
            if self._capacity == 0:
                return self._slot is not None or self._closed
            return bool(self._queue) or self._closed

    def register_recv_waiter(self, waiter: Waiter) -> None:
        """Have ``waiter.notify()`` called whenever a value may be receivable."""
        with self._lock:
            self._recv_waiters.append(waiter)

    def unregister_recv_waiter(self, waiter: Waiter) -> None:
        """Stop notifying ``waiter`` about receivable values."""
        with self._lock:
            self._recv_waiters = [w for w in self._recv_waiters if w is not waiter]

    def register_send_waiter(self, waiter: Waiter) -> None:
        """Have ``waiter.notify()`` called whenever a send may succeed."""
        with self._lock:
            self._send_waiters.append(waiter)

    def unregister_send_waiter(self, waiter: Waiter) -> None:
        """Stop notifying ``waiter`` about send readiness."""
        with self._lock:
            self._send_waiters = [w for w in self._send_waiters if w is not waiter]

    def __iter__(self) -> Iterator[T]:
        """Yield received values until the channel is closed and drained."""
        while True:
            try:
                yield self.recv()
            except ChannelClosedError:
                return