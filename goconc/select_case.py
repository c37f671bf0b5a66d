"""Waiting on several channel operations at once and running the one that is ready."""

from __future__ import annotations

import itertools
import random
import threading
from abc import ABC, abstractmethod
from typing import Any, Callable, Generic, List, Optional, TypeVar

from goconc.chan import Chan, ChannelClosedError, WouldBlockError

T = TypeVar("T")

_case_ids = itertools.count(1)
_select_ids = itertools.count(1)


class SelectCase(ABC):
    """One channel operation that a select statement may choose to run."""

    def __init__(self) -> None:
        self.case_id = next(_case_ids)

    @abstractmethod
    def is_ready(self) -> bool:
        """Return True if the operation can run now without blocking."""

    @abstractmethod
    def execute(self) -> None:
        """Perform the operation and call its callback."""

    @abstractmethod
    def register_with(self, sel: "Select") -> None:
        """Ask the underlying channel to notify ``sel`` on state changes."""

    @abstractmethod
    def unregister(self) -> None:
        """Stop notifications to the select this case was registered with."""


class RecvCase(SelectCase, Generic[T]):
    """Receives from a channel; the callback gets the value, or None once closed."""

    def __init__(self, ch: Chan[T], fn: Callable[[Optional[T]], Any]) -> None:
        super().__init__()
        self._chan = ch
        self._fn = fn
        self._sel: Optional[Select] = None

    def is_ready(self) -> bool:
        return self._chan.can_recv()

    def execute(self) -> None:
        try:
            value = self._chan.try_recv()
        except ChannelClosedError:
            self._fn(None)
            return
        except WouldBlockError:
            if self._chan.is_closed():
                self._fn(None)
                return
            # Another receiver took the value first; wait for the next one.
            try:
                value = self._chan.recv()
            except ChannelClosedError:
                self._fn(None)
                return
        self._fn(value)

    def register_with(self, sel: "Select") -> None:
        self._sel = sel
        self._chan.register_recv_waiter(sel)

    def unregister(self) -> None:
        if self._sel is not None:
            self._chan.unregister_recv_waiter(self._sel)
            self._sel = None


class SendCase(SelectCase, Generic[T]):
    """Sends a value to a channel; the callback is told whether it succeeded."""

    def __init__(self, ch: Chan[T], value: T, fn: Callable[[bool], Any]) -> None:
        super().__init__()
        self._chan = ch
        self._value = value
        self._fn = fn
        self._sel: Optional[Select] = None

    def is_ready(self) -> bool:
        return self._chan.can_send()

    def execute(self) -> None:
        try:
            self._chan.try_send(self._value)
        except (ChannelClosedError, WouldBlockError):
            self._fn(False)
        else:
            self._fn(True)

    def register_with(self, sel: "Select") -> None:
        self._sel = sel
        self._chan.register_send_waiter(sel)

    def unregister(self) -> None:
        if self._sel is not None:
            self._chan.unregister_send_waiter(self._sel)
            self._sel = None


class DefaultCase(SelectCase):
    """Runs when no other case is ready."""

    def __init__(self, fn: Optional[Callable[[], Any]]) -> None:
        super().__init__()
        self._fn = fn

    def is_ready(self) -> bool:
        return True

    def execute(self) -> None:
        if self._fn is not None:
            self._fn()

    def register_with(self, sel: "Select") -> None:
        pass

    def unregister(self) -> None:
        pass


class Select:
    """Blocks until one of its cases can proceed, then runs exactly one.

    Among several ready cases one is chosen at random. A default case runs
    only when nothing else is ready; without one, ``run`` waits.
    """

    def __init__(self) -> None:
        self.select_id = next(_select_ids)
        self._cases: List[SelectCase] = []
        self._cond = threading.Condition()
        self._ready = False
        self._done = False

    def add_case(self, case: Optional[SelectCase]) -> None:
        """Add a case; None is ignored."""
        if case is not None:
            self._cases.append(case)

    def run(self) -> None:
        """Wait for a case to become ready and execute it."""
        with self._cond:
            self._done = False
        for case in self._cases:
            case.register_with(self)
        try:
            self._run_loop()
        finally:
            self._cleanup()

    def _run_loop(self) -> None:
        default: Optional[SelectCase] = next(
            (c for c in self._cases if isinstance(c, DefaultCase)), None
        )
        while True:
            with self._cond:
                self._ready = False
            ready = [
                c for c in self._cases
                if not isinstance(c, DefaultCase) and c.is_ready()
            ]
            if ready:
                random.choice(ready).execute()
                return
            if default is not None:
                default.execute()
                return
            with self._cond:
                self._cond.wait_for(lambda: self._ready)

    def notify(self) -> None:
        """Wake the select so it re-checks its cases."""
        with self._cond:
            if not self._done:
                self._ready = True
                self._cond.notify()

    def _cleanup(self) -> None:
        with self._cond:
            self._done = True
        for case in self._cases:
            case.unregister()


def recv(ch: Chan[T], fn: Callable[[Optional[T]], Any]) -> RecvCase[T]:
    """Make a case that receives from ``ch`` and passes the result to ``fn``."""
    return RecvCase(ch, fn)


def send(ch: Chan[T], value: T, fn: Callable[[bool], Any]) -> SendCase[T]:
    """Make a case that sends ``value`` on ``ch`` and reports success to ``fn``."""
    return SendCase(ch, value, fn)


def default_case(fn: Optional[Callable[[], Any]]) -> DefaultCase:
    """Make a case that runs ``fn`` when no other case is ready."""
    return DefaultCase(fn)


def select(*args: Optional[SelectCase]) -> None:
    """Run a select over the given cases."""
    sel = Select()
    for case in args:
        sel.add_case(case)
    sel.run()