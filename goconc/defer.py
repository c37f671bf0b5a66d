"""Deferred cleanup calls that run when a scope is left."""

from __future__ import annotations

from typing import Any, Callable, List, Optional, Tuple


class Defer:
    """Collects callables and runs them, last registered first, on exit.

    Use as a context manager; every deferred call runs when the ``with``
    block is left, whether normally or through an exception.
    """

    def __init__(self, fn: Optional[Callable[[], Any]] = None) -> None:
        self._calls: List[Tuple[Callable[..., Any], tuple, dict]] = []
        if fn is not None:
            self.defer(fn)

    def defer(self, fn: Callable[..., Any], *args: Any, **kwargs: Any) -> None:
        """Register ``fn(*args, **kwargs)`` to run when the scope is left."""
        self._calls.append((fn, args, kwargs))

    def run(self) -> None:
        """Run all pending calls in reverse order of registration.

        Every call runs even if an earlier one raises; the first exception
        raised is re-raised once all have run.
        """
        first_error: Optional[BaseException] = None
        while self._calls:
            fn, args, kwargs = self._calls.pop()
            try:
                fn(*args, **kwargs)
            except BaseException as exc:  # noqa: BLE001 - re-raised below
                if first_error is None:
                    first_error = exc
        if first_error is not None:
            raise first_error

    def __enter__(self) -> "Defer":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.run()