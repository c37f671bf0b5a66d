"""A value paired with an optional error, for code that reports failure as data."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, Optional, TypeVar

T = TypeVar("T")


@dataclass
class Result(Generic[T]):
    """Holds either a successful value or the error that prevented it.

    A result with no error is a success. It is truthy exactly when it
    succeeded. A result with no value stands for an operation that returns
    nothing but may fail.
    """

    value: Optional[T] = None
    err: Optional[BaseException] = None

    def ok(self) -> bool:
        """Return True if no error is held."""
        return self.err is None

    def failed(self) -> bool:
        """Return True if an error is held."""
        return self.err is not None

    def unwrap_or(self, fallback: T) -> T:
        """Return the value on success, otherwise ``fallback``."""
        return fallback if self.err is not None else self.value  # type: ignore[return-value]

    def __bool__(self) -> bool:
        return self.ok()