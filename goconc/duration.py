"""An integer count of nanoseconds with unit helpers and arithmetic."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import timedelta
from typing import ClassVar, Union

NANOSECOND = 1
MICROSECOND = 1000 * NANOSECOND
MILLISECOND = 1000 * MICROSECOND
SECOND = 1000 * MILLISECOND
MINUTE = 60 * SECOND
HOUR = 60 * MINUTE


def _trunc_div(a: int, b: int) -> int:
    """Integer division rounding toward zero."""
    q = abs(a) // abs(b)
    return q if (a < 0) == (b < 0) else -q


@dataclass(frozen=True, order=True)
class Duration:
    """An elapsed time measured in whole nanoseconds."""

    ns: int = 0

    NANOSECOND: ClassVar[int] = NANOSECOND
    MICROSECOND: ClassVar[int] = MICROSECOND
    MILLISECOND: ClassVar[int] = MILLISECOND
    SECOND: ClassVar[int] = SECOND
    MINUTE: ClassVar[int] = MINUTE
    HOUR: ClassVar[int] = HOUR

    def nanoseconds(self) -> int:
        return self.ns

    def microseconds(self) -> int:
        return _trunc_div(self.ns, MICROSECOND)

    def milliseconds(self) -> int:
        return _trunc_div(self.ns, MILLISECOND)

    def seconds(self) -> float:
        return self.ns / SECOND

    def minutes(self) -> float:
        return self.ns / MINUTE

    def hours(self) -> float:
        return self.ns / HOUR

    def to_timedelta(self) -> timedelta:
        """Convert to a timedelta, dropping precision finer than a microsecond."""
        return timedelta(microseconds=self.microseconds())

    def __add__(self, other: "Duration") -> "Duration":
        if not isinstance(other, Duration):
            return NotImplemented
        return Duration(self.ns + other.ns)

    def __sub__(self, other: "Duration") -> "Duration":
        if not isinstance(other, Duration):
            return NotImplemented
        return Duration(self.ns - other.ns)

    def __mul__(self, n: int) -> "Duration":
        if not isinstance(n, int) or isinstance(n, bool):
            return NotImplemented
        return Duration(self.ns * n)

    __rmul__ = __mul__

    def __truediv__(self, n: int) -> "Duration":
        if not isinstance(n, int) or isinstance(n, bool):
            return NotImplemented
        if n == 0:
            raise ZeroDivisionError("duration division by zero")
        return Duration(_trunc_div(self.ns, n))


def _scaled(n: Union[int, float], unit: int) -> Duration:
    if isinstance(n, float):
        return Duration(int(n * unit))
    return Duration(n * unit)


def nanoseconds(n: int) -> Duration:
    return Duration(n)


def microseconds(n: int) -> Duration:
    return Duration(n * MICROSECOND)


def milliseconds(n: int) -> Duration:
    return Duration(n * MILLISECOND)


def seconds(n: Union[int, float]) -> Duration:
    return _scaled(n, SECOND)


def minutes(n: Union[int, float]) -> Duration:
    return _scaled(n, MINUTE)


def hours(n: Union[int, float]) -> Duration:
    return _scaled(n, HOUR)