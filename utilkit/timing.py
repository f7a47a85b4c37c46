"""Wall-clock timing of code sections with an HH:MM:SS:mmm.uuu breakdown."""

from __future__ import annotations

import time
from dataclasses import dataclass, field
from types import TracebackType

__all__ = ["TimeVal", "Timing", "timeval_diff"]

_USEC_PER_SEC = 1_000_000


def _trunc_divmod(a: int, b: int) -> tuple[int, int]:
    """Integer division that truncates toward zero, as C does."""
    q = abs(a) // b
    if a < 0:
        q = -q
    return q, a - q * b


@dataclass(frozen=True)
class TimeVal:
    """A point in time as whole seconds plus microseconds."""

    tv_sec: int = 0
    tv_usec: int = 0

    @staticmethod
    def now() -> TimeVal:
        """Return the current wall-clock time."""
        sec, usec = divmod(time.time_ns() // 1000, _USEC_PER_SEC)
        return TimeVal(sec, usec)


def _normalized_diff(end_time: TimeVal, start_time: TimeVal) -> TimeVal:
    sec = end_time.tv_sec - start_time.tv_sec
    usec = end_time.tv_usec - start_time.tv_usec
    while usec < 0:
        usec += _USEC_PER_SEC
        sec -= 1
    return TimeVal(sec, usec)


def timeval_diff(end_time: TimeVal, start_time: TimeVal) -> int:
    """Return the number of microseconds from ``start_time`` to ``end_time``."""
    diff = _normalized_diff(end_time, start_time)
    return _USEC_PER_SEC * diff.tv_sec + diff.tv_usec


@dataclass
class Timing:
    """Times a section of code; usable as a context manager."""

    start_time: TimeVal = field(default_factory=TimeVal)
    end_time: TimeVal = field(default_factory=TimeVal)
    timing_double: float = 0.0
    hours: int = 0
    minutes: int = 0
    seconds: int = 0
    milliseconds: int = 0
    microseconds: int = 0

    def start(self) -> None:
        """Begin timing."""
        self.start_time = TimeVal.now()
        self.end_time = TimeVal()
        self.timing_double = 0.0

    def end(self) -> None:
        """Stop timing and compute the elapsed time."""
        self.end_time = TimeVal.now()
        self.calc_difference()

    def calc_difference(self) -> None:
        """Recompute the elapsed time from the stored start and end."""
        diff = _normalized_diff(self.end_time, self.start_time)
        self.timing_double = diff.tv_sec + diff.tv_usec / 1_000_000.0
        hours, rest = _trunc_divmod(diff.tv_sec, 3600)
        minutes, seconds = _trunc_divmod(rest, 60)
        milliseconds, microseconds = _trunc_divmod(diff.tv_usec, 1000)
        self.hours = hours
        self.minutes = minutes
        self.seconds = seconds
        self.milliseconds = milliseconds
        self.microseconds = microseconds

    def format_time_diff(self) -> str:
        """Return the breakdown as ``HH:MM:SS:mmm.uuu``."""
        return (
            f"{self.hours:02d}:{self.minutes:02d}:{self.seconds:02d}:"
            f"{self.milliseconds:03d}.{self.microseconds:03d}"
        )

    def __enter__(self) -> Timing:
        self.start()
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.end()