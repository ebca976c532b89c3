"""Clock sources and a context manager timer for measuring performance.

Instants are integer nanoseconds from ``time.perf_counter_ns``; durations
are non-negative integer nanoseconds.
"""

import time
from typing import Optional, Protocol

from ..errors import InvalidIntervalError

NANOS_PER_MILLI = 1_000_000
NANOS_PER_SECOND = 1_000_000_000


class ClockSource(Protocol):
    """Anything that can hand out monotonic instants."""

    def now(self) -> int:
        ...

    def elapsed(self, start: int, end: int) -> int:
        ...


class MonotonicClock:
    """Clock backed by the highest resolution monotonic counter."""

    def now(self) -> int:
        return time.perf_counter_ns()

    def elapsed(self, start: int, end: int) -> int:
        """
        Duration between two instants.

        Raises:
            InvalidIntervalError: if ``end`` precedes ``start``
        """
        if end < start:
            raise InvalidIntervalError(start, end)
        return end - start


default_clock = MonotonicClock()


class Timer:
    """Context manager for timing a single block."""

    def __init__(self, clock: Optional[ClockSource] = None):
        self.clock = clock or default_clock
        self.start_time: Optional[int] = None
        self.end_time: Optional[int] = None

    def __enter__(self) -> 'Timer':
        self.start_time = self.clock.now()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.end_time = self.clock.now()

    @property
    def elapsed_ns(self) -> int:
        """Get elapsed time in nanoseconds."""
        if self.start_time is None:
            raise ValueError("Timer not started")
        if self.end_time is None:
            raise ValueError("Timer not finished")
        return self.clock.elapsed(self.start_time, self.end_time)

    @property
    def elapsed_seconds(self) -> float:
        """Get elapsed time in seconds."""
        return self.elapsed_ns / NANOS_PER_SECOND

    @property
    def elapsed_ms(self) -> int:
        """Get elapsed time in milliseconds."""
        return self.elapsed_ns // NANOS_PER_MILLI
