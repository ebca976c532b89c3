"""Duration and throughput arithmetic."""

from dataclasses import dataclass
from typing import Optional

from .timing import NANOS_PER_MILLI, NANOS_PER_SECOND, ClockSource, default_clock


@dataclass(frozen=True)
class MetricsResult:
    """Elapsed milliseconds and, when it is defined, the rate per second."""
    elapsed_ms: int
    rate_per_sec: Optional[float]


def _as_count(count) -> int:
    value = int(count)
    if value < 0:
        raise ValueError(f"Count must be non-negative, got {count!r}")
    return value


class MetricsCalculator:
    """Turns raw nanosecond intervals into milliseconds and rates."""

    def __init__(self, clock: Optional[ClockSource] = None):
        self.clock = clock or default_clock

    def to_millis(self, duration: int) -> int:
        """Whole milliseconds in ``duration``, sub-millisecond remainder floored."""
        return duration // NANOS_PER_MILLI

    def rate(self, count, duration: int) -> float:
        """
        Units per second over ``duration``.

        A zero duration yields ``0.0`` rather than dividing by zero.
        """
        count = _as_count(count)
        if duration <= 0:
            return 0.0
        return count / (duration / NANOS_PER_SECOND)

    def measure(self, start: int, end: int, count=None) -> MetricsResult:
        """
        Compute both figures for the interval ``start`` to ``end``.

        Args:
            start: Instant the interval began
            end: Instant the interval finished
            count: Units processed, if a rate is wanted

        Returns:
            MetricsResult whose ``rate_per_sec`` is None when count is
            missing or zero, or no time has elapsed
        """
        duration = self.clock.elapsed(start, end)
        rate_per_sec = None
        if count is not None and _as_count(count) > 0 and duration > 0:
            rate_per_sec = self.rate(count, duration)
        return MetricsResult(elapsed_ms=self.to_millis(duration), rate_per_sec=rate_per_sec)


_default_calculator = MetricsCalculator()


def to_millis(duration: int) -> int:
    return _default_calculator.to_millis(duration)


def rate(count, duration: int) -> float:
    return _default_calculator.rate(count, duration)
