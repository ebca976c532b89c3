"""
Named timers for marking points in time and measuring work between them.

A :class:`TimerRegistry` maps a caller-chosen key (``"InsertingRecords"``)
to the one interval currently tracked under it. Typical use::

    timers = TimerRegistry.started("InsertingRecords")
    insert_rows(rows)
    timers.end("InsertingRecords")
    say(f"Inserted {len(rows)} rows in {timers.duration_ms('InsertingRecords')} ms "
        f"({timers.rate_per_second('InsertingRecords', len(rows)):.1f}/s)")

Until ``end`` is called a timer is running and queries measure time since
``create``. ``end`` freezes the interval, so later queries keep reporting
the same duration however long after the work they run.
"""

import logging
import threading
from contextlib import contextmanager
from dataclasses import dataclass, replace
from typing import Iterator, List, Optional

from .errors import UnknownKeyError
from .utils.logging import log_timing
from .utils.metrics import MetricsCalculator, MetricsResult
from .utils.timing import ClockSource, default_clock

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TimerHandle:
    """One started interval."""
    key: str
    started_at: int
    ended_at: Optional[int] = None

    @property
    def is_running(self) -> bool:
        return self.ended_at is None


class TimerRegistry:
    """Caller-owned table of named timers, safe to share between threads."""

    def __init__(
        self,
        clock: Optional[ClockSource] = None,
        calculator: Optional[MetricsCalculator] = None,
    ):
        self.clock = clock or default_clock
        self.calculator = calculator or MetricsCalculator(self.clock)
        self._timers = {}
        self._lock = threading.RLock()

    @classmethod
    def started(cls, key: str, clock: Optional[ClockSource] = None) -> 'TimerRegistry':
        """Build a registry with ``key`` already running."""
        registry = cls(clock=clock)
        registry.create(key)
        return registry

    def create(self, key: str) -> TimerHandle:
        """
        Start timing ``key`` now.

        A live timer under the same key is replaced and its interval is lost.
        """
        with self._lock:
            handle = TimerHandle(key=key, started_at=self.clock.now())
            previous = self._timers.get(key)
            self._timers[key] = handle
        if previous is not None:
            logger.debug(f"Replaced timer '{key}' started at {previous.started_at}")
        else:
            logger.debug(f"Created timer '{key}'")
        return handle

    add = create

    def end(self, key: str) -> int:
        """
        Freeze the interval for ``key`` at the current instant.

        Ending an already ended timer moves its end to now. The entry is
        left untouched when the interval would end before it starts.

        Returns:
            Frozen duration in milliseconds
        """
        with self._lock:
            now = self.clock.now()
            handle = self._lookup(key)
            duration = self.clock.elapsed(handle.started_at, now)
            self._timers[key] = replace(handle, ended_at=now)
        duration_ms = self.calculator.to_millis(duration)
        logger.debug(f"Ended timer '{key}' after {duration_ms} ms")
        return duration_ms

    def get(self, key: str) -> TimerHandle:
        with self._lock:
            return self._lookup(key)

    def duration_ms(self, key: str) -> int:
        """Milliseconds elapsed on ``key``, floored."""
        handle, end = self._snapshot(key)
        return self.calculator.to_millis(self.clock.elapsed(handle.started_at, end))

    def rate_per_second(self, key: str, count) -> float:
        """
        Units per second for ``count`` units processed under ``key``.

        Returns ``0.0`` when no time has elapsed.
        """
        handle, end = self._snapshot(key)
        return self.calculator.rate(count, self.clock.elapsed(handle.started_at, end))

    def metrics(self, key: str, count=None) -> MetricsResult:
        handle, end = self._snapshot(key)
        return self.calculator.measure(handle.started_at, end, count)

    @contextmanager
    def time(self, key: str) -> Iterator[TimerHandle]:
        """Create ``key`` on entry and end it on exit, even on error."""
        handle = self.create(key)
        try:
            yield handle
        finally:
            self.end(key)

    def log(self, key: str, target: logging.Logger, count=None) -> MetricsResult:
        """Emit a structured timing record for ``key`` to ``target``."""
        handle, end = self._snapshot(key)
        result = self.calculator.measure(handle.started_at, end, count)
        log_timing(target, {
            "timer": key,
            "elapsed_ms": result.elapsed_ms,
            "rate_per_sec": result.rate_per_sec,
            "count": count,
            "running": handle.is_running,
        })
        return result

    def keys(self) -> List[str]:
        with self._lock:
            return list(self._timers)

    def __contains__(self, key: object) -> bool:
        with self._lock:
            return key in self._timers

    def __len__(self) -> int:
        with self._lock:
            return len(self._timers)

    def _lookup(self, key: str) -> TimerHandle:
        # caller holds the lock
        try:
            return self._timers[key]
        except KeyError:
            raise UnknownKeyError(key) from None

    def _snapshot(self, key: str):
        """The entry for ``key`` and the instant its interval ends at."""
        with self._lock:
            handle = self._lookup(key)
            if handle.ended_at is not None:
                return handle, handle.ended_at
            return handle, self.clock.now()
