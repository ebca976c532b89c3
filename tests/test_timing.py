"""Tests for clock sources and the context manager timer."""

import time

import pytest

from wolves_cli_helper.errors import InvalidIntervalError
from wolves_cli_helper.utils.timing import MonotonicClock, Timer


class TestMonotonicClock:
    """Test the perf_counter backed clock."""

    def test_now_never_goes_backward(self):
        """Successive reads are non-decreasing."""
        clock = MonotonicClock()
        readings = [clock.now() for _ in range(1000)]
        assert readings == sorted(readings)

    def test_elapsed(self):
        clock = MonotonicClock()
        assert clock.elapsed(100, 350) == 250
        assert clock.elapsed(5, 5) == 0

    def test_elapsed_reversed_interval(self):
        """An end before the start is rejected."""
        clock = MonotonicClock()
        with pytest.raises(InvalidIntervalError) as exc_info:
            clock.elapsed(500, 100)
        assert exc_info.value.start == 500
        assert exc_info.value.end == 100
        assert isinstance(exc_info.value, ValueError)

    def test_elapsed_tracks_real_sleep(self):
        clock = MonotonicClock()
        start = clock.now()
        time.sleep(0.01)
        assert clock.elapsed(start, clock.now()) >= 10_000_000


class TestTimer:
    """Test Timer context manager."""

    def test_measures_block(self, clock):
        with Timer(clock) as timer:
            clock.advance(ms=1500.7)
        assert timer.elapsed_ms == 1500
        assert timer.elapsed_seconds == pytest.approx(1.5007)

    def test_not_started(self):
        timer = Timer()
        with pytest.raises(ValueError, match="Timer not started"):
            timer.elapsed_ms

    def test_not_finished(self, clock):
        timer = Timer(clock)
        timer.__enter__()
        with pytest.raises(ValueError, match="Timer not finished"):
            timer.elapsed_seconds

    def test_records_on_exception(self, clock):
        """The end time is taken even when the block raises."""
        timer = Timer(clock)
        with pytest.raises(RuntimeError):
            with timer:
                clock.advance(ms=20)
                raise RuntimeError("boom")
        assert timer.elapsed_ms == 20
