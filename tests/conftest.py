"""Shared fixtures."""

import io

import pytest
from rich.console import Console

from wolves_cli_helper.utils.timing import MonotonicClock


class FakeClock(MonotonicClock):
    """Clock that only moves when told to."""

    def __init__(self, start: int = 1_000_000_000):
        self.instant = start

    def now(self) -> int:
        return self.instant

    def advance(self, ms: float = 0, ns: int = 0) -> None:
        self.instant += int(ms * 1_000_000) + ns


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def output():
    """Console writing plain text into a buffer."""
    buffer = io.StringIO()
    return Console(file=buffer, color_system=None, width=200), buffer


class HookClock(FakeClock):
    """Clock that runs a one-shot callback while it is being read."""

    def __init__(self, start: int = 1_000_000_000):
        super().__init__(start)
        self.hook = None

    def now(self) -> int:
        instant = self.instant
        hook, self.hook = self.hook, None
        if hook is not None:
            hook()
        return instant


class BrokenStream(io.StringIO):
    """Stream whose reader has gone away."""

    def __init__(self):
        super().__init__()
        self.writes = 0

    def write(self, s):
        self.writes += 1
        raise BrokenPipeError(32, "Broken pipe")


@pytest.fixture
def hook_clock():
    return HookClock()


@pytest.fixture
def broken_output():
    """Console whose every write fails."""
    stream = BrokenStream()
    return Console(file=stream, color_system=None), stream
