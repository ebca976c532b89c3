"""Timers, rates and styled status output for command-line programs."""

from .config import DisplayConfig, load_display_config
from .errors import ConfigError, InvalidIntervalError, UnknownKeyError, WolvesHelperError
from .sysinfo import DiskInfo, SystemInfo
from .timers import TimerHandle, TimerRegistry
from .utils.metrics import MetricsCalculator, MetricsResult
from .utils.timing import ClockSource, MonotonicClock, Timer
from .verbose import announce, padding_line, say, stamp, styled, write_header_lines

__version__ = "0.1.0"

__all__ = [
    "ClockSource",
    "ConfigError",
    "DiskInfo",
    "DisplayConfig",
    "InvalidIntervalError",
    "MetricsCalculator",
    "MetricsResult",
    "MonotonicClock",
    "SystemInfo",
    "Timer",
    "TimerHandle",
    "TimerRegistry",
    "UnknownKeyError",
    "WolvesHelperError",
    "announce",
    "load_display_config",
    "padding_line",
    "say",
    "stamp",
    "styled",
    "write_header_lines",
]
