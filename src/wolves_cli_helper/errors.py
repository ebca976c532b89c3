"""Exceptions raised by wolves_cli_helper."""


class WolvesHelperError(Exception):
    """Base class for all library errors."""


class UnknownKeyError(WolvesHelperError, KeyError):
    """A timer was queried under a key that was never created."""

    def __init__(self, key: str):
        self.key = key
        super().__init__(key)

    def __str__(self) -> str:
        return f"No timer created for key '{self.key}'"


class InvalidIntervalError(WolvesHelperError, ValueError):
    """An interval ends before it starts."""

    def __init__(self, start: int, end: int):
        self.start = start
        self.end = end
        super().__init__(f"Interval end {end} precedes start {start}")


class ConfigError(WolvesHelperError):
    """Display configuration could not be loaded."""
