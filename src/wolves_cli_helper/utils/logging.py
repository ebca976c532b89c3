"""Logging utilities with JSON formatting."""

import json
import logging
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict, Optional

LOGGER_NAME = "wolves_cli_helper"


class JSONFormatter(logging.Formatter):
    """Custom formatter that outputs JSON lines."""

    def format(self, record: logging.LogRecord) -> str:
        """Format log record as JSON."""
        log_data = {
            "timestamp": datetime.now(timezone.utc).isoformat().replace("+00:00", "Z"),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        # Add any extra fields from the record
        if hasattr(record, 'extra_data'):
            log_data.update(record.extra_data)

        return json.dumps(log_data, ensure_ascii=False)


def setup_logger(log_path: Optional[Path] = None, verbose: bool = False) -> logging.Logger:
    """
    Set up the library logger with JSON formatting.

    Args:
        log_path: Directory to write a JSONL log file to, if any
        verbose: Whether to also log to console

    Returns:
        Configured logger
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(logging.DEBUG)

    # Remove any existing handlers
    for handler in logger.handlers[:]:
        logger.removeHandler(handler)
        handler.close()

    if log_path is not None:
        log_path.mkdir(parents=True, exist_ok=True)
        timestamp = datetime.now(timezone.utc).strftime("%Y-%m-%dT%H-%M-%S")
        log_file = log_path / f"wolves_cli_helper_{timestamp}.jsonl"

        file_handler = logging.FileHandler(log_file)
        file_handler.setFormatter(JSONFormatter())
        logger.addHandler(file_handler)

    if verbose:
        console_handler = logging.StreamHandler()
        console_handler.setFormatter(JSONFormatter())
        logger.addHandler(console_handler)

    if not logger.handlers:
        logger.addHandler(logging.NullHandler())

    return logger


def log_timing(logger: logging.Logger, data: Dict[str, Any]) -> None:
    """Log a timer measurement with structured data."""
    record = logging.LogRecord(
        name=f"{logger.name}.timing",
        level=logging.INFO,
        pathname="",
        lineno=0,
        msg="Timing recorded",
        args=(),
        exc_info=None
    )
    record.extra_data = data
    logger.handle(record)
