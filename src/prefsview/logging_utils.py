"""Logging setup for prefsview.

Records go to stderr and into a bounded in-memory buffer that the Debug Logs
dialog reads back.
"""
from __future__ import annotations

import logging
import sys
import threading
from collections import deque
from typing import TextIO

LOG_LEVEL_OPTIONS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
DEFAULT_LOG_LEVEL = "INFO"
LOG_FORMAT = "%(asctime)s.%(msecs)03d %(levelname)-7s %(name)s: %(message)s"
LOG_DATE_FORMAT = "%H:%M:%S"


class LogBuffer(logging.Handler):
    """Keeps the most recent formatted records in memory."""

    def __init__(self, capacity: int = 2000) -> None:
        super().__init__()
        self._lines: deque[str] = deque(maxlen=capacity)
        self._guard = threading.Lock()

    def emit(self, record: logging.LogRecord) -> None:
        try:
            line = self.format(record)
        except Exception:
            self.handleError(record)
            return
        with self._guard:
            self._lines.append(line)

    def lines(self) -> list[str]:
        with self._guard:
            return list(self._lines)

    def clear(self) -> None:
        with self._guard:
            self._lines.clear()


LOG_BUFFER = LogBuffer()


def resolve_log_level(value: object) -> str:
    name = str(value or "").strip().upper()
    return name if name in LOG_LEVEL_OPTIONS else DEFAULT_LOG_LEVEL


def configure_app_logging(level: object = DEFAULT_LOG_LEVEL, *, stream: TextIO | None = None) -> str:
    """Route prefsview logging to ``stream`` (stderr) and the buffer.

    Safe to call again; only the level changes then. Returns the level name used.
    """
    level_name = resolve_log_level(level)
    root_logger = logging.getLogger()
    formatter = logging.Formatter(LOG_FORMAT, LOG_DATE_FORMAT)
    if LOG_BUFFER not in root_logger.handlers:
        LOG_BUFFER.setFormatter(formatter)
        root_logger.addHandler(LOG_BUFFER)
        console = logging.StreamHandler(stream if stream is not None else sys.stderr)
        console.setFormatter(formatter)
        console.set_name("prefsview-console")
        root_logger.addHandler(console)
    root_logger.setLevel(getattr(logging, level_name))
    logging.captureWarnings(True)
    return level_name


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)
