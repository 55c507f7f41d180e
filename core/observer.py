"""Structured JSON logging shared by the world core and the event bus."""

import json
import sys
import threading
from enum import IntEnum

from utils.tracking import format_timestamp


class LogLevel(IntEnum):
    DEBUG = 10
    INFO = 20
    WARN = 30
    ERROR = 40


_logger = None
_logger_lock = threading.Lock()


class StructuredLogger:
    """One JSON record per line on a text stream (stderr by default)."""

    def __init__(self, level=LogLevel.INFO, stream=None):
        self.level = level
        self.stream = stream

    def _emit(self, level, message, error=None, **fields):
        if level < self.level:
            return
        record = {"timestamp": format_timestamp(), "level": level.name, "msg": message, **fields}
        if error is not None:
            record["err"] = str(error)
            record["err_type"] = type(error).__name__
            error_id = getattr(error, "error_id", None)
            if error_id:
                record["err_id"] = error_id
        print(json.dumps(record, default=str), file=self.stream or sys.stderr, flush=True)

    def debug(self, message, **fields):
        self._emit(LogLevel.DEBUG, message, **fields)

    def info(self, message, **fields):
        self._emit(LogLevel.INFO, message, **fields)

    def warn(self, message, error=None, **fields):
        self._emit(LogLevel.WARN, message, error, **fields)

    def error(self, message, error=None, **fields):
        self._emit(LogLevel.ERROR, message, error, **fields)

    @classmethod
    def configure(cls, min_level=LogLevel.INFO, stream=None):
        global _logger
        with _logger_lock:
            _logger = cls(min_level, stream)
        return _logger


def configure_from(logging_config, stream=None):
    """Install the process logger at the level named by a LoggingConfig."""
    level = LogLevel[logging_config.level.upper()]
    return StructuredLogger.configure(min_level=level, stream=stream)


def get_logger():
    global _logger
    if _logger is None:
        with _logger_lock:
            if _logger is None:
                _logger = StructuredLogger()
    return _logger
