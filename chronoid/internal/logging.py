import json
import sys
import threading
from enum import IntEnum

from chronoid.errors import ConfigError
from chronoid.utils.timestamp import format_timestamp


class LogLevel(IntEnum):
    DEBUG = 10
    INFO = 20
    WARN = 30
    ERROR = 40

    @classmethod
    def parse(cls, value):
        if isinstance(value, cls):
            return value
        name = str(value).upper()
        if name == "WARNING":
            name = "WARN"
        try:
            return cls[name]
        except KeyError:
            choices = ", ".join(member.name for member in cls)
            raise ConfigError(f"unknown log level {value!r}, expected one of: {choices}",
                              field="logging.level")


_logger = None
_logger_lock = threading.Lock()


class StructuredLogger:
    def __init__(self, level=LogLevel.INFO):
        self.level = level

    def _emit(self, level, message, error=None, **kwargs):
        if level < self.level:
            return
        try:
            record = {"timestamp": format_timestamp(), "level": level.name, "msg": message, **kwargs}
            if error:
                record["err"] = str(error)
            print(json.dumps(record, default=str), file=sys.stderr, flush=True)
        except (TypeError, ValueError, OSError):
            pass

    def debug(self, message, **kwargs):
        self._emit(LogLevel.DEBUG, message, **kwargs)

    def info(self, message, **kwargs):
        self._emit(LogLevel.INFO, message, **kwargs)

    def warn(self, message, error=None, **kwargs):
        self._emit(LogLevel.WARN, message, error, **kwargs)

    def error(self, message, error=None, **kwargs):
        self._emit(LogLevel.ERROR, message, error, **kwargs)

    @classmethod
    def configure(cls, min_level=LogLevel.INFO):
        global _logger
        with _logger_lock:
            _logger = cls(LogLevel.parse(min_level))


def get_logger():
    global _logger
    if _logger is None:
        with _logger_lock:
            if _logger is None:
                _logger = StructuredLogger()
    return _logger
