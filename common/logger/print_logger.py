# common/logger/print_logger.py

"""
Minimal logger that writes straight to stdout. Handy for scripts and tests.
"""

from datetime import datetime
from typing import Any

from .logger_interface import LoggerInterface, LogLevel

_ORDER = [
    LogLevel.DEBUG,
    LogLevel.INFO,
    LogLevel.WARNING,
    LogLevel.ERROR,
    LogLevel.CRITICAL,
]


class PrintLogger(LoggerInterface):
    """Print-based logger"""

    def _emit(self, level: LogLevel, message: str, *args: Any) -> None:
        if _ORDER.index(level) < _ORDER.index(self.level):
            return
        if args:
            message = message % args
        timestamp = datetime.now().strftime("%Y-%m-%d %H:%M:%S")
        print(f"{timestamp} | {level.value:<8} | {self.name} | {message}")

    def debug(self, message: str, *args: Any, **kwargs: Any) -> None:
        self._emit(LogLevel.DEBUG, message, *args)

    def info(self, message: str, *args: Any, **kwargs: Any) -> None:
        self._emit(LogLevel.INFO, message, *args)

    def warning(self, message: str, *args: Any, **kwargs: Any) -> None:
        self._emit(LogLevel.WARNING, message, *args)

    def error(self, message: str, *args: Any, **kwargs: Any) -> None:
        self._emit(LogLevel.ERROR, message, *args)

    def critical(self, message: str, *args: Any, **kwargs: Any) -> None:
        self._emit(LogLevel.CRITICAL, message, *args)

    def set_level(self, level: LogLevel) -> None:
        self.level = level
