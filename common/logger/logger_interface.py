# common/logger/logger_interface.py

"""
Logger interface shared by every logger implementation.
"""

from abc import ABC, abstractmethod
from enum import Enum
from typing import Any


class LogLevel(Enum):
    """Supported log levels"""

    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"

    @classmethod
    def from_string(cls, value: str) -> "LogLevel":
        """Resolve a level from its (case-insensitive) name"""
        try:
            return cls(value.upper())
        except ValueError:
            raise ValueError(
                f"Unknown log level '{value}', expected one of {[l.value for l in cls]}"
            )


class LoggerInterface(ABC):
    """Abstract logger used across services"""

    def __init__(self, name: str, level: LogLevel = LogLevel.INFO):
        self.name = name
        self.level = level

    @abstractmethod
    def debug(self, message: str, *args: Any, **kwargs: Any) -> None:
        pass

    @abstractmethod
    def info(self, message: str, *args: Any, **kwargs: Any) -> None:
        pass

    @abstractmethod
    def warning(self, message: str, *args: Any, **kwargs: Any) -> None:
        pass

    @abstractmethod
    def error(self, message: str, *args: Any, **kwargs: Any) -> None:
        pass

    @abstractmethod
    def critical(self, message: str, *args: Any, **kwargs: Any) -> None:
        pass

    @abstractmethod
    def set_level(self, level: LogLevel) -> None:
        pass

    def exception(self, message: str, *args: Any, **kwargs: Any) -> None:
        """Log an error together with the active exception traceback"""
        kwargs.setdefault("exc_info", True)
        self.error(message, *args, **kwargs)
