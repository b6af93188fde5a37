# common/logger/logger_factory.py

"""
Factory for creating and sharing logger instances.

Loggers are cached by name so every module asking for "news-router" gets the
same handlers instead of stacking duplicates.
"""

import threading
from enum import Enum
from typing import Dict, Optional

from .logger_interface import LoggerInterface, LogLevel
from .print_logger import PrintLogger
from .standard_logger import StandardLogger


class LoggerType(Enum):
    """Available logger implementations"""

    STANDARD = "standard"
    PRINT = "print"


class LoggerFactory:
    """Create loggers and keep one instance per name"""

    _loggers: Dict[str, LoggerInterface] = {}
    _lock = threading.Lock()

    @staticmethod
    def create_logger(
        name: str,
        logger_type: LoggerType = LoggerType.STANDARD,
        level: LogLevel = LogLevel.INFO,
        console_level: Optional[LogLevel] = None,
        file_level: Optional[LogLevel] = None,
        use_colors: bool = True,
        log_file: Optional[str] = None,
    ) -> LoggerInterface:
        """Build a new logger without touching the cache"""
        if logger_type == LoggerType.PRINT:
            return PrintLogger(name=name, level=level)
        if logger_type == LoggerType.STANDARD:
            return StandardLogger(
                name=name,
                level=level,
                console_level=console_level,
                file_level=file_level,
                use_colors=use_colors,
                log_file=log_file,
            )
        raise ValueError(f"Unsupported logger type: {logger_type}")

    @classmethod
    def get_logger(
        cls,
        name: str,
        logger_type: LoggerType = LoggerType.STANDARD,
        level: LogLevel = LogLevel.INFO,
        console_level: Optional[LogLevel] = None,
        file_level: Optional[LogLevel] = None,
        use_colors: bool = True,
        log_file: Optional[str] = None,
    ) -> LoggerInterface:
        """Return the cached logger for name, creating it on first use"""
        with cls._lock:
            logger = cls._loggers.get(name)
            if logger is None:
                logger = cls.create_logger(
                    name=name,
                    logger_type=logger_type,
                    level=level,
                    console_level=console_level,
                    file_level=file_level,
                    use_colors=use_colors,
                    log_file=log_file,
                )
                cls._loggers[name] = logger
            return logger

    @classmethod
    def clear(cls) -> None:
        with cls._lock:
            cls._loggers.clear()
