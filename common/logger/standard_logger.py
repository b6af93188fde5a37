# common/logger/standard_logger.py

"""
Logger implementation on top of the standard library logging module.
Console output is colourised with colorama, file output is plain text.
"""

import logging
import os
from typing import Any, Optional

from colorama import Fore, Style
from colorama import init as colorama_init

from .logger_interface import LoggerInterface, LogLevel

colorama_init()

_LEVEL_MAP = {
    LogLevel.DEBUG: logging.DEBUG,
    LogLevel.INFO: logging.INFO,
    LogLevel.WARNING: logging.WARNING,
    LogLevel.ERROR: logging.ERROR,
    LogLevel.CRITICAL: logging.CRITICAL,
}

_LEVEL_COLORS = {
    logging.DEBUG: Fore.CYAN,
    logging.INFO: Fore.GREEN,
    logging.WARNING: Fore.YELLOW,
    logging.ERROR: Fore.RED,
    logging.CRITICAL: Fore.MAGENTA + Style.BRIGHT,
}

DEFAULT_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
DEFAULT_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


class ColoredFormatter(logging.Formatter):
    """Formatter adding ANSI colours to the level name"""

    def format(self, record: logging.LogRecord) -> str:
        color = _LEVEL_COLORS.get(record.levelno, "")
        original = record.levelname
        record.levelname = f"{color}{original}{Style.RESET_ALL}"
        try:
            return super().format(record)
        finally:
            record.levelname = original


class StandardLogger(LoggerInterface):
    """LoggerInterface backed by logging.Logger"""

    def __init__(
        self,
        name: str,
        level: LogLevel = LogLevel.INFO,
        console_level: Optional[LogLevel] = None,
        file_level: Optional[LogLevel] = None,
        use_colors: bool = True,
        log_file: Optional[str] = None,
        log_format: str = DEFAULT_FORMAT,
        date_format: str = DEFAULT_DATE_FORMAT,
    ):
        super().__init__(name, level)
        self._logger = logging.getLogger(name)
        self._logger.propagate = False
        self._logger.handlers.clear()
        self._logger.setLevel(logging.DEBUG)

        console_handler = logging.StreamHandler()
        console_handler.setLevel(_LEVEL_MAP[console_level or level])
        formatter_cls = ColoredFormatter if use_colors else logging.Formatter
        console_handler.setFormatter(formatter_cls(log_format, date_format))
        self._logger.addHandler(console_handler)
        self._console_handler = console_handler

        self._file_handler: Optional[logging.Handler] = None
        if log_file:
            directory = os.path.dirname(log_file)
            if directory:
                os.makedirs(directory, exist_ok=True)
            file_handler = logging.FileHandler(log_file, encoding="utf-8")
            file_handler.setLevel(_LEVEL_MAP[file_level or level])
            file_handler.setFormatter(logging.Formatter(log_format, date_format))
            self._logger.addHandler(file_handler)
            self._file_handler = file_handler

    @property
    def logger(self) -> logging.Logger:
        return self._logger

    def debug(self, message: str, *args: Any, **kwargs: Any) -> None:
        self._logger.debug(message, *args, **kwargs)

    def info(self, message: str, *args: Any, **kwargs: Any) -> None:
        self._logger.info(message, *args, **kwargs)

    def warning(self, message: str, *args: Any, **kwargs: Any) -> None:
        self._logger.warning(message, *args, **kwargs)

    def error(self, message: str, *args: Any, **kwargs: Any) -> None:
        self._logger.error(message, *args, **kwargs)

    def critical(self, message: str, *args: Any, **kwargs: Any) -> None:
        self._logger.critical(message, *args, **kwargs)

    def set_level(self, level: LogLevel) -> None:
        self.level = level
        self._console_handler.setLevel(_LEVEL_MAP[level])
