# common/logger/__init__.py

from .logger_factory import LoggerFactory, LoggerType
from .logger_interface import LoggerInterface, LogLevel
from .print_logger import PrintLogger
from .standard_logger import ColoredFormatter, StandardLogger

__all__ = [
    "LoggerInterface",
    "LogLevel",
    "StandardLogger",
    "ColoredFormatter",
    "PrintLogger",
    "LoggerFactory",
    "LoggerType",
]
