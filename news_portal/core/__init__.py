# core/__init__.py

"""
Core configuration and settings.
"""

from .config import Settings, settings

__all__ = [
    "settings",
    "Settings",
]
