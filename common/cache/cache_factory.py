# common/cache/cache_factory.py

"""
Factory for cache backends. get_cache() keeps one instance per name.
"""

import threading
from enum import Enum
from typing import Any, Dict

from .cache_interface import CacheInterface
from .file_cache import FileCache
from .in_memory_cache import InMemoryCache
from .redis_cache import RedisCache


class CacheType(Enum):
    """Available cache backends"""

    MEMORY = "memory"
    FILE = "file"
    REDIS = "redis"


class CacheFactory:
    """Create and share cache instances"""

    _instances: Dict[str, CacheInterface] = {}
    _lock = threading.Lock()

    @staticmethod
    def create_cache(
        cache_type: CacheType = CacheType.MEMORY, **kwargs: Any
    ) -> CacheInterface:
        """Build a fresh cache of the given type"""
        if cache_type == CacheType.MEMORY:
            return InMemoryCache(**kwargs)
        if cache_type == CacheType.FILE:
            return FileCache(**kwargs)
        if cache_type == CacheType.REDIS:
            return RedisCache(**kwargs)
        raise ValueError(f"Unsupported cache type: {cache_type}")

    @classmethod
    def get_cache(
        cls, name: str, cache_type: CacheType = CacheType.MEMORY, **kwargs: Any
    ) -> CacheInterface:
        """Return the named cache, creating it on first use"""
        with cls._lock:
            cache = cls._instances.get(name)
            if cache is None:
                cache = cls.create_cache(cache_type, name=name, **kwargs)
                cls._instances[name] = cache
            return cache

    @classmethod
    def remove_cache(cls, name: str) -> bool:
        with cls._lock:
            return cls._instances.pop(name, None) is not None

    @classmethod
    def clear_instances(cls) -> None:
        with cls._lock:
            cls._instances.clear()
