# common/cache/__init__.py

from .cache_factory import CacheFactory, CacheType
from .cache_interface import CacheInterface, CacheStats, CacheStatus
from .file_cache import FileCache
from .in_memory_cache import InMemoryCache
from .redis_cache import RedisCache

__all__ = [
    "CacheInterface",
    "CacheStatus",
    "CacheStats",
    "InMemoryCache",
    "RedisCache",
    "FileCache",
    "CacheFactory",
    "CacheType",
]
