# common/cache/cache_interface.py

"""
Cache interface and statistics shared by every cache backend.
"""

import time
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, List, Optional


class CacheStatus(Enum):
    """Outcome of a cache lookup"""

    HIT = "hit"
    MISS = "miss"
    EXPIRED = "expired"
    ERROR = "error"


@dataclass
class CacheStats:
    """Running counters for a cache instance"""

    hits: int = 0
    misses: int = 0
    sets: int = 0
    deletes: int = 0
    evictions: int = 0
    errors: int = 0
    created_at: float = field(default_factory=time.time)

    def record(self, status: CacheStatus) -> None:
        if status == CacheStatus.HIT:
            self.hits += 1
        elif status == CacheStatus.ERROR:
            self.errors += 1
        else:
            self.misses += 1

    def get_hit_rate(self) -> float:
        total = self.hits + self.misses
        return self.hits / total if total else 0.0

    def get_uptime(self) -> float:
        return time.time() - self.created_at

    def to_dict(self) -> dict:
        return {
            "hits": self.hits,
            "misses": self.misses,
            "sets": self.sets,
            "deletes": self.deletes,
            "evictions": self.evictions,
            "errors": self.errors,
            "hit_rate": self.get_hit_rate(),
            "uptime": self.get_uptime(),
        }


class CacheInterface(ABC):
    """Synchronous key-value cache contract"""

    def __init__(self, name: str = "default", default_ttl: Optional[int] = None):
        self.name = name
        self.default_ttl = default_ttl
        self._stats = CacheStats()

    @abstractmethod
    def get(self, key: str) -> Optional[Any]:
        """Return the stored value or None when missing or expired"""

    @abstractmethod
    def set(self, key: str, value: Any, ttl: Optional[int] = None) -> bool:
        """Store value; ttl in seconds, None means the backend default"""

    @abstractmethod
    def delete(self, key: str) -> bool:
        """Remove key, returning True if something was removed"""

    @abstractmethod
    def exists(self, key: str) -> bool:
        pass

    @abstractmethod
    def clear(self) -> bool:
        pass

    @abstractmethod
    def keys(self) -> List[str]:
        pass

    def get_stats(self) -> CacheStats:
        return self._stats

    def get_memory_usage(self) -> Optional[int]:
        """Approximate size in bytes, None when the backend cannot tell"""
        return None
