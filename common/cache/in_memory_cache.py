# common/cache/in_memory_cache.py

"""
Process-local cache with TTL expiry and LRU eviction.
"""

import sys
import threading
import time
from collections import OrderedDict
from typing import Any, List, Optional, Tuple

from .cache_interface import CacheInterface, CacheStatus


class InMemoryCache(CacheInterface):
    """Thread-safe in-memory cache"""

    def __init__(
        self,
        name: str = "memory",
        max_size: int = 1000,
        default_ttl: Optional[int] = None,
        key_prefix: str = "",
    ):
        super().__init__(name=name, default_ttl=default_ttl)
        self.max_size = max_size
        self.key_prefix = key_prefix
        # key -> (value, expires_at or None)
        self._data: "OrderedDict[str, Tuple[Any, Optional[float]]]" = OrderedDict()
        self._lock = threading.RLock()

    def _key(self, key: str) -> str:
        return f"{self.key_prefix}{key}"

    def _expired(self, expires_at: Optional[float]) -> bool:
        return expires_at is not None and expires_at <= time.time()

    def get(self, key: str) -> Optional[Any]:
        full_key = self._key(key)
        with self._lock:
            entry = self._data.get(full_key)
            if entry is None:
                self._stats.record(CacheStatus.MISS)
                return None
            value, expires_at = entry
            if self._expired(expires_at):
                del self._data[full_key]
                self._stats.record(CacheStatus.EXPIRED)
                return None
            self._data.move_to_end(full_key)
            self._stats.record(CacheStatus.HIT)
            return value

    def set(self, key: str, value: Any, ttl: Optional[int] = None) -> bool:
        ttl = ttl if ttl is not None else self.default_ttl
        expires_at = time.time() + ttl if ttl else None
        full_key = self._key(key)
        with self._lock:
            self._data[full_key] = (value, expires_at)
            self._data.move_to_end(full_key)
            while len(self._data) > self.max_size:
                self._data.popitem(last=False)
                self._stats.evictions += 1
            self._stats.sets += 1
        return True

    def delete(self, key: str) -> bool:
        with self._lock:
            removed = self._data.pop(self._key(key), None) is not None
        if removed:
            self._stats.deletes += 1
        return removed

    def exists(self, key: str) -> bool:
        with self._lock:
            entry = self._data.get(self._key(key))
            return entry is not None and not self._expired(entry[1])

    def clear(self) -> bool:
        with self._lock:
            self._data.clear()
        return True

    def keys(self) -> List[str]:
        prefix_len = len(self.key_prefix)
        with self._lock:
            return [
                k[prefix_len:]
                for k, (_, expires_at) in self._data.items()
                if not self._expired(expires_at)
            ]

    def get_memory_usage(self) -> Optional[int]:
        with self._lock:
            return sum(
                sys.getsizeof(k) + sys.getsizeof(v) for k, (v, _) in self._data.items()
            )
