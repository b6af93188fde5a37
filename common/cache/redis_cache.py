# common/cache/redis_cache.py

"""
Redis backed cache. Values are stored as JSON strings under a key prefix so
several services can share one Redis database.
"""

import json
from typing import Any, List, Optional

import redis

from .cache_interface import CacheInterface, CacheStatus


class RedisCache(CacheInterface):
    """Cache stored in Redis"""

    def __init__(
        self,
        name: str = "redis",
        host: str = "localhost",
        port: int = 6379,
        db: int = 0,
        password: Optional[str] = None,
        key_prefix: str = "",
        default_ttl: Optional[int] = None,
        connection_timeout: int = 5,
        socket_timeout: int = 5,
        socket_connect_timeout: Optional[int] = None,
        socket_keepalive: bool = True,
        retry_on_timeout: bool = True,
        max_connections: int = 10,
        client: Optional["redis.Redis"] = None,
    ):
        super().__init__(name=name, default_ttl=default_ttl)
        self.key_prefix = key_prefix
        if client is None:
            pool = redis.ConnectionPool(
                host=host,
                port=port,
                db=db,
                password=password,
                socket_timeout=socket_timeout,
                socket_connect_timeout=socket_connect_timeout or connection_timeout,
                socket_keepalive=socket_keepalive,
                retry_on_timeout=retry_on_timeout,
                max_connections=max_connections,
                decode_responses=True,
            )
            client = redis.Redis(connection_pool=pool)
        self._client = client

    def _key(self, key: str) -> str:
        return f"{self.key_prefix}{key}"

    def get(self, key: str) -> Optional[Any]:
        try:
            raw = self._client.get(self._key(key))
        except redis.RedisError:
            self._stats.record(CacheStatus.ERROR)
            raise
        if raw is None:
            self._stats.record(CacheStatus.MISS)
            return None
        self._stats.record(CacheStatus.HIT)
        return json.loads(raw)

    def set(self, key: str, value: Any, ttl: Optional[int] = None) -> bool:
        ttl = ttl if ttl is not None else self.default_ttl
        result = self._client.set(self._key(key), json.dumps(value), ex=ttl or None)
        self._stats.sets += 1
        return bool(result)

    def delete(self, key: str) -> bool:
        removed = self._client.delete(self._key(key)) > 0
        if removed:
            self._stats.deletes += 1
        return removed

    def exists(self, key: str) -> bool:
        return bool(self._client.exists(self._key(key)))

    def clear(self) -> bool:
        keys = list(self._client.scan_iter(match=f"{self.key_prefix}*"))
        if keys:
            self._client.delete(*keys)
        return True

    def keys(self) -> List[str]:
        prefix_len = len(self.key_prefix)
        return [k[prefix_len:] for k in self._client.scan_iter(match=f"{self.key_prefix}*")]
