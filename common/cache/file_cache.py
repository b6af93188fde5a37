# common/cache/file_cache.py

"""
Cache persisted on disk, one JSON document per key.

Values must be JSON serializable. Survives process restarts, which makes it
suitable for small client-side state such as a stored session.
"""

import hashlib
import json
import os
import threading
import time
from pathlib import Path
from typing import Any, List, Optional

from .cache_interface import CacheInterface, CacheStatus


class FileCache(CacheInterface):
    """JSON file backed cache"""

    def __init__(
        self,
        name: str = "file",
        cache_dir: str = "cache",
        default_ttl: Optional[int] = None,
    ):
        super().__init__(name=name, default_ttl=default_ttl)
        self.cache_dir = Path(cache_dir)
        self.cache_dir.mkdir(parents=True, exist_ok=True)
        self._lock = threading.RLock()

    def _path(self, key: str) -> Path:
        digest = hashlib.sha256(key.encode("utf-8")).hexdigest()
        return self.cache_dir / f"{digest}.json"

    def _read(self, path: Path) -> Optional[dict]:
        try:
            with open(path, "r", encoding="utf-8") as f:
                return json.load(f)
        except FileNotFoundError:
            return None
        except (OSError, json.JSONDecodeError):
            self._stats.errors += 1
            return None

    @staticmethod
    def _expired(entry: dict) -> bool:
        expires_at = entry.get("expires_at")
        return expires_at is not None and expires_at <= time.time()

    def get(self, key: str) -> Optional[Any]:
        path = self._path(key)
        with self._lock:
            entry = self._read(path)
            if entry is None:
                self._stats.record(CacheStatus.MISS)
                return None
            if self._expired(entry):
                path.unlink(missing_ok=True)
                self._stats.record(CacheStatus.EXPIRED)
                return None
            self._stats.record(CacheStatus.HIT)
            return entry.get("value")

    def set(self, key: str, value: Any, ttl: Optional[int] = None) -> bool:
        ttl = ttl if ttl is not None else self.default_ttl
        entry = {
            "key": key,
            "value": value,
            "expires_at": time.time() + ttl if ttl else None,
        }
        path = self._path(key)
        tmp_path = path.with_suffix(".tmp")
        with self._lock:
            with open(tmp_path, "w", encoding="utf-8") as f:
                json.dump(entry, f)
            os.replace(tmp_path, path)
            self._stats.sets += 1
        return True

    def delete(self, key: str) -> bool:
        path = self._path(key)
        with self._lock:
            if not path.exists():
                return False
            path.unlink()
            self._stats.deletes += 1
            return True

    def exists(self, key: str) -> bool:
        with self._lock:
            entry = self._read(self._path(key))
            return entry is not None and not self._expired(entry)

    def clear(self) -> bool:
        with self._lock:
            for path in self.cache_dir.glob("*.json"):
                path.unlink(missing_ok=True)
        return True

    def keys(self) -> List[str]:
        result = []
        with self._lock:
            for path in self.cache_dir.glob("*.json"):
                entry = self._read(path)
                if entry is not None and not self._expired(entry):
                    result.append(entry["key"])
        return result

    def get_memory_usage(self) -> Optional[int]:
        return sum(p.stat().st_size for p in self.cache_dir.glob("*.json"))
