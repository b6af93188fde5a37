# tests/test_common_module.py

"""
Tests for the shared logger and cache packages.
"""

import time
from unittest.mock import MagicMock

import pytest

import common
from common.cache import (
    CacheFactory,
    CacheStatus,
    CacheType,
    FileCache,
    InMemoryCache,
    RedisCache,
)
from common.logger import (
    LoggerFactory,
    LoggerType,
    LogLevel,
    PrintLogger,
    StandardLogger,
)


class TestModuleStructure:
    def test_exports(self):
        for attr in ["__version__", "LoggerFactory", "CacheFactory"]:
            assert hasattr(common, attr)


class TestLoggerFactory:
    def teardown_method(self):
        LoggerFactory.clear()

    def test_create_standard_logger(self):
        logger = LoggerFactory.create_logger(
            name="test_service", logger_type=LoggerType.STANDARD, level=LogLevel.INFO
        )

        assert isinstance(logger, StandardLogger)
        logger.info("Logger test successful - INFO level")
        logger.warning("Logger test successful - WARNING level")

    def test_create_print_logger(self, capsys):
        logger = LoggerFactory.create_logger("printer", LoggerType.PRINT, LogLevel.WARNING)

        logger.info("hidden")
        logger.error("shown %s", "here")

        out = capsys.readouterr().out
        assert isinstance(logger, PrintLogger)
        assert "hidden" not in out
        assert "shown here" in out

    def test_get_logger_is_cached_by_name(self):
        first = LoggerFactory.get_logger("shared")
        second = LoggerFactory.get_logger("shared")

        assert first is second

    def test_file_logging(self, tmp_path):
        log_file = tmp_path / "logs" / "service.log"
        logger = LoggerFactory.create_logger(
            "file_service", LoggerType.STANDARD, log_file=str(log_file)
        )

        logger.error("written to disk")

        assert "written to disk" in log_file.read_text()

    def test_level_from_string(self):
        assert LogLevel.from_string("warning") == LogLevel.WARNING
        with pytest.raises(ValueError):
            LogLevel.from_string("verbose")


class TestInMemoryCache:
    def test_set_get_delete(self):
        cache = CacheFactory.create_cache(cache_type=CacheType.MEMORY, max_size=100)

        cache.set("test_key", "test_value", ttl=60)
        assert cache.get("test_key") == "test_value"
        assert cache.exists("test_key")

        cache.delete("test_key")
        assert cache.get("test_key") is None

    def test_expiry(self):
        cache = InMemoryCache(default_ttl=1)
        cache.set("k", "v")
        cache._data[cache._key("k")] = ("v", time.time() - 1)

        assert cache.get("k") is None

    def test_lru_eviction(self):
        cache = InMemoryCache(max_size=2)
        cache.set("a", 1)
        cache.set("b", 2)
        cache.get("a")
        cache.set("c", 3)

        assert cache.get("a") == 1
        assert cache.get("b") is None
        assert sorted(cache.keys()) == ["a", "c"]

    def test_stats(self):
        cache = InMemoryCache()
        cache.set("k", "v")
        cache.get("k")
        cache.get("missing")

        stats = cache.get_stats()
        assert stats.hits == 1
        assert stats.misses == 1
        assert stats.get_hit_rate() == 0.5


class TestFileCache:
    def test_persists_between_instances(self, tmp_path):
        FileCache(cache_dir=str(tmp_path)).set("adminToken", "abc")

        assert FileCache(cache_dir=str(tmp_path)).get("adminToken") == "abc"

    def test_clear(self, tmp_path):
        cache = FileCache(cache_dir=str(tmp_path))
        cache.set("a", {"nested": [1, 2]})
        cache.set("b", "two")

        assert sorted(cache.keys()) == ["a", "b"]
        cache.clear()
        assert cache.keys() == []


class TestRedisCache:
    def test_uses_prefix_and_json(self):
        client = MagicMock()
        client.get.return_value = '{"name": "Jane"}'
        cache = RedisCache(key_prefix="news-portal:", client=client)

        cache.set("adminData", {"name": "Jane"}, ttl=30)
        value = cache.get("adminData")

        client.set.assert_called_once_with(
            "news-portal:adminData", '{"name": "Jane"}', ex=30
        )
        client.get.assert_called_once_with("news-portal:adminData")
        assert value == {"name": "Jane"}

    def test_miss_recorded(self):
        client = MagicMock()
        client.get.return_value = None
        cache = RedisCache(client=client)

        assert cache.get("nothing") is None
        assert cache.get_stats().misses == 1


class TestCacheFactory:
    def test_get_cache_is_shared_by_name(self):
        first = CacheFactory.get_cache("sessions", CacheType.MEMORY)
        second = CacheFactory.get_cache("sessions", CacheType.MEMORY)

        assert first is second
        assert CacheFactory.remove_cache("sessions") is True
        assert CacheFactory.get_cache("sessions") is not first

    def test_create_cache_types(self, tmp_path):
        assert isinstance(CacheFactory.create_cache(CacheType.MEMORY), InMemoryCache)
        assert isinstance(
            CacheFactory.create_cache(CacheType.FILE, cache_dir=str(tmp_path)), FileCache
        )

    def test_cache_status_values(self):
        assert {s.value for s in CacheStatus} >= {"hit", "miss"}
