# utils/dependencies.py

"""
Dependency injection utilities for the news portal gateway.
"""

from typing import Any, Dict, Optional

from dependency_injector import containers, providers
from fastapi import Header

from common.cache import CacheFactory, CacheInterface, CacheType
from common.logger import LoggerFactory, LoggerType, LogLevel

from ..adapters.admin_api_client import AdminApiClient
from ..adapters.backend_client import BackendClient
from ..core.config import settings
from ..services.auth_state import AuthStateStore
from ..services.feed_service import FeedService
from ..services.proxy_service import ProxyService
from ..services.sitemap_service import SitemapService
from .errors import AuthorizationRequiredError

AUTH_STORAGE_NAME = "auth-state"


def create_auth_storage(storage_config: Dict[str, Any]) -> CacheInterface:
    """Pick the key-value backend that holds the admin session"""
    backend = CacheType(storage_config.get("backend", "memory"))
    if backend == CacheType.FILE:
        return CacheFactory.get_cache(
            AUTH_STORAGE_NAME, backend, cache_dir=storage_config["directory"]
        )
    if backend == CacheType.REDIS:
        return CacheFactory.get_cache(
            AUTH_STORAGE_NAME,
            backend,
            host=storage_config["redis_host"],
            port=storage_config["redis_port"],
            db=storage_config["redis_db"],
            password=storage_config["redis_password"],
            key_prefix=storage_config["redis_key_prefix"],
        )
    return CacheFactory.get_cache(AUTH_STORAGE_NAME, CacheType.MEMORY)


class Container(containers.DeclarativeContainer):
    """Dependency injection container using dependency-injector"""

    # Configuration
    config = providers.Configuration()

    # Logger
    logger = providers.Singleton(
        LoggerFactory.get_logger,
        name="dependency-container",
        logger_type=LoggerType.STANDARD,
        level=LogLevel.INFO,
    )

    # Backend REST client
    backend_client = providers.Singleton(
        BackendClient,
        base_url=config.api_base_url.as_(str),
        timeout=config.backend_timeout.as_(float),
    )

    # Proxy Service
    proxy_service = providers.Singleton(
        ProxyService,
        backend=backend_client,
    )

    # Sitemap Service
    sitemap_service = providers.Singleton(
        SitemapService,
        proxy=proxy_service,
        site_url=config.site_url.as_(str),
        categories=config.sitemap_categories,
        article_limit=config.sitemap_article_limit.as_(int),
        timeout=config.sitemap_timeout.as_(float),
        page_timeout=config.sitemap_page_timeout.as_(float),
    )

    # Feed Service
    feed_service = providers.Singleton(
        FeedService,
        proxy=proxy_service,
        site_url=config.site_url.as_(str),
        site_name=config.site_name.as_(str),
        language=config.site_language.as_(str),
        article_limit=config.feed_article_limit.as_(int),
    )

    # Admin session storage
    auth_storage = providers.Singleton(
        create_auth_storage,
        storage_config=config.storage,
    )

    auth_state = providers.Singleton(
        AuthStateStore,
        storage=auth_storage,
    )

    admin_api_client = providers.Factory(
        AdminApiClient,
        base_url=config.api_base_url.as_(str),
        auth_state=auth_state,
        timeout=config.backend_timeout.as_(float),
    )


# Global container instance
container = Container()

# Configure default values from settings
container.config.api_base_url.from_value(settings.api_base_url)
container.config.backend_timeout.from_value(settings.backend_timeout_seconds)
container.config.site_url.from_value(settings.site_url)
container.config.site_name.from_value(settings.site_name)
container.config.site_language.from_value(settings.site_language)
container.config.sitemap_categories.from_value(settings.sitemap_categories)
container.config.sitemap_article_limit.from_value(settings.sitemap_article_limit)
container.config.sitemap_timeout.from_value(settings.sitemap_timeout_seconds)
container.config.sitemap_page_timeout.from_value(settings.sitemap_page_timeout_seconds)
container.config.feed_article_limit.from_value(settings.feed_article_limit)
container.config.storage.from_value(settings.storage_config)


async def initialize_services() -> None:
    """Open the shared backend client"""
    logger = container.logger()
    logger.info("Initializing services...")
    try:
        await container.backend_client().open()
        logger.info("✅ All services initialized successfully")
    except Exception as e:
        logger.error(f"❌ Failed to initialize services: {e}")
        raise


async def cleanup_services() -> None:
    """Close the shared backend client"""
    logger = container.logger()
    logger.info("Cleaning up services...")
    try:
        await container.backend_client().close()
        logger.info("✅ All services cleaned up successfully")
    except Exception as e:
        logger.error(f"❌ Error during service cleanup: {e}")


def get_proxy_service() -> ProxyService:
    """Get proxy service instance"""
    try:
        return container.proxy_service()
    except Exception as e:
        logger = container.logger()
        logger.error(f"Failed to get proxy service: {e}")
        raise


def get_sitemap_service() -> SitemapService:
    """Get sitemap service instance"""
    try:
        return container.sitemap_service()
    except Exception as e:
        logger = container.logger()
        logger.error(f"Failed to get sitemap service: {e}")
        raise


def get_feed_service() -> FeedService:
    """Get feed service instance"""
    try:
        return container.feed_service()
    except Exception as e:
        logger = container.logger()
        logger.error(f"Failed to get feed service: {e}")
        raise


def get_auth_state_store() -> AuthStateStore:
    """Get admin session store instance"""
    try:
        return container.auth_state()
    except Exception as e:
        logger = container.logger()
        logger.error(f"Failed to get auth state store: {e}")
        raise


def create_admin_api_client() -> AdminApiClient:
    """New back office client bound to the shared session store"""
    return container.admin_api_client()


def require_authorization(
    authorization: Optional[str] = Header(None),
) -> str:
    """
    Require an Authorization header on protected routes.

    The value is passed through untouched; the backend decides whether it is
    valid.

    Raises:
        AuthorizationRequiredError: header missing or empty
    """
    if not authorization:
        raise AuthorizationRequiredError()
    return authorization
