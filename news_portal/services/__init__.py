# services/__init__.py

"""
Business logic services.
"""

from .auth_state import AuthStateStore
from .proxy_service import ProxyService
from .sitemap_service import SitemapService
from .feed_service import FeedService

__all__ = [
    "AuthStateStore",
    "ProxyService",
    "SitemapService",
    "FeedService",
]
