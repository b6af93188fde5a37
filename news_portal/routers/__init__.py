# routers/__init__.py

"""
Routers package for the news portal gateway.
Contains all FastAPI route definitions.
"""

from . import (
    admin_router,
    articles_router,
    categories_router,
    comments_router,
    contact_router,
    feeds_router,
    metadata_router,
    rss_feeds_router,
    sitemap_router,
)

__all__ = [
    "admin_router",
    "articles_router",
    "categories_router",
    "comments_router",
    "contact_router",
    "feeds_router",
    "metadata_router",
    "rss_feeds_router",
    "sitemap_router",
]
