# schemas/__init__.py

from .common_schemas import (
    ErrorEnvelope,
    PaginateOptions,
    PaginationMeta,
    PaginationResult,
    PopulateOption,
)
from .news_schemas import (
    AdminRole,
    AdminUser,
    ChangeFrequency,
    NewsArticle,
    NewsCategory,
    SitemapEntry,
)

__all__ = [
    "ErrorEnvelope",
    "PaginateOptions",
    "PaginationMeta",
    "PaginationResult",
    "PopulateOption",
    "AdminRole",
    "AdminUser",
    "ChangeFrequency",
    "NewsArticle",
    "NewsCategory",
    "SitemapEntry",
]
