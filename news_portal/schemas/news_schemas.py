"""
Display shapes for data owned by the backend service.

The gateway never validates these beyond what it needs to read; unknown
fields are preserved so relayed documents stay intact.
"""

from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel


class AdminRole(str, Enum):
    """Back office roles"""

    ADMIN = "admin"
    EDITOR = "editor"


class BackendDocument(BaseModel):
    """Base for documents coming from the backend (camelCase, _id)."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="allow",
    )

    id: Optional[str] = Field(None, alias="_id")

    def to_document(self) -> dict:
        """Serialize back to the backend's JSON shape"""
        return self.model_dump(by_alias=True, mode="json")


class AdminUser(BackendDocument):
    """Admin account snapshot cached for session display."""

    name: str
    email: str
    role: AdminRole = AdminRole.ADMIN
    is_active: bool = True
    profile_picture: Optional[str] = None
    description: Optional[str] = None
    last_login: Optional[str] = None
    created_at: Optional[str] = None
    updated_at: Optional[str] = None


class ArticleAuthor(BackendDocument):
    name: str = "Unknown Author"
    profile_picture: Optional[str] = None
    description: Optional[str] = None


class ArticleCategory(BackendDocument):
    name: str
    slug: str
    color: Optional[str] = None


class NewsCategory(BackendDocument):
    """Category as listed by the backend."""

    name: str
    slug: str
    color: Optional[str] = None
    description: Optional[str] = None
    article_count: Optional[int] = None


class NewsArticle(BackendDocument):
    """Article as returned by the backend."""

    title: str
    slug: str
    content: str = ""
    excerpt: str = ""
    author: Optional[ArticleAuthor] = None
    category: Optional[ArticleCategory] = None
    image_url: Optional[str] = None
    featured_image: Optional[str] = None
    published_at: Optional[str] = None
    is_featured: Optional[bool] = None
    is_breaking: Optional[bool] = None
    tags: List[str] = Field(default_factory=list)
    status: Optional[str] = None
    views: Optional[int] = None
    created_at: Optional[str] = None
    updated_at: Optional[str] = None

    @field_validator("author", mode="before")
    @classmethod
    def coerce_author(cls, v):
        # Unpopulated references arrive as a bare name or id
        if isinstance(v, str):
            return {"name": v}
        return v

    @field_validator("category", mode="before")
    @classmethod
    def coerce_category(cls, v):
        if isinstance(v, str):
            return None
        return v


class ChangeFrequency(str, Enum):
    HOURLY = "hourly"
    DAILY = "daily"
    WEEKLY = "weekly"
    MONTHLY = "monthly"


class SitemapEntry(BaseModel):
    """One <url> of the sitemap."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    url: str
    last_modified: str
    change_frequency: ChangeFrequency
    priority: float
