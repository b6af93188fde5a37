# core/config.py

"""
Configuration management for the news portal gateway.
"""

from typing import List, Optional

from pydantic import AliasChoices, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings with validation."""

    # Service configuration
    app_name: str = "news-portal-gateway"
    debug: bool = False
    environment: str = "development"
    host: str = "0.0.0.0"
    port: int = 3000

    # Backend REST service
    api_base_url: str = Field(
        default="http://localhost:5000",
        validation_alias=AliasChoices(
            "api_base_url", "backend_url", "next_public_api_url"
        ),
        description="Base URL of the backend REST API",
    )
    backend_timeout_seconds: float = Field(
        default=30.0, description="Timeout for proxied backend requests"
    )

    # Public site
    site_url: str = Field(
        default="http://localhost:3000",
        validation_alias=AliasChoices("site_url", "next_public_site_url"),
        description="Public URL of the site, used for sitemap and feed links",
    )
    site_name: str = Field(default="The Daily Herald")
    site_language: str = Field(default="en-US")
    sitemap_categories: List[str] = Field(
        default_factory=lambda: [
            "politics",
            "technology",
            "sports",
            "business",
            "health",
            "world",
            "entertainment",
        ],
        description="Category slugs listed in the sitemap",
    )
    sitemap_article_limit: int = Field(
        default=10000, description="Maximum articles fetched for sitemap.xml"
    )
    sitemap_timeout_seconds: float = Field(
        default=60.0, description="Timeout for the sitemap article fetch"
    )
    sitemap_page_timeout_seconds: float = Field(
        default=30.0, description="Timeout for paged sitemap article fetches"
    )
    feed_article_limit: int = Field(
        default=50, description="Articles per category RSS feed"
    )

    # Client-side auth state storage
    auth_storage_backend: str = Field(
        default="memory", description="Auth state storage: memory, file or redis"
    )
    auth_storage_dir: str = Field(
        default=".auth_state", description="Directory for file auth storage"
    )
    redis_host: str = Field(default="localhost", description="Redis host")
    redis_port: int = Field(default=6379, description="Redis port")
    redis_db: int = Field(default=0, description="Redis database number")
    redis_password: Optional[str] = Field(default=None, description="Redis password")
    redis_key_prefix: str = Field(
        default="news-portal:", description="Redis key prefix"
    )

    # CORS
    cors_origins: List[str] = Field(
        default_factory=lambda: ["http://localhost:3000"],
        description="Allowed origins when debug is off",
    )

    # Logging configuration
    log_level: str = "INFO"
    log_file_path: str = "logs/"

    @field_validator("api_base_url", "site_url")
    @classmethod
    def strip_trailing_slash(cls, v):
        v = v.strip()
        if not v.startswith(("http://", "https://")):
            raise ValueError("URL must start with http:// or https://")
        return v.rstrip("/")

    @field_validator("auth_storage_backend")
    @classmethod
    def validate_auth_storage_backend(cls, v):
        valid_backends = {"memory", "file", "redis"}
        if v.lower() not in valid_backends:
            raise ValueError(
                f"auth_storage_backend must be one of {sorted(valid_backends)}"
            )
        return v.lower()

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v):
        levels = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        if v.upper() not in levels:
            raise ValueError(f"log_level must be one of {sorted(levels)}")
        return v.upper()

    @field_validator("sitemap_article_limit", "feed_article_limit")
    @classmethod
    def validate_positive_limit(cls, v):
        if v < 1:
            raise ValueError("article limits must be at least 1")
        return v

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    @property
    def storage_config(self) -> dict:
        """Get auth storage configuration"""
        return {
            "backend": self.auth_storage_backend,
            "directory": self.auth_storage_dir,
            "redis_host": self.redis_host,
            "redis_port": self.redis_port,
            "redis_db": self.redis_db,
            "redis_password": self.redis_password,
            "redis_key_prefix": self.redis_key_prefix,
        }


# Global settings instance
settings = Settings()
