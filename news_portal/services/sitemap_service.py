# services/sitemap_service.py

"""
Sitemap generation: static pages, RSS feeds, category pages and every
published article fetched from the backend sitemap endpoint.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Any, List, Optional
from xml.sax.saxutils import escape

from common.logger import LoggerFactory, LoggerType, LogLevel

from ..schemas.news_schemas import ChangeFrequency, SitemapEntry
from ..utils.dates import parse_timestamp, to_iso_timestamp, utc_now
from ..utils.errors import GatewayError
from .proxy_service import ProxyService

logger = LoggerFactory.get_logger(
    name="sitemap-service",
    logger_type=LoggerType.STANDARD,
    level=LogLevel.INFO,
)

SITEMAP_NAMESPACE = "http://www.sitemaps.org/schemas/sitemap/0.9"


@dataclass
class SitemapDocument:
    xml: str
    total_urls: int
    article_count: int
    generated_at: datetime


class SitemapService:
    """Builds sitemap.xml and the paged article sitemap listing"""

    def __init__(
        self,
        proxy: ProxyService,
        site_url: str,
        categories: List[str],
        article_limit: int = 10000,
        timeout: float = 60.0,
        page_timeout: float = 30.0,
    ):
        self.proxy = proxy
        self.site_url = site_url.rstrip("/")
        self.categories = categories
        self.article_limit = article_limit
        self.timeout = timeout
        self.page_timeout = page_timeout

    def static_entries(self, now: Optional[datetime] = None) -> List[SitemapEntry]:
        """Home, about, contact, RSS feeds and category pages"""
        lastmod = to_iso_timestamp(now or utc_now())
        base = self.site_url

        entries = [
            SitemapEntry(
                url=base,
                last_modified=lastmod,
                change_frequency=ChangeFrequency.DAILY,
                priority=1.0,
            ),
            SitemapEntry(
                url=f"{base}/about",
                last_modified=lastmod,
                change_frequency=ChangeFrequency.MONTHLY,
                priority=0.8,
            ),
            SitemapEntry(
                url=f"{base}/contact",
                last_modified=lastmod,
                change_frequency=ChangeFrequency.MONTHLY,
                priority=0.8,
            ),
            SitemapEntry(
                url=f"{base}/feed/",
                last_modified=lastmod,
                change_frequency=ChangeFrequency.HOURLY,
                priority=0.9,
            ),
        ]
        entries.extend(
            SitemapEntry(
                url=f"{base}/feed/category/{slug}/",
                last_modified=lastmod,
                change_frequency=ChangeFrequency.HOURLY,
                priority=0.8,
            )
            for slug in self.categories
        )
        entries.extend(
            SitemapEntry(
                url=f"{base}/category/{slug}",
                last_modified=lastmod,
                change_frequency=ChangeFrequency.DAILY,
                priority=0.7,
            )
            for slug in self.categories
        )
        return entries

    def article_entry(self, article: dict) -> Optional[SitemapEntry]:
        slug = article.get("slug")
        if not slug:
            return None
        modified = parse_timestamp(article.get("updatedAt")) or parse_timestamp(
            article.get("publishedAt")
        )
        return SitemapEntry(
            url=f"{self.site_url}/article/{slug}",
            last_modified=to_iso_timestamp(modified or utc_now()),
            change_frequency=ChangeFrequency.WEEKLY,
            priority=0.6,
        )

    def _article_entries(self, data: Any) -> List[SitemapEntry]:
        if not isinstance(data, dict) or not data.get("success") or not data.get("docs"):
            return []
        entries = []
        for article in data["docs"]:
            entry = self.article_entry(article) if isinstance(article, dict) else None
            if entry is not None:
                entries.append(entry)
        return entries

    async def fetch_article_page(self, page: str = "1", limit: str = "100") -> List[SitemapEntry]:
        """
        One page of article entries from the backend sitemap endpoint.

        Raises:
            GatewayError: backend failure
        """
        result = await self.proxy.get(
            "/api/articles/sitemap",
            params={"page": page, "limit": limit},
            error_message="Failed to fetch articles",
            timeout=self.page_timeout,
        )
        return self._article_entries(result.data)

    async def fetch_all_article_entries(self) -> List[SitemapEntry]:
        """All published articles; an unreachable backend yields an empty list"""
        try:
            result = await self.proxy.get(
                "/api/articles/sitemap",
                params={"limit": str(self.article_limit)},
                error_message="Failed to fetch articles",
                timeout=self.timeout,
            )
        except GatewayError as e:
            logger.error(f"Error fetching articles for sitemap: {e.message}")
            return []

        entries = self._article_entries(result.data)
        if not entries:
            logger.warning("No articles data found in sitemap response")
        return entries

    async def generate(self) -> SitemapDocument:
        now = utc_now()
        static = self.static_entries(now)
        articles = await self.fetch_all_article_entries()
        entries = static + articles
        logger.info(
            f"Sitemap generated with {len(entries)} total URLs ({len(articles)} articles)"
        )
        return SitemapDocument(
            xml=render_urlset(entries),
            total_urls=len(entries),
            article_count=len(articles),
            generated_at=now,
        )


def render_urlset(entries: List[SitemapEntry]) -> str:
    """Render entries as a sitemap <urlset> document"""
    urls = "\n".join(
        "  <url>\n"
        f"    <loc>{escape(entry.url)}</loc>\n"
        f"    <lastmod>{entry.last_modified}</lastmod>\n"
        f"    <changefreq>{entry.change_frequency.value}</changefreq>\n"
        f"    <priority>{entry.priority:g}</priority>\n"
        "  </url>"
        for entry in entries
    )
    return (
        '<?xml version="1.0" encoding="UTF-8"?>\n'
        f'<urlset xmlns="{SITEMAP_NAMESPACE}">\n'
        f"{urls}\n"
        "</urlset>"
    )
