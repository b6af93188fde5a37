# services/feed_service.py

"""
Per-category RSS 2.0 feed built from published articles.
"""

import re
from datetime import datetime
from typing import Any, List, Optional
from xml.sax.saxutils import escape

from pydantic import ValidationError

from common.logger import LoggerFactory, LoggerType, LogLevel

from ..schemas.news_schemas import NewsArticle, NewsCategory
from ..utils.dates import parse_timestamp, to_rfc822, utc_now
from ..utils.errors import BackendError, GatewayError
from .proxy_service import ProxyService

logger = LoggerFactory.get_logger(
    name="feed-service",
    logger_type=LoggerType.STANDARD,
    level=LogLevel.INFO,
)

HTML_TAG_PATTERN = re.compile(r"<[^>]*>")

RSS_NAMESPACES = {
    "content": "http://purl.org/rss/1.0/modules/content/",
    "wfw": "http://wellformedweb.org/CommentAPI/",
    "dc": "http://purl.org/dc/elements/1.1/",
    "atom": "http://www.w3.org/2005/Atom",
    "sy": "http://purl.org/rss/1.0/modules/syndication/",
    "slash": "http://purl.org/rss/1.0/modules/slash/",
}


class CategoryNotFoundError(GatewayError):
    status_code = 404

    def __init__(self, slug: str):
        super().__init__("Category not found")
        self.slug = slug


def strip_html(text: str) -> str:
    return HTML_TAG_PATTERN.sub("", text or "")


def cdata(text: str) -> str:
    # "]]>" cannot appear inside a CDATA section
    return "<![CDATA[" + text.replace("]]>", "]]]]><![CDATA[>") + "]]>"


def xml_attr(text: str) -> str:
    return escape(text, {'"': "&quot;", "'": "&apos;"})


class FeedService:
    """Renders RSS feeds for a single category"""

    def __init__(
        self,
        proxy: ProxyService,
        site_url: str,
        site_name: str = "The Daily Herald",
        language: str = "en-US",
        article_limit: int = 50,
    ):
        self.proxy = proxy
        self.site_url = site_url.rstrip("/")
        self.site_name = site_name
        self.language = language
        self.article_limit = article_limit

    async def fetch_categories(self) -> List[NewsCategory]:
        result = await self.proxy.get(
            "/api/categories", error_message="Failed to fetch categories"
        )
        categories = []
        for item in coerce_categories(result.data):
            try:
                categories.append(NewsCategory.model_validate(item))
            except ValidationError as e:
                logger.warning(f"Skipping malformed category: {e}")
        return categories

    async def fetch_articles(self, slug: str) -> List[NewsArticle]:
        result = await self.proxy.get(
            "/api/articles",
            params={
                "status": "published",
                "category": slug,
                "limit": str(self.article_limit),
                "sort": "-publishedAt",
            },
            error_message="Failed to fetch articles",
        )
        data = result.data
        if not isinstance(data, dict) or not data.get("success"):
            raise BackendError("Failed to fetch articles", 500, payload=data)

        articles = []
        for item in data.get("docs") or []:
            try:
                articles.append(NewsArticle.model_validate(item))
            except ValidationError as e:
                logger.warning(f"Skipping malformed article in feed: {e}")
        return articles

    async def build_category_feed(self, slug: str) -> str:
        """
        Build the RSS document for one category.

        Raises:
            CategoryNotFoundError: no category with this slug
            GatewayError: backend failure
        """
        categories = await self.fetch_categories()
        category = next((c for c in categories if c.slug == slug), None)
        if category is None:
            raise CategoryNotFoundError(slug)

        articles = await self.fetch_articles(slug)
        logger.info(f"Rendering RSS feed for {slug} with {len(articles)} articles")
        return self.render(category, articles, categories)

    def category_tags(
        self, article: NewsArticle, categories: List[NewsCategory]
    ) -> List[str]:
        """Article category, its tags, then other categories mentioned in the text"""
        names: List[str] = []
        own = article.category.name if article.category else None
        if own:
            names.append(own)
        names.extend(article.tags)

        title = article.title.lower()
        content = article.content.lower()
        for category in categories:
            lowered = category.name.lower()
            if own and lowered == own.lower():
                continue
            if lowered in title or lowered in content:
                names.append(category.name)
        return names

    def render_item(
        self, article: NewsArticle, categories: List[NewsCategory]
    ) -> str:
        url = f"{self.site_url}/article/{article.slug}"
        title = escape(article.title)
        author = article.author.name if article.author else "Unknown Author"
        published = parse_timestamp(article.published_at) or utc_now()
        tags = "\n\t\t".join(
            f"<category>{cdata(name)}</category>"
            for name in self.category_tags(article, categories)
        )
        read_more = (
            f'<p class="read-more-container"><a title="{xml_attr(article.title)}" '
            f'class="read-more button" href="{url}" '
            f'aria-label="Read more about {xml_attr(article.title)}">Read more</a></p>'
        )
        return (
            "\t<item>\n"
            f"\t\t<title>{title}</title>\n"
            f"\t\t<link>{url}</link>\n"
            f"\t\t<comments>{url}#comments</comments>\n"
            f"\t\t<dc:creator>{cdata(author)}</dc:creator>\n"
            f"\t\t<pubDate>{to_rfc822(published)}</pubDate>\n"
            f"\t\t{tags}\n"
            f'\t\t<guid isPermaLink="false">{url}</guid>\n'
            f"\t\t<description>{cdata(strip_html(article.excerpt) + ' ' + read_more)}</description>\n"
            f"\t\t<content:encoded>{cdata(strip_html(article.content))}</content:encoded>\n"
            f"\t\t<wfw:commentRss>{url}/feed/</wfw:commentRss>\n"
            "\t\t<slash:comments>0</slash:comments>\n"
            "\t</item>"
        )

    def render(
        self,
        category: NewsCategory,
        articles: List[NewsArticle],
        categories: List[NewsCategory],
        now: Optional[datetime] = None,
    ) -> str:
        title = f"{category.name} - {self.site_name}"
        description = (
            category.description
            or f"Latest {category.name} news and updates from {self.site_name}"
        )
        page_url = f"{self.site_url}/category/{category.slug}"
        namespaces = "\n".join(
            f'\txmlns:{prefix}="{uri}"' for prefix, uri in RSS_NAMESPACES.items()
        )
        items = "\n".join(self.render_item(a, categories) for a in articles)

        return (
            '<?xml version="1.0" encoding="UTF-8"?>\n'
            '<rss version="2.0"\n'
            f"{namespaces}\n"
            "\t>\n"
            "<channel>\n"
            f"\t<title>{escape(title)}</title>\n"
            f'\t<atom:link href="{self.site_url}/feed/category/{category.slug}/" '
            'rel="self" type="application/rss+xml" />\n'
            f"\t<link>{page_url}</link>\n"
            f"\t<description>{escape(description)}</description>\n"
            f"\t<lastBuildDate>{to_rfc822(now or utc_now())}</lastBuildDate>\n"
            f"\t<language>{self.language}</language>\n"
            "\t<sy:updatePeriod>hourly</sy:updatePeriod>\n"
            "\t<sy:updateFrequency>1</sy:updateFrequency>\n"
            "<image>\n"
            f"\t<url>{self.site_url}/logo.png</url>\n"
            f"\t<title>{escape(self.site_name)}</title>\n"
            f"\t<link>{page_url}</link>\n"
            "\t<width>32</width>\n"
            "\t<height>32</height>\n"
            "</image>\n"
            f"{items}\n"
            "</channel>\n"
            "</rss>"
        )


def coerce_categories(data: Any) -> List[Any]:
    """Accept either a bare list or {"categories": [...]}"""
    if isinstance(data, list):
        return data
    if isinstance(data, dict):
        return data.get("categories") or []
    return []
