# utils/metadata.py

"""
Page metadata used by the site's HTML head.
"""

from typing import Any, Dict, Optional

from ..core.config import settings

DEFAULT_KEYWORDS = "news, breaking news, current events, latest news"


def build_page_metadata(
    title: Optional[str] = None,
    description: Optional[str] = None,
    path: str = "/",
    site_name: Optional[str] = None,
    site_url: Optional[str] = None,
) -> Dict[str, Any]:
    """
    Build the metadata dictionary for one page.

    Args:
        title: Page title; suffixed with " - <site name>" when a site name is set
        description: Page description
        path: Canonical path relative to the site URL
        site_name: Overrides settings.site_name
        site_url: Overrides settings.site_url

    Returns:
        Dict[str, Any]: title, description, canonical URLs, Open Graph,
        Twitter card and robots directives
    """
    name = settings.site_name if site_name is None else site_name
    base_url = (site_url or settings.site_url).rstrip("/")
    base_title = title or ""
    base_description = description or ""
    full_title = f"{base_title} - {name}" if name else base_title

    return {
        "title": full_title,
        "description": base_description,
        "keywords": DEFAULT_KEYWORDS,
        "authors": [{"name": name}] if name else [],
        "creator": name,
        "publisher": name,
        "formatDetection": {"email": False, "address": False, "telephone": False},
        "metadataBase": base_url,
        "alternates": {"canonical": path, "languages": {"en-US": path}},
        "openGraph": {
            "title": full_title,
            "description": base_description,
            "url": path,
            "siteName": name,
            "locale": "en_US",
            "type": "website",
        },
        "twitter": {
            "card": "summary_large_image",
            "title": full_title,
            "description": base_description,
        },
        "robots": {
            "index": True,
            "follow": True,
            "googleBot": {
                "index": True,
                "follow": True,
                "max-video-preview": -1,
                "max-image-preview": "large",
                "max-snippet": -1,
            },
        },
    }
