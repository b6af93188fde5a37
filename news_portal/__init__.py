# __init__.py
"""
News Portal Gateway - web tier of the news site: proxy routes to the backend
REST API, sitemap and RSS feeds, pagination and admin session helpers.
"""

__version__ = "1.0.0"
__title__ = "News Portal Gateway"
__description__ = "Proxy gateway and site documents for the news publishing site"
