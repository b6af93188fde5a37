# routers/articles_router.py

from fastapi import APIRouter, Depends, Path, Request
from fastapi.responses import JSONResponse

from common.logger import LoggerFactory, LoggerType, LogLevel

from ..services.proxy_service import ProxyService
from ..utils.dependencies import get_proxy_service
from ..utils.errors import GatewayError, INTERNAL_SERVER_ERROR
from ..utils.response_converters import error_response, relay_response

# Initialize router
router = APIRouter(prefix="/api/articles", tags=["articles"])

# Setup logging
logger = LoggerFactory.get_logger(
    name="articles-router",
    logger_type=LoggerType.STANDARD,
    level=LogLevel.INFO,
)

ARTICLE_CACHE_HEADERS = {
    "Cache-Control": "public, max-age=60, stale-while-revalidate=300"
}
MISSING_ARTICLE_CACHE_HEADERS = {
    "Cache-Control": "public, max-age=300, stale-while-revalidate=600"
}
NO_CACHE_HEADERS = {"Cache-Control": "no-cache, no-store, must-revalidate"}


@router.get("")
async def list_articles(
    request: Request,
    proxy: ProxyService = Depends(get_proxy_service),
) -> JSONResponse:
    """
    List articles. The query string (page, limit, category, status, sort,
    search...) is forwarded untouched.
    """
    result = await proxy.get(
        "/api/articles",
        params=request.url.query,
        error_message="Failed to fetch articles",
    )
    return relay_response(result)


@router.get("/slug/{slug}")
async def get_article_by_slug(
    slug: str = Path(..., description="Article slug"),
    proxy: ProxyService = Depends(get_proxy_service),
) -> JSONResponse:
    """Fetch one article by slug, with CDN-friendly cache headers"""
    try:
        result = await proxy.get(
            f"/api/articles/slug/{slug}", error_message="Article not found"
        )
        return relay_response(result, headers=ARTICLE_CACHE_HEADERS)

    except GatewayError as e:
        if e.status_code == 404:
            logger.info(f"Article not found: {slug}")
            return error_response(
                GatewayError("Article not found", 404),
                headers=MISSING_ARTICLE_CACHE_HEADERS,
            )
        logger.error(f"Error fetching article {slug}: {e.message}")
        return error_response(
            GatewayError(INTERNAL_SERVER_ERROR), headers=NO_CACHE_HEADERS
        )
