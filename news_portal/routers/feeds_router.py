# routers/feeds_router.py

from fastapi import APIRouter, Depends, Path
from fastapi.responses import PlainTextResponse, Response

from common.logger import LoggerFactory, LoggerType, LogLevel

from ..services.feed_service import CategoryNotFoundError, FeedService
from ..utils.dependencies import get_feed_service
from ..utils.errors import GatewayError

# Initialize router
router = APIRouter(prefix="/feed", tags=["feeds"])

# Setup logging
logger = LoggerFactory.get_logger(
    name="feeds-router",
    logger_type=LoggerType.STANDARD,
    level=LogLevel.INFO,
)

RSS_MEDIA_TYPE = "application/rss+xml; charset=utf-8"
FEED_HEADERS = {"Cache-Control": "public, max-age=300, s-maxage=600"}


@router.get("/category/{slug}")
@router.get("/category/{slug}/", include_in_schema=False)
async def get_category_feed(
    slug: str = Path(..., description="Category slug"),
    feed_service: FeedService = Depends(get_feed_service),
) -> Response:
    """RSS 2.0 feed of the latest published articles in one category"""
    try:
        xml = await feed_service.build_category_feed(slug)
    except CategoryNotFoundError:
        return PlainTextResponse("Category not found", status_code=404)
    except GatewayError as e:
        logger.error(f"Error generating category RSS feed for {slug}: {e.message}")
        return PlainTextResponse("Error generating RSS feed", status_code=500)

    return Response(content=xml, media_type=RSS_MEDIA_TYPE, headers=FEED_HEADERS)
