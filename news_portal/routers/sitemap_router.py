# routers/sitemap_router.py

from fastapi import APIRouter, Depends, Query
from fastapi.responses import JSONResponse, Response

from common.logger import LoggerFactory, LoggerType, LogLevel

from ..services.sitemap_service import SitemapService
from ..utils.dates import to_iso_timestamp, utc_now
from ..utils.dependencies import get_sitemap_service
from ..utils.errors import GatewayError, INTERNAL_SERVER_ERROR
from ..utils.response_converters import error_response

# Initialize router
router = APIRouter(tags=["sitemap"])

# Setup logging
logger = LoggerFactory.get_logger(
    name="sitemap-router",
    logger_type=LoggerType.STANDARD,
    level=LogLevel.INFO,
)

SITEMAP_HEADERS = {"Cache-Control": "public, max-age=300, s-maxage=300"}


@router.get("/sitemap.xml")
async def get_sitemap(
    sitemap_service: SitemapService = Depends(get_sitemap_service),
) -> Response:
    """Full sitemap; served even when the article fetch fails"""
    document = await sitemap_service.generate()
    return Response(
        content=document.xml,
        media_type="application/xml",
        headers=SITEMAP_HEADERS,
    )


@router.get("/api/sitemap/articles")
async def get_article_sitemap(
    page: str = Query("1"),
    limit: str = Query("100"),
    sitemap_service: SitemapService = Depends(get_sitemap_service),
) -> JSONResponse:
    """One page of article sitemap entries"""
    try:
        entries = await sitemap_service.fetch_article_page(page=page, limit=limit)
    except GatewayError as e:
        logger.error(f"Error generating article sitemap: {e.message}")
        return error_response(GatewayError("Failed to generate article sitemap"))

    return JSONResponse(
        content={
            "articles": [
                entry.model_dump(by_alias=True, mode="json") for entry in entries
            ]
        }
    )


@router.get("/api/sitemap/refresh")
async def get_sitemap_status(
    sitemap_service: SitemapService = Depends(get_sitemap_service),
) -> JSONResponse:
    """Regenerate the sitemap and report its size and article count"""
    try:
        document = await sitemap_service.generate()
    except Exception as e:
        logger.error(f"❌ Error checking sitemap status: {e}")
        return error_response(GatewayError(INTERNAL_SERVER_ERROR))

    return JSONResponse(
        content={
            "success": True,
            "accessible": True,
            "articleCount": document.article_count,
            "lastModified": to_iso_timestamp(document.generated_at),
            "size": len(document.xml),
        }
    )


@router.post("/api/sitemap/refresh")
async def refresh_sitemap(
    sitemap_service: SitemapService = Depends(get_sitemap_service),
) -> JSONResponse:
    logger.info("🔄 Manual sitemap refresh triggered")
    try:
        document = await sitemap_service.generate()
    except Exception as e:
        logger.error(f"❌ Error refreshing sitemap: {e}")
        return error_response(GatewayError(INTERNAL_SERVER_ERROR))

    logger.info(f"✅ Sitemap refreshed successfully ({document.total_urls} URLs)")
    return JSONResponse(
        content={
            "success": True,
            "message": "Sitemap refreshed successfully",
            "timestamp": to_iso_timestamp(utc_now()),
        }
    )
