# routers/rss_feeds_router.py

from typing import Any, Optional

from fastapi import APIRouter, Body, Depends, Header
from fastapi.responses import JSONResponse

from common.logger import LoggerFactory, LoggerType, LogLevel

from ..services.proxy_service import ProxyService
from ..utils.dependencies import get_proxy_service
from ..utils.errors import InvalidRequestError
from ..utils.response_converters import relay_response

# Initialize router
router = APIRouter(prefix="/api/rss-feeds", tags=["rss-feeds"])

# Setup logging
logger = LoggerFactory.get_logger(
    name="rss-feeds-router",
    logger_type=LoggerType.STANDARD,
    level=LogLevel.INFO,
)


def bearer_token(authorization: Optional[str]) -> Optional[str]:
    """Normalize an Authorization header to "Bearer <token>" """
    if not authorization:
        return None
    token = authorization.replace("Bearer ", "", 1).strip()
    return f"Bearer {token}" if token else None


@router.post("/test-category")
async def test_category_identification(
    payload: Any = Body(...),
    authorization: Optional[str] = Header(None),
    proxy: ProxyService = Depends(get_proxy_service),
) -> JSONResponse:
    """
    Ask the backend which category it would assign to a title and content.

    Raises:
        InvalidRequestError: title or content missing
    """
    fields = payload if isinstance(payload, dict) else {}
    title = fields.get("title")
    content = fields.get("content")
    if not title or not content:
        raise InvalidRequestError("Title and content are required")

    logger.info(f"Testing category identification for: {str(title)[:60]}")
    result = await proxy.post(
        "/api/rss-feeds/test-category",
        body={"title": title, "content": content},
        authorization=bearer_token(authorization),
        error_message="Failed to identify category",
    )
    return relay_response(result)
