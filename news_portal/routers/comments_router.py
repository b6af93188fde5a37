# routers/comments_router.py

from typing import Any, Optional

from fastapi import APIRouter, Body, Depends, Path, Query
from fastapi.responses import JSONResponse

from common.logger import LoggerFactory, LoggerType, LogLevel

from ..services.proxy_service import ProxyService
from ..utils.dependencies import get_proxy_service, require_authorization
from ..utils.response_converters import relay_response

# Initialize router
router = APIRouter(prefix="/api/comments", tags=["comments"])

# Setup logging
logger = LoggerFactory.get_logger(
    name="comments-router",
    logger_type=LoggerType.STANDARD,
    level=LogLevel.INFO,
)


@router.post("")
async def create_comment(
    payload: Any = Body(...),
    proxy: ProxyService = Depends(get_proxy_service),
) -> JSONResponse:
    """Submit a reader comment (public)"""
    result = await proxy.post(
        "/api/comments", body=payload, error_message="Failed to submit comment"
    )
    return relay_response(result)


@router.get("/admin")
async def list_comments_for_moderation(
    page: str = Query("1"),
    limit: str = Query("20"),
    status: Optional[str] = Query(None),
    article_id: Optional[str] = Query(None, alias="articleId"),
    authorization: str = Depends(require_authorization),
    proxy: ProxyService = Depends(get_proxy_service),
) -> JSONResponse:
    """
    Moderation queue

    - **status**: pending, approved, rejected...
    - **articleId**: restrict to one article
    """
    params = {"page": page, "limit": limit}
    if status:
        params["status"] = status
    if article_id:
        params["articleId"] = article_id

    result = await proxy.get(
        "/api/comments/admin",
        params=params,
        authorization=authorization,
        error_message="Failed to fetch comments",
    )
    return relay_response(result)


@router.get("/admin/settings")
async def get_comment_settings(
    authorization: str = Depends(require_authorization),
    proxy: ProxyService = Depends(get_proxy_service),
) -> JSONResponse:
    result = await proxy.get(
        "/api/comments/admin/settings",
        authorization=authorization,
        error_message="Failed to fetch comment settings",
    )
    return relay_response(result)


@router.patch("/admin/settings")
async def update_comment_settings(
    payload: Any = Body(...),
    authorization: str = Depends(require_authorization),
    proxy: ProxyService = Depends(get_proxy_service),
) -> JSONResponse:
    result = await proxy.patch(
        "/api/comments/admin/settings",
        body=payload,
        authorization=authorization,
        error_message="Failed to update comment settings",
    )
    return relay_response(result)


@router.get("/article/{article_id}")
async def list_article_comments(
    article_id: str = Path(..., description="Article id"),
    page: str = Query("1"),
    limit: str = Query("10"),
    proxy: ProxyService = Depends(get_proxy_service),
) -> JSONResponse:
    """Approved comments for one article"""
    result = await proxy.get(
        f"/api/comments/article/{article_id}",
        params={"page": page, "limit": limit},
        error_message="Failed to fetch comments",
    )
    return relay_response(result)


@router.delete("/{comment_id}")
async def delete_comment(
    comment_id: str = Path(..., description="Comment id"),
    authorization: str = Depends(require_authorization),
    proxy: ProxyService = Depends(get_proxy_service),
) -> JSONResponse:
    logger.info(f"Deleting comment {comment_id}")
    result = await proxy.delete(
        f"/api/comments/{comment_id}",
        authorization=authorization,
        error_message="Failed to delete comment",
    )
    return relay_response(result)
