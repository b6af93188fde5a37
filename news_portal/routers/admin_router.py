# routers/admin_router.py

from typing import Any

from fastapi import APIRouter, Body, Depends, Path, Request
from fastapi.responses import JSONResponse

from common.logger import LoggerFactory, LoggerType, LogLevel

from ..services.proxy_service import ProxyService
from ..utils.dependencies import get_proxy_service, require_authorization
from ..utils.response_converters import relay_response

# Initialize router
router = APIRouter(prefix="/api/admin", tags=["admin"])

# Setup logging
logger = LoggerFactory.get_logger(
    name="admin-router",
    logger_type=LoggerType.STANDARD,
    level=LogLevel.INFO,
)


@router.get("/stats")
async def get_dashboard_stats(
    authorization: str = Depends(require_authorization),
    proxy: ProxyService = Depends(get_proxy_service),
) -> JSONResponse:
    result = await proxy.get(
        "/api/admin/stats",
        authorization=authorization,
        error_message="Failed to fetch stats",
    )
    return relay_response(result)


@router.get("/analytics")
async def get_analytics(
    request: Request,
    authorization: str = Depends(require_authorization),
    proxy: ProxyService = Depends(get_proxy_service),
) -> JSONResponse:
    """Analytics dashboard data; the query string (e.g. period) is forwarded"""
    result = await proxy.get(
        "/api/admin/analytics",
        params=request.url.query,
        authorization=authorization,
        error_message="Failed to fetch analytics",
    )
    return relay_response(result)


@router.get("/users")
async def list_admin_users(
    authorization: str = Depends(require_authorization),
    proxy: ProxyService = Depends(get_proxy_service),
) -> JSONResponse:
    result = await proxy.get(
        "/api/admin/users",
        authorization=authorization,
        error_message="Failed to fetch users",
    )
    return relay_response(result)


@router.post("/users")
async def create_admin_user(
    payload: Any = Body(...),
    authorization: str = Depends(require_authorization),
    proxy: ProxyService = Depends(get_proxy_service),
) -> JSONResponse:
    details = payload if isinstance(payload, dict) else {}
    logger.info(f"Creating admin user: {details.get('email')}")
    result = await proxy.post(
        "/api/admin/users",
        body=payload,
        authorization=authorization,
        error_message="Failed to create user",
    )
    return relay_response(result)


@router.put("/users/{user_id}")
async def update_admin_user(
    user_id: str = Path(..., description="Admin user id"),
    payload: Any = Body(...),
    authorization: str = Depends(require_authorization),
    proxy: ProxyService = Depends(get_proxy_service),
) -> JSONResponse:
    logger.info(f"Updating admin user {user_id}")
    result = await proxy.put(
        f"/api/admin/users/{user_id}",
        body=payload,
        authorization=authorization,
        error_message="Failed to update user",
    )
    return relay_response(result)


@router.delete("/users/{user_id}")
async def delete_admin_user(
    user_id: str = Path(..., description="Admin user id"),
    authorization: str = Depends(require_authorization),
    proxy: ProxyService = Depends(get_proxy_service),
) -> JSONResponse:
    logger.info(f"Deleting admin user {user_id}")
    result = await proxy.delete(
        f"/api/admin/users/{user_id}",
        authorization=authorization,
        error_message="Failed to delete user",
    )
    return relay_response(result)
