# routers/contact_router.py

from typing import Any, Optional

from fastapi import APIRouter, Body, Depends, Path, Query
from fastapi.responses import JSONResponse

from common.logger import LoggerFactory, LoggerType, LogLevel

from ..services.proxy_service import ProxyService
from ..utils.dependencies import get_proxy_service, require_authorization
from ..utils.response_converters import relay_response

# Initialize router
router = APIRouter(prefix="/api/contact", tags=["contact"])

# Setup logging
logger = LoggerFactory.get_logger(
    name="contact-router",
    logger_type=LoggerType.STANDARD,
    level=LogLevel.INFO,
)


@router.post("")
async def submit_contact(
    payload: Any = Body(...),
    proxy: ProxyService = Depends(get_proxy_service),
) -> JSONResponse:
    """Public contact form submission"""
    result = await proxy.post(
        "/api/contact", body=payload, error_message="Failed to submit contact form"
    )
    return relay_response(result)


@router.get("/admin")
async def list_contacts(
    page: str = Query("1"),
    limit: str = Query("20"),
    status: Optional[str] = Query(None),
    priority: Optional[str] = Query(None),
    authorization: str = Depends(require_authorization),
    proxy: ProxyService = Depends(get_proxy_service),
) -> JSONResponse:
    params = {"page": page, "limit": limit}
    if status:
        params["status"] = status
    if priority:
        params["priority"] = priority

    result = await proxy.get(
        "/api/contact/admin",
        params=params,
        authorization=authorization,
        error_message="Failed to fetch contacts",
    )
    return relay_response(result)


@router.get("/admin/stats")
async def get_contact_stats(
    authorization: str = Depends(require_authorization),
    proxy: ProxyService = Depends(get_proxy_service),
) -> JSONResponse:
    result = await proxy.get(
        "/api/contact/admin/stats",
        authorization=authorization,
        error_message="Failed to fetch contact stats",
    )
    return relay_response(result)


@router.get("/admin/{contact_id}")
async def get_contact(
    contact_id: str = Path(..., description="Contact message id"),
    authorization: str = Depends(require_authorization),
    proxy: ProxyService = Depends(get_proxy_service),
) -> JSONResponse:
    result = await proxy.get(
        f"/api/contact/admin/{contact_id}",
        authorization=authorization,
        error_message="Failed to fetch contact",
    )
    return relay_response(result)


@router.patch("/admin/{contact_id}/status")
async def update_contact_status(
    contact_id: str = Path(..., description="Contact message id"),
    payload: Any = Body(...),
    authorization: str = Depends(require_authorization),
    proxy: ProxyService = Depends(get_proxy_service),
) -> JSONResponse:
    details = payload if isinstance(payload, dict) else {}
    logger.info(f"Updating contact {contact_id} status: {details.get('status')}")
    result = await proxy.patch(
        f"/api/contact/admin/{contact_id}/status",
        body=payload,
        authorization=authorization,
        error_message="Failed to update contact status",
    )
    return relay_response(result)


@router.delete("/admin/{contact_id}")
async def delete_contact(
    contact_id: str = Path(..., description="Contact message id"),
    authorization: str = Depends(require_authorization),
    proxy: ProxyService = Depends(get_proxy_service),
) -> JSONResponse:
    logger.info(f"Deleting contact {contact_id}")
    result = await proxy.delete(
        f"/api/contact/admin/{contact_id}",
        authorization=authorization,
        error_message="Failed to delete contact",
    )
    return relay_response(result)
