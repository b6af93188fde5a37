# routers/categories_router.py

from typing import Any

from fastapi import APIRouter, Body, Depends, Path
from fastapi.responses import JSONResponse

from common.logger import LoggerFactory, LoggerType, LogLevel

from ..services.proxy_service import ProxyService
from ..utils.dependencies import get_proxy_service, require_authorization
from ..utils.response_converters import relay_response

# Initialize router
router = APIRouter(prefix="/api/categories", tags=["categories"])

# Setup logging
logger = LoggerFactory.get_logger(
    name="categories-router",
    logger_type=LoggerType.STANDARD,
    level=LogLevel.INFO,
)


@router.get("")
async def list_categories(
    proxy: ProxyService = Depends(get_proxy_service),
) -> JSONResponse:
    """
    List categories.

    A {"success": true, "categories": [...]} reply is unwrapped to the bare
    list; any other shape is relayed as is.
    """
    result = await proxy.get("/api/categories", error_message="Failed to fetch categories")
    data = result.data
    if (
        isinstance(data, dict)
        and data.get("success")
        and isinstance(data.get("categories"), list)
    ):
        return JSONResponse(content=data["categories"], status_code=result.status_code)
    return relay_response(result)


@router.post("")
async def create_category(
    payload: Any = Body(...),
    authorization: str = Depends(require_authorization),
    proxy: ProxyService = Depends(get_proxy_service),
) -> JSONResponse:
    details = payload if isinstance(payload, dict) else {}
    logger.info(f"Creating category: {details.get('name')}")
    result = await proxy.post(
        "/api/categories",
        body=payload,
        authorization=authorization,
        error_message="Failed to create category",
    )
    return relay_response(result)


@router.put("/{category_id}")
async def update_category(
    category_id: str = Path(..., description="Category id"),
    payload: Any = Body(...),
    authorization: str = Depends(require_authorization),
    proxy: ProxyService = Depends(get_proxy_service),
) -> JSONResponse:
    logger.info(f"Updating category {category_id}")
    result = await proxy.put(
        f"/api/categories/{category_id}",
        body=payload,
        authorization=authorization,
        error_message="Failed to update category",
    )
    return relay_response(result)


@router.delete("/{category_id}")
async def delete_category(
    category_id: str = Path(..., description="Category id"),
    authorization: str = Depends(require_authorization),
    proxy: ProxyService = Depends(get_proxy_service),
) -> JSONResponse:
    logger.info(f"Deleting category {category_id}")
    result = await proxy.delete(
        f"/api/categories/{category_id}",
        authorization=authorization,
        error_message="Failed to delete category",
    )
    return relay_response(result)
