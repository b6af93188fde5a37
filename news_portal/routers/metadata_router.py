# routers/metadata_router.py

from typing import Any, Dict, Optional

from fastapi import APIRouter, Query

from ..utils.metadata import build_page_metadata

router = APIRouter(prefix="/api/metadata", tags=["metadata"])


@router.get("")
async def get_page_metadata(
    title: Optional[str] = Query(None, description="Page title"),
    description: Optional[str] = Query(None, description="Page description"),
    path: str = Query("/", description="Canonical path"),
) -> Dict[str, Any]:
    """Head metadata (title, canonical, Open Graph, Twitter, robots) for a page"""
    return build_page_metadata(title, description, path)
