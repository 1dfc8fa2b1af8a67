# ============================================================================
# creation_hub/api/v1/routers/content.py
# ============================================================================
"""
Content Repository API Endpoints.

Lists the merged content of every configured source with search, type
filtering and sorting applied, and exposes the single-item detail view.

Usage:
    GET  /api/v1/content?search=launch&types=Carousel&sort_by=title&sort_order=asc
    GET  /api/v1/content/types
    GET  /api/v1/content/detail?type=Carousel&id=12
    POST /api/v1/content/sort
"""

import logging
from typing import List

from fastapi import APIRouter, Depends, HTTPException, Query

from ....dependencies import get_content_repository
from ....models import (
    ContentListResponse,
    ContentTypesResponse,
    ItemDetailResponse,
    SortField,
    SortOrder,
    SortState,
    SortToggleRequest,
)
from ....services.content_display import describe_item
from ....services.content_query import toggle_sort
from ....services.content_repository import ContentRepositoryService

router = APIRouter(prefix="/content", tags=["Content Repository"])
logger = logging.getLogger("creation_hub.api.content")


@router.get("", response_model=ContentListResponse)
async def list_content(
    search: str = Query("", description="Case-insensitive title substring"),
    types: List[str] = Query([], description="Restrict to these content types"),
    sort_by: SortField = Query(SortField.DATE),
    sort_order: SortOrder = Query(SortOrder.DESC),
    repository: ContentRepositoryService = Depends(get_content_repository),
):
    """Aggregate all sources, then filter and sort the result."""
    view = repository.new_view()
    view.set_search(search)
    for content_type in types:
        view.add_type(content_type)
    view.sort_by = sort_by
    view.sort_order = sort_order

    result = await repository.list_content(view)
    logger.info(f"Listed {result.count}/{result.total} items (search={search!r}, types={types})")
    return result


@router.get("/types", response_model=ContentTypesResponse)
async def list_content_types(repository: ContentRepositoryService = Depends(get_content_repository)):
    """Categories offered by the type filter."""
    return ContentTypesResponse(types=repository.content_types)


@router.get("/detail", response_model=ItemDetailResponse)
async def get_content_detail(
    content_type: str = Query(..., alias="type"),
    item_id: str = Query(..., alias="id"),
    repository: ContentRepositoryService = Depends(get_content_repository),
):
    item = await repository.find_item(content_type, item_id)
    if item is None:
        raise HTTPException(status_code=404, detail=f"No {content_type} item with id {item_id}")
    return describe_item(item)


@router.post("/sort", response_model=SortState)
async def next_sort_state(payload: SortToggleRequest):
    """Sort state after the user picks ``payload.field``."""
    return toggle_sort(payload.current, payload.field)
