from __future__ import annotations
"""Page API endpoints, nested under their project."""

from typing import Optional

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from storyboarder.auth import UserIdentity, get_identity
from storyboarder.database import get_db
from storyboarder.schemas.common import ApiResponse, ItemList, SuccessResponse
from storyboarder.schemas.page import PageCreate, PageData, PageRead, PageUpdate
from storyboarder.services import pages as service

router = APIRouter()


def _page_response(page) -> ApiResponse[PageData]:
    return ApiResponse[PageData](data=PageData(page=PageRead.model_validate(page)))


@router.get("/projects/{project_id}/pages", response_model=ApiResponse[ItemList[PageRead]])
async def list_pages(
    project_id: str,
    db: AsyncSession = Depends(get_db),
    identity: Optional[UserIdentity] = Depends(get_identity),
):
    """List all pages of a project, ordered by page number."""
    pages = await service.list_pages(db, identity, project_id)
    items = [PageRead.model_validate(p) for p in pages]
    return ApiResponse[ItemList[PageRead]](
        data=ItemList[PageRead](items=items, total=len(items))
    )


@router.post("/projects/{project_id}/pages", response_model=ApiResponse[PageData], status_code=201)
async def create_page(
    project_id: str,
    data: PageCreate,
    db: AsyncSession = Depends(get_db),
    identity: Optional[UserIdentity] = Depends(get_identity),
):
    page = await service.create_page(db, identity, project_id, data)
    return _page_response(page)


@router.patch("/projects/{project_id}/pages/{page_id}", response_model=ApiResponse[PageData])
async def update_page(
    project_id: str,
    page_id: str,
    data: PageUpdate,
    db: AsyncSession = Depends(get_db),
    identity: Optional[UserIdentity] = Depends(get_identity),
):
    page = await service.update_page(db, identity, project_id, page_id, data)
    return _page_response(page)


@router.delete("/projects/{project_id}/pages/{page_id}", response_model=SuccessResponse)
async def delete_page(
    project_id: str,
    page_id: str,
    db: AsyncSession = Depends(get_db),
    identity: Optional[UserIdentity] = Depends(get_identity),
):
    """Delete a page and all of its panels."""
    await service.delete_page(db, identity, project_id, page_id)
    return SuccessResponse()
