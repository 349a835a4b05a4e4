from __future__ import annotations
"""Panel API endpoints, nested under their page."""

from typing import Optional

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from storyboarder.auth import UserIdentity, get_identity
from storyboarder.database import get_db
from storyboarder.schemas.common import ApiResponse, ItemList, SuccessResponse
from storyboarder.schemas.panel import PanelCreate, PanelData, PanelRead, PanelUpdate
from storyboarder.services import panels as service

router = APIRouter()

_BASE = "/projects/{project_id}/pages/{page_id}/panels"


def _panel_response(panel) -> ApiResponse[PanelData]:
    return ApiResponse[PanelData](data=PanelData(panel=PanelRead.model_validate(panel)))


@router.get(_BASE, response_model=ApiResponse[ItemList[PanelRead]])
async def list_panels(
    project_id: str,
    page_id: str,
    db: AsyncSession = Depends(get_db),
    identity: Optional[UserIdentity] = Depends(get_identity),
):
    """List all panels on a page, ordered by panel index."""
    panels = await service.list_panels(db, identity, project_id, page_id)
    items = [PanelRead.model_validate(p) for p in panels]
    return ApiResponse[ItemList[PanelRead]](
        data=ItemList[PanelRead](items=items, total=len(items))
    )


@router.post(_BASE, response_model=ApiResponse[PanelData], status_code=201)
async def create_panel(
    project_id: str,
    page_id: str,
    data: PanelCreate,
    db: AsyncSession = Depends(get_db),
    identity: Optional[UserIdentity] = Depends(get_identity),
):
    panel = await service.create_panel(db, identity, project_id, page_id, data)
    return _panel_response(panel)


@router.patch(_BASE + "/{panel_id}", response_model=ApiResponse[PanelData])
async def update_panel(
    project_id: str,
    page_id: str,
    panel_id: str,
    data: PanelUpdate,
    db: AsyncSession = Depends(get_db),
    identity: Optional[UserIdentity] = Depends(get_identity),
):
    panel = await service.update_panel(db, identity, project_id, page_id, panel_id, data)
    return _panel_response(panel)


@router.delete(_BASE + "/{panel_id}", response_model=SuccessResponse)
async def delete_panel(
    project_id: str,
    page_id: str,
    panel_id: str,
    db: AsyncSession = Depends(get_db),
    identity: Optional[UserIdentity] = Depends(get_identity),
):
    await service.delete_panel(db, identity, project_id, page_id, panel_id)
    return SuccessResponse()
