from __future__ import annotations
"""Project API endpoints."""

from typing import Optional

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from storyboarder.auth import UserIdentity, get_identity
from storyboarder.database import get_db
from storyboarder.schemas.common import ApiResponse, ItemList, SuccessResponse
from storyboarder.schemas.project import (
    ProjectCreate,
    ProjectData,
    ProjectRead,
    ProjectUpdate,
)
from storyboarder.services import projects as service

router = APIRouter()


def _project_response(project) -> ApiResponse[ProjectData]:
    return ApiResponse[ProjectData](
        data=ProjectData(project=ProjectRead.model_validate(project))
    )


@router.get("/projects", response_model=ApiResponse[ItemList[ProjectRead]])
async def list_projects(
    db: AsyncSession = Depends(get_db),
    identity: Optional[UserIdentity] = Depends(get_identity),
):
    """List the caller's projects, newest first."""
    projects = await service.list_projects(db, identity)
    items = [ProjectRead.model_validate(p) for p in projects]
    return ApiResponse[ItemList[ProjectRead]](
        data=ItemList[ProjectRead](items=items, total=len(items))
    )


@router.post("/projects", response_model=ApiResponse[ProjectData], status_code=201)
async def create_project(
    data: ProjectCreate,
    db: AsyncSession = Depends(get_db),
    identity: Optional[UserIdentity] = Depends(get_identity),
):
    """Create a new project owned by the caller."""
    project = await service.create_project(db, identity, data)
    return _project_response(project)


@router.patch("/projects/{project_id}", response_model=ApiResponse[ProjectData])
async def update_project(
    project_id: str,
    data: ProjectUpdate,
    db: AsyncSession = Depends(get_db),
    identity: Optional[UserIdentity] = Depends(get_identity),
):
    """Update a project's content fields."""
    project = await service.update_project(db, identity, project_id, data)
    return _project_response(project)


@router.delete("/projects/{project_id}", response_model=SuccessResponse)
async def delete_project(
    project_id: str,
    db: AsyncSession = Depends(get_db),
    identity: Optional[UserIdentity] = Depends(get_identity),
):
    """Delete a project together with its pages and panels."""
    await service.delete_project(db, identity, project_id)
    return SuccessResponse()
