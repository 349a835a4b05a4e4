from __future__ import annotations
"""Pydantic v2 schemas for ComicProject model."""

from datetime import datetime

from pydantic import Field

from storyboarder.schemas.common import CamelModel, PartialUpdate


class ProjectCreate(CamelModel):
    """Schema for creating a new project."""

    title: str = Field(..., min_length=1)
    description: str | None = None
    genre: str | None = None
    format: str | None = None
    target_audience: str | None = None


class ProjectUpdate(PartialUpdate):
    """Schema for updating a project's content fields."""

    non_nullable_fields = ("title",)

    title: str | None = Field(None, min_length=1)
    description: str | None = None
    genre: str | None = None
    format: str | None = None
    target_audience: str | None = None


class ProjectRead(CamelModel):
    """Schema for reading a project."""

    id: str
    user_id: str
    title: str
    description: str | None = None
    genre: str | None = None
    format: str | None = None
    target_audience: str | None = None
    created_at: datetime
    updated_at: datetime


class ProjectData(CamelModel):
    project: ProjectRead
