from __future__ import annotations
"""Pydantic v2 schemas for ComicPage model."""

from datetime import datetime

from pydantic import Field

from storyboarder.schemas.common import CamelModel, PartialUpdate


class PageCreate(CamelModel):
    """Schema for creating a page; the project comes from the URL."""

    page_number: int = Field(..., ge=1)
    title: str | None = None
    thumbnail_url: str | None = None
    notes: str | None = None


class PageUpdate(PartialUpdate):
    """Schema for updating a page."""

    non_nullable_fields = ("page_number",)

    page_number: int | None = Field(None, ge=1)
    title: str | None = None
    thumbnail_url: str | None = None
    notes: str | None = None


class PageRead(CamelModel):
    """Schema for reading a page."""

    id: str
    project_id: str
    page_number: int
    title: str | None = None
    thumbnail_url: str | None = None
    notes: str | None = None
    created_at: datetime
    updated_at: datetime


class PageData(CamelModel):
    page: PageRead
