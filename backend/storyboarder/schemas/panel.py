from __future__ import annotations
"""Pydantic v2 schemas for ComicPanel model."""

from datetime import datetime

from storyboarder.schemas.common import CamelModel, PartialUpdate


class PanelCreate(CamelModel):
    """Schema for creating a panel; page and project come from the URL."""

    panel_index: int
    layout_json: str | None = None
    description: str | None = None
    dialogue: str | None = None
    caption: str | None = None
    sound_effects: str | None = None


class PanelUpdate(PartialUpdate):
    """Schema for updating a panel. layoutJson is stored as given."""

    non_nullable_fields = ("panel_index",)

    panel_index: int | None = None
    layout_json: str | None = None
    description: str | None = None
    dialogue: str | None = None
    caption: str | None = None
    sound_effects: str | None = None


class PanelRead(CamelModel):
    """Schema for reading a panel."""

    id: str
    page_id: str
    panel_index: int
    layout_json: str | None = None
    description: str | None = None
    dialogue: str | None = None
    caption: str | None = None
    sound_effects: str | None = None
    created_at: datetime


class PanelData(CamelModel):
    panel: PanelRead
