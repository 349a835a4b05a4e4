"""Pydantic v2 schemas package."""

from storyboarder.schemas.common import ApiResponse, ItemList, SuccessResponse
from storyboarder.schemas.project import (
    ProjectCreate,
    ProjectData,
    ProjectRead,
    ProjectUpdate,
)
from storyboarder.schemas.page import PageCreate, PageData, PageRead, PageUpdate
from storyboarder.schemas.panel import PanelCreate, PanelData, PanelRead, PanelUpdate

__all__ = [
    "ApiResponse",
    "ItemList",
    "SuccessResponse",
    "ProjectCreate",
    "ProjectData",
    "ProjectRead",
    "ProjectUpdate",
    "PageCreate",
    "PageData",
    "PageRead",
    "PageUpdate",
    "PanelCreate",
    "PanelData",
    "PanelRead",
    "PanelUpdate",
]
