from __future__ import annotations
"""Master API router — mounts all sub-routers."""

from fastapi import APIRouter

from storyboarder.api.projects import router as projects_router
from storyboarder.api.pages import router as pages_router
from storyboarder.api.panels import router as panels_router

api_router = APIRouter(prefix="/api", redirect_slashes=False)

api_router.include_router(projects_router, tags=["Projects"])
api_router.include_router(pages_router, tags=["Pages"])
api_router.include_router(panels_router, tags=["Panels"])
