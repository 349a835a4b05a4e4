from __future__ import annotations
"""Ownership-chain resolution: user -> project -> page -> panel.

Each resolver filters by the entity id AND its claimed parent, so a row that
exists under a different owner or parent is indistinguishable from a missing
one. Both fail with NOT_FOUND.
"""

import logging

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from storyboarder.errors import ActionError, ErrorCode
from storyboarder.models import ComicPage, ComicPanel, ComicProject

logger = logging.getLogger(__name__)


async def resolve_project(db: AsyncSession, project_id: str, user_id: str) -> ComicProject:
    """Return the project if ``user_id`` owns it."""
    result = await db.execute(
        select(ComicProject).where(
            ComicProject.id == project_id,
            ComicProject.user_id == user_id,
        )
    )
    project = result.scalar_one_or_none()
    if project is None:
        logger.debug("project %s not resolvable for user %s", project_id, user_id)
        raise ActionError(ErrorCode.NOT_FOUND, "Project not found.")
    return project


async def resolve_page(
    db: AsyncSession, page_id: str, project_id: str, user_id: str
) -> ComicPage:
    """Return the page if it belongs to ``project_id`` and the user owns that project.

    The caller-supplied project id scopes the lookup; it is not re-derived
    from the page row.
    """
    await resolve_project(db, project_id, user_id)

    result = await db.execute(
        select(ComicPage).where(
            ComicPage.id == page_id,
            ComicPage.project_id == project_id,
        )
    )
    page = result.scalar_one_or_none()
    if page is None:
        logger.debug("page %s not resolvable in project %s", page_id, project_id)
        raise ActionError(ErrorCode.NOT_FOUND, "Page not found.")
    return page


async def resolve_panel(
    db: AsyncSession, panel_id: str, page_id: str, project_id: str, user_id: str
) -> ComicPanel:
    """Return the panel if it sits on ``page_id`` and the whole chain is owned."""
    await resolve_page(db, page_id, project_id, user_id)

    result = await db.execute(
        select(ComicPanel).where(
            ComicPanel.id == panel_id,
            ComicPanel.page_id == page_id,
        )
    )
    panel = result.scalar_one_or_none()
    if panel is None:
        logger.debug("panel %s not resolvable on page %s", panel_id, page_id)
        raise ActionError(ErrorCode.NOT_FOUND, "Panel not found.")
    return panel
