from __future__ import annotations
"""Page operations."""

import logging
import uuid
from typing import Optional

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from storyboarder.auth import UserIdentity, require_user
from storyboarder.database import utcnow
from storyboarder.models import ComicPage, ComicPanel
from storyboarder.schemas.page import PageCreate, PageUpdate
from storyboarder.services.ownership import resolve_page, resolve_project

logger = logging.getLogger(__name__)


async def create_page(
    db: AsyncSession,
    identity: Optional[UserIdentity],
    project_id: str,
    data: PageCreate,
) -> ComicPage:
    user = require_user(identity)
    await resolve_project(db, project_id, user.id)
    now = utcnow()

    page = ComicPage(
        id=str(uuid.uuid4()),
        project_id=project_id,
        page_number=data.page_number,
        title=data.title,
        thumbnail_url=data.thumbnail_url,
        notes=data.notes,
        created_at=now,
        updated_at=now,
    )
    db.add(page)
    await db.flush()
    await db.refresh(page)
    logger.info("Created page %s (#%d) in project %s", page.id, page.page_number, project_id)
    return page


async def update_page(
    db: AsyncSession,
    identity: Optional[UserIdentity],
    project_id: str,
    page_id: str,
    data: PageUpdate,
) -> ComicPage:
    user = require_user(identity)
    page = await resolve_page(db, page_id, project_id, user.id)

    for key, value in data.changes().items():
        setattr(page, key, value)
    page.updated_at = utcnow()

    await db.flush()
    await db.refresh(page)
    return page


async def delete_page(
    db: AsyncSession,
    identity: Optional[UserIdentity],
    project_id: str,
    page_id: str,
) -> None:
    """Delete a page and every panel on it, in the request transaction."""
    user = require_user(identity)
    await resolve_page(db, page_id, project_id, user.id)

    # Panels first: comic_panels.page_id references the page row
    panels = await db.execute(
        delete(ComicPanel)
        .where(ComicPanel.page_id == page_id)
        .execution_options(synchronize_session=False)
    )
    await db.execute(
        delete(ComicPage)
        .where(ComicPage.id == page_id)
        .execution_options(synchronize_session=False)
    )
    logger.info("Deleted page %s with %d panel(s)", page_id, panels.rowcount)


async def list_pages(
    db: AsyncSession, identity: Optional[UserIdentity], project_id: str
) -> list[ComicPage]:
    """Pages of a project ordered by page number."""
    user = require_user(identity)
    await resolve_project(db, project_id, user.id)

    result = await db.execute(
        select(ComicPage)
        .where(ComicPage.project_id == project_id)
        .order_by(ComicPage.page_number, ComicPage.created_at)
    )
    return list(result.scalars().all())
