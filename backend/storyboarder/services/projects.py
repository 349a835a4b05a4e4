from __future__ import annotations
"""Project operations."""

import logging
import uuid
from typing import Optional

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from storyboarder.auth import UserIdentity, require_user
from storyboarder.database import utcnow
from storyboarder.models import ComicPage, ComicPanel, ComicProject
from storyboarder.schemas.project import ProjectCreate, ProjectUpdate
from storyboarder.services.ownership import resolve_project

logger = logging.getLogger(__name__)


async def create_project(
    db: AsyncSession, identity: Optional[UserIdentity], data: ProjectCreate
) -> ComicProject:
    """Create a project owned by the caller."""
    user = require_user(identity)
    now = utcnow()

    project = ComicProject(
        id=str(uuid.uuid4()),
        user_id=user.id,
        title=data.title,
        description=data.description,
        genre=data.genre,
        format=data.format,
        target_audience=data.target_audience,
        created_at=now,
        updated_at=now,
    )
    db.add(project)
    await db.flush()
    await db.refresh(project)
    logger.info("Created project %s for user %s", project.id, user.id)
    return project


async def update_project(
    db: AsyncSession,
    identity: Optional[UserIdentity],
    project_id: str,
    data: ProjectUpdate,
) -> ComicProject:
    """Apply the supplied fields and bump updated_at."""
    user = require_user(identity)
    project = await resolve_project(db, project_id, user.id)

    for key, value in data.changes().items():
        setattr(project, key, value)
    project.updated_at = utcnow()

    await db.flush()
    await db.refresh(project)
    return project


async def list_projects(
    db: AsyncSession, identity: Optional[UserIdentity]
) -> list[ComicProject]:
    """All of the caller's projects, newest first."""
    user = require_user(identity)
    result = await db.execute(
        select(ComicProject)
        .where(ComicProject.user_id == user.id)
        .order_by(ComicProject.created_at.desc())
    )
    return list(result.scalars().all())


async def delete_project(
    db: AsyncSession, identity: Optional[UserIdentity], project_id: str
) -> None:
    """Delete a project with its pages and their panels.

    All three deletes share the request transaction, so no rows are orphaned
    if one fails.
    """
    user = require_user(identity)
    await resolve_project(db, project_id, user.id)

    page_ids = select(ComicPage.id).where(ComicPage.project_id == project_id)
    panels = await db.execute(
        delete(ComicPanel)
        .where(ComicPanel.page_id.in_(page_ids))
        .execution_options(synchronize_session=False)
    )
    pages = await db.execute(
        delete(ComicPage)
        .where(ComicPage.project_id == project_id)
        .execution_options(synchronize_session=False)
    )
    await db.execute(
        delete(ComicProject)
        .where(ComicProject.id == project_id)
        .execution_options(synchronize_session=False)
    )
    logger.info(
        "Deleted project %s (%d page(s), %d panel(s))",
        project_id, pages.rowcount, panels.rowcount,
    )
