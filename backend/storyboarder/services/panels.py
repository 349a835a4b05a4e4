from __future__ import annotations
"""Panel operations."""

import logging
import uuid
from typing import Optional

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from storyboarder.auth import UserIdentity, require_user
from storyboarder.database import utcnow
from storyboarder.errors import ActionError, ErrorCode
from storyboarder.models import ComicPanel
from storyboarder.schemas.panel import PanelCreate, PanelUpdate
from storyboarder.services.ownership import resolve_page, resolve_panel

logger = logging.getLogger(__name__)


async def create_panel(
    db: AsyncSession,
    identity: Optional[UserIdentity],
    project_id: str,
    page_id: str,
    data: PanelCreate,
) -> ComicPanel:
    user = require_user(identity)
    await resolve_page(db, page_id, project_id, user.id)

    panel = ComicPanel(
        id=str(uuid.uuid4()),
        page_id=page_id,
        panel_index=data.panel_index,
        layout_json=data.layout_json,
        description=data.description,
        dialogue=data.dialogue,
        caption=data.caption,
        sound_effects=data.sound_effects,
        created_at=utcnow(),
    )
    db.add(panel)
    await db.flush()
    await db.refresh(panel)
    logger.info("Created panel %s on page %s", panel.id, page_id)
    return panel


async def update_panel(
    db: AsyncSession,
    identity: Optional[UserIdentity],
    project_id: str,
    page_id: str,
    panel_id: str,
    data: PanelUpdate,
) -> ComicPanel:
    """Partial update; panels carry no updated_at, so no timestamp changes."""
    user = require_user(identity)
    panel = await resolve_panel(db, panel_id, page_id, project_id, user.id)

    for key, value in data.changes().items():
        setattr(panel, key, value)

    await db.flush()
    await db.refresh(panel)
    return panel


async def delete_panel(
    db: AsyncSession,
    identity: Optional[UserIdentity],
    project_id: str,
    page_id: str,
    panel_id: str,
) -> None:
    user = require_user(identity)
    await resolve_page(db, page_id, project_id, user.id)

    result = await db.execute(
        delete(ComicPanel)
        .where(ComicPanel.id == panel_id, ComicPanel.page_id == page_id)
        .execution_options(synchronize_session=False)
    )
    if result.rowcount == 0:
        raise ActionError(ErrorCode.NOT_FOUND, "Panel not found.")
    logger.info("Deleted panel %s from page %s", panel_id, page_id)


async def list_panels(
    db: AsyncSession,
    identity: Optional[UserIdentity],
    project_id: str,
    page_id: str,
) -> list[ComicPanel]:
    """Panels of a page ordered by panel index."""
    user = require_user(identity)
    await resolve_page(db, page_id, project_id, user.id)

    result = await db.execute(
        select(ComicPanel)
        .where(ComicPanel.page_id == page_id)
        .order_by(ComicPanel.panel_index, ComicPanel.created_at)
    )
    return list(result.scalars().all())
