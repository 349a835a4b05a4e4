from __future__ import annotations
"""Panel ORM model — layout position plus narrative text on a page."""

import uuid
from datetime import datetime
from typing import Optional

from sqlalchemy import DateTime, ForeignKey, Integer, String, Text, func
from sqlalchemy.orm import Mapped, mapped_column

from storyboarder.database import Base


class ComicPanel(Base):
    """A storyboard panel. Has no updated_at column; edits leave timestamps alone."""

    __tablename__ = "comic_panels"
    __table_args__ = {
        "mysql_charset": "utf8mb4",
        "mysql_collate": "utf8mb4_unicode_ci",
    }

    id: Mapped[str] = mapped_column(
        String(36),
        primary_key=True,
        default=lambda: str(uuid.uuid4()),
    )
    page_id: Mapped[str] = mapped_column(
        String(36),
        ForeignKey("comic_pages.id"),
        nullable=False,
        index=True,
    )
    # Order on the page; negative values are allowed
    panel_index: Mapped[int] = mapped_column(Integer, nullable=False)
    # Opaque client layout blob, stored verbatim
    layout_json: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    description: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    dialogue: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    caption: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    sound_effects: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    created_at: Mapped[datetime] = mapped_column(
        DateTime, server_default=func.now()
    )
