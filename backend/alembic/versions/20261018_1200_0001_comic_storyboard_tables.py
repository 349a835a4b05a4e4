"""Comic storyboard tables — comic_projects, comic_pages, comic_panels

Revision ID: 0001
Revises: None
Create Date: 2026-10-18 12:00:00
"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision: str = "0001"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "comic_projects",
        sa.Column("id", sa.String(36), primary_key=True),
        sa.Column("user_id", sa.String(255), nullable=False),
        sa.Column("title", sa.Text, nullable=False),
        sa.Column("description", sa.Text, nullable=True),
        sa.Column("genre", sa.Text, nullable=True),
        sa.Column("format", sa.Text, nullable=True, comment="webtoon | page-comic | ..."),
        sa.Column("target_audience", sa.Text, nullable=True),
        sa.Column("created_at", sa.DateTime, nullable=False, server_default=sa.func.now()),
        sa.Column("updated_at", sa.DateTime, nullable=False, server_default=sa.func.now()),
        mysql_charset="utf8mb4",
        mysql_collate="utf8mb4_unicode_ci",
    )
    op.create_index("ix_comic_projects_user_id", "comic_projects", ["user_id"])

    op.create_table(
        "comic_pages",
        sa.Column("id", sa.String(36), primary_key=True),
        sa.Column("project_id", sa.String(36), sa.ForeignKey("comic_projects.id"), nullable=False),
        sa.Column("page_number", sa.Integer, nullable=False),
        sa.Column("title", sa.Text, nullable=True),
        sa.Column("thumbnail_url", sa.Text, nullable=True),
        sa.Column("notes", sa.Text, nullable=True),
        sa.Column("created_at", sa.DateTime, nullable=False, server_default=sa.func.now()),
        sa.Column("updated_at", sa.DateTime, nullable=False, server_default=sa.func.now()),
        mysql_charset="utf8mb4",
        mysql_collate="utf8mb4_unicode_ci",
    )
    op.create_index("ix_comic_pages_project_id", "comic_pages", ["project_id"])

    op.create_table(
        "comic_panels",
        sa.Column("id", sa.String(36), primary_key=True),
        sa.Column("page_id", sa.String(36), sa.ForeignKey("comic_pages.id"), nullable=False),
        sa.Column("panel_index", sa.Integer, nullable=False),
        sa.Column("layout_json", sa.Text, nullable=True),
        sa.Column("description", sa.Text, nullable=True),
        sa.Column("dialogue", sa.Text, nullable=True),
        sa.Column("caption", sa.Text, nullable=True),
        sa.Column("sound_effects", sa.Text, nullable=True),
        sa.Column("created_at", sa.DateTime, nullable=False, server_default=sa.func.now()),
        mysql_charset="utf8mb4",
        mysql_collate="utf8mb4_unicode_ci",
    )
    op.create_index("ix_comic_panels_page_id", "comic_panels", ["page_id"])


def downgrade() -> None:
    op.drop_index("ix_comic_panels_page_id", table_name="comic_panels")
    op.drop_table("comic_panels")
    op.drop_index("ix_comic_pages_project_id", table_name="comic_pages")
    op.drop_table("comic_pages")
    op.drop_index("ix_comic_projects_user_id", table_name="comic_projects")
    op.drop_table("comic_projects")
