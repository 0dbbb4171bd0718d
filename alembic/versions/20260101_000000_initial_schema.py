"""Initial schema for the MEMOPYK site

Revision ID: 20260101_000000
Revises: None
Create Date: 2026-01-01 00:00:00.000000

Creates the content tables of the site:
- contacts, hero_videos, gallery_items, faqs
- seo_settings
- deployments (deployment log)

Revision format: YYYYMMDD_HHMMSS_description

"""

from typing import Sequence, Union

import sqlalchemy as sa

from alembic import op

# revision identifiers, used by Alembic.
revision: str = "20260101_000000"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Create all tables."""

    op.create_table(
        "contacts",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("name", sa.String(), nullable=False),
        sa.Column("email", sa.String(), nullable=False),
        sa.Column("package", sa.String(), nullable=False),
        sa.Column("message", sa.String(), nullable=True),
        sa.Column("created_at", sa.DateTime(), nullable=False),
        sa.PrimaryKeyConstraint("id"),
    )

    op.create_table(
        "hero_videos",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("title_en", sa.String(), nullable=False),
        sa.Column("title_fr", sa.String(), nullable=False),
        sa.Column("url_en", sa.String(), nullable=False),
        sa.Column("url_fr", sa.String(), nullable=False),
        sa.Column("order_index", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("is_active", sa.Boolean(), nullable=False, server_default=sa.true()),
        sa.Column("created_at", sa.DateTime(), nullable=False),
        sa.Column("updated_at", sa.DateTime(), nullable=False),
        sa.PrimaryKeyConstraint("id"),
        sa.Index("ix_hero_videos_order_index", "order_index"),
    )

    op.create_table(
        "gallery_items",
        sa.Column("id", sa.String(64), nullable=False),
        sa.Column("title_en", sa.String(), nullable=False),
        sa.Column("title_fr", sa.String(), nullable=False),
        sa.Column("description_en", sa.String(), nullable=False),
        sa.Column("description_fr", sa.String(), nullable=False),
        sa.Column("additional_info_en", sa.JSON(), nullable=False),
        sa.Column("additional_info_fr", sa.JSON(), nullable=False),
        sa.Column("price_en", sa.String(), nullable=True),
        sa.Column("price_fr", sa.String(), nullable=True),
        sa.Column("image_url_en", sa.String(), nullable=False),
        sa.Column("image_url_fr", sa.String(), nullable=False),
        sa.Column("video_url_en", sa.String(), nullable=True),
        sa.Column("video_url_fr", sa.String(), nullable=True),
        sa.Column("alt_text_en", sa.String(), nullable=False),
        sa.Column("alt_text_fr", sa.String(), nullable=False),
        sa.Column("order", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("is_active", sa.Boolean(), nullable=False, server_default=sa.true()),
        sa.Column("created_at", sa.DateTime(), nullable=False),
        sa.Column("updated_at", sa.DateTime(), nullable=False),
        sa.PrimaryKeyConstraint("id"),
        sa.Index("ix_gallery_items_order", "order"),
    )

    op.create_table(
        "faqs",
        sa.Column("id", sa.String(36), nullable=False),
        sa.Column("section", sa.String(), nullable=False),
        sa.Column("section_name_en", sa.String(), nullable=False),
        sa.Column("section_name_fr", sa.String(), nullable=False),
        sa.Column("section_order", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("order", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("is_active", sa.Boolean(), nullable=False, server_default=sa.true()),
        sa.Column("question_en", sa.String(), nullable=False),
        sa.Column("question_fr", sa.String(), nullable=False),
        sa.Column("answer_en", sa.String(), nullable=False),
        sa.Column("answer_fr", sa.String(), nullable=False),
        sa.Column("created_at", sa.DateTime(), nullable=False),
        sa.PrimaryKeyConstraint("id"),
        sa.Index("ix_faqs_section", "section"),
    )

    op.create_table(
        "seo_settings",
        sa.Column("id", sa.String(36), nullable=False),
        sa.Column("page", sa.String(), nullable=False),
        sa.Column("url_slug", sa.String(), nullable=False),
        sa.Column("meta_title", sa.String(), nullable=True),
        sa.Column("meta_description", sa.String(), nullable=True),
        sa.Column("robots_directives", sa.String(), nullable=False, server_default="index,follow"),
        sa.Column("canonical_url", sa.String(), nullable=True),
        sa.Column("og_title", sa.String(), nullable=True),
        sa.Column("og_description", sa.String(), nullable=True),
        sa.Column("og_image_url", sa.String(), nullable=True),
        sa.Column("twitter_title", sa.String(), nullable=True),
        sa.Column("twitter_description", sa.String(), nullable=True),
        sa.Column("twitter_image_url", sa.String(), nullable=True),
        sa.Column("json_ld", sa.JSON(), nullable=True),
        sa.Column("auto_generate_faq", sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column("auto_generate_videos", sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column("created_at", sa.DateTime(), nullable=False),
        sa.Column("updated_at", sa.DateTime(), nullable=False),
        sa.PrimaryKeyConstraint("id"),
        sa.Index("ix_seo_settings_page", "page"),
    )

    op.create_table(
        "deployments",
        sa.Column("id", sa.String(36), nullable=False),
        sa.Column("environment", sa.String(32), nullable=False),
        sa.Column("version", sa.String(), nullable=False),
        sa.Column("status", sa.String(32), nullable=False, server_default="pending"),
        sa.Column("notes", sa.String(), nullable=True),
        sa.Column("deployed_by", sa.String(), nullable=True),
        sa.Column("started_at", sa.DateTime(), nullable=False),
        sa.Column("completed_at", sa.DateTime(), nullable=True),
        sa.PrimaryKeyConstraint("id"),
        sa.Index("ix_deployments_environment", "environment"),
    )


def downgrade() -> None:
    """Drop all tables."""
    op.drop_table("deployments")
    op.drop_table("seo_settings")
    op.drop_table("faqs")
    op.drop_table("gallery_items")
    op.drop_table("hero_videos")
    op.drop_table("contacts")
