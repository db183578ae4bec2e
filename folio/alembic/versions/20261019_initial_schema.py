"""initial schema

Revision ID: 1a2b3c4d5e6f
Revises:
Create Date: 2026-10-19 09:00:00.000000

Creates every portfolio table. Orderable tables carry an indexed integer
``order`` column.
"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '1a2b3c4d5e6f'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _audit_columns() -> list[sa.Column]:
    return [
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column("sa_orm_sentinel", sa.Integer(), nullable=True),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=False),
    ]


def _order_column() -> sa.Column:
    return sa.Column("order", sa.Integer(), nullable=False, server_default="0")


def upgrade() -> None:
    op.create_table(
        "admins",
        *_audit_columns(),
        sa.Column("email", sa.String(320), nullable=False),
        sa.Column("name", sa.String(255), nullable=True),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_admins_email", "admins", ["email"], unique=True)

    op.create_table(
        "project_categories",
        *_audit_columns(),
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column("slug", sa.String(255), nullable=False),
        _order_column(),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("name"),
    )
    op.create_index("ix_project_categories_slug", "project_categories", ["slug"], unique=True)
    op.create_index("ix_project_categories_order", "project_categories", ["order"])

    op.create_table(
        "clients",
        *_audit_columns(),
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column("slug", sa.String(255), nullable=False),
        sa.Column("logo_url", sa.String(1024), nullable=True),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("is_visible", sa.Boolean(), nullable=False, server_default=sa.true()),
        _order_column(),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_clients_slug", "clients", ["slug"], unique=True)
    op.create_index("ix_clients_order", "clients", ["order"])

    op.create_table(
        "client_categories",
        *_audit_columns(),
        sa.Column("client_id", sa.Uuid(), nullable=False),
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column("slug", sa.String(255), nullable=False),
        _order_column(),
        sa.PrimaryKeyConstraint("id"),
        sa.ForeignKeyConstraint(["client_id"], ["clients.id"], ondelete="CASCADE"),
        sa.UniqueConstraint("client_id", "slug", name="uq_client_categories_client_slug"),
    )
    op.create_index("ix_client_categories_client_id", "client_categories", ["client_id"])
    op.create_index("ix_client_categories_order", "client_categories", ["order"])

    op.create_table(
        "category_images",
        *_audit_columns(),
        sa.Column("category_id", sa.Uuid(), nullable=False),
        sa.Column("url", sa.String(1024), nullable=False),
        _order_column(),
        sa.PrimaryKeyConstraint("id"),
        sa.ForeignKeyConstraint(["category_id"], ["client_categories.id"], ondelete="CASCADE"),
    )
    op.create_index("ix_category_images_category_id", "category_images", ["category_id"])
    op.create_index("ix_category_images_order", "category_images", ["order"])

    op.create_table(
        "hero_slides",
        *_audit_columns(),
        sa.Column("title", sa.String(255), nullable=False),
        sa.Column("left_title", sa.String(255), nullable=False),
        sa.Column("left_subtitle", sa.String(500), nullable=False),
        sa.Column("right_title", sa.String(255), nullable=False),
        sa.Column("right_subtitle", sa.String(500), nullable=False),
        sa.Column("image_url", sa.String(1024), nullable=True),
        sa.Column("background_color", sa.String(32), nullable=True),
        sa.Column("background_from", sa.String(32), nullable=True),
        sa.Column("background_to", sa.String(32), nullable=True),
        sa.Column("is_visible", sa.Boolean(), nullable=False, server_default=sa.true()),
        _order_column(),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_hero_slides_order", "hero_slides", ["order"])

    op.create_table(
        "projects",
        *_audit_columns(),
        sa.Column("title", sa.String(500), nullable=False),
        sa.Column("slug", sa.String(500), nullable=False),
        sa.Column("project_date", sa.DateTime(timezone=True), nullable=False),
        sa.Column("summary", sa.Text(), nullable=False),
        sa.Column("problem", sa.Text(), nullable=True),
        sa.Column("solution", sa.Text(), nullable=True),
        sa.Column("result", sa.Text(), nullable=True),
        sa.Column("thumbnail_url", sa.String(1024), nullable=False),
        sa.Column("video_url", sa.String(1024), nullable=True),
        sa.Column("is_visible", sa.Boolean(), nullable=False, server_default=sa.true()),
        sa.Column("likes_count", sa.Integer(), nullable=False, server_default="0"),
        _order_column(),
        sa.Column("client_id", sa.Uuid(), nullable=True),
        sa.Column("category_id", sa.Uuid(), nullable=True),
        sa.PrimaryKeyConstraint("id"),
        sa.ForeignKeyConstraint(["client_id"], ["clients.id"], ondelete="SET NULL"),
        sa.ForeignKeyConstraint(["category_id"], ["project_categories.id"], ondelete="SET NULL"),
    )
    op.create_index("ix_projects_slug", "projects", ["slug"], unique=True)
    op.create_index("ix_projects_order", "projects", ["order"])
    op.create_index("ix_projects_client_id", "projects", ["client_id"])
    op.create_index("ix_projects_category_id", "projects", ["category_id"])

    op.create_table(
        "project_images",
        *_audit_columns(),
        sa.Column("project_id", sa.Uuid(), nullable=False),
        sa.Column("url", sa.String(1024), nullable=False),
        sa.PrimaryKeyConstraint("id"),
        sa.ForeignKeyConstraint(["project_id"], ["projects.id"], ondelete="CASCADE"),
    )
    op.create_index("ix_project_images_project_id", "project_images", ["project_id"])

    op.create_table(
        "services",
        *_audit_columns(),
        sa.Column("title", sa.String(255), nullable=False),
        sa.Column("description", sa.Text(), nullable=False),
        sa.Column("icon_url", sa.String(1024), nullable=True),
        _order_column(),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_services_order", "services", ["order"])

    op.create_table(
        "skills",
        *_audit_columns(),
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column("short_name", sa.String(64), nullable=True),
        sa.Column("icon_url", sa.String(1024), nullable=True),
        sa.Column(
            "category",
            sa.Enum("HARD_SKILL", "SOFT_SKILL", name="skill_category"),
            nullable=False,
        ),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("gradient_from", sa.String(32), nullable=True),
        sa.Column("gradient_to", sa.String(32), nullable=True),
        sa.Column("gradient_via", sa.String(32), nullable=True),
        _order_column(),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_skills_category", "skills", ["category"])
    op.create_index("ix_skills_order", "skills", ["order"])

    op.create_table(
        "experiences",
        *_audit_columns(),
        sa.Column("company", sa.String(255), nullable=False),
        sa.Column("role", sa.String(255), nullable=False),
        sa.Column("start_date", sa.DateTime(timezone=True), nullable=False),
        sa.Column("end_date", sa.DateTime(timezone=True), nullable=True),
        sa.Column("is_current", sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column("description", sa.JSON(), nullable=False),
        sa.Column("thumbnail_url", sa.String(1024), nullable=True),
        sa.Column("logo_url", sa.String(1024), nullable=True),
        sa.PrimaryKeyConstraint("id"),
    )

    op.create_table(
        "messages",
        *_audit_columns(),
        sa.Column("name", sa.String(100), nullable=False),
        sa.Column("email", sa.String(320), nullable=False),
        sa.Column("content", sa.Text(), nullable=False),
        sa.Column("is_read", sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_messages_is_read", "messages", ["is_read"])

    op.create_table(
        "profiles",
        *_audit_columns(),
        sa.Column("name", sa.String(255), nullable=True),
        sa.Column("tagline", sa.String(500), nullable=True),
        sa.Column("bio", sa.Text(), nullable=False, server_default=""),
        sa.Column("email", sa.String(320), nullable=False, server_default=""),
        sa.Column("profile_image_url", sa.String(1024), nullable=True),
        sa.Column("hero_image_url", sa.String(1024), nullable=True),
        sa.Column("resume_url", sa.String(1024), nullable=True),
        sa.Column("footer_text", sa.String(500), nullable=True),
        sa.Column("linkedin_url", sa.String(1024), nullable=True),
        sa.Column("instagram_url", sa.String(1024), nullable=True),
        sa.Column("tiktok_url", sa.String(1024), nullable=True),
        sa.Column("pinterest_url", sa.String(1024), nullable=True),
        sa.Column("youtube_url", sa.String(1024), nullable=True),
        sa.PrimaryKeyConstraint("id"),
    )

    op.create_table(
        "educations",
        *_audit_columns(),
        sa.Column("profile_id", sa.Uuid(), nullable=False),
        sa.Column("degree", sa.String(255), nullable=False),
        sa.Column("institution", sa.String(255), nullable=False),
        sa.Column("start_year", sa.Integer(), nullable=False),
        sa.Column("end_year", sa.Integer(), nullable=True),
        sa.Column("is_current", sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column("description", sa.Text(), nullable=True),
        _order_column(),
        sa.PrimaryKeyConstraint("id"),
        sa.ForeignKeyConstraint(["profile_id"], ["profiles.id"], ondelete="CASCADE"),
    )
    op.create_index("ix_educations_profile_id", "educations", ["profile_id"])
    op.create_index("ix_educations_order", "educations", ["order"])

    op.create_table(
        "site_settings",
        *_audit_columns(),
        sa.Column("site_name", sa.String(255), nullable=False, server_default="Portfolio"),
        sa.Column("browser_title", sa.String(255), nullable=True),
        sa.Column("logo_url", sa.String(1024), nullable=True),
        sa.Column("favicon_url", sa.String(1024), nullable=True),
        sa.Column("primary_color", sa.String(32), nullable=False, server_default="#FFD369"),
        sa.Column("secondary_color", sa.String(32), nullable=False, server_default="#1a1a2e"),
        sa.Column("footer_text", sa.String(500), nullable=True),
        sa.Column("cta_heading", sa.String(255), nullable=True),
        sa.Column("cta_description", sa.Text(), nullable=True),
        sa.Column("cta_button_text", sa.String(100), nullable=True),
        sa.Column("whatsapp_number", sa.String(32), nullable=True),
        sa.PrimaryKeyConstraint("id"),
    )


def downgrade() -> None:
    op.drop_table("site_settings")
    op.drop_index("ix_educations_order", table_name="educations")
    op.drop_index("ix_educations_profile_id", table_name="educations")
    op.drop_table("educations")
    op.drop_table("profiles")
    op.drop_index("ix_messages_is_read", table_name="messages")
    op.drop_table("messages")
    op.drop_table("experiences")
    op.drop_index("ix_skills_order", table_name="skills")
    op.drop_index("ix_skills_category", table_name="skills")
    op.drop_table("skills")
    sa.Enum(name="skill_category").drop(op.get_bind(), checkfirst=True)
    op.drop_index("ix_services_order", table_name="services")
    op.drop_table("services")
    op.drop_index("ix_project_images_project_id", table_name="project_images")
    op.drop_table("project_images")
    op.drop_index("ix_projects_category_id", table_name="projects")
    op.drop_index("ix_projects_client_id", table_name="projects")
    op.drop_index("ix_projects_order", table_name="projects")
    op.drop_index("ix_projects_slug", table_name="projects")
    op.drop_table("projects")
    op.drop_index("ix_hero_slides_order", table_name="hero_slides")
    op.drop_table("hero_slides")
    op.drop_index("ix_category_images_order", table_name="category_images")
    op.drop_index("ix_category_images_category_id", table_name="category_images")
    op.drop_table("category_images")
    op.drop_index("ix_client_categories_order", table_name="client_categories")
    op.drop_index("ix_client_categories_client_id", table_name="client_categories")
    op.drop_table("client_categories")
    op.drop_index("ix_clients_order", table_name="clients")
    op.drop_index("ix_clients_slug", table_name="clients")
    op.drop_table("clients")
    op.drop_index("ix_project_categories_order", table_name="project_categories")
    op.drop_index("ix_project_categories_slug", table_name="project_categories")
    op.drop_table("project_categories")
    op.drop_index("ix_admins_email", table_name="admins")
    op.drop_table("admins")
