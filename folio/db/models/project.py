"""Project, project gallery image and project like models."""

from __future__ import annotations

from datetime import datetime
from typing import TYPE_CHECKING
from uuid import UUID

from sqlalchemy import Boolean, DateTime, ForeignKey, Integer, String, Text, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column, relationship

from folio.db.base import Base

if TYPE_CHECKING:
    from folio.db.models.category import ProjectCategory
    from folio.db.models.client import Client


class Project(Base):
    """A case study shown in the portfolio."""

    __tablename__ = "projects"

    title: Mapped[str] = mapped_column(String(500), nullable=False)
    slug: Mapped[str] = mapped_column(String(500), nullable=False, unique=True, index=True)
    project_date: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)

    # Case study content
    summary: Mapped[str] = mapped_column(Text, nullable=False)
    problem: Mapped[str | None] = mapped_column(Text, nullable=True)
    solution: Mapped[str | None] = mapped_column(Text, nullable=True)
    result: Mapped[str | None] = mapped_column(Text, nullable=True)

    # Media
    thumbnail_url: Mapped[str] = mapped_column(String(1024), nullable=False)
    video_url: Mapped[str | None] = mapped_column(String(1024), nullable=True)

    is_visible: Mapped[bool] = mapped_column(Boolean, default=True, nullable=False)
    likes_count: Mapped[int] = mapped_column(Integer, default=0, nullable=False)

    # Ordering field
    order: Mapped[int] = mapped_column(Integer, default=0, nullable=False, index=True)

    client_id: Mapped[UUID | None] = mapped_column(
        ForeignKey("clients.id", ondelete="SET NULL"), nullable=True, index=True
    )
    client: Mapped["Client | None"] = relationship("Client", lazy="selectin")

    category_id: Mapped[UUID | None] = mapped_column(
        ForeignKey("project_categories.id", ondelete="SET NULL"), nullable=True, index=True
    )
    category: Mapped["ProjectCategory | None"] = relationship(
        "ProjectCategory", back_populates="projects", lazy="selectin"
    )

    gallery: Mapped[list["ProjectImage"]] = relationship(
        "ProjectImage",
        back_populates="project",
        cascade="all, delete-orphan",
        order_by="ProjectImage.created_at",
        lazy="selectin",
    )


class ProjectImage(Base):
    """Gallery image attached to a project."""

    __tablename__ = "project_images"

    project_id: Mapped[UUID] = mapped_column(
        ForeignKey("projects.id", ondelete="CASCADE"), nullable=False, index=True
    )
    project: Mapped[Project] = relationship("Project", back_populates="gallery")

    url: Mapped[str] = mapped_column(String(1024), nullable=False)


class ProjectLike(Base):
    """One like per project per (hashed) visitor IP."""

    __tablename__ = "project_likes"
    __table_args__ = (
        UniqueConstraint("project_id", "user_ip_hash", name="uq_project_likes_project_ip"),
    )

    project_id: Mapped[UUID] = mapped_column(
        ForeignKey("projects.id", ondelete="CASCADE"), nullable=False, index=True
    )
    user_ip_hash: Mapped[str] = mapped_column(String(64), nullable=False)
