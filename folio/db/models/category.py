"""Project category model."""

from __future__ import annotations

from typing import TYPE_CHECKING

from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from folio.db.base import Base

if TYPE_CHECKING:
    from folio.db.models.project import Project


class ProjectCategory(Base):
    """Grouping used to filter projects on the public site."""

    __tablename__ = "project_categories"

    name: Mapped[str] = mapped_column(String(255), nullable=False, unique=True)
    slug: Mapped[str] = mapped_column(String(255), nullable=False, unique=True, index=True)

    # Ordering field
    order: Mapped[int] = mapped_column(Integer, default=0, nullable=False, index=True)

    projects: Mapped[list["Project"]] = relationship(
        "Project", back_populates="category", passive_deletes=True
    )
