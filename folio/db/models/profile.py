"""Owner profile and education models."""

from __future__ import annotations

from uuid import UUID

from sqlalchemy import Boolean, ForeignKey, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from folio.db.base import Base


class Profile(Base):
    """The portfolio owner's profile. At most one row exists."""

    __tablename__ = "profiles"

    name: Mapped[str | None] = mapped_column(String(255), nullable=True)
    tagline: Mapped[str | None] = mapped_column(String(500), nullable=True)
    bio: Mapped[str] = mapped_column(Text, nullable=False, default="")
    email: Mapped[str] = mapped_column(String(320), nullable=False, default="")

    profile_image_url: Mapped[str | None] = mapped_column(String(1024), nullable=True)
    hero_image_url: Mapped[str | None] = mapped_column(String(1024), nullable=True)
    resume_url: Mapped[str | None] = mapped_column(String(1024), nullable=True)
    footer_text: Mapped[str | None] = mapped_column(String(500), nullable=True)

    # Social links
    linkedin_url: Mapped[str | None] = mapped_column(String(1024), nullable=True)
    instagram_url: Mapped[str | None] = mapped_column(String(1024), nullable=True)
    tiktok_url: Mapped[str | None] = mapped_column(String(1024), nullable=True)
    pinterest_url: Mapped[str | None] = mapped_column(String(1024), nullable=True)
    youtube_url: Mapped[str | None] = mapped_column(String(1024), nullable=True)

    educations: Mapped[list["Education"]] = relationship(
        "Education",
        back_populates="profile",
        cascade="all, delete-orphan",
        order_by="Education.order",
        lazy="selectin",
    )


class Education(Base):
    """Education entry attached to the profile."""

    __tablename__ = "educations"

    profile_id: Mapped[UUID] = mapped_column(
        ForeignKey("profiles.id", ondelete="CASCADE"), nullable=False, index=True
    )
    profile: Mapped[Profile] = relationship("Profile", back_populates="educations")

    degree: Mapped[str] = mapped_column(String(255), nullable=False)
    institution: Mapped[str] = mapped_column(String(255), nullable=False)
    start_year: Mapped[int] = mapped_column(Integer, nullable=False)
    end_year: Mapped[int | None] = mapped_column(Integer, nullable=True)
    is_current: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)

    # Ordering field
    order: Mapped[int] = mapped_column(Integer, default=0, nullable=False, index=True)
