from sqlalchemy import Boolean, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from folio.db.base import Base


class HeroSlide(Base):
    """Slide shown in the landing page hero carousel."""

    __tablename__ = "hero_slides"

    title: Mapped[str] = mapped_column(String(255), nullable=False)
    left_title: Mapped[str] = mapped_column(String(255), nullable=False)
    left_subtitle: Mapped[str] = mapped_column(String(500), nullable=False)
    right_title: Mapped[str] = mapped_column(String(255), nullable=False)
    right_subtitle: Mapped[str] = mapped_column(String(500), nullable=False)
    image_url: Mapped[str | None] = mapped_column(String(1024), nullable=True)

    # Background styling
    background_color: Mapped[str | None] = mapped_column(String(32), nullable=True)
    background_from: Mapped[str | None] = mapped_column(String(32), nullable=True)
    background_to: Mapped[str | None] = mapped_column(String(32), nullable=True)

    is_visible: Mapped[bool] = mapped_column(Boolean, default=True, nullable=False)

    # Ordering field
    order: Mapped[int] = mapped_column(Integer, default=0, nullable=False, index=True)
