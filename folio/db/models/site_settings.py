from sqlalchemy import String, Text
from sqlalchemy.orm import Mapped, mapped_column

from folio.db.base import Base


class SiteSettings(Base):
    """Site-wide branding and call-to-action copy. At most one row exists."""

    __tablename__ = "site_settings"

    site_name: Mapped[str] = mapped_column(String(255), nullable=False, default="Portfolio")
    browser_title: Mapped[str | None] = mapped_column(String(255), nullable=True)
    logo_url: Mapped[str | None] = mapped_column(String(1024), nullable=True)
    favicon_url: Mapped[str | None] = mapped_column(String(1024), nullable=True)
    primary_color: Mapped[str] = mapped_column(String(32), nullable=False, default="#FFD369")
    secondary_color: Mapped[str] = mapped_column(String(32), nullable=False, default="#1a1a2e")
    footer_text: Mapped[str | None] = mapped_column(String(500), nullable=True)

    # Call to action block
    cta_heading: Mapped[str | None] = mapped_column(String(255), nullable=True)
    cta_description: Mapped[str | None] = mapped_column(Text, nullable=True)
    cta_button_text: Mapped[str | None] = mapped_column(String(100), nullable=True)

    whatsapp_number: Mapped[str | None] = mapped_column(String(32), nullable=True)
