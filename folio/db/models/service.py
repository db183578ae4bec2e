from sqlalchemy import Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from folio.db.base import Base


class Service(Base):
    """A service offered by the designer."""

    __tablename__ = "services"

    title: Mapped[str] = mapped_column(String(255), nullable=False)
    description: Mapped[str] = mapped_column(Text, nullable=False)
    icon_url: Mapped[str | None] = mapped_column(String(1024), nullable=True)

    # Ordering field
    order: Mapped[int] = mapped_column(Integer, default=0, nullable=False, index=True)
