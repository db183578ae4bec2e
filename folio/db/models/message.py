from sqlalchemy import Boolean, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from folio.db.base import Base


class Message(Base):
    """Contact form submission."""

    __tablename__ = "messages"

    name: Mapped[str] = mapped_column(String(100), nullable=False)
    email: Mapped[str] = mapped_column(String(320), nullable=False)
    content: Mapped[str] = mapped_column(Text, nullable=False)
    is_read: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False, index=True)
