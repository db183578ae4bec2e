from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column

from folio.db.base import Base


class Admin(Base):
    """Email allow-list of users granted admin privileges."""

    __tablename__ = "admins"

    email: Mapped[str] = mapped_column(String(320), nullable=False, unique=True, index=True)
    name: Mapped[str | None] = mapped_column(String(255), nullable=True)
