"""Client, client category and category image models."""

from __future__ import annotations

from uuid import UUID

from sqlalchemy import Boolean, ForeignKey, Integer, String, Text, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column, relationship

from folio.db.base import Base


class Client(Base):
    """A client or workplace whose work is shown as a gallery."""

    __tablename__ = "clients"

    name: Mapped[str] = mapped_column(String(255), nullable=False)
    slug: Mapped[str] = mapped_column(String(255), nullable=False, unique=True, index=True)
    logo_url: Mapped[str | None] = mapped_column(String(1024), nullable=True)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    is_visible: Mapped[bool] = mapped_column(Boolean, default=True, nullable=False)

    # Ordering field
    order: Mapped[int] = mapped_column(Integer, default=0, nullable=False, index=True)

    categories: Mapped[list["ClientCategory"]] = relationship(
        "ClientCategory",
        back_populates="client",
        cascade="all, delete-orphan",
        order_by="ClientCategory.order",
        lazy="selectin",
    )


class ClientCategory(Base):
    """A gallery section within a client, ordered per client."""

    __tablename__ = "client_categories"
    __table_args__ = (UniqueConstraint("client_id", "slug", name="uq_client_categories_client_slug"),)

    client_id: Mapped[UUID] = mapped_column(
        ForeignKey("clients.id", ondelete="CASCADE"), nullable=False, index=True
    )
    client: Mapped[Client] = relationship("Client", back_populates="categories")

    name: Mapped[str] = mapped_column(String(255), nullable=False)
    slug: Mapped[str] = mapped_column(String(255), nullable=False)

    # Ordering field, scoped to client_id
    order: Mapped[int] = mapped_column(Integer, default=0, nullable=False, index=True)

    images: Mapped[list["CategoryImage"]] = relationship(
        "CategoryImage",
        back_populates="category",
        cascade="all, delete-orphan",
        order_by="CategoryImage.order",
        lazy="selectin",
    )


class CategoryImage(Base):
    """A single gallery image, ordered per client category."""

    __tablename__ = "category_images"

    category_id: Mapped[UUID] = mapped_column(
        ForeignKey("client_categories.id", ondelete="CASCADE"), nullable=False, index=True
    )
    category: Mapped[ClientCategory] = relationship("ClientCategory", back_populates="images")

    url: Mapped[str] = mapped_column(String(1024), nullable=False)

    # Ordering field, scoped to category_id
    order: Mapped[int] = mapped_column(Integer, default=0, nullable=False, index=True)
