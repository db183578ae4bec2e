"""Client service: clients, their gallery categories and category images.

Three ordered collections live here. Clients are ordered globally, client
categories within their client, and images within their category.
"""

from typing import Any
from uuid import UUID

from sqlalchemy import delete, select
from sqlalchemy.orm import contains_eager
from sqlalchemy.ext.asyncio import AsyncSession

from folio.db.models import CategoryImage, Client, ClientCategory
from folio.db.ordering import OrderAssignment, OrderedCollection, next_order, reorder
from folio.db.services.common import apply_updates, commit_unique, get_or_404, reload
from folio.lib.exceptions import ConflictError, NotFoundError

CLIENTS = OrderedCollection(Client, name="clients")
CLIENT_CATEGORIES = OrderedCollection(ClientCategory, name="client categories", partition="client_id")
CATEGORY_IMAGES = OrderedCollection(CategoryImage, name="category images", partition="category_id")


# -- Clients ---------------------------------------------------------------


async def list_clients(db_session: AsyncSession, visible_only: bool = False) -> list[Client]:
    """List clients by display order, categories and images included."""
    query = select(Client).order_by(Client.order.asc(), Client.created_at.asc())
    if visible_only:
        query = query.where(Client.is_visible == True)  # noqa: E712
    result = await db_session.execute(query)
    return list(result.scalars().all())


async def get_client(db_session: AsyncSession, client_id: UUID) -> Client:
    return await get_or_404(db_session, Client, client_id, "Client")


async def get_client_by_slug(db_session: AsyncSession, slug: str) -> Client:
    """Public lookup; hidden clients are reported as missing."""
    result = await db_session.execute(
        select(Client).where(Client.slug == slug, Client.is_visible == True)  # noqa: E712
    )
    client = result.scalar_one_or_none()
    if client is None:
        raise NotFoundError("Client not found")
    return client


async def _check_slug(db_session: AsyncSession, slug: str, exclude_id: UUID | None = None) -> None:
    query = select(Client.id).where(Client.slug == slug)
    if exclude_id is not None:
        query = query.where(Client.id != exclude_id)
    result = await db_session.execute(query)
    if result.scalar_one_or_none() is not None:
        raise ConflictError("Client with this slug already exists")


async def create_client(db_session: AsyncSession, fields: dict[str, Any]) -> Client:
    """Create a client.

    Args:
        db_session: Database session
        fields: Validated column values; ``order`` is optional and defaults to
            the end of the list

    Returns:
        Created Client

    Raises:
        ConflictError: the slug is taken
    """
    await _check_slug(db_session, fields["slug"])

    fields = dict(fields)
    if fields.get("order") is None:
        fields["order"] = await next_order(db_session, CLIENTS)

    client = Client(**fields)
    db_session.add(client)
    await commit_unique(db_session, "Client with this slug already exists")
    return await reload(db_session, Client, client.id)


async def update_client(db_session: AsyncSession, client_id: UUID, fields: dict[str, Any]) -> Client:
    client = await get_client(db_session, client_id)

    slug = fields.get("slug")
    if slug and slug != client.slug:
        await _check_slug(db_session, slug, exclude_id=client_id)

    apply_updates(client, fields)
    await commit_unique(db_session, "Client with this slug already exists")
    return await reload(db_session, Client, client.id)


async def delete_client(db_session: AsyncSession, client_id: UUID) -> None:
    """Delete a client together with its categories and their images."""
    await get_client(db_session, client_id)
    # Refresh categories and images the identity map may hold from before they were added
    client = await reload(db_session, Client, client_id)
    await db_session.delete(client)
    await db_session.commit()


async def toggle_client_visibility(db_session: AsyncSession, client_id: UUID) -> Client:
    client = await get_client(db_session, client_id)
    client.is_visible = not client.is_visible
    await db_session.commit()
    return await reload(db_session, Client, client.id)


async def reorder_clients(db_session: AsyncSession, ids: list[UUID]) -> list[Client]:
    """Reorder clients and return the refreshed admin list."""
    await reorder(db_session, CLIENTS, ids)
    return await list_clients(db_session)


# -- Client categories -----------------------------------------------------


async def list_all_client_categories(db_session: AsyncSession) -> list[ClientCategory]:
    """Every client category, grouped by client order then category order."""
    query = (
        select(ClientCategory)
        .join(Client, ClientCategory.client_id == Client.id)
        .options(contains_eager(ClientCategory.client))
        .order_by(Client.order.asc(), ClientCategory.order.asc(), ClientCategory.created_at.asc())
    )
    result = await db_session.execute(query)
    return list(result.scalars().all())


async def list_client_categories(db_session: AsyncSession, client_id: UUID) -> list[ClientCategory]:
    result = await db_session.execute(
        select(ClientCategory)
        .where(ClientCategory.client_id == client_id)
        .order_by(ClientCategory.order.asc(), ClientCategory.created_at.asc())
    )
    return list(result.scalars().all())


async def get_client_category(db_session: AsyncSession, category_id: UUID) -> ClientCategory:
    return await get_or_404(db_session, ClientCategory, category_id, "Category")


async def _check_category_slug(
    db_session: AsyncSession, client_id: UUID, slug: str, exclude_id: UUID | None = None
) -> None:
    query = select(ClientCategory.id).where(
        ClientCategory.client_id == client_id, ClientCategory.slug == slug
    )
    if exclude_id is not None:
        query = query.where(ClientCategory.id != exclude_id)
    result = await db_session.execute(query)
    if result.scalar_one_or_none() is not None:
        raise ConflictError("Category with this slug already exists for this client")


async def create_client_category(
    db_session: AsyncSession, client_id: UUID, name: str, slug: str
) -> ClientCategory:
    """Append a category to the end of a client's category list."""
    await get_client(db_session, client_id)
    await _check_category_slug(db_session, client_id, slug)

    category = ClientCategory(
        client_id=client_id,
        name=name,
        slug=slug,
        order=await next_order(db_session, CLIENT_CATEGORIES, client_id),
    )
    db_session.add(category)
    await commit_unique(db_session, "Category with this slug already exists for this client")
    return await reload(db_session, ClientCategory, category.id)


async def update_client_category(
    db_session: AsyncSession, category_id: UUID, name: str, slug: str | None = None
) -> ClientCategory:
    category = await get_client_category(db_session, category_id)
    if slug and slug != category.slug:
        await _check_category_slug(db_session, category.client_id, slug, exclude_id=category_id)
        category.slug = slug
    category.name = name

    await commit_unique(db_session, "Category with this slug already exists for this client")
    return await reload(db_session, ClientCategory, category.id)


async def delete_client_category(db_session: AsyncSession, category_id: UUID) -> None:
    await get_client_category(db_session, category_id)
    category = await reload(db_session, ClientCategory, category_id)
    await db_session.delete(category)
    await db_session.commit()


async def reorder_client_categories(
    db_session: AsyncSession, client_id: UUID, ids: list[UUID]
) -> list[OrderAssignment]:
    await get_client(db_session, client_id)
    return await reorder(db_session, CLIENT_CATEGORIES, ids, partition=client_id)


# -- Category images -------------------------------------------------------


async def list_category_images(db_session: AsyncSession, category_id: UUID) -> list[CategoryImage]:
    result = await db_session.execute(
        select(CategoryImage)
        .where(CategoryImage.category_id == category_id)
        .order_by(CategoryImage.order.asc(), CategoryImage.created_at.asc())
    )
    return list(result.scalars().all())


async def add_category_image(db_session: AsyncSession, category_id: UUID, url: str) -> CategoryImage:
    """Append an image to a category's gallery."""
    await get_client_category(db_session, category_id)

    image = CategoryImage(
        category_id=category_id,
        url=url,
        order=await next_order(db_session, CATEGORY_IMAGES, category_id),
    )
    db_session.add(image)
    await db_session.commit()
    await db_session.refresh(image)
    return image


async def remove_category_images(db_session: AsyncSession, category_id: UUID, image_ids: list[UUID]) -> int:
    """Delete the given images from a category. IDs from other categories are ignored.

    Returns:
        Number of images deleted
    """
    result = await db_session.execute(
        delete(CategoryImage).where(
            CategoryImage.category_id == category_id,
            CategoryImage.id.in_(image_ids),
        )
    )
    await db_session.commit()
    return result.rowcount or 0


async def reorder_category_images(
    db_session: AsyncSession, category_id: UUID, image_ids: list[UUID]
) -> list[CategoryImage]:
    """Reorder a category's images and return them in their new order."""
    await get_client_category(db_session, category_id)
    await reorder(db_session, CATEGORY_IMAGES, image_ids, partition=category_id)
    return await list_category_images(db_session, category_id)
