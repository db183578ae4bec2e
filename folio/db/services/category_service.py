"""Project category service."""

from uuid import UUID

from sqlalchemy import func, or_, select
from sqlalchemy.ext.asyncio import AsyncSession

from folio.db.models import Project, ProjectCategory
from folio.db.ordering import OrderAssignment, OrderedCollection, next_order, reorder
from folio.db.services.common import commit_unique, get_or_404
from folio.lib.exceptions import ConflictError, InvalidRequestError
from folio.lib.text import slugify

CATEGORIES = OrderedCollection(ProjectCategory, name="categories")


def _project_count():
    return (
        select(func.count(Project.id))
        .where(Project.category_id == ProjectCategory.id)
        .correlate(ProjectCategory)
        .scalar_subquery()
    )


async def list_categories(db_session: AsyncSession) -> list[tuple[ProjectCategory, int]]:
    """List categories by display order, each paired with its project count."""
    query = select(ProjectCategory, _project_count()).order_by(
        ProjectCategory.order.asc(), ProjectCategory.created_at.asc()
    )
    result = await db_session.execute(query)
    return [(category, count) for category, count in result.all()]


async def count_projects(db_session: AsyncSession, category_id: UUID) -> int:
    result = await db_session.execute(
        select(func.count(Project.id)).where(Project.category_id == category_id)
    )
    return int(result.scalar_one())


async def _check_unique(
    db_session: AsyncSession, name: str, slug: str, exclude_id: UUID | None = None
) -> None:
    query = select(ProjectCategory.id).where(
        or_(ProjectCategory.name == name, ProjectCategory.slug == slug)
    )
    if exclude_id is not None:
        query = query.where(ProjectCategory.id != exclude_id)
    result = await db_session.execute(query.limit(1))
    if result.scalar_one_or_none() is not None:
        raise ConflictError(f"Category '{name}' already exists")


def _slug_for(name: str) -> str:
    slug = slugify(name)
    if not slug:
        raise InvalidRequestError("Category name must contain letters or digits")
    return slug


async def create_category(db_session: AsyncSession, name: str) -> ProjectCategory:
    """Create a category at the end of the list.

    Args:
        db_session: Database session
        name: Display name, the slug is derived from it

    Returns:
        Created ProjectCategory

    Raises:
        ConflictError: the name or derived slug is taken
    """
    name = name.strip()
    slug = _slug_for(name)
    await _check_unique(db_session, name, slug)

    category = ProjectCategory(
        name=name,
        slug=slug,
        order=await next_order(db_session, CATEGORIES),
    )
    db_session.add(category)
    await commit_unique(db_session, f"Category '{name}' already exists")
    await db_session.refresh(category)
    return category


async def update_category(db_session: AsyncSession, category_id: UUID, name: str) -> ProjectCategory:
    """Rename a category and regenerate its slug."""
    category = await get_or_404(db_session, ProjectCategory, category_id, "Category")

    name = name.strip()
    slug = _slug_for(name)
    await _check_unique(db_session, name, slug, exclude_id=category_id)

    category.name = name
    category.slug = slug
    await commit_unique(db_session, f"Category '{name}' already exists")
    await db_session.refresh(category)
    return category


async def delete_category(db_session: AsyncSession, category_id: UUID) -> None:
    """Delete a category that no project references."""
    category = await get_or_404(db_session, ProjectCategory, category_id, "Category")

    in_use = await count_projects(db_session, category_id)
    if in_use:
        raise ConflictError(
            f"Category is used by {in_use} project(s); reassign them before deleting"
        )

    await db_session.delete(category)
    await db_session.commit()


async def reorder_categories(db_session: AsyncSession, ids: list[UUID]) -> list[OrderAssignment]:
    return await reorder(db_session, CATEGORIES, ids)
