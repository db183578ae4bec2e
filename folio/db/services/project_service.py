"""Project service: case studies, their gallery and visitor likes."""

import logging
from typing import Any
from uuid import UUID

from sqlalchemy import delete, select, update
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from folio.db.models import Project, ProjectImage, ProjectLike
from folio.db.ordering import OrderAssignment, OrderedCollection, next_order, reorder
from folio.db.services.common import apply_updates, commit_unique, get_or_404, reload
from folio.lib.exceptions import ConflictError, InvalidRequestError, NotFoundError
from folio.lib.text import slugify

logger = logging.getLogger(__name__)

PROJECTS = OrderedCollection(Project, name="projects")

_SLUG_TAKEN = "Project with similar title already exists"


async def list_projects(db_session: AsyncSession, visible_only: bool = False) -> list[Project]:
    """List projects by display order with category, client and gallery loaded.

    Args:
        db_session: Database session
        visible_only: Only return projects flagged visible

    Returns:
        List of Project objects
    """
    query = select(Project).order_by(Project.order.asc(), Project.created_at.asc())
    if visible_only:
        query = query.where(Project.is_visible == True)  # noqa: E712
    result = await db_session.execute(query)
    return list(result.scalars().all())


async def get_project(db_session: AsyncSession, project_id: UUID) -> Project:
    return await get_or_404(db_session, Project, project_id, "Project")


async def get_project_by_slug(db_session: AsyncSession, slug: str) -> Project:
    result = await db_session.execute(select(Project).where(Project.slug == slug))
    project = result.scalar_one_or_none()
    if project is None:
        raise NotFoundError("Project not found")
    return project


async def _slug_from_title(db_session: AsyncSession, title: str, exclude_id: UUID | None = None) -> str:
    slug = slugify(title)
    if not slug:
        raise InvalidRequestError("Project title must contain letters or digits")

    query = select(Project.id).where(Project.slug == slug)
    if exclude_id is not None:
        query = query.where(Project.id != exclude_id)
    result = await db_session.execute(query)
    if result.scalar_one_or_none() is not None:
        raise ConflictError(_SLUG_TAKEN)
    return slug


async def create_project(db_session: AsyncSession, fields: dict[str, Any]) -> Project:
    """Create a project at the end of the list; the slug is derived from the title."""
    slug = await _slug_from_title(db_session, fields["title"])

    project = Project(**fields, slug=slug, order=await next_order(db_session, PROJECTS))
    db_session.add(project)
    await commit_unique(db_session, _SLUG_TAKEN)
    return await reload(db_session, Project, project.id)


async def update_project(db_session: AsyncSession, project_id: UUID, fields: dict[str, Any]) -> Project:
    project = await get_project(db_session, project_id)

    fields = dict(fields)
    title = fields.get("title")
    if title and title != project.title:
        fields["slug"] = await _slug_from_title(db_session, title, exclude_id=project_id)

    apply_updates(project, fields)
    await commit_unique(db_session, _SLUG_TAKEN)
    return await reload(db_session, Project, project.id)


async def toggle_project_visibility(db_session: AsyncSession, project_id: UUID) -> Project:
    project = await get_project(db_session, project_id)
    project.is_visible = not project.is_visible
    await db_session.commit()
    await db_session.refresh(project)
    return project


async def delete_project(db_session: AsyncSession, project_id: UUID) -> None:
    await get_project(db_session, project_id)
    project = await reload(db_session, Project, project_id)
    await db_session.delete(project)
    await db_session.commit()


async def reorder_projects(db_session: AsyncSession, ids: list[UUID]) -> list[OrderAssignment]:
    return await reorder(db_session, PROJECTS, ids)


async def like_project(db_session: AsyncSession, project_id: UUID, ip_hash: str) -> int:
    """Record one like per visitor and bump the project's counter.

    The like row and the counter increment commit together.

    Args:
        db_session: Database session
        project_id: Project UUID
        ip_hash: SHA-256 of the visitor's IP

    Returns:
        The new like count

    Raises:
        NotFoundError: the project does not exist
        ConflictError: this visitor already liked the project
    """
    project = await get_project(db_session, project_id)

    result = await db_session.execute(
        select(ProjectLike.id).where(
            ProjectLike.project_id == project_id,
            ProjectLike.user_ip_hash == ip_hash,
        )
    )
    if result.scalar_one_or_none() is not None:
        raise ConflictError("Already liked this project")

    try:
        db_session.add(ProjectLike(project_id=project_id, user_ip_hash=ip_hash))
        await db_session.execute(
            update(Project)
            .where(Project.id == project_id)
            .values(likes_count=Project.likes_count + 1)
            .execution_options(synchronize_session=False)
        )
        await db_session.commit()
    except IntegrityError as exc:
        await db_session.rollback()
        raise ConflictError("Already liked this project") from exc

    await db_session.refresh(project, attribute_names=["likes_count"])
    logger.debug("Project %s liked, now %d", project_id, project.likes_count)
    return project.likes_count


async def add_gallery_image(db_session: AsyncSession, project_id: UUID, url: str) -> ProjectImage:
    await get_project(db_session, project_id)

    image = ProjectImage(project_id=project_id, url=url)
    db_session.add(image)
    await db_session.commit()
    await db_session.refresh(image)
    return image


async def remove_gallery_images(db_session: AsyncSession, project_id: UUID, image_ids: list[UUID]) -> int:
    """Delete gallery images belonging to the project; foreign IDs are ignored."""
    await get_project(db_session, project_id)

    result = await db_session.execute(
        delete(ProjectImage).where(
            ProjectImage.project_id == project_id,
            ProjectImage.id.in_(image_ids),
        )
    )
    await db_session.commit()
    return result.rowcount or 0
