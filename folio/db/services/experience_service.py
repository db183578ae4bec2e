"""Experience service."""

from typing import Any
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from folio.db.models import Experience
from folio.db.services.common import apply_updates, get_or_404


async def list_experiences(db_session: AsyncSession) -> list[Experience]:
    """Current positions first, then newest start date first."""
    result = await db_session.execute(
        select(Experience).order_by(Experience.is_current.desc(), Experience.start_date.desc())
    )
    return list(result.scalars().all())


async def get_experience(db_session: AsyncSession, experience_id: UUID) -> Experience:
    return await get_or_404(db_session, Experience, experience_id, "Experience")


async def create_experience(db_session: AsyncSession, fields: dict[str, Any]) -> Experience:
    experience = Experience(**fields)
    db_session.add(experience)
    await db_session.commit()
    await db_session.refresh(experience)
    return experience


async def update_experience(
    db_session: AsyncSession, experience_id: UUID, fields: dict[str, Any]
) -> Experience:
    experience = await get_experience(db_session, experience_id)
    apply_updates(experience, fields)
    await db_session.commit()
    await db_session.refresh(experience)
    return experience


async def delete_experience(db_session: AsyncSession, experience_id: UUID) -> None:
    experience = await get_experience(db_session, experience_id)
    await db_session.delete(experience)
    await db_session.commit()
