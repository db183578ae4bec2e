"""Skill service. Skills are ordered separately within each category."""

from typing import Any
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from folio.db.models import Skill, SkillCategory
from folio.db.ordering import OrderAssignment, OrderedCollection, next_order, reorder
from folio.db.services.common import apply_updates, get_or_404

SKILLS = OrderedCollection(Skill, name="skills", partition="category")


async def list_skills(db_session: AsyncSession, category: SkillCategory | None = None) -> list[Skill]:
    """List skills, optionally for one category, by category then order."""
    query = select(Skill).order_by(Skill.category.asc(), Skill.order.asc(), Skill.created_at.asc())
    if category is not None:
        query = query.where(Skill.category == category)
    result = await db_session.execute(query)
    return list(result.scalars().all())


async def create_skill(db_session: AsyncSession, fields: dict[str, Any]) -> Skill:
    """Create a skill at the end of its category."""
    category = SkillCategory(fields["category"])
    skill = Skill(**fields, order=await next_order(db_session, SKILLS, category))
    db_session.add(skill)
    await db_session.commit()
    await db_session.refresh(skill)
    return skill


async def update_skill(db_session: AsyncSession, skill_id: UUID, fields: dict[str, Any]) -> Skill:
    """Update a skill.

    Moving a skill to another category appends it to the end of that
    category. The gap it leaves behind closes on the next reorder.
    """
    skill = await get_or_404(db_session, Skill, skill_id, "Skill")

    fields = dict(fields)
    new_category = fields.get("category")
    if new_category is not None and SkillCategory(new_category) != skill.category:
        fields["order"] = await next_order(db_session, SKILLS, SkillCategory(new_category))

    apply_updates(skill, fields)
    await db_session.commit()
    await db_session.refresh(skill)
    return skill


async def delete_skill(db_session: AsyncSession, skill_id: UUID) -> None:
    skill = await get_or_404(db_session, Skill, skill_id, "Skill")
    await db_session.delete(skill)
    await db_session.commit()


async def reorder_skills(db_session: AsyncSession, ids: list[UUID]) -> list[OrderAssignment]:
    return await reorder(db_session, SKILLS, ids)
