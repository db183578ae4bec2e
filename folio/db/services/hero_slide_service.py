"""Hero slide service."""

from typing import Any
from uuid import UUID

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from folio.db.models import HeroSlide
from folio.db.ordering import OrderAssignment, OrderedCollection, next_order, reorder
from folio.db.services.common import apply_updates, get_or_404
from folio.lib.exceptions import InvalidRequestError

HERO_SLIDES = OrderedCollection(HeroSlide, name="hero slides")


async def list_hero_slides(db_session: AsyncSession, visible_only: bool = False) -> list[HeroSlide]:
    query = select(HeroSlide).order_by(HeroSlide.order.asc(), HeroSlide.created_at.asc())
    if visible_only:
        query = query.where(HeroSlide.is_visible == True)  # noqa: E712
    result = await db_session.execute(query)
    return list(result.scalars().all())


async def create_hero_slide(db_session: AsyncSession, fields: dict[str, Any]) -> HeroSlide:
    """Create a slide at the end of the carousel."""
    slide = HeroSlide(**fields, order=await next_order(db_session, HERO_SLIDES))
    db_session.add(slide)
    await db_session.commit()
    await db_session.refresh(slide)
    return slide


async def update_hero_slide(db_session: AsyncSession, slide_id: UUID, fields: dict[str, Any]) -> HeroSlide:
    slide = await get_or_404(db_session, HeroSlide, slide_id, "Hero slide")
    apply_updates(slide, fields)
    await db_session.commit()
    await db_session.refresh(slide)
    return slide


async def toggle_hero_slide_visibility(db_session: AsyncSession, slide_id: UUID) -> HeroSlide:
    """Flip a slide's visibility.

    The carousel must never be empty, so hiding the only visible slide is
    refused with ``InvalidRequestError``.
    """
    slide = await get_or_404(db_session, HeroSlide, slide_id, "Hero slide")

    if slide.is_visible:
        result = await db_session.execute(
            select(func.count(HeroSlide.id)).where(HeroSlide.is_visible == True)  # noqa: E712
        )
        if result.scalar_one() <= 1:
            raise InvalidRequestError("At least one slide must stay visible")

    slide.is_visible = not slide.is_visible
    await db_session.commit()
    await db_session.refresh(slide)
    return slide


async def delete_hero_slide(db_session: AsyncSession, slide_id: UUID) -> None:
    slide = await get_or_404(db_session, HeroSlide, slide_id, "Hero slide")
    await db_session.delete(slide)
    await db_session.commit()


async def reorder_hero_slides(db_session: AsyncSession, ids: list[UUID]) -> list[OrderAssignment]:
    return await reorder(db_session, HERO_SLIDES, ids)
