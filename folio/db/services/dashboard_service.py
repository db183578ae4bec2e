"""Admin dashboard statistics."""

from dataclasses import dataclass

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from folio.db.models import Client, Experience, Message, Skill
from folio.db.services import message_service


@dataclass
class DashboardStats:
    total_clients: int
    visible_clients: int
    total_messages: int
    unread_messages: int
    skills: int
    experiences: int
    recent_messages: list[Message]


async def _count(db_session: AsyncSession, model, *filters) -> int:
    query = select(func.count()).select_from(model)
    if filters:
        query = query.where(*filters)
    result = await db_session.execute(query)
    return int(result.scalar_one())


async def get_stats(db_session: AsyncSession) -> DashboardStats:
    """Collect the counters and the five latest messages shown on the dashboard."""
    return DashboardStats(
        total_clients=await _count(db_session, Client),
        visible_clients=await _count(db_session, Client, Client.is_visible == True),  # noqa: E712
        total_messages=await _count(db_session, Message),
        unread_messages=await _count(db_session, Message, Message.is_read == False),  # noqa: E712
        skills=await _count(db_session, Skill),
        experiences=await _count(db_session, Experience),
        recent_messages=await message_service.list_messages(db_session, limit=5),
    )
