"""Contact message service."""

from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from folio.db.models import Message
from folio.db.services.common import get_or_404


async def create_message(db_session: AsyncSession, name: str, email: str, content: str) -> Message:
    """Store a contact form submission as unread."""
    message = Message(name=name, email=email, content=content, is_read=False)
    db_session.add(message)
    await db_session.commit()
    await db_session.refresh(message)
    return message


async def list_messages(db_session: AsyncSession, limit: int | None = None) -> list[Message]:
    """Newest first."""
    query = select(Message).order_by(Message.created_at.desc())
    if limit:
        query = query.limit(limit)
    result = await db_session.execute(query)
    return list(result.scalars().all())


async def read_message(db_session: AsyncSession, message_id: UUID) -> Message:
    """Fetch a message for the admin, marking it read on first view."""
    message = await get_or_404(db_session, Message, message_id, "Message")
    if not message.is_read:
        message.is_read = True
        await db_session.commit()
        await db_session.refresh(message)
    return message


async def toggle_message_read(db_session: AsyncSession, message_id: UUID) -> Message:
    message = await get_or_404(db_session, Message, message_id, "Message")
    message.is_read = not message.is_read
    await db_session.commit()
    await db_session.refresh(message)
    return message


async def delete_message(db_session: AsyncSession, message_id: UUID) -> None:
    message = await get_or_404(db_session, Message, message_id, "Message")
    await db_session.delete(message)
    await db_session.commit()
