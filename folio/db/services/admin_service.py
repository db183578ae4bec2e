"""Admin allow-list lookups."""

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from folio.db.models import Admin


async def is_admin(db_session: AsyncSession, email: str | None) -> bool:
    """Whether ``email`` is on the admin allow-list (case-insensitive)."""
    if not email:
        return False
    result = await db_session.execute(
        select(Admin.id).where(func.lower(Admin.email) == email.strip().lower())
    )
    return result.scalar_one_or_none() is not None


async def add_admin(db_session: AsyncSession, email: str, name: str | None = None) -> Admin:
    """Add an email to the allow-list, returning the existing row if already present."""
    email = email.strip().lower()
    result = await db_session.execute(select(Admin).where(func.lower(Admin.email) == email))
    admin = result.scalar_one_or_none()
    if admin is not None:
        return admin

    admin = Admin(email=email, name=name)
    db_session.add(admin)
    await db_session.commit()
    await db_session.refresh(admin)
    return admin
