"""Owner profile and education service.

The profile is a singleton: the first row is the profile, and ``PUT`` creates
it when it does not exist yet.
"""

from typing import Any
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from folio.db.models import Education, Profile
from folio.db.ordering import OrderedCollection, next_order
from folio.db.services.common import apply_updates, get_or_404, reload
from folio.lib.exceptions import NotFoundError

EDUCATIONS = OrderedCollection(Education, name="educations", partition="profile_id")


async def get_profile(db_session: AsyncSession) -> Profile | None:
    """Return the profile with its educations, or None when none exists."""
    result = await db_session.execute(select(Profile).order_by(Profile.created_at.asc()).limit(1))
    return result.scalar_one_or_none()


async def upsert_profile(db_session: AsyncSession, fields: dict[str, Any]) -> Profile:
    """Update the profile, creating it on first save.

    Args:
        db_session: Database session
        fields: Only the fields the caller supplied

    Returns:
        The saved Profile with educations loaded
    """
    profile = await get_profile(db_session)
    if profile is None:
        profile = Profile(bio="", email="")
        db_session.add(profile)

    apply_updates(profile, fields)
    await db_session.commit()
    return await reload(db_session, Profile, profile.id)


async def list_educations(db_session: AsyncSession) -> list[Education]:
    result = await db_session.execute(
        select(Education).order_by(Education.order.asc(), Education.created_at.asc())
    )
    return list(result.scalars().all())


async def create_education(db_session: AsyncSession, fields: dict[str, Any]) -> Education:
    """Attach an education entry to the profile.

    When ``order`` is omitted the entry is appended after the existing ones.

    Raises:
        NotFoundError: no profile has been saved yet
    """
    profile = await get_profile(db_session)
    if profile is None:
        raise NotFoundError("Profile not found. Create profile first.")

    fields = dict(fields)
    if fields.get("order") is None:
        fields["order"] = await next_order(db_session, EDUCATIONS, profile.id)

    education = Education(**fields, profile_id=profile.id)
    db_session.add(education)
    await db_session.commit()
    await db_session.refresh(education)
    return education


async def update_education(db_session: AsyncSession, education_id: UUID, fields: dict[str, Any]) -> Education:
    education = await get_or_404(db_session, Education, education_id, "Education")
    apply_updates(education, fields)
    await db_session.commit()
    await db_session.refresh(education)
    return education


async def delete_education(db_session: AsyncSession, education_id: UUID) -> None:
    education = await get_or_404(db_session, Education, education_id, "Education")
    await db_session.delete(education)
    await db_session.commit()
