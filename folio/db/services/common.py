"""Helpers shared by the resource service modules."""

from collections.abc import Mapping
from typing import Any, TypeVar
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from folio.lib.exceptions import ConflictError, NotFoundError

T = TypeVar("T")


async def get_or_404(db_session: AsyncSession, model: type[T], record_id: UUID, label: str) -> T:
    """Load a row by primary key or raise ``NotFoundError``."""
    result = await db_session.execute(select(model).where(model.id == record_id))
    record = result.scalar_one_or_none()
    if record is None:
        raise NotFoundError(f"{label} not found")
    return record


def apply_updates(record: Any, fields: Mapping[str, Any]) -> None:
    """Copy the supplied (already validated) fields onto an ORM row."""
    for name, value in fields.items():
        setattr(record, name, value)


async def commit_unique(db_session: AsyncSession, conflict_message: str) -> None:
    """Commit, turning a unique-constraint violation into ``ConflictError``.

    Services check uniqueness before writing; this covers the window between
    that check and the commit.
    """
    try:
        await db_session.commit()
    except IntegrityError as exc:
        await db_session.rollback()
        raise ConflictError(conflict_message) from exc


async def reload(db_session: AsyncSession, model: type[T], record_id: UUID) -> T:
    """Re-select a row, overwriting identity-map state and re-running eager loads.

    Used after writes that change relationships so the returned object carries
    the related rows the response serializes.
    """
    result = await db_session.execute(
        select(model).where(model.id == record_id).execution_options(populate_existing=True)
    )
    return result.scalar_one()
