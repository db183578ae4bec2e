"""Ordered collections: dense ``order`` keys, append-on-create and atomic reorder.

Every orderable table carries an integer ``order`` column. Within a collection,
or within one partition of it (skills per category, client categories per
client, gallery images per category), reads sort by ``order`` ascending.

Keys are kept dense (``1..n``) procedurally:

* ``next_order`` gives a new row ``max(order) + 1`` in its partition.
* ``reorder`` rewrites the whole partition in one transaction so that the
  caller's IDs take positions ``1..k`` and any rows the caller left out follow
  in their previous relative order.

Deletes never compact; gaps close on the next reorder.

``next_order`` is a plain read followed by the caller's insert, so two
concurrent creates in one partition can receive the same key. The next
reorder of that partition repairs the tie.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from typing import Any
from uuid import UUID

from sqlalchemy import func, select, update
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from folio.lib import observability
from folio.lib.exceptions import (
    FolioError,
    InvalidRequestError,
    NotFoundError,
    StorageUnavailableError,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class OrderedCollection:
    """An orderable ORM model and the column, if any, that partitions it."""

    model: Any
    name: str
    partition: str | None = None

    @property
    def partition_column(self):
        if self.partition is None:
            return None
        return getattr(self.model, self.partition)


@dataclass(frozen=True)
class OrderAssignment:
    id: UUID
    order: int


def plan_reorder(
    current: Sequence[tuple[UUID, int]],
    desired_ids: Sequence[UUID],
) -> list[OrderAssignment]:
    """Compute the ``order`` value for every row of a partition.

    Args:
        current: ``(id, order)`` pairs for the partition as it is stored now
        desired_ids: IDs in the order the caller wants them displayed

    Returns:
        One assignment per row of ``current``: ``desired_ids[k]`` gets
        ``k + 1``, unmentioned rows follow in their existing relative order.

    Raises:
        InvalidRequestError: ``desired_ids`` repeats an ID
        NotFoundError: ``desired_ids`` names an ID absent from ``current``
    """
    seen: set[UUID] = set()
    duplicates: list[UUID] = []
    for record_id in desired_ids:
        if record_id in seen:
            duplicates.append(record_id)
        seen.add(record_id)
    if duplicates:
        raise InvalidRequestError(
            f"Duplicate ids in reorder request: {', '.join(str(d) for d in duplicates)}"
        )

    known = {record_id for record_id, _ in current}
    missing = [record_id for record_id in desired_ids if record_id not in known]
    if missing:
        raise NotFoundError(f"Unknown ids in reorder request: {', '.join(str(m) for m in missing)}")

    # sorted() is stable, so rows sharing a key keep the order they were loaded in
    remainder = [
        record_id
        for record_id, _ in sorted(current, key=lambda row: row[1])
        if record_id not in seen
    ]

    return [
        OrderAssignment(id=record_id, order=position)
        for position, record_id in enumerate([*desired_ids, *remainder], start=1)
    ]


async def next_order(
    db_session: AsyncSession,
    collection: OrderedCollection,
    partition: Any = None,
) -> int:
    """Return the key a newly created row should take: ``max + 1``, or 1 when empty."""
    model = collection.model
    query = select(func.coalesce(func.max(model.order), 0))
    if collection.partition_column is not None:
        query = query.where(collection.partition_column == partition)

    result = await db_session.execute(query)
    return int(result.scalar_one()) + 1


async def _load_partition(
    db_session: AsyncSession,
    collection: OrderedCollection,
    desired_ids: Sequence[UUID],
    partition: Any = None,
) -> list[tuple[UUID, int]]:
    """Load ``(id, order)`` for the partition the requested IDs belong to."""
    model = collection.model
    query = select(model.id, model.order).order_by(model.order.asc(), model.created_at.asc())

    column = collection.partition_column
    if column is not None:
        result = await db_session.execute(
            select(column).where(model.id.in_(desired_ids)).distinct()
        )
        partitions = list(result.scalars().all())
        if not partitions:
            raise NotFoundError(f"No {collection.name} found for the supplied ids")
        if len(partitions) > 1 or (partition is not None and partitions[0] != partition):
            raise InvalidRequestError(
                f"Cannot reorder {collection.name} across more than one group in a single request"
            )
        query = query.where(column == partitions[0])

    result = await db_session.execute(query)
    return [(row.id, row.order) for row in result.all()]


async def reorder(
    db_session: AsyncSession,
    collection: OrderedCollection,
    desired_ids: Iterable[UUID],
    partition: Any = None,
) -> list[OrderAssignment]:
    """Atomically rewrite ``order`` so the partition reads back in ``desired_ids`` order.

    For partitioned collections the partition is inferred from the IDs; pass
    ``partition`` to also require that it matches a known value (the client
    or category named in the URL).

    All updates are committed together. On a storage failure the transaction
    is rolled back, the previous ordering stays in place and
    ``StorageUnavailableError`` is raised.
    """
    desired_ids = list(desired_ids)
    if not desired_ids:
        raise InvalidRequestError("Reorder request must contain at least one id")

    model = collection.model
    with observability.span("reorder", collection=collection.name, size=len(desired_ids)):
        try:
            current = await _load_partition(db_session, collection, desired_ids, partition)
            assignments = plan_reorder(current, desired_ids)
            for assignment in assignments:
                await db_session.execute(
                    update(model).where(model.id == assignment.id).values(order=assignment.order)
                )
            await db_session.commit()
        except FolioError:
            await db_session.rollback()
            raise
        except SQLAlchemyError as exc:
            await db_session.rollback()
            logger.warning("Reorder of %s rolled back: %s", collection.name, exc)
            raise StorageUnavailableError(
                f"Could not reorder {collection.name}, no changes were applied"
            ) from exc

    logger.debug("Reordered %d %s", len(assignments), collection.name)
    return assignments
