"""Offered-services service."""

from typing import Any
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from folio.db.models import Service
from folio.db.ordering import OrderAssignment, OrderedCollection, next_order, reorder
from folio.db.services.common import apply_updates, get_or_404

SERVICES = OrderedCollection(Service, name="services")


async def list_services(db_session: AsyncSession) -> list[Service]:
    result = await db_session.execute(
        select(Service).order_by(Service.order.asc(), Service.created_at.asc())
    )
    return list(result.scalars().all())


async def create_service(db_session: AsyncSession, fields: dict[str, Any]) -> Service:
    service = Service(**fields, order=await next_order(db_session, SERVICES))
    db_session.add(service)
    await db_session.commit()
    await db_session.refresh(service)
    return service


async def update_service(db_session: AsyncSession, service_id: UUID, fields: dict[str, Any]) -> Service:
    service = await get_or_404(db_session, Service, service_id, "Service")
    apply_updates(service, fields)
    await db_session.commit()
    await db_session.refresh(service)
    return service


async def delete_service(db_session: AsyncSession, service_id: UUID) -> None:
    service = await get_or_404(db_session, Service, service_id, "Service")
    await db_session.delete(service)
    await db_session.commit()


async def reorder_services(db_session: AsyncSession, ids: list[UUID]) -> list[OrderAssignment]:
    return await reorder(db_session, SERVICES, ids)
