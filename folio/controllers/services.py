"""Offered-services endpoints."""

from uuid import UUID

from litestar import Controller, delete, get, patch, post, put
from litestar.status_codes import HTTP_200_OK
from sqlalchemy.ext.asyncio import AsyncSession

from folio.auth.guards import admin_guard
from folio.db.services import service_service
from folio.schemas import serialize, serialize_many
from folio.schemas.common import SUCCESS, ReorderRequest
from folio.schemas.services import CreateServiceRequest, ServiceResponse, UpdateServiceRequest


class ServiceController(Controller):
    path = "/services"
    tags = ["services"]

    @get("/")
    async def list_services(self, db_session: AsyncSession) -> list[dict]:
        return serialize_many(ServiceResponse, await service_service.list_services(db_session))

    @post("/", guards=[admin_guard])
    async def create_service(self, db_session: AsyncSession, data: CreateServiceRequest) -> dict:
        service = await service_service.create_service(db_session, data.changes())
        return serialize(ServiceResponse, service)

    @patch("/reorder", guards=[admin_guard])
    async def reorder_services(self, db_session: AsyncSession, data: ReorderRequest) -> dict:
        await service_service.reorder_services(db_session, data.ids)
        return SUCCESS

    @put("/{service_id:uuid}", guards=[admin_guard])
    async def update_service(
        self, db_session: AsyncSession, service_id: UUID, data: UpdateServiceRequest
    ) -> dict:
        service = await service_service.update_service(db_session, service_id, data.changes())
        return serialize(ServiceResponse, service)

    @delete("/{service_id:uuid}", guards=[admin_guard], status_code=HTTP_200_OK)
    async def delete_service(self, db_session: AsyncSession, service_id: UUID) -> dict:
        await service_service.delete_service(db_session, service_id)
        return SUCCESS
