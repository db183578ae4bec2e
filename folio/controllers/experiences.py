"""Work experience endpoints."""

from uuid import UUID

from litestar import Controller, delete, get, post, put
from litestar.status_codes import HTTP_200_OK
from sqlalchemy.ext.asyncio import AsyncSession

from folio.auth.guards import admin_guard
from folio.db.services import experience_service
from folio.schemas import serialize, serialize_many
from folio.schemas.common import SUCCESS
from folio.schemas.experiences import (
    CreateExperienceRequest,
    ExperienceResponse,
    UpdateExperienceRequest,
)


class ExperienceController(Controller):
    path = "/experiences"
    tags = ["experiences"]

    @get("/")
    async def list_experiences(self, db_session: AsyncSession) -> list[dict]:
        return serialize_many(ExperienceResponse, await experience_service.list_experiences(db_session))

    @get("/{experience_id:uuid}")
    async def get_experience(self, db_session: AsyncSession, experience_id: UUID) -> dict:
        experience = await experience_service.get_experience(db_session, experience_id)
        return serialize(ExperienceResponse, experience)

    @post("/", guards=[admin_guard])
    async def create_experience(self, db_session: AsyncSession, data: CreateExperienceRequest) -> dict:
        experience = await experience_service.create_experience(db_session, data.changes())
        return serialize(ExperienceResponse, experience)

    @put("/{experience_id:uuid}", guards=[admin_guard])
    async def update_experience(
        self, db_session: AsyncSession, experience_id: UUID, data: UpdateExperienceRequest
    ) -> dict:
        experience = await experience_service.update_experience(db_session, experience_id, data.changes())
        return serialize(ExperienceResponse, experience)

    @delete("/{experience_id:uuid}", guards=[admin_guard], status_code=HTTP_200_OK)
    async def delete_experience(self, db_session: AsyncSession, experience_id: UUID) -> dict:
        await experience_service.delete_experience(db_session, experience_id)
        return SUCCESS
