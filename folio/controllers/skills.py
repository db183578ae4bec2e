"""Skill endpoints. Skills are listed and reordered per category."""

from uuid import UUID

from litestar import Controller, delete, get, patch, post, put
from litestar.status_codes import HTTP_200_OK
from sqlalchemy.ext.asyncio import AsyncSession

from folio.auth.guards import admin_guard
from folio.db.models import SkillCategory
from folio.db.services import skill_service
from folio.schemas import serialize, serialize_many
from folio.schemas.common import SUCCESS, ReorderRequest
from folio.schemas.skills import CreateSkillRequest, SkillResponse, UpdateSkillRequest


class SkillController(Controller):
    path = "/skills"
    tags = ["skills"]

    @get("/")
    async def list_skills(
        self, db_session: AsyncSession, category: SkillCategory | None = None
    ) -> list[dict]:
        return serialize_many(SkillResponse, await skill_service.list_skills(db_session, category))

    @post("/", guards=[admin_guard])
    async def create_skill(self, db_session: AsyncSession, data: CreateSkillRequest) -> dict:
        return serialize(SkillResponse, await skill_service.create_skill(db_session, data.changes()))

    @patch("/reorder", guards=[admin_guard])
    async def reorder_skills(self, db_session: AsyncSession, data: ReorderRequest) -> dict:
        """Reorder skills of one category; mixing categories is rejected."""
        await skill_service.reorder_skills(db_session, data.ids)
        return SUCCESS

    @put("/{skill_id:uuid}", guards=[admin_guard])
    async def update_skill(self, db_session: AsyncSession, skill_id: UUID, data: UpdateSkillRequest) -> dict:
        skill = await skill_service.update_skill(db_session, skill_id, data.changes())
        return serialize(SkillResponse, skill)

    @delete("/{skill_id:uuid}", guards=[admin_guard], status_code=HTTP_200_OK)
    async def delete_skill(self, db_session: AsyncSession, skill_id: UUID) -> dict:
        await skill_service.delete_skill(db_session, skill_id)
        return SUCCESS
