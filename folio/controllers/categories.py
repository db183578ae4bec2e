"""Project category endpoints."""

from uuid import UUID

from litestar import Controller, delete, get, patch, post, put
from litestar.status_codes import HTTP_200_OK
from sqlalchemy.ext.asyncio import AsyncSession

from folio.auth.guards import admin_guard
from folio.db.services import category_service
from folio.schemas import serialize
from folio.schemas.categories import CategoryRequest, CategoryResponse
from folio.schemas.common import SUCCESS, ReorderRequest


def _render(category, project_count: int) -> dict:
    return {**serialize(CategoryResponse, category), "projectCount": project_count}


class CategoryController(Controller):
    path = "/categories"
    tags = ["categories"]

    @get("/")
    async def list_categories(self, db_session: AsyncSession) -> list[dict]:
        rows = await category_service.list_categories(db_session)
        return [_render(category, count) for category, count in rows]

    @post("/", guards=[admin_guard])
    async def create_category(self, db_session: AsyncSession, data: CategoryRequest) -> dict:
        category = await category_service.create_category(db_session, data.name)
        return _render(category, 0)

    @patch("/reorder", guards=[admin_guard])
    async def reorder_categories(self, db_session: AsyncSession, data: ReorderRequest) -> dict:
        await category_service.reorder_categories(db_session, data.ids)
        return SUCCESS

    @put("/{category_id:uuid}", guards=[admin_guard])
    async def update_category(
        self, db_session: AsyncSession, category_id: UUID, data: CategoryRequest
    ) -> dict:
        category = await category_service.update_category(db_session, category_id, data.name)
        return _render(category, await category_service.count_projects(db_session, category_id))

    @delete("/{category_id:uuid}", guards=[admin_guard], status_code=HTTP_200_OK)
    async def delete_category(self, db_session: AsyncSession, category_id: UUID) -> dict:
        await category_service.delete_category(db_session, category_id)
        return SUCCESS
