"""Hero carousel slide endpoints."""

from uuid import UUID

from litestar import Controller, delete, get, patch, post, put
from litestar.status_codes import HTTP_200_OK
from sqlalchemy.ext.asyncio import AsyncSession

from folio.auth.guards import admin_guard
from folio.db.services import hero_slide_service
from folio.schemas import serialize, serialize_many
from folio.schemas.common import SUCCESS, ReorderRequest
from folio.schemas.hero_slides import CreateHeroSlideRequest, HeroSlideResponse, UpdateHeroSlideRequest


class HeroSlideController(Controller):
    path = "/hero-slides"
    tags = ["hero-slides"]

    @get("/")
    async def list_slides(self, db_session: AsyncSession) -> list[dict]:
        return serialize_many(HeroSlideResponse, await hero_slide_service.list_hero_slides(db_session))

    @get("/visible")
    async def list_visible_slides(self, db_session: AsyncSession) -> list[dict]:
        slides = await hero_slide_service.list_hero_slides(db_session, visible_only=True)
        return serialize_many(HeroSlideResponse, slides)

    @post("/", guards=[admin_guard])
    async def create_slide(self, db_session: AsyncSession, data: CreateHeroSlideRequest) -> dict:
        slide = await hero_slide_service.create_hero_slide(db_session, data.changes())
        return serialize(HeroSlideResponse, slide)

    @patch("/reorder", guards=[admin_guard])
    async def reorder_slides(self, db_session: AsyncSession, data: ReorderRequest) -> dict:
        await hero_slide_service.reorder_hero_slides(db_session, data.ids)
        return SUCCESS

    @put("/{slide_id:uuid}", guards=[admin_guard])
    async def update_slide(
        self, db_session: AsyncSession, slide_id: UUID, data: UpdateHeroSlideRequest
    ) -> dict:
        slide = await hero_slide_service.update_hero_slide(db_session, slide_id, data.changes())
        return serialize(HeroSlideResponse, slide)

    @patch("/{slide_id:uuid}/visibility", guards=[admin_guard])
    async def toggle_visibility(self, db_session: AsyncSession, slide_id: UUID) -> dict:
        slide = await hero_slide_service.toggle_hero_slide_visibility(db_session, slide_id)
        return serialize(HeroSlideResponse, slide)

    @delete("/{slide_id:uuid}", guards=[admin_guard], status_code=HTTP_200_OK)
    async def delete_slide(self, db_session: AsyncSession, slide_id: UUID) -> dict:
        await hero_slide_service.delete_hero_slide(db_session, slide_id)
        return SUCCESS
