"""Site settings endpoints."""

from litestar import Controller, get, put
from sqlalchemy.ext.asyncio import AsyncSession

from folio.auth.guards import admin_guard
from folio.db.services import settings_service
from folio.schemas import serialize
from folio.schemas.settings import SiteSettingsResponse, UpdateSiteSettingsRequest


class SettingsController(Controller):
    path = "/settings"
    tags = ["settings"]

    @get("/")
    async def get_settings(self, db_session: AsyncSession) -> dict:
        return serialize(SiteSettingsResponse, await settings_service.get_site_settings(db_session))

    @put("/", guards=[admin_guard])
    async def update_settings(self, db_session: AsyncSession, data: UpdateSiteSettingsRequest) -> dict:
        settings = await settings_service.update_site_settings(db_session, data.changes())
        return serialize(SiteSettingsResponse, settings)
