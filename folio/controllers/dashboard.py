from litestar import Controller, get
from sqlalchemy.ext.asyncio import AsyncSession

from folio.auth.guards import admin_guard
from folio.db.services import dashboard_service
from folio.schemas import serialize
from folio.schemas.dashboard import DashboardStatsResponse


class DashboardController(Controller):
    path = "/dashboard"
    tags = ["dashboard"]
    guards = [admin_guard]

    @get("/stats")
    async def stats(self, db_session: AsyncSession) -> dict:
        return serialize(DashboardStatsResponse, await dashboard_service.get_stats(db_session))
