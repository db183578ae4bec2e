from litestar import Controller, get
from sqlalchemy.ext.asyncio import AsyncSession

from folio.db.services import health_service


class HealthController(Controller):
    path = "/health"
    tags = ["health"]

    @get("/")
    async def health(self) -> dict:
        return health_service.check()

    @get("/db")
    async def database_health(self, db_session: AsyncSession) -> dict:
        return await health_service.check_database(db_session)
