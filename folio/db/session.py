"""Request-scoped sessions that are rolled back when the client disconnects.

advanced_alchemy releases the request session in its ``before_send`` hook,
which never runs when a disconnect cancels the handler. A reorder cancelled
halfway would then keep its connection checked out with uncommitted updates
pending. Serving the session from a generator dependency puts the cleanup in
Litestar's dependency teardown, which does run on cancellation.
"""

import asyncio
import logging
from collections.abc import AsyncGenerator
from typing import TYPE_CHECKING, Callable, cast

from advanced_alchemy._listeners import set_async_context
from advanced_alchemy.extensions.litestar import SQLAlchemyAsyncConfig
from advanced_alchemy.extensions.litestar._utils import (
    delete_aa_scope_state,
    get_aa_scope_state,
    set_aa_scope_state,
)
from sqlalchemy import event
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession

if TYPE_CHECKING:
    from litestar.datastructures import State
    from litestar.types import Scope

logger = logging.getLogger(__name__)


def enable_sqlite_foreign_keys(engine: AsyncEngine) -> None:
    """Have SQLite enforce the ON DELETE rules of every foreign key.

    SQLite ignores foreign keys unless each connection turns them on.
    Other dialects are left alone.
    """
    if engine.dialect.name != "sqlite":
        return

    @event.listens_for(engine.sync_engine, "connect")
    def _foreign_keys_on(dbapi_connection, connection_record):
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()


class SafeSQLAlchemyAsyncConfig(SQLAlchemyAsyncConfig):
    """Async config whose ``db_session`` dependency survives cancelled requests."""

    def get_engine(self) -> AsyncEngine:
        created = self.engine_instance is None
        engine = super().get_engine()
        if created:
            enable_sqlite_foreign_keys(engine)
        return engine

    def _scoped_session(self, state: "State", scope: "Scope") -> AsyncSession:
        session = cast("AsyncSession | None", get_aa_scope_state(scope, self.session_scope_key))
        if session is not None:
            return session

        make_session = cast("Callable[[], AsyncSession]", state[self.session_maker_app_state_key])
        session = make_session()
        set_aa_scope_state(scope, self.session_scope_key, session)
        return session

    async def provide_session(
        self,
        state: "State",
        scope: "Scope",
    ) -> AsyncGenerator[AsyncSession, None]:
        session = self._scoped_session(state, scope)
        set_async_context(True)

        try:
            yield session
        except asyncio.CancelledError:
            logger.debug("Request cancelled, discarding uncommitted changes")
            await session.rollback()
            await session.close()
            delete_aa_scope_state(scope, self.session_scope_key)
            raise


__all__ = ["SafeSQLAlchemyAsyncConfig", "enable_sqlite_foreign_keys"]
