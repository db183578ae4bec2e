"""ASGI application factory for the Folio API.

Run with ``folio serve`` or point any ASGI server at ``folio.asgi:app``.
"""

import logging

from advanced_alchemy.extensions.litestar import SQLAlchemyPlugin
from litestar import Litestar, Router
from litestar.openapi import OpenAPIConfig

from folio.app_config import (
    build_cors_config,
    build_db_config,
    build_local_uploads_router,
    build_logging_config,
    build_rate_limit_middleware,
    build_security_middleware,
)
from folio.auth.delegate import SupabaseAuthDelegate
from folio.config import Settings, get_settings
from folio.controllers import API_CONTROLLERS
from folio.db.services import health_service
from folio.lib import observability
from folio.lib.email import EmailNotifier
from folio.lib.exceptions import EXCEPTION_HANDLERS
from folio.lib.keepalive import KeepAlive
from folio.lib.storage import create_storage_backend
from folio.lib.uploads import Uploader

logger = logging.getLogger(__name__)


def create_app(
    settings: Settings | None = None,
    auth_delegate=None,
    email_notifier: EmailNotifier | None = None,
) -> Litestar:
    """Create and configure the Litestar application.

    Args:
        settings: Settings to use instead of ``get_settings()``
        auth_delegate: Object with an async ``resolve(token)``; defaults to
            the Supabase delegate
        email_notifier: Notifier used by the contact form; defaults to Resend
    """
    settings = settings or get_settings()

    observability.configure(settings)
    observability.instrument_httpx()

    db_config = build_db_config(settings)
    storage_backend = create_storage_backend(settings.storage)
    keepalive = KeepAlive(
        ping=lambda: _ping_database(db_config),
        interval_seconds=settings.keepalive.interval_seconds,
    )

    async def on_startup(app: Litestar) -> None:
        observability.instrument_sqlalchemy(db_config.get_engine())
        if settings.keepalive.enabled:
            keepalive.start()
        logger.info("Folio API started (storage=%s)", settings.storage.backend)

    async def on_shutdown(app: Litestar) -> None:
        await keepalive.stop()
        await storage_backend.close()

    api = Router(path=settings.api_prefix, route_handlers=API_CONTROLLERS)

    app = Litestar(
        route_handlers=[api, *build_local_uploads_router(settings)],
        on_startup=[on_startup],
        on_shutdown=[on_shutdown],
        plugins=[SQLAlchemyPlugin(config=db_config)],
        cors_config=build_cors_config(settings),
        middleware=[*build_security_middleware(settings), *build_rate_limit_middleware(settings)],
        exception_handlers=EXCEPTION_HANDLERS,
        logging_config=build_logging_config(settings),
        openapi_config=OpenAPIConfig(title="Folio API", version="1.0.0", path="/api/docs"),
        request_max_body_size=settings.storage.max_upload_size * settings.storage.max_files_per_request,
        debug=settings.debug,
    )

    app.state.settings = settings
    app.state.session_maker = db_config.get_session
    app.state.auth_delegate = auth_delegate or SupabaseAuthDelegate(settings.supabase)
    app.state.email_notifier = email_notifier or EmailNotifier(settings.email)
    app.state.uploader = Uploader(storage_backend, settings.storage)
    app.state.keepalive = keepalive

    return observability.instrument_app(app)


async def _ping_database(db_config) -> dict:
    async with db_config.get_session() as db_session:
        return await health_service.check_database(db_session)


app = create_app()
