"""Builders for the pieces ``create_app`` wires into Litestar."""

from pathlib import Path

from advanced_alchemy.config import EngineConfig
from advanced_alchemy.extensions.litestar import AsyncSessionConfig
from litestar.config.cors import CORSConfig
from litestar.logging import LoggingConfig
from litestar.middleware import DefineMiddleware
from litestar.static_files import create_static_files_router

from folio.config import Settings
import folio.db.models  # noqa: F401  (registers every table on Base.metadata)
from folio.db.base import Base
from folio.db.session import SafeSQLAlchemyAsyncConfig
from folio.middleware.rate_limit import RateLimitMiddleware
from folio.middleware.security import SecurityHeadersMiddleware


def build_db_config(settings: Settings) -> SafeSQLAlchemyAsyncConfig:
    """Build the SQLAlchemy async database configuration."""
    if "sqlite" in settings.db.url:
        engine_config = EngineConfig(echo=settings.db.echo)
    else:
        engine_config = EngineConfig(
            pool_size=settings.db.pool_size,
            max_overflow=settings.db.pool_overflow,
            pool_timeout=settings.db.pool_timeout,
            pool_pre_ping=settings.db.pool_pre_ping,
            echo=settings.db.echo,
        )

    return SafeSQLAlchemyAsyncConfig(
        connection_string=settings.db.url,
        metadata=Base.metadata,
        create_all=settings.db.create_all,
        session_config=AsyncSessionConfig(expire_on_commit=False),
        engine_config=engine_config,
    )


def build_cors_config(settings: Settings) -> CORSConfig:
    return CORSConfig(
        allow_origins=settings.cors.origins,
        allow_methods=["GET", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"],
        allow_headers=["Content-Type", "Authorization"],
        allow_credentials=True,
    )


def build_security_middleware(settings: Settings) -> list:
    """Build the security headers middleware list (empty if disabled)."""
    if not settings.security_headers.enabled:
        return []

    headers = settings.security_headers.build_headers(debug=settings.debug)
    csp_value = settings.security_headers.content_security_policy
    if not headers and not csp_value:
        return []

    return [DefineMiddleware(SecurityHeadersMiddleware, headers=headers, csp_value=csp_value)]


def build_rate_limit_middleware(settings: Settings) -> list:
    """Build the rate limiting middleware list (empty if disabled)."""
    if not settings.rate_limit.enabled:
        return []

    return [
        DefineMiddleware(
            RateLimitMiddleware,
            requests_per_minute=settings.rate_limit.requests_per_minute,
            paths=settings.rate_limit.paths,
        )
    ]


def build_logging_config(settings: Settings) -> LoggingConfig:
    level = "DEBUG" if settings.debug else "INFO"
    return LoggingConfig(
        root={"level": level, "handlers": ["queue_listener"]},
        loggers={"folio": {"level": level, "propagate": True}},
        configure_root_logger=True,
        log_exceptions="debug",
    )


def build_local_uploads_router(settings: Settings) -> list:
    """Serve locally stored uploads in development. S3/R2 serves its own."""
    if settings.storage.backend != "local":
        return []

    upload_dir = Path(settings.storage.local_path)
    upload_dir.mkdir(parents=True, exist_ok=True)
    return [
        create_static_files_router(
            path=settings.storage.local_url_prefix,
            directories=[upload_dir],
            include_in_schema=False,
        )
    ]
