"""Liveness and database connectivity checks."""

import logging
import time
from datetime import UTC, datetime

from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

logger = logging.getLogger(__name__)

_STARTED_AT = time.monotonic()


def _now() -> str:
    return datetime.now(UTC).isoformat()


def check() -> dict:
    return {
        "status": "ok",
        "timestamp": _now(),
        "uptime": round(time.monotonic() - _STARTED_AT, 3),
    }


async def check_database(db_session: AsyncSession) -> dict:
    """Run ``SELECT 1`` and report the outcome instead of raising."""
    try:
        await db_session.execute(text("SELECT 1"))
    except SQLAlchemyError as exc:
        logger.warning("Database health check failed: %s", exc)
        return {
            "status": "error",
            "database": "disconnected",
            "message": str(exc),
            "timestamp": _now(),
        }

    return {"status": "ok", "database": "connected", "timestamp": _now()}
