"""Background task that pings the database on an interval.

Hosted free-tier databases pause after a period of inactivity; a ping every
few days keeps them awake.
"""

import asyncio
import logging
from collections.abc import Awaitable, Callable

logger = logging.getLogger(__name__)


class KeepAlive:
    def __init__(self, ping: Callable[[], Awaitable[dict]], interval_seconds: float) -> None:
        self._ping = ping
        self._interval = interval_seconds
        self._task: asyncio.Task | None = None

    @property
    def running(self) -> bool:
        return self._task is not None and not self._task.done()

    async def run_once(self) -> dict:
        logger.info("Running scheduled database keep-alive ping...")
        result = await self._ping()
        logger.info("Database keep-alive result: %s", result["status"])
        return result

    async def _loop(self) -> None:
        while True:
            await asyncio.sleep(self._interval)
            try:
                await self.run_once()
            except Exception:
                logger.exception("Database keep-alive ping raised")

    def start(self) -> None:
        if not self.running:
            self._task = asyncio.create_task(self._loop(), name="folio-keepalive")

    async def stop(self) -> None:
        if self._task is None:
            return
        self._task.cancel()
        try:
            await self._task
        except asyncio.CancelledError:
            pass
        self._task = None
