"""Ties the connection pool to the ASGI lifespan."""

import logging
from typing import Any

from psycopg_pool import AsyncConnectionPool

logger = logging.getLogger(__name__)


class PoolLifespanMiddleware:
    """Opens the pool when the server starts and closes it on shutdown.

    Requests never run against a closed pool: Falcon finishes startup
    before it routes the first request.
    """

    def __init__(self, pool: AsyncConnectionPool) -> None:
        self._pool = pool

    async def process_startup(self, scope: dict[str, Any], event: dict[str, Any]) -> None:
        await self._pool.open()
        logger.info(
            "pool %s opened (min_size=%d max_size=%d)",
            self._pool.name,
            self._pool.min_size,
            self._pool.max_size,
        )

    async def process_shutdown(self, scope: dict[str, Any], event: dict[str, Any]) -> None:
        await self._pool.close()
        logger.info("pool %s closed", self._pool.name)
