"""PostgreSQL async connection pool."""

import logging

import psycopg
from psycopg_pool import AsyncConnectionPool, PoolTimeout

logger = logging.getLogger(__name__)


def create_pool(conninfo: str, min_size: int = 2, max_size: int = 10) -> AsyncConnectionPool:
    """Pool shared by the primary store and the session store.

    Created closed; PoolLifespanMiddleware opens it on ASGI startup.
    """
    return AsyncConnectionPool(
        conninfo=conninfo,
        min_size=min_size,
        max_size=max_size,
        open=False,
        name="carescope",
    )


async def ping(pool: AsyncConnectionPool, timeout: float = 2.0) -> bool:
    """True if a connection can be checked out and answers SELECT 1."""
    try:
        async with pool.connection(timeout=timeout) as conn:
            await conn.execute("SELECT 1")
    except (psycopg.Error, PoolTimeout) as e:
        logger.warning("database ping failed: %s", e)
        return False
    return True
