"""
Engine construction and per-request connection scoping.

The engine owns the connection pool. Request handlers never touch the pool
directly: they enter ``Database.connect()``, which hands out one connection
and returns it to the pool on every exit path.
"""
import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from sqlalchemy.ext.asyncio import AsyncConnection, AsyncEngine, create_async_engine

from flightquery.core.config import Settings

logger = logging.getLogger(__name__)


def build_engine(settings: Settings) -> AsyncEngine:
    pool_kwargs = {
        "pool_pre_ping": True,
        "pool_size": settings.DB_POOL_SIZE,
        "max_overflow": settings.DB_MAX_OVERFLOW,
        "pool_timeout": settings.DB_POOL_TIMEOUT,
    }
    if settings.DATABASE_URL:
        return create_async_engine(settings.DATABASE_URL, **pool_kwargs)
    # Credentials and DSN go straight to oracledb.connect(); the DSN may be an
    # Easy Connect string or a tnsnames alias, neither of which fits a URL host.
    return create_async_engine(
        "oracle+oracledb://@",
        connect_args={
            "user": settings.DB_USER,
            "password": settings.DB_PASSWORD,
            "dsn": settings.DB_CONNECTION_STRING,
        },
        **pool_kwargs,
    )


class Database:
    def __init__(self, engine: AsyncEngine):
        self.engine = engine

    @classmethod
    def from_settings(cls, settings: Settings) -> "Database":
        return cls(build_engine(settings))

    @asynccontextmanager
    async def connect(self) -> AsyncIterator[AsyncConnection]:
        """Acquire one pooled connection for the duration of the block.

        Acquisition errors propagate to the caller. The connection is released
        exactly once however the block exits; a failure while releasing is
        logged and does not replace the block's own outcome.
        """
        conn = await self.engine.connect()
        try:
            yield conn
        finally:
            await _release(conn)

    async def dispose(self) -> None:
        await self.engine.dispose()
        logger.info("Database engine disposed")


async def _release(conn: AsyncConnection) -> None:
    try:
        await conn.close()
    except Exception:
        logger.exception("Error closing the database connection")
