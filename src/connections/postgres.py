"""
PostgreSQL Connection Module.

Manages PostgreSQL connection pool.
"""

import json
from typing import Optional

import asyncpg
from loguru import logger

from config.settings import get_settings

pg_log = logger.bind(module="Postgres")


async def _init_connection(conn: asyncpg.Connection) -> None:
    """Decode/encode JSON columns as Python objects."""
    for type_name in ("json", "jsonb"):
        await conn.set_type_codec(
            type_name,
            encoder=lambda v: json.dumps(v, ensure_ascii=False, default=str),
            decoder=json.loads,
            schema="pg_catalog",
        )


class PostgresConnection:
    """PostgreSQL connection manager."""

    def __init__(self):
        """Initialize PostgreSQL connection."""
        self.settings = get_settings().postgres
        self._pool: Optional[asyncpg.Pool] = None

    async def connect(self) -> None:
        """Connect to PostgreSQL."""
        pg_log.info(f"Connecting to PostgreSQL at {self.settings.host}:{self.settings.port}")
        self._pool = await asyncpg.create_pool(
            dsn=self.settings.dsn,
            min_size=2,
            max_size=self.settings.pool_max,
            init=_init_connection,
        )
        pg_log.info("PostgreSQL connected successfully")

    async def close(self) -> None:
        """Close PostgreSQL connection pool."""
        if self._pool:
            await self._pool.close()
            pg_log.info("PostgreSQL connection closed")

    @property
    def pool(self) -> asyncpg.Pool:
        """Get connection pool."""
        if not self._pool:
            raise RuntimeError("PostgreSQL not connected. Call connect() first.")
        return self._pool


# Singleton instance
_postgres: Optional[PostgresConnection] = None


async def get_postgres() -> PostgresConnection:
    """Get PostgreSQL connection singleton."""
    global _postgres
    if _postgres is None:
        connection = PostgresConnection()
        await connection.connect()
        _postgres = connection
    return _postgres


async def close_postgres() -> None:
    """Close PostgreSQL connection."""
    global _postgres
    if _postgres:
        await _postgres.close()
        _postgres = None
