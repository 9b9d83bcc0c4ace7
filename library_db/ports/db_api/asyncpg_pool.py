"""asyncpg-backed connector for the core executor."""

from __future__ import annotations

import contextlib
import logging
from typing import Any, AsyncIterator, Optional, Sequence, Tuple

import asyncpg

from ...core.results import DriverResult
from .dialects import PostgresDialect
from .settings import DbSettings

logger = logging.getLogger(__name__)


def parse_status(statusmsg: Optional[str]) -> Tuple[str, Optional[int]]:
    """Split a PostgreSQL command tag into `(command, rowcount)`.

    `"INSERT 0 1"` gives `("INSERT", 1)`, `"UPDATE 3"` gives `("UPDATE", 3)`
    and `"CREATE TABLE"` gives `("CREATE", None)`.
    """

    if not statusmsg:
        return "", None
    parts = statusmsg.split()
    command = parts[0].upper()
    if len(parts) > 1 and parts[-1].isdigit():
        return command, int(parts[-1])
    return command, None


async def run_statement(conn: Any, text: str, values: Sequence[Any]) -> DriverResult:
    """Prepare and run one statement on an asyncpg connection."""

    stmt = await conn.prepare(text)
    records = await stmt.fetch(*values)
    command, rowcount = parse_status(stmt.get_statusmsg())
    rows = list(records) if stmt.get_attributes() else None
    return DriverResult(command=command, rows=rows, rowcount=rowcount)


class ConnectionConnector:
    """Connector pinned to one borrowed connection (used inside transactions)."""

    dialect = PostgresDialect()

    def __init__(self, conn: Any):
        self.conn = conn

    async def query(self, text: str, values: Sequence[Any]) -> DriverResult:
        logger.debug("Executing on pinned connection: %s", text)
        return await run_statement(self.conn, text, values)

    @contextlib.asynccontextmanager
    async def transaction(self) -> AsyncIterator[ConnectionConnector]:
        """Open a nested transaction (a savepoint) on the same connection."""

        async with self.conn.transaction():
            yield self


class AsyncpgConnector:
    """Connector that borrows a pooled connection for every statement."""

    dialect = PostgresDialect()

    def __init__(self, pool: Any):
        """Wrap an existing `asyncpg.Pool` (or anything with the same surface)."""

        self.pool = pool
        self._closed = False

    @classmethod
    async def create(cls, settings: Optional[DbSettings] = None, **pool_options: Any) -> AsyncpgConnector:
        """Build the shared pool and wrap it.

        Connection failures from `asyncpg.create_pool` propagate unchanged.

        Args:
            settings: Connection settings. Defaults to `DbSettings.from_env()`.
            **pool_options: Extra `asyncpg.create_pool` arguments; they win over settings.
        """

        if settings is None:
            settings = DbSettings.from_env()
        options = settings.pool_kwargs()
        options.update(pool_options)
        pool = await asyncpg.create_pool(**options)
        logger.info(
            "Created PostgreSQL pool for %s (min_size=%s, max_size=%s)",
            settings.describe(),
            options.get("min_size"),
            options.get("max_size"),
        )
        return cls(pool)

    async def query(self, text: str, values: Sequence[Any]) -> DriverResult:
        logger.debug("Executing: %s", text)
        async with self.pool.acquire() as conn:
            return await run_statement(conn, text, values)

    @contextlib.asynccontextmanager
    async def transaction(self) -> AsyncIterator[ConnectionConnector]:
        """Borrow one connection and run a transaction on it."""

        async with self.pool.acquire() as conn:
            async with conn.transaction():
                yield ConnectionConnector(conn)

    async def close(self) -> None:
        """Close the pool. Calling it again is a no-op."""

        if self._closed:
            return
        self._closed = True
        await self.pool.close()
        logger.info("Closed PostgreSQL pool")

    async def __aenter__(self) -> AsyncpgConnector:
        return self

    async def __aexit__(self, exc_type: Any, exc: Any, tb: Any) -> None:
        await self.close()
