"""Executor that runs legacy `?` statements through a connector."""

from __future__ import annotations

import contextlib
from typing import AsyncIterator, Optional

from .contracts import ConnectorPort, DialectPort
from .errors import NotAReadStatementError
from .placeholders import translate
from .results import QueryResult, ReadResult, classify
from .types import ExecutionResult, MaybeRow, QueryParams, Rows


class CompatExecutor:
    """Run statements written for the legacy client against a connector.

    Each call translates markers, submits the statement, and normalizes the
    result. Nothing is cached between calls. Driver errors propagate unchanged.
    """

    def __init__(self, connector: ConnectorPort, dialect: Optional[DialectPort] = None):
        """Create an executor.

        Args:
            connector: Pool-backed (or connection-bound) connector.
            dialect: Placeholder syntax override. Defaults to the connector's dialect.
        """

        self.connector = connector
        self.dialect = dialect if dialect is not None else getattr(connector, "dialect", None)

    async def run(self, sql: str, params: QueryParams = ()) -> QueryResult:
        """Execute one statement and return the tagged result."""

        query = translate(sql, params, self.dialect)
        raw = await self.connector.query(query.text, query.values)
        return classify(raw)

    async def execute(self, sql: str, params: QueryParams = ()) -> ExecutionResult:
        """Execute one statement and return `(rows, None)` or `(status,)`."""

        result = await self.run(sql, params)
        return result.to_legacy()

    async def fetchall(self, sql: str, params: QueryParams = ()) -> Rows:
        """Execute a read statement and return all rows."""

        result = await self.run(sql, params)
        if not isinstance(result, ReadResult):
            raise NotAReadStatementError(
                "Statement did not return rows; use execute() for mutations."
            )
        return result.rows

    async def fetchone(self, sql: str, params: QueryParams = ()) -> MaybeRow:
        """Execute a read statement and return its first row, or None."""

        rows = await self.fetchall(sql, params)
        if not rows:
            return None
        return rows[0]

    @contextlib.asynccontextmanager
    async def transaction(self) -> AsyncIterator[CompatExecutor]:
        """Run statements on one connection inside a commit/rollback scope."""

        async with self.connector.transaction() as bound:
            yield CompatExecutor(bound, self.dialect)


async def execute(
    connector: ConnectorPort,
    sql: str,
    params: QueryParams = (),
) -> ExecutionResult:
    """One-shot `CompatExecutor(connector).execute(sql, params)`."""

    return await CompatExecutor(connector).execute(sql, params)
