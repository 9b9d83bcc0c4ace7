"""asyncpg connector, settings and dialect exports."""

from .asyncpg_pool import AsyncpgConnector, ConnectionConnector, parse_status, run_statement
from .dialects import Dialect, PostgresDialect, SQLiteDialect
from .settings import DbSettings

__all__ = [
    "AsyncpgConnector",
    "ConnectionConnector",
    "DbSettings",
    "Dialect",
    "PostgresDialect",
    "SQLiteDialect",
    "parse_status",
    "run_statement",
]
