"""Public port exports for concrete connector implementations."""

from .db_api import AsyncpgConnector, ConnectionConnector, DbSettings, Dialect, PostgresDialect, SQLiteDialect

__all__ = [
    "AsyncpgConnector",
    "ConnectionConnector",
    "DbSettings",
    "Dialect",
    "PostgresDialect",
    "SQLiteDialect",
]
