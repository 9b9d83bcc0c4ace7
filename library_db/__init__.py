"""Run `?`-placeholder SQL written for a legacy client against PostgreSQL."""

from .core import (
    CompatExecutor,
    ConfigurationError,
    DriverResult,
    LibraryDbError,
    MutationResult,
    NotAReadStatementError,
    ParameterCountError,
    QueryResult,
    ReadResult,
    TranslatedQuery,
    classify,
    count_markers,
    execute,
    normalize,
    translate,
)
from .ports import AsyncpgConnector, ConnectionConnector, DbSettings, Dialect, PostgresDialect, SQLiteDialect

__all__ = [
    "AsyncpgConnector",
    "CompatExecutor",
    "ConfigurationError",
    "ConnectionConnector",
    "DbSettings",
    "Dialect",
    "DriverResult",
    "LibraryDbError",
    "MutationResult",
    "NotAReadStatementError",
    "ParameterCountError",
    "PostgresDialect",
    "QueryResult",
    "ReadResult",
    "SQLiteDialect",
    "TranslatedQuery",
    "classify",
    "count_markers",
    "execute",
    "normalize",
    "translate",
]
