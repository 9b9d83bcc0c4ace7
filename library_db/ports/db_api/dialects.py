"""Concrete placeholder dialects for translated statements."""

from __future__ import annotations


class Dialect:
    """Base dialect that defines the positional placeholder for a paramstyle."""

    name: str = "generic"
    paramstyle: str = "numeric_dollar"

    def placeholder(self, position: int) -> str:
        """Return the placeholder for the 1-indexed parameter `position`."""

        if position < 1:
            raise ValueError(f"Placeholder positions start at 1, got {position}.")
        if self.paramstyle == "numeric_dollar":
            return f"${position}"
        if self.paramstyle == "numeric":
            return f":{position}"
        if self.paramstyle == "qmark":
            return "?"
        raise ValueError(f"Unsupported paramstyle: {self.paramstyle}")


class PostgresDialect(Dialect):
    """PostgreSQL wire protocol (`$1`, `$2`, ... references)."""

    name = "postgres"
    paramstyle = "numeric_dollar"


class SQLiteDialect(Dialect):
    """SQLite (`?` positional parameters, statement text unchanged)."""

    name = "sqlite"
    paramstyle = "qmark"
