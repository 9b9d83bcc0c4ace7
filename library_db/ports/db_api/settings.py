"""Connection settings for the shared PostgreSQL pool."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Any, Mapping, Optional

from dotenv import find_dotenv, load_dotenv

from ...core.errors import ConfigurationError

DEFAULT_PORT = 5432


def _text(environ: Mapping[str, str], key: str) -> Optional[str]:
    value = environ.get(key)
    if value is None:
        return None
    value = value.strip()
    return value or None


def _integer(environ: Mapping[str, str], key: str, default: int) -> int:
    raw = _text(environ, key)
    if raw is None:
        return default
    try:
        return int(raw)
    except ValueError as exc:
        raise ConfigurationError(f"{key} must be an integer, got {raw!r}.") from exc


@dataclass(frozen=True)
class DbSettings:
    """Host, credentials and pool bounds for `asyncpg.create_pool`.

    Unset connection fields are left to asyncpg, which falls back to the
    libpq `PG*` environment variables and its own defaults.
    """

    host: Optional[str] = None
    user: Optional[str] = None
    password: Optional[str] = None
    database: Optional[str] = None
    port: int = DEFAULT_PORT
    min_size: int = 1
    max_size: int = 10

    def __post_init__(self) -> None:
        if not 0 < self.port < 65536:
            raise ConfigurationError(f"port must be between 1 and 65535, got {self.port}.")
        if self.max_size < 1:
            raise ConfigurationError("max_size must be >= 1.")
        if not 0 <= self.min_size <= self.max_size:
            raise ConfigurationError("min_size must be between 0 and max_size.")

    @classmethod
    def from_env(
        cls,
        environ: Optional[Mapping[str, str]] = None,
        *,
        load_env_file: bool = True,
    ) -> DbSettings:
        """Read `DB_HOST`, `DB_USER`, `DB_PASS`, `DB_NAME`, `DB_PORT` and pool bounds.

        Args:
            environ: Mapping to read instead of `os.environ`.
            load_env_file: Load the nearest `.env` file (searched upward from the
                working directory) into `os.environ` first. Ignored
                when `environ` is given.
        """

        if environ is None:
            if load_env_file:
                load_dotenv(find_dotenv(usecwd=True))
            environ = os.environ

        return cls(
            host=_text(environ, "DB_HOST"),
            user=_text(environ, "DB_USER"),
            password=_text(environ, "DB_PASS"),
            database=_text(environ, "DB_NAME"),
            port=_integer(environ, "DB_PORT", DEFAULT_PORT),
            min_size=_integer(environ, "DB_POOL_MIN_SIZE", 1),
            max_size=_integer(environ, "DB_POOL_MAX_SIZE", 10),
        )

    def pool_kwargs(self) -> dict[str, Any]:
        """Keyword arguments for `asyncpg.create_pool`."""

        kwargs: dict[str, Any] = {
            "port": self.port,
            "min_size": self.min_size,
            "max_size": self.max_size,
        }
        for key in ("host", "user", "password", "database"):
            value = getattr(self, key)
            if value is not None:
                kwargs[key] = value
        return kwargs

    def describe(self) -> str:
        """Connection target without credentials, for log lines."""

        user = f"{self.user}@" if self.user else ""
        return f"{user}{self.host or 'localhost'}:{self.port}/{self.database or ''}"
