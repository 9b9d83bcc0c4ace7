"""Core port contracts used by the executor and the connector adapters."""

from __future__ import annotations

from contextlib import AbstractAsyncContextManager
from typing import Any, Protocol, Sequence

from .results import DriverResult


class DialectPort(Protocol):
    """Dialect behavior required by placeholder translation."""

    name: str
    paramstyle: str

    def placeholder(self, position: int) -> str: ...


class ConnectorPort(Protocol):
    """Driver adapter behavior required by `CompatExecutor`.

    `query` receives already-translated text and the positional values to bind.
    `transaction` yields a connector pinned to one connection for its duration.
    """

    dialect: DialectPort

    async def query(self, text: str, values: Sequence[Any]) -> DriverResult: ...

    def transaction(self) -> AbstractAsyncContextManager[ConnectorPort]: ...
