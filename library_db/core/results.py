"""Normalize driver results into the legacy positional result shapes.

Reads become `(rows, None)` and mutations become
`({"affectedRows": n, "insertId": None},)`. Callers unpack these by position.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Mapping, Optional, Sequence, Union

from .types import ExecutionResult, MutationTuple, ReadTuple, Rows


@dataclass(frozen=True)
class DriverResult:
    """Raw outcome of one statement as reported by a connector.

    `rows` is `None` when the statement describes no result columns, and a
    (possibly empty) sequence when it does.
    """

    command: str = ""
    rows: Optional[Sequence[Any]] = None
    rowcount: Optional[int] = None


@dataclass(frozen=True)
class ReadResult:
    """Statement that produced a row set (SELECT, `... RETURNING`)."""

    rows: Rows = field(default_factory=list)

    def to_legacy(self) -> ReadTuple:
        return (self.rows, None)


@dataclass(frozen=True)
class MutationResult:
    """Statement that produced only a status (INSERT/UPDATE/DELETE/DDL)."""

    affected_rows: int = 0
    insert_id: Any = None

    def status(self) -> Dict[str, Any]:
        return {"affectedRows": self.affected_rows, "insertId": self.insert_id}

    def to_legacy(self) -> MutationTuple:
        return (self.status(),)


QueryResult = Union[ReadResult, MutationResult]


def row_to_dict(row: Any) -> Dict[str, Any]:
    """Normalize one driver row to a plain dict.

    Accepts mappings and mapping-like records (anything `dict()` accepts with
    string keys, such as `asyncpg.Record`).
    """

    if isinstance(row, Mapping):
        return dict(row)
    if isinstance(row, (str, bytes, tuple, list)):
        raise TypeError(f"Cannot map row without column names: {type(row)}")
    try:
        return dict(row)
    except (TypeError, ValueError) as exc:
        raise TypeError(f"Unsupported row type: {type(row)}") from exc


def is_read(result: DriverResult) -> bool:
    """Return True when the result should be presented as a row set."""

    return (result.command or "").upper() == "SELECT" or result.rows is not None


def classify(result: DriverResult) -> QueryResult:
    """Tag a driver result as a read or a mutation."""

    if is_read(result):
        return ReadResult([row_to_dict(r) for r in result.rows or ()])
    affected = result.rowcount if result.rowcount is not None else 0
    return MutationResult(affected_rows=affected, insert_id=None)


def normalize(result: DriverResult) -> ExecutionResult:
    """Map a driver result straight to its legacy tuple shape."""

    return classify(result).to_legacy()
