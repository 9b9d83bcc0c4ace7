"""Shared core type aliases used across contracts, executor, and ports."""

from __future__ import annotations

from typing import Any, Dict, List, Optional, Sequence, Tuple, Union

PositionalParams = Sequence[Any]
QueryParams = Optional[PositionalParams]

Rows = List[Dict[str, Any]]
MaybeRow = Optional[Dict[str, Any]]

StatusMapping = Dict[str, Any]
ReadTuple = Tuple[Rows, None]
MutationTuple = Tuple[StatusMapping]
ExecutionResult = Union[ReadTuple, MutationTuple]
