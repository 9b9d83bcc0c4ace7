"""Public core API for placeholder translation, result normalization, and execution."""

from .errors import ConfigurationError, LibraryDbError, NotAReadStatementError, ParameterCountError
from .executor import CompatExecutor, execute
from .placeholders import TranslatedQuery, count_markers, marker_positions, translate
from .results import (
    DriverResult,
    MutationResult,
    QueryResult,
    ReadResult,
    classify,
    is_read,
    normalize,
    row_to_dict,
)

__all__ = [
    "CompatExecutor",
    "ConfigurationError",
    "DriverResult",
    "LibraryDbError",
    "MutationResult",
    "NotAReadStatementError",
    "ParameterCountError",
    "QueryResult",
    "ReadResult",
    "TranslatedQuery",
    "classify",
    "count_markers",
    "execute",
    "is_read",
    "marker_positions",
    "normalize",
    "row_to_dict",
    "translate",
]
