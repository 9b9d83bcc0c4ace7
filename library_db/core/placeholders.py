"""Rewrite legacy `?` markers into a driver's positional parameter syntax.

Only the statement text is rewritten. Values are handed to the driver for
binding and are never interpolated into SQL.

Markers are located with a small scanner that steps over quoted regions so a
`?` inside a string literal, a quoted identifier, a dollar-quoted body or a
comment is neither rewritten nor counted.
"""

from __future__ import annotations

import re
from typing import Any, List, NamedTuple, Optional

from .contracts import DialectPort
from .errors import ParameterCountError
from .types import QueryParams

MARKER = "?"

_DOLLAR_TAG = re.compile(r"\$(?:[A-Za-z_][A-Za-z0-9_]*)?\$")


class TranslatedQuery(NamedTuple):
    """Statement text in the target syntax plus the values to bind."""

    text: str
    values: List[Any]


def _is_ident_char(ch: str) -> bool:
    return ch.isalnum() or ch == "_"


def _skip_quoted(sql: str, start: int, quote: str, *, backslash_escapes: bool = False) -> int:
    i = start + 1
    n = len(sql)
    while i < n:
        ch = sql[i]
        if backslash_escapes and ch == "\\":
            i += 2
            continue
        if ch == quote:
            # '' inside a literal is an escaped quote.
            if i + 1 < n and sql[i + 1] == quote:
                i += 2
                continue
            return i + 1
        i += 1
    return n


def marker_positions(sql: str) -> List[int]:
    """Return string offsets of every `?` marker outside quotes and comments."""

    positions: List[int] = []
    i = 0
    n = len(sql)
    while i < n:
        ch = sql[i]
        prev = sql[i - 1] if i > 0 else ""
        if ch == MARKER:
            positions.append(i)
            i += 1
        elif ch == "'":
            escaped = prev in ("E", "e") and (i < 2 or not _is_ident_char(sql[i - 2]))
            i = _skip_quoted(sql, i, "'", backslash_escapes=escaped)
        elif ch == '"':
            i = _skip_quoted(sql, i, '"')
        elif sql.startswith("--", i):
            end = sql.find("\n", i + 2)
            i = n if end == -1 else end + 1
        elif sql.startswith("/*", i):
            end = sql.find("*/", i + 2)
            i = n if end == -1 else end + 2
        elif ch == "$" and not _is_ident_char(prev):
            match = _DOLLAR_TAG.match(sql, i)
            if match is None:
                i += 1
                continue
            tag = match.group(0)
            end = sql.find(tag, match.end())
            i = n if end == -1 else end + len(tag)
        else:
            i += 1
    return positions


def count_markers(sql: str) -> int:
    """Count `?` markers that would be rewritten by `translate`."""

    return len(marker_positions(sql))


def _numbered(position: int) -> str:
    return f"${position}"


def translate(
    sql: str,
    params: QueryParams = None,
    dialect: Optional[DialectPort] = None,
) -> TranslatedQuery:
    """Translate a `?`-style statement for the target dialect.

    Args:
        sql: Statement text using `?` as the positional marker.
        params: Values bound to the markers, in order. Empty or `None` returns
            the text untouched without scanning it.
        dialect: Target dialect. Defaults to numbered `$n` references.

    Raises:
        ParameterCountError: Marker count differs from the number of values.
    """

    if isinstance(params, (str, bytes)):
        raise TypeError("params must be a sequence of values, not a string.")
    if not params:
        return TranslatedQuery(sql, [])

    values = list(params)
    positions = marker_positions(sql)
    if len(positions) != len(values):
        raise ParameterCountError(len(positions), len(values))

    placeholder = dialect.placeholder if dialect is not None else _numbered
    parts: List[str] = []
    last = 0
    for position, offset in enumerate(positions, start=1):
        parts.append(sql[last:offset])
        parts.append(placeholder(position))
        last = offset + 1
    parts.append(sql[last:])
    return TranslatedQuery("".join(parts), values)
