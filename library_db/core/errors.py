"""Errors raised by the compatibility layer itself.

Driver errors are never wrapped; only problems detected before a statement is
submitted (or while reading back a result the caller asked for) use these.
"""

from __future__ import annotations


class LibraryDbError(Exception):
    """Base class for errors raised by `library_db`."""


class ParameterCountError(LibraryDbError, ValueError):
    """Number of `?` markers does not match the number of parameters."""

    def __init__(self, expected: int, received: int):
        self.expected = expected
        self.received = received
        super().__init__(
            f"Statement has {expected} placeholder(s) but {received} parameter(s) were given."
        )


class NotAReadStatementError(LibraryDbError, TypeError):
    """Rows were requested from a statement that produced a status result."""


class ConfigurationError(LibraryDbError, ValueError):
    """Database settings are missing or malformed."""
