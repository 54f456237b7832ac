"""Custom exception hierarchy for urlsql.

All public errors inherit from UrlSqlError so callers can catch the base
class for any urlsql-specific failure.
"""
from __future__ import annotations


class UrlSqlError(Exception):
    """Base exception for all urlsql errors."""


class ParseError(UrlSqlError):
    """Raised when a query string or one of its tokens cannot be parsed.

    Args:
        message: Human-readable description.
        raw: The raw token that failed to parse.
    """

    def __init__(self, message: str, raw: str | None = None) -> None:
        super().__init__(message)
        self.raw = raw


class InvalidSort(ParseError):
    """Raised when a sort token has no ``-`` between field and direction."""

    def __init__(self, raw: str) -> None:
        super().__init__(
            f"Invalid sort '{raw}': expected '<field>-<asc|desc>'.", raw=raw
        )


class InvalidSortBy(ParseError):
    """Raised when the sort direction is not exactly ``asc`` or ``desc``."""

    def __init__(self, raw: str) -> None:
        super().__init__(
            f"Invalid sort direction '{raw}': expected 'asc' or 'desc'.", raw=raw
        )


class InvalidFilter(ParseError):
    """Raised when a filter token is not ``<field>-<op>-<value>``."""

    def __init__(self, raw: str) -> None:
        super().__init__(
            f"Invalid filter '{raw}': expected '<field>-<op>-<value>'.", raw=raw
        )


class InvalidFilterOp(ParseError):
    """Raised when a filter uses an operator outside the supported set."""

    def __init__(self, op: str, allowed_ops: list[str]) -> None:
        super().__init__(
            f"Unknown filter operator '{op}'. Allowed: {allowed_ops}.", raw=op
        )
        self.allowed_ops = allowed_ops


class InvalidField(ParseError):
    """Raised when a query references a field missing from the allow-list."""

    def __init__(self, field: str, allowed_fields: list[str]) -> None:
        super().__init__(f"Field '{field}' is not allowed.", raw=field)
        self.field = field
        self.allowed_fields = allowed_fields


class InvalidLimit(ParseError):
    """Raised by ``UrlQuery.check_limit`` when the limit is unusable."""


class InvalidOffset(ParseError):
    """Raised by ``UrlQuery.check_offset`` when the offset is unusable."""


class CompilationError(UrlSqlError):
    """Raised when SQL assembly fails for an unexpected reason.

    Args:
        message: Human-readable description.
        clause: The clause being assembled when the error occurred.
    """

    def __init__(self, message: str, clause: str | None = None) -> None:
        super().__init__(message)
        self.clause = clause


class BindError(UrlSqlError):
    """Raised when a bind argument cannot be converted to its declared type.

    Args:
        field: The field the argument belongs to.
        value: The raw string value.
    """

    def __init__(self, field: str, value: str) -> None:
        super().__init__(f"Cannot bind value '{value}' for field '{field}'.")
        self.field = field
        self.value = value
