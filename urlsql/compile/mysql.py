"""MySQL dialect."""

from __future__ import annotations

from urlsql.compile.base import Database, SQLDialect
from urlsql.errors import CompilationError


class MySQLDialect(SQLDialect):
    """Renders MySQL-flavoured parameterized SQL.

    Parameter style: ``?`` – positional, so the argument order is the only
    link between a value and its placeholder.

    Note: MySQL does not support ``ILIKE``; it is mapped to ``LIKE``.
    MySQL's ``LIKE`` is case-insensitive for non-binary TEXT/VARCHAR columns
    by default.
    """

    @property
    def database(self) -> Database:
        return Database.MYSQL

    def param_placeholder(self, position: int) -> str:
        if position < 1:
            raise CompilationError(
                f"Bind position must be >= 1, got {position}.", clause="WHERE"
            )
        return "?"

    def like_operator(self, op: str) -> str:
        return "LIKE"  # MySQL has no ILIKE; LIKE is case-insensitive for TEXT by default
