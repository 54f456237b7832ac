"""PostgreSQL dialect."""

from __future__ import annotations

from urlsql.compile.base import Database, SQLDialect
from urlsql.errors import CompilationError


class PostgresDialect(SQLDialect):
    """Renders PostgreSQL-flavoured parameterized SQL.

    Parameter style: ``$1``, ``$2``, ... (1-based) – compatible with
    ``asyncpg`` and server-side prepared statements.
    """

    @property
    def database(self) -> Database:
        return Database.POSTGRES

    def param_placeholder(self, position: int) -> str:
        if position < 1:
            raise CompilationError(
                f"Bind position must be >= 1, got {position}.", clause="WHERE"
            )
        return f"${position}"

    def like_operator(self, op: str) -> str:
        return op  # 'LIKE' or 'ILIKE' - PostgreSQL supports both natively
