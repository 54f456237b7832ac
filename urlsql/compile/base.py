"""Dialect abstractions: ``SQLDialect``, ``BindArg`` and ``CompiledSQL``.

The Strategy pattern is used:
- ``SQLDialect`` declares the dialect-specific steps (placeholder syntax,
  LIKE/ILIKE keyword).
- ``PostgresDialect`` and ``MySQLDialect`` implement them.

The set of dialects is closed: adding one means adding a ``Database`` member
and a ``SQLDialect`` subclass, and wiring both in :func:`dialect_for`.
"""
from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any, NamedTuple

from urlsql.schema.dialect import Database


class BindArg(NamedTuple):
    """A ``(field, value)`` pair to bind, in placeholder order."""

    field: str
    value: str


@dataclass(frozen=True)
class CompiledSQL:
    """The output of a build.

    Attributes:
        sql: The SQL string with positional placeholders.
        args: Bind arguments; the Nth entry matches the Nth placeholder of
            the WHERE clause.
        database: The dialect the placeholders were written for.
    """

    sql: str
    args: list[BindArg] = field(default_factory=list)
    database: Database = Database.POSTGRES

    def bind(self, types: Mapping[str, Any]) -> list[Any]:
        """Return the bind values converted to native types.

        See :func:`urlsql.compile.bind.bind_args`.
        """
        from urlsql.compile.bind import bind_args

        return bind_args(self.args, types)


class SQLDialect(ABC):
    """Abstract base for dialect-specific rendering.

    Implementations hold no state; every method is a pure function of its
    arguments.
    """

    @abstractmethod
    def param_placeholder(self, position: int) -> str:
        """Return the placeholder for the bind argument at ``position``.

        Args:
            position: 1-based argument position.

        Returns:
            Dialect-specific placeholder string.
        """

    @abstractmethod
    def like_operator(self, op: str) -> str:
        """Return the SQL keyword for a LIKE / ILIKE operator.

        Args:
            op: ``'LIKE'`` or ``'ILIKE'``.

        Returns:
            SQL operator keyword.
        """

    @property
    @abstractmethod
    def database(self) -> Database:
        """Return the :class:`Database` member this dialect renders for."""


def dialect_for(database: Database | str) -> SQLDialect:
    """Return the dialect implementation for ``database``.

    Args:
        database: A :class:`Database` member or its value
            (``'postgres'`` / ``'mysql'``).

    Raises:
        CompilationError: If ``database`` names no supported dialect.
    """
    from urlsql.compile.mysql import MySQLDialect
    from urlsql.compile.postgres import PostgresDialect
    from urlsql.errors import CompilationError

    try:
        database = Database(database)
    except ValueError as exc:
        supported = [d.value for d in Database]
        raise CompilationError(
            f"Unsupported database: '{database}'. Supported: {supported}."
        ) from exc

    if database is Database.MYSQL:
        return MySQLDialect()
    return PostgresDialect()
