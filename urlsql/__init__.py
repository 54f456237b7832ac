"""urlsql – API query strings to parameterized SQL.

Public API
----------
``compile_query``
    Parse a query string against a field allow-list and build parameterized
    SQL from it in one call.

``QueryBuilder``
    Fluent, immutable builder for finer control (joins, column maps, bind
    shifting, case conversion, target database).

Re-exported types
-----------------
``UrlQuery``, ``Filter``, ``Sort``, ``CaseMode``, ``Database``,
``CompiledSQL``, ``BindArg`` and all error classes.

Example::

    import urlsql

    compiled = urlsql.compile_query(
        "userId=123&sort=createdAt-desc&limit=20",
        allowed_fields=["userId", "createdAt"],
        sql="SELECT id, status FROM orders",
    )
    compiled.sql   # "SELECT id, status FROM orders WHERE user_id = $1 ORDER BY created_at DESC LIMIT 20"
    compiled.args  # [BindArg(field="userId", value="123")]
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping

from urlsql.compile.base import BindArg, CompiledSQL, SQLDialect, dialect_for
from urlsql.compile.bind import bind_args
from urlsql.compile.builder import QueryBuilder, Statement
from urlsql.compile.columns import ColumnMapper
from urlsql.compile.mysql import MySQLDialect
from urlsql.compile.postgres import PostgresDialect
from urlsql.errors import (
    BindError,
    CompilationError,
    InvalidField,
    InvalidFilter,
    InvalidFilterOp,
    InvalidLimit,
    InvalidOffset,
    InvalidSort,
    InvalidSortBy,
    ParseError,
    UrlSqlError,
)
from urlsql.schema.case import CaseMode, convert_case
from urlsql.schema.dialect import Database
from urlsql.schema.filter import Filter, FilterOp, Predicate
from urlsql.schema.sort import Sort, SortBy
from urlsql.schema.url_query import UrlQuery

__all__ = [
    # Core pipeline
    "compile_query",
    # Query model
    "UrlQuery",
    "Filter",
    "FilterOp",
    "Predicate",
    "Sort",
    "SortBy",
    "CaseMode",
    "convert_case",
    "Database",
    # Compilation
    "QueryBuilder",
    "Statement",
    "ColumnMapper",
    "CompiledSQL",
    "BindArg",
    "SQLDialect",
    "PostgresDialect",
    "MySQLDialect",
    "dialect_for",
    "bind_args",
    # Errors
    "UrlSqlError",
    "ParseError",
    "InvalidSort",
    "InvalidSortBy",
    "InvalidFilter",
    "InvalidFilterOp",
    "InvalidField",
    "InvalidLimit",
    "InvalidOffset",
    "CompilationError",
    "BindError",
]


def compile_query(
    query: str,
    allowed_fields: Iterable[str],
    sql: str,
    *,
    database: Database | str = Database.POSTGRES,
    columns: Mapping[str, str] | None = None,
    shift: int = 0,
    case: CaseMode | None = None,
    max_limit: int | None = None,
) -> CompiledSQL:
    """Parse ``query`` and build parameterized SQL on top of ``sql``.

    Args:
        query: Raw query string (``userId=1&sort=price-desc&limit=10``).
        allowed_fields: Field names clients may filter, sort or group by.
        sql: SQL prefix, typically a complete ``SELECT ... FROM ...``.
        database: Target database; selects the placeholder syntax.
        columns: Optional ``field -> table`` map for ambiguous columns.
        shift: Number of placeholders already present in ``sql``.
        case: Identifier case; ``None`` means snake_case.
        max_limit: Optional upper bound for ``limit``.

    Returns:
        ``CompiledSQL`` with ``sql``, ``args`` and ``database``.

    Raises:
        ParseError: (or subclass) if the query string is malformed or names
            a field outside ``allowed_fields``.
    """
    url_query = UrlQuery.parse(query, allowed_fields, max_limit=max_limit)

    builder = QueryBuilder.from_str(sql, url_query).set_database(database).shift_bind(shift)
    if columns:
        builder = builder.map_columns(columns)
    if case is not None:
        builder = builder.convert_case(case)
    return builder.build()
