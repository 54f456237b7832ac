"""urlsql compilation layer: UrlQuery → parameterized SQL."""
from urlsql.compile.base import BindArg, CompiledSQL, SQLDialect, dialect_for
from urlsql.compile.bind import bind_args
from urlsql.compile.builder import QueryBuilder, Statement
from urlsql.compile.columns import ColumnMapper
from urlsql.compile.mysql import MySQLDialect
from urlsql.compile.postgres import PostgresDialect

__all__ = [
    "BindArg",
    "CompiledSQL",
    "SQLDialect",
    "dialect_for",
    "bind_args",
    "QueryBuilder",
    "Statement",
    "ColumnMapper",
    "MySQLDialect",
    "PostgresDialect",
]
