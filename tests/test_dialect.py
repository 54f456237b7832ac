"""Unit tests for the Postgres / MySQL dialects."""

from __future__ import annotations

import pytest

from urlsql.compile.base import dialect_for
from urlsql.compile.mysql import MySQLDialect
from urlsql.compile.postgres import PostgresDialect
from urlsql.errors import CompilationError
from urlsql.schema.dialect import Database


@pytest.mark.parametrize("position", [1, 2, 10, 250])
def test_postgres_placeholders_are_numbered(position):
    assert PostgresDialect().param_placeholder(position) == f"${position}"


@pytest.mark.parametrize("position", [1, 2, 10, 250])
def test_mysql_placeholders_are_positional(position):
    assert MySQLDialect().param_placeholder(position) == "?"


@pytest.mark.parametrize("dialect", [PostgresDialect(), MySQLDialect()])
def test_position_must_be_positive(dialect):
    with pytest.raises(CompilationError):
        dialect.param_placeholder(0)


def test_like_operator():
    assert PostgresDialect().like_operator("ILIKE") == "ILIKE"
    assert MySQLDialect().like_operator("ILIKE") == "LIKE"
    assert MySQLDialect().like_operator("LIKE") == "LIKE"


def test_dialect_for():
    assert isinstance(dialect_for(Database.POSTGRES), PostgresDialect)
    assert isinstance(dialect_for("mysql"), MySQLDialect)
    assert dialect_for("postgres").database is Database.POSTGRES


def test_dialect_for_unknown():
    with pytest.raises(CompilationError, match="Unsupported database"):
        dialect_for("sqlite")
