"""Unit tests for Filter parsing and predicate rendering."""

from __future__ import annotations

import pytest

from urlsql.errors import InvalidFilter, InvalidFilterOp
from urlsql.schema.case import CaseMode
from urlsql.schema.dialect import Database
from urlsql.schema.filter import Filter, FilterOp, Predicate


def test_parse_filter():
    flt = Filter.parse("price-ge-200")
    assert flt.field == "price"
    assert flt.op is FilterOp.GE
    assert flt.value == "200"


def test_value_may_contain_hyphens():
    flt = Filter.parse("createdAt-ge-2024-01-31")
    assert flt.field == "createdAt"
    assert flt.value == "2024-01-31"


@pytest.mark.parametrize("token", ["price", "price-ge"])
def test_missing_parts(token):
    with pytest.raises(InvalidFilter):
        Filter.parse(token)


def test_unknown_operator():
    with pytest.raises(InvalidFilterOp) as exc_info:
        Filter.parse("price-between-1")
    assert "eq" in exc_info.value.allowed_ops


@pytest.mark.parametrize(
    "op, sql_op",
    [
        (FilterOp.EQ, "="),
        (FilterOp.NE, "!="),
        (FilterOp.GT, ">"),
        (FilterOp.GE, ">="),
        (FilterOp.LT, "<"),
        (FilterOp.LE, "<="),
        (FilterOp.LIKE, "LIKE"),
        (FilterOp.ILIKE, "ILIKE"),
    ],
)
def test_operators_postgres(op, sql_op):
    flt = Filter(field="userId", op=op, value="1")
    assert flt.to_sql(3) == f"user_id {sql_op} $3"


def test_ilike_mysql_maps_to_like():
    flt = Filter(field="name", op=FilterOp.ILIKE, value="%bob%")
    assert flt.to_sql(1, database=Database.MYSQL) == "name LIKE ?"


def test_to_sql_map_table():
    flt = Filter(field="createdAt", op=FilterOp.LT, value="2024-01-01")
    assert (
        flt.to_sql_map_table(2, "orders", None, Database.POSTGRES)
        == "orders.created_at < $2"
    )
    assert (
        flt.to_sql_map_table(2, None, CaseMode.CAMEL, Database.MYSQL)
        == "createdAt < ?"
    )


def test_filter_is_a_predicate():
    assert isinstance(Filter(field="a", value="1"), Predicate)


def test_default_operator_is_eq():
    assert Filter(field="a", value="1").op is FilterOp.EQ
