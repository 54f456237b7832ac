"""Unit tests for typed bind-argument conversion."""

from __future__ import annotations

import uuid
from datetime import date

import pytest

from urlsql.compile.base import BindArg
from urlsql.compile.bind import bind_args
from urlsql.compile.builder import QueryBuilder
from urlsql.errors import BindError


def test_converts_mapped_fields():
    uid = uuid.uuid4()
    args = [
        BindArg("id", str(uid)),
        BindArg("userId", "123"),
        BindArg("createdAt", "2024-01-31"),
    ]
    values = bind_args(args, {"id": uuid.UUID, "userId": int, "createdAt": date})
    assert values == [uid, 123, date(2024, 1, 31)]


def test_unmapped_fields_pass_through():
    assert bind_args([("userName", "bob"), ("userId", "7")], {"userId": int}) == ["bob", 7]


def test_conversion_failure():
    with pytest.raises(BindError) as exc_info:
        bind_args([("userId", "abc")], {"userId": int})
    assert exc_info.value.field == "userId"
    assert exc_info.value.value == "abc"


def test_compiled_sql_bind(orders_query):
    compiled = QueryBuilder.from_str("SELECT * FROM orders", orders_query).build()
    assert compiled.bind({"userId": int, "orderId": int, "price": float}) == [
        123,
        "bob",
        1,
        200.0,
    ]
