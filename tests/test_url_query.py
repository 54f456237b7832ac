"""Unit tests for UrlQuery parsing and limit / offset validation."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from urlsql.errors import (
    InvalidField,
    InvalidFilter,
    InvalidLimit,
    InvalidOffset,
    InvalidSort,
    InvalidSortBy,
)
from urlsql.schema.filter import FilterOp
from urlsql.schema.sort import SortBy
from urlsql.schema.url_query import UrlQuery
from tests.fixtures import load_query_string


def test_parse_orders_fixture(orders_query):
    assert [(f.field, f.op, f.value) for f in orders_query.filters] == [
        ("userId", FilterOp.EQ, "123"),
        ("userName", FilterOp.EQ, "bob"),
        ("orderId", FilterOp.EQ, "1"),
        ("price", FilterOp.GE, "200"),
    ]
    assert orders_query.sort.field == "price"
    assert orders_query.sort.sort_by is SortBy.DESC
    assert orders_query.limit == "10"
    assert orders_query.offset == "0"
    assert orders_query.group is None


def test_parse_group(joined_query):
    assert joined_query.group == "id"


def test_leading_question_mark_and_percent_decoding():
    q = UrlQuery.parse("?name=bob%20smith&filter[]=name-like-%25bob%25", ["name"])
    assert [f.value for f in q.filters] == ["bob smith", "%bob%"]


def test_filter_key_without_brackets():
    q = UrlQuery.parse("filter=price-lt-5", ["price"])
    assert q.filters[0].op is FilterOp.LT


def test_empty_query():
    q = UrlQuery.parse("", ["a"])
    assert q.filters == []
    assert q.sort is None


def test_last_sort_wins():
    q = UrlQuery.parse("sort=a-asc&sort=b-desc", ["a", "b"])
    assert q.sort.field == "b"


@pytest.mark.parametrize(
    "query",
    ["secret=1", "filter[]=secret-eq-1", "sort=secret-asc", "group=secret"],
)
def test_fields_must_be_allowed(query):
    with pytest.raises(InvalidField) as exc_info:
        UrlQuery.parse(query, ["id"])
    assert exc_info.value.field == "secret"
    assert exc_info.value.allowed_fields == ["id"]


@pytest.mark.parametrize(
    "query, error",
    [
        ("sort=price", InvalidSort),
        ("sort=price-up", InvalidSortBy),
        ("filter[]=price", InvalidFilter),
    ],
)
def test_malformed_tokens(query, error):
    _, allowed = load_query_string("orders")
    with pytest.raises(error):
        UrlQuery.parse(query, allowed)


def test_check_limit_and_offset(orders_query):
    assert orders_query.check_limit() == "10"
    assert orders_query.check_offset() == "0"


@pytest.mark.parametrize("limit", [None, "", "abc", "-5", "0", "1.5"])
def test_check_limit_rejects(limit):
    with pytest.raises(InvalidLimit):
        UrlQuery(limit=limit).check_limit()


def test_check_limit_max():
    q = UrlQuery.parse("limit=101", [], max_limit=100)
    with pytest.raises(InvalidLimit, match="exceeds"):
        q.check_limit()
    assert UrlQuery(limit="100", max_limit=100).check_limit() == "100"


@pytest.mark.parametrize("offset", [None, "", "x", "-1"])
def test_check_offset_rejects(offset):
    with pytest.raises(InvalidOffset):
        UrlQuery(offset=offset).check_offset()


def test_url_query_is_frozen(orders_query):
    with pytest.raises(ValidationError):
        orders_query.limit = "5"
