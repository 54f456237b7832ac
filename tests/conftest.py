"""Shared pytest fixtures for urlsql unit tests."""
from __future__ import annotations

import pytest

from urlsql.schema.filter import Filter
from urlsql.schema.sort import Sort
from urlsql.schema.url_query import UrlQuery
from tests.fixtures import load_url_query


@pytest.fixture(scope="session")
def orders_query() -> UrlQuery:
    """Four filters, a sort, limit 10 and offset 0."""
    return load_url_query("orders")


@pytest.fixture(scope="session")
def joined_query() -> UrlQuery:
    """One filter on ``id``, grouped by ``id``, sorted by ``createdAt``."""
    return load_url_query("orders_joined")


@pytest.fixture(scope="session")
def two_filters_query() -> UrlQuery:
    return load_url_query("two_filters")


@pytest.fixture(scope="session")
def paged_query() -> UrlQuery:
    """The two-filter example: userId and orderId, price sort, paging."""
    return UrlQuery(
        filters=[
            Filter(field="userId", value="123"),
            Filter(field="orderId", value="1"),
        ],
        sort=Sort.parse("price-desc"),
        limit="10",
        offset="0",
    )
