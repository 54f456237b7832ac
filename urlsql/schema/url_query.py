"""Pydantic model for a parsed API query string.

``UrlQuery`` is what the query builder consumes.  It is usually produced by
:meth:`UrlQuery.parse` from a raw query string such as::

    userId=123&filter[]=price-ge-200&group=status&sort=price-desc&limit=10&offset=0

Recognised keys
---------------
``filter[]`` (or ``filter``)
    ``<field>-<op>-<value>``, see :class:`~urlsql.schema.filter.Filter`.
``sort``
    ``<field>-<asc|desc>``, see :class:`~urlsql.schema.sort.Sort`.
``group``
    A single field name for GROUP BY.
``limit`` / ``offset``
    Kept as raw strings and validated lazily by :meth:`UrlQuery.check_limit`
    and :meth:`UrlQuery.check_offset`.
anything else
    ``<field>=<value>`` is shorthand for ``filter[]=<field>-eq-<value>``.

Every field referenced by a filter, the sort or the group must be in the
allow-list passed to :meth:`UrlQuery.parse`.
"""
from __future__ import annotations

import logging
import re
from collections.abc import Iterable
from urllib.parse import parse_qsl

from pydantic import BaseModel, ConfigDict, Field

from urlsql.errors import InvalidField, InvalidLimit, InvalidOffset
from urlsql.schema.filter import Filter, FilterOp
from urlsql.schema.sort import Sort

logger = logging.getLogger(__name__)

_FILTER_KEYS = frozenset({"filter[]", "filter"})
_DIGITS = re.compile(r"[0-9]+")


class UrlQuery(BaseModel):
    """A validated query: filters, optional group / sort, raw limit / offset.

    Attributes:
        filters: Filters in query-string order.
        group: Field to GROUP BY.
        sort: Sort directive for ORDER BY.
        limit: Raw ``limit`` value as received.
        offset: Raw ``offset`` value as received.
        max_limit: Upper bound enforced by :meth:`check_limit`
            (``None`` = unbounded).
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    filters: list[Filter] = Field(default_factory=list)
    group: str | None = None
    sort: Sort | None = None
    limit: str | None = None
    offset: str | None = None
    max_limit: int | None = None

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------

    @classmethod
    def parse(
        cls,
        query: str,
        allowed_fields: Iterable[str],
        *,
        max_limit: int | None = None,
    ) -> UrlQuery:
        """Parse a raw query string against a field allow-list.

        Args:
            query: The query string, with or without a leading ``?``.
            allowed_fields: Field names clients may filter, sort or group by.
            max_limit: Optional upper bound for ``limit``.

        Returns:
            A :class:`UrlQuery`.  When a ``sort``, ``group``, ``limit`` or
            ``offset`` key is repeated the last value wins.

        Raises:
            InvalidField: A filter, sort or group names a field outside
                ``allowed_fields``.
            InvalidFilter, InvalidFilterOp, InvalidSort, InvalidSortBy:
                A token is malformed.
        """
        allowed = list(allowed_fields)
        filters: list[Filter] = []
        group: str | None = None
        sort: Sort | None = None
        limit: str | None = None
        offset: str | None = None

        for key, value in parse_qsl(query.lstrip("?"), keep_blank_values=True):
            if key in _FILTER_KEYS:
                parsed = Filter.parse(value)
                _check_field(parsed.field, allowed)
                filters.append(parsed)
            elif key == "sort":
                sort = Sort.parse(value)
                _check_field(sort.field, allowed)
            elif key == "group":
                _check_field(value, allowed)
                group = value
            elif key == "limit":
                limit = value
            elif key == "offset":
                offset = value
            else:
                _check_field(key, allowed)
                filters.append(Filter(field=key, op=FilterOp.EQ, value=value))

        logger.debug(
            "Parsed query string: %d filter(s), group=%s, sort=%s",
            len(filters),
            group,
            sort,
        )
        return cls(
            filters=filters,
            group=group,
            sort=sort,
            limit=limit,
            offset=offset,
            max_limit=max_limit,
        )

    # ------------------------------------------------------------------
    # Limit / offset validation
    # ------------------------------------------------------------------

    def check_limit(self) -> str:
        """Return the limit if it is a positive integer within ``max_limit``.

        Raises:
            InvalidLimit: If the limit is absent, not a decimal integer,
                zero, or greater than ``max_limit``.
        """
        if self.limit is None:
            raise InvalidLimit("No limit given.")
        if not _DIGITS.fullmatch(self.limit):
            raise InvalidLimit(
                f"Limit must be a positive integer, got '{self.limit}'.", raw=self.limit
            )
        value = int(self.limit)
        if value == 0:
            raise InvalidLimit("Limit must be greater than 0.", raw=self.limit)
        if self.max_limit is not None and value > self.max_limit:
            raise InvalidLimit(
                f"Limit {value} exceeds the maximum of {self.max_limit}.",
                raw=self.limit,
            )
        return self.limit

    def check_offset(self) -> str:
        """Return the offset if it is a non-negative integer.

        Raises:
            InvalidOffset: If the offset is absent or not a decimal integer.
        """
        if self.offset is None:
            raise InvalidOffset("No offset given.")
        if not _DIGITS.fullmatch(self.offset):
            raise InvalidOffset(
                f"Offset must be a non-negative integer, got '{self.offset}'.",
                raw=self.offset,
            )
        return self.offset


def _check_field(field: str, allowed: list[str]) -> None:
    if field not in allowed:
        raise InvalidField(field, allowed)
