"""Filters: the predicate capability interface and the built-in ``Filter``.

The query builder only depends on :class:`Predicate` — anything that exposes
its ``(field, value)`` pair and can render itself given a bind position, an
optional table qualifier, a case mode and a database.  :class:`Filter` is the
implementation produced by :meth:`UrlQuery.parse`.
"""
from __future__ import annotations

from enum import Enum
from typing import Protocol, runtime_checkable

from pydantic import BaseModel, ConfigDict

from urlsql.errors import InvalidFilter, InvalidFilterOp
from urlsql.schema.case import CaseMode, convert_case
from urlsql.schema.dialect import Database


class FilterOp(str, Enum):
    """Filter operators accepted in ``filter[]=<field>-<op>-<value>``."""

    EQ = "eq"
    NE = "ne"
    GT = "gt"
    GE = "ge"
    LT = "lt"
    LE = "le"
    LIKE = "like"
    ILIKE = "ilike"


_CMP: dict[FilterOp, str] = {
    FilterOp.EQ: "=",
    FilterOp.NE: "!=",
    FilterOp.GT: ">",
    FilterOp.GE: ">=",
    FilterOp.LT: "<",
    FilterOp.LE: "<=",
}


@runtime_checkable
class Predicate(Protocol):
    """Anything the query builder can put in a WHERE clause."""

    @property
    def field(self) -> str: ...

    @property
    def value(self) -> str: ...

    def to_sql_map_table(
        self,
        position: int,
        table: str | None,
        case: CaseMode | None,
        database: Database,
    ) -> str: ...


class Filter(BaseModel):
    """A single ``<field> <op> <value>`` condition.

    Attributes:
        field: Field name as sent by the client.
        op: Comparison operator.
        value: Raw value; converted to a native type only at bind time.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    field: str
    op: FilterOp = FilterOp.EQ
    value: str

    @classmethod
    def parse(cls, text: str) -> Filter:
        """Parse ``"<field>-<op>-<value>"``.

        Only the first two hyphens separate parts, so the value itself may
        contain hyphens (dates, UUIDs, negative numbers).

        Raises:
            InvalidFilter: If ``text`` has fewer than three parts.
            InvalidFilterOp: If the operator is not a :class:`FilterOp`.
        """
        parts = text.split("-", 2)
        if len(parts) != 3:
            raise InvalidFilter(text)
        field, op, value = parts
        try:
            filter_op = FilterOp(op)
        except ValueError as exc:
            raise InvalidFilterOp(op, [o.value for o in FilterOp]) from exc
        return cls(field=field, op=filter_op, value=value)

    def to_sql(
        self,
        position: int,
        case: CaseMode | None = None,
        database: Database = Database.POSTGRES,
    ) -> str:
        """Render the predicate without a table qualifier."""
        return self.to_sql_map_table(position, None, case, database)

    def to_sql_map_table(
        self,
        position: int,
        table: str | None,
        case: CaseMode | None,
        database: Database,
    ) -> str:
        """Render ``"[<table>.]<column> <op> <placeholder>"``.

        Args:
            position: 1-based bind position of this filter's value.
            table: Optional table qualifier.
            case: Case applied to the column; ``None`` means snake_case.
            database: Target database (selects the placeholder syntax).
        """
        from urlsql.compile.base import dialect_for  # avoid circular import

        dialect = dialect_for(database)
        column = convert_case(self.field, case)
        if table is not None:
            column = f"{table}.{column}"
        if self.op in _CMP:
            sql_op = _CMP[self.op]
        else:
            sql_op = dialect.like_operator(self.op.value.upper())
        return f"{column} {sql_op} {dialect.param_placeholder(position)}"
