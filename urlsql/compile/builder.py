"""UrlQuery → parameterized SQL assembly.

Building is split in two phases:

``QueryBuilder``
    Immutable configuration.  Every setter returns a new builder and leaves
    the original untouched, so a base builder can be shared and specialised
    per request::

        base = QueryBuilder.new("orders", ["id", "status"], query).convert_case(CaseMode.SNAKE)
        compiled = base.set_database(Database.MYSQL).build()

``Statement``
    The single-use assembly buffer for one build.  ``QueryBuilder.build()``
    drives it through WHERE, GROUP BY, ORDER BY and LIMIT / OFFSET, in that
    order, whatever order the builder was configured in.  Callers needing
    finer control can call ``QueryBuilder.statement()`` and run the steps
    themselves.

Bind numbering
--------------
The Nth filter gets bind position ``N + shift``.  ``shift`` accounts for
placeholders already present in a raw SQL prefix (e.g. a ``$1`` inside a
scalar subquery).  MySQL ignores the position and always emits ``?``.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field, replace
from types import MappingProxyType

from urlsql.compile.base import BindArg, CompiledSQL, dialect_for
from urlsql.compile.columns import ColumnMapper
from urlsql.errors import InvalidLimit, InvalidOffset
from urlsql.schema.case import CaseMode
from urlsql.schema.dialect import Database
from urlsql.schema.url_query import UrlQuery

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class QueryBuilder:
    """Configuration for turning a :class:`UrlQuery` into SQL.

    Always created via :meth:`new` or :meth:`from_str`.

    Attributes:
        url_query: The parsed query supplying filters, group, sort and paging.
        sql: SQL prefix the clauses are appended to.
        database: Target database (selects the placeholder syntax).
        columns: ``field -> table`` map for ambiguous columns.
        shift: Number of placeholders already present in ``sql``.
        case: Case applied to identifiers; ``None`` means snake_case.
    """

    url_query: UrlQuery
    sql: str
    database: Database = Database.POSTGRES
    columns: Mapping[str, str] = field(default_factory=dict)
    shift: int = 0
    case: CaseMode | None = None

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------

    @classmethod
    def new(cls, table: str, columns: Sequence[str], url_query: UrlQuery) -> QueryBuilder:
        """Start from ``SELECT <columns> FROM <table>``.

        An empty ``columns`` list is not rejected; it yields
        ``SELECT  FROM <table>``.
        """
        return cls(url_query=url_query, sql=f"SELECT {', '.join(columns)} FROM {table}")

    @classmethod
    def from_str(cls, sql: str, url_query: UrlQuery) -> QueryBuilder:
        """Start from a caller-supplied SQL prefix, used verbatim."""
        return cls(url_query=url_query, sql=sql)

    # ------------------------------------------------------------------
    # Configuration
    # ------------------------------------------------------------------

    def set_database(self, database: Database | str) -> QueryBuilder:
        """Select the target database.

        Raises:
            CompilationError: If ``database`` names no supported dialect.
        """
        return replace(self, database=dialect_for(database).database)

    def append(self, sql: str) -> QueryBuilder:
        """Append a raw fragment (JOINs and the like), separated by a space.

        Fragments land before any generated clause, in call order.
        """
        return replace(self, sql=f"{self.sql} {sql}")

    def map_columns(self, columns: Mapping[str, str]) -> QueryBuilder:
        """Provide a ``field -> table`` map to qualify ambiguous columns."""
        return replace(self, columns=MappingProxyType(dict(columns)))

    def shift_bind(self, shift: int) -> QueryBuilder:
        """Shift the bind numbering.

        With a shift of 1 the first filter binds to ``$2``, leaving ``$1`` to
        a placeholder already present in the SQL prefix.
        """
        return replace(self, shift=shift)

    def convert_case(self, case: CaseMode) -> QueryBuilder:
        """Set the case applied to every identifier the builder writes."""
        return replace(self, case=case)

    # ------------------------------------------------------------------
    # Building
    # ------------------------------------------------------------------

    def statement(self) -> Statement:
        """Return a fresh :class:`Statement` for this configuration."""
        return Statement(self)

    def build(self) -> CompiledSQL:
        """Assemble the full statement.

        Returns:
            :class:`~urlsql.compile.base.CompiledSQL` with the SQL text and
            the bind arguments in placeholder order.
        """
        stmt = self.statement()
        stmt.append_where()
        stmt.append_group()
        stmt.append_sort()
        stmt.append_limit_offset()
        return stmt.finish()


class Statement:
    """Single-use SQL buffer driven by :meth:`QueryBuilder.build`.

    Each ``append_*`` method appends one clause.  Call them in the order
    WHERE, GROUP BY, ORDER BY, LIMIT / OFFSET, then :meth:`finish`.

    Args:
        builder: The configuration to assemble.
    """

    def __init__(self, builder: QueryBuilder) -> None:
        self._builder = builder
        self._query = builder.url_query
        self._mapper = ColumnMapper(builder.columns, builder.case)
        self._parts: list[str] = [builder.sql]
        self._args: list[BindArg] = []

    @property
    def sql(self) -> str:
        """The SQL assembled so far."""
        return "".join(self._parts)

    def append_where(self) -> list[BindArg]:
        """Append the WHERE clause; no-op when the query has no filters.

        Returns:
            The bind arguments, one per filter, in placeholder order.
        """
        args: list[BindArg] = []
        predicates: list[str] = []
        for flt in self._query.filters:
            predicates.append(
                flt.to_sql_map_table(
                    len(args) + self._builder.shift + 1,
                    self._mapper.table_for(flt.field),
                    self._builder.case,
                    self._builder.database,
                )
            )
            args.append(BindArg(flt.field, flt.value))

        if predicates:
            self._parts.append(f" WHERE {' AND '.join(predicates)}")
            self._args.extend(args)
        return args

    def append_group(self) -> None:
        """Append GROUP BY; no-op when the query has no group field."""
        group = self._query.group
        if group is None:
            return
        self._parts.append(f" GROUP BY {self._mapper.qualify(group)}")

    def append_sort(self) -> None:
        """Append ORDER BY; no-op when the query has no sort directive."""
        sort = self._query.sort
        if sort is None:
            return
        table = self._mapper.table_for(sort.field)
        self._parts.append(f" ORDER BY {sort.to_sql_map_table(table, self._builder.case)}")

    def append_limit_offset(self) -> None:
        """Append LIMIT and OFFSET when valid.

        An absent or invalid limit omits both clauses; an absent or invalid
        offset omits only OFFSET.  Neither case raises.
        """
        try:
            limit = self._query.check_limit()
        except InvalidLimit as exc:
            logger.debug("Skipping LIMIT/OFFSET: %s", exc)
            return
        self._parts.append(f" LIMIT {limit}")

        try:
            offset = self._query.check_offset()
        except InvalidOffset as exc:
            logger.debug("Skipping OFFSET: %s", exc)
            return
        self._parts.append(f" OFFSET {offset}")

    def finish(self) -> CompiledSQL:
        """Return the assembled :class:`CompiledSQL`."""
        sql = self.sql
        logger.debug(
            "Built %s statement with %d bind arg(s): %s",
            self._builder.database.value,
            len(self._args),
            sql,
        )
        return CompiledSQL(sql=sql, args=list(self._args), database=self._builder.database)
