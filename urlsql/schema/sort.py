"""Sort directive: the ``sort=<field>-<asc|desc>`` mini-language.

A :class:`Sort` is parsed once when the query model is built and rendered
by the query builder into the ORDER BY clause.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from urlsql.errors import InvalidSort, InvalidSortBy
from urlsql.schema.case import CaseMode, convert_case


class SortBy(str, Enum):
    """Sort direction.  Values are the SQL keywords."""

    ASC = "ASC"
    DESC = "DESC"

    @classmethod
    def parse(cls, token: str) -> SortBy:
        """Parse a lowercase direction token (``asc`` / ``desc``).

        Raises:
            InvalidSortBy: For anything else, including ``ASC``.
        """
        if token == "asc":
            return cls.ASC
        if token == "desc":
            return cls.DESC
        raise InvalidSortBy(token)


@dataclass(frozen=True)
class Sort:
    """A parsed ``field-direction`` sort token.

    Attributes:
        field: Field name as sent by the client.
        sort_by: Sort direction.
    """

    field: str
    sort_by: SortBy

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------

    @classmethod
    def parse(cls, text: str) -> Sort:
        """Parse ``"<field>-<asc|desc>"``, splitting on the first hyphen.

        No whitespace is trimmed; validating the field against an allow-list
        is the caller's job.

        Raises:
            InvalidSort: If ``text`` contains no hyphen.
            InvalidSortBy: If the direction is not ``asc`` or ``desc``.
        """
        field, sep, direction = text.partition("-")
        if not sep:
            raise InvalidSort(text)
        return cls(field=field, sort_by=SortBy.parse(direction))

    # ------------------------------------------------------------------
    # Rendering
    # ------------------------------------------------------------------

    def to_string(self) -> str:
        """Render ``"<field> <ASC|DESC>"`` without any case conversion."""
        return f"{self.field} {self.sort_by.value}"

    def to_sql(self, case: CaseMode | None = None, prefix: str = "") -> str:
        """Render the case-converted field (snake_case by default)."""
        return f"{prefix}{convert_case(self.field, case)} {self.sort_by.value}"

    def to_sql_map_table(
        self, table: str | None = None, case: CaseMode | None = None
    ) -> str:
        """Render like :meth:`to_sql`, qualified with ``table`` when given."""
        prefix = f"{table}." if table is not None else ""
        return self.to_sql(case, prefix)

    def __str__(self) -> str:
        return self.to_string()
