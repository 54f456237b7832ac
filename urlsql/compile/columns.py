"""Column mapping for statements that join several tables.

When a base SELECT joins tables that share column names (``id``,
``created_at``, ...), an unqualified column in WHERE / GROUP BY / ORDER BY is
ambiguous.  :class:`ColumnMapper` owns the ``field -> table`` map that
resolves these, plus the case conversion applied to the column itself.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType

from urlsql.schema.case import CaseMode, convert_case


@dataclass(frozen=True)
class ColumnMapper:
    """Resolves API field names to (optionally qualified) SQL columns.

    Attributes:
        columns: Maps a field name, as sent by the client, to the table that
            should qualify it.  Fields without an entry stay unqualified.
        case: Case applied to the column; ``None`` means snake_case.
    """

    columns: Mapping[str, str] = field(default_factory=dict)
    case: CaseMode | None = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "columns", MappingProxyType(dict(self.columns)))

    def table_for(self, field_name: str) -> str | None:
        """Return the table mapped to ``field_name``, or ``None``."""
        return self.columns.get(field_name)

    def column(self, field_name: str) -> str:
        """Return the case-converted, unqualified column name."""
        return convert_case(field_name, self.case)

    def qualify(self, field_name: str) -> str:
        """Return ``"<table>.<column>"`` when mapped, else ``"<column>"``.

        Example::

            mapper = ColumnMapper({"createdAt": "orders"})
            mapper.qualify("createdAt")  # "orders.created_at"
            mapper.qualify("status")     # "status"
        """
        table = self.table_for(field_name)
        column = self.column(field_name)
        if table is None:
            return column
        return f"{table}.{column}"
