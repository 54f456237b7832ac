"""Utilities for deriving field allow-lists and column maps from SQLAlchemy.

The query builder needs two things that usually mirror the database schema:

* the allow-list of API field names passed to :meth:`UrlQuery.parse`;
* the ``field -> table`` map that qualifies ambiguous columns in joins.

Both can be derived from SQLAlchemy :class:`~sqlalchemy.schema.Table`
objects, either declared in code or reflected from a live engine.

Install the optional dependency before using this module::

    pip install "urlsql[sqlalchemy]"

Example::

    from sqlalchemy import create_engine
    from urlsql.schema.converters import column_map_from_engine

    engine = create_engine("sqlite:///shop.db")
    columns = column_map_from_engine(engine, ["orders", "order_items"])
    # {"id": "orders", "createdAt": "orders", "orderId": "order_items", ...}
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from urlsql.schema.case import CaseMode, convert_case

if TYPE_CHECKING:
    from sqlalchemy import Engine, Table


def fields_from_sqlalchemy(*tables: Table, case: CaseMode = CaseMode.CAMEL) -> list[str]:
    """Return the API field names for every column of ``tables``.

    Column names are converted to ``case`` (camelCase by default, the usual
    shape of JSON APIs).  Duplicates are dropped, keeping first occurrence.

    Args:
        *tables: SQLAlchemy tables, in priority order.
        case: Case of the API field names.

    Returns:
        De-duplicated list of field names.
    """
    return list(column_map_from_sqlalchemy(*tables, case=case))


def column_map_from_sqlalchemy(
    *tables: Table, case: CaseMode = CaseMode.CAMEL
) -> dict[str, str]:
    """Build a ``field -> table`` map for :meth:`QueryBuilder.map_columns`.

    When a column exists in several tables (``id``, ``created_at``), the
    first table listed wins, so list the table of the main ``FROM`` first.

    Args:
        *tables: SQLAlchemy tables, in priority order.
        case: Case of the API field names (the map keys).

    Returns:
        Mapping of API field name to table name.
    """
    columns: dict[str, str] = {}
    for table in tables:
        for col in table.columns:
            columns.setdefault(convert_case(col.name, case), table.name)
    return columns


def column_map_from_engine(
    engine: Engine,
    tables: list[str],
    *,
    schema: str | None = None,
    case: CaseMode = CaseMode.CAMEL,
) -> dict[str, str]:
    """Reflect ``tables`` from ``engine`` and build their column map.

    Args:
        engine: A connected :class:`sqlalchemy.engine.Engine` instance.
        tables: Table names to reflect, in priority order.
        schema: Optional database schema name (e.g. ``"public"`` for
            PostgreSQL).  Passed directly to
            :meth:`sqlalchemy.schema.MetaData.reflect`.
        case: Case of the API field names (the map keys).

    Returns:
        Mapping of API field name to table name.

    Raises:
        ImportError: If ``sqlalchemy`` is not installed.
    """
    try:
        from sqlalchemy import MetaData as _MetaData
    except ImportError as exc:
        raise ImportError(
            "SQLAlchemy is required for column_map_from_engine(). "
            'Install it with: pip install "urlsql[sqlalchemy]"'
        ) from exc

    metadata = _MetaData(schema=schema)
    with engine.connect() as conn:
        metadata.reflect(bind=conn, only=tables, schema=schema)

    prefix = f"{schema}." if schema else ""
    reflected = [metadata.tables[f"{prefix}{name}"] for name in tables]
    return column_map_from_sqlalchemy(*reflected, case=case)
