"""Target database selection.

The set is closed: each member has exactly one
:class:`~urlsql.compile.base.SQLDialect` implementation, returned by
:func:`~urlsql.compile.base.dialect_for`.
"""
from __future__ import annotations

from enum import Enum


class Database(str, Enum):
    """Supported target databases.

    ``POSTGRES`` numbers its placeholders (``$1``, ``$2``, ...); ``MYSQL``
    uses a bare ``?`` for every argument.
    """

    POSTGRES = "postgres"
    MYSQL = "mysql"
