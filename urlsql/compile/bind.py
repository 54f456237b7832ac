"""Typed binding of string arguments.

The builder returns every bind value as the raw string from the query
string.  Drivers want native values (``int``, ``UUID``, ``datetime``, ...);
:func:`bind_args` converts them using pydantic ``TypeAdapter`` validation,
driven by a ``field -> type`` map::

    compiled = QueryBuilder.from_str("SELECT * FROM orders", query).build()
    values = bind_args(compiled.args, {"id": uuid.UUID, "userId": int})
    rows = await conn.fetch(compiled.sql, *values)
"""
from __future__ import annotations

from collections.abc import Iterable, Mapping
from functools import lru_cache
from typing import Any

from pydantic import TypeAdapter
from pydantic import ValidationError as PydanticValidationError

from urlsql.errors import BindError


@lru_cache(maxsize=128)
def _adapter(tp: Any) -> TypeAdapter:
    return TypeAdapter(tp)


def bind_args(
    args: Iterable[tuple[str, str]],
    types: Mapping[str, Any],
) -> list[Any]:
    """Convert bind arguments to native values, preserving their order.

    Args:
        args: ``(field, value)`` pairs as returned by the builder.
        types: Target type per field.  Fields without an entry are passed
            through as strings so positions stay aligned with placeholders.

    Returns:
        The converted values, one per argument.

    Raises:
        BindError: If a value cannot be converted to its field's type.
    """
    values: list[Any] = []
    for field, value in args:
        tp = types.get(field)
        if tp is None:
            values.append(value)
            continue
        try:
            values.append(_adapter(tp).validate_python(value))
        except PydanticValidationError as exc:
            raise BindError(field, value) from exc
    return values
