"""Identifier case conversion.

Field names arrive in whatever case the API exposes (usually camelCase) and
are converted before they are written into SQL.  Every identifier-emitting
path (filters, GROUP BY, ORDER BY) goes through :func:`convert_case`, so an
unset mode means snake_case everywhere.

Conversion always normalises to snake_case first, using pydantic's alias
generators, and derives the other cases from that.
"""
from __future__ import annotations

from enum import Enum

from pydantic.alias_generators import to_camel, to_pascal, to_snake


class CaseMode(str, Enum):
    """Target case for identifiers written into SQL."""

    SNAKE = "snake"
    CAMEL = "camel"
    PASCAL = "pascal"
    KEBAB = "kebab"
    CONSTANT = "constant"
    LOWER = "lower"
    UPPER = "upper"


def convert_case(name: str, case: CaseMode | None = None) -> str:
    """Convert ``name`` to ``case``; ``None`` means snake_case.

    Example::

        convert_case("createdAt")                  # "created_at"
        convert_case("created_at", CaseMode.CAMEL) # "createdAt"
    """
    snake = to_snake(name)
    if case is None or case is CaseMode.SNAKE:
        return snake
    if case is CaseMode.CAMEL:
        return to_camel(snake)
    if case is CaseMode.PASCAL:
        return to_pascal(snake)
    if case is CaseMode.KEBAB:
        return snake.replace("_", "-")
    if case is CaseMode.CONSTANT:
        return snake.upper()
    if case is CaseMode.LOWER:
        return snake.replace("_", "")
    return snake.replace("_", "").upper()
