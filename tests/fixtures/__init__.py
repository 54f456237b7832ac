"""Test fixtures: sample query strings and their field allow-lists."""

from __future__ import annotations

import json
from pathlib import Path

from urlsql.schema.url_query import UrlQuery

_FIXTURES_DIR = Path(__file__).parent


def _load() -> dict:
    return json.loads((_FIXTURES_DIR / "queries.json").read_text())


def load_query_string(name: str) -> tuple[str, list[str]]:
    """Return the raw query string and allow-list stored under ``name``."""
    entry = _load()[name]
    return entry["query"], entry["allowed_fields"]


def load_url_query(name: str) -> UrlQuery:
    """Parse the sample query stored under ``name`` in queries.json."""
    query, allowed = load_query_string(name)
    return UrlQuery.parse(query, allowed)
