"""urlsql schema models: UrlQuery, Filter, Sort, CaseMode, Database."""
from urlsql.schema.case import CaseMode, convert_case
from urlsql.schema.dialect import Database
from urlsql.schema.filter import Filter, FilterOp, Predicate
from urlsql.schema.sort import Sort, SortBy
from urlsql.schema.url_query import UrlQuery

__all__ = [
    "CaseMode",
    "convert_case",
    "Database",
    "Filter",
    "FilterOp",
    "Predicate",
    "Sort",
    "SortBy",
    "UrlQuery",
]
