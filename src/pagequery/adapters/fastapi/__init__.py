"""FastAPI adapter – list-query dependency and error mapping."""
from pagequery.adapters.fastapi.deps import FastAPIListQueryDep, ListQueryParams, list_query_dep
from pagequery.adapters.fastapi.exception_mapper import FastAPIExceptionMapper

__all__ = [
    "FastAPIExceptionMapper",
    "FastAPIListQueryDep",
    "ListQueryParams",
    "list_query_dep",
]
