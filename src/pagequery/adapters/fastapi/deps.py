"""FastAPI adapter – list-query dependency.

Query-string parameters are declared without ``ge``/``le`` bounds: an
out-of-range ``page`` or ``limit`` must reach the validation layer and come
back as ``invalid_page`` / ``invalid_limit`` (HTTP 400), not as FastAPI's
generic 422.
"""
from __future__ import annotations

import dataclasses
from typing import Annotated, Literal

from fastapi import Depends, Query

from pagequery.application.pagination.page_request import PageRequest, SortDirection, SortSpec


@dataclasses.dataclass(frozen=True)
class ListQueryParams:
    """Pagination and ordering parameters parsed from the query string."""

    page_request: PageRequest
    sort: SortSpec | None = None


async def list_query_dep(
    page: int = Query(default=1, description="1-based page number"),
    limit: int = Query(default=20, description="Records per page"),
    sort_by: str | None = Query(default=None, description="Field to sort by"),
    sort_order: Literal["asc", "desc"] = Query(default="asc", description="Sort direction"),
) -> ListQueryParams:
    sort = SortSpec(sort_by, SortDirection.parse(sort_order)) if sort_by else None
    return ListQueryParams(page_request=PageRequest(page=page, limit=limit), sort=sort)


FastAPIListQueryDep = Annotated[ListQueryParams, Depends(list_query_dep)]


__all__ = ["FastAPIListQueryDep", "ListQueryParams", "list_query_dep"]
