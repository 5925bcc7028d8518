"""Application pagination – page slicer."""
from __future__ import annotations

from collections.abc import Sequence
from typing import TypeVar

from pagequery.application.pagination.page import Pagination

T = TypeVar("T")


def slice_page(ordered: Sequence[T], page: int, limit: int) -> tuple[list[T], Pagination]:
    """Cut page *page* of size *limit* out of an already ordered sequence.

    A page past the end yields an empty list; the metadata is returned
    unchanged in every case. Inputs are assumed to be validated.
    """
    records = len(ordered)
    start = (page - 1) * limit
    if start >= records:
        data: list[T] = []
    else:
        data = list(ordered[start:min(start + limit, records)])
    return data, Pagination.for_total(page, limit, records)


__all__ = ["slice_page"]
