"""Application pagination – page request, slicer and result primitives."""
from pagequery.application.pagination.page_request import PageRequest, SortDirection, SortSpec
from pagequery.application.pagination.page import PageResult, Pagination, page_count
from pagequery.application.pagination.slicer import slice_page

__all__ = [
    "PageRequest",
    "PageResult",
    "Pagination",
    "SortDirection",
    "SortSpec",
    "page_count",
    "slice_page",
]
