"""Application – pagination primitives and the paginated query engine."""

from pagequery.application.pagination import (
    PageRequest,
    PageResult,
    Pagination,
    SortDirection,
    SortSpec,
    slice_page,
)
from pagequery.application.query import (
    FieldSpec,
    FieldType,
    InMemoryRecordSource,
    QueryEngine,
    RecordSchema,
    RecordSource,
    list_records,
)

__all__ = [
    "FieldSpec",
    "FieldType",
    "InMemoryRecordSource",
    "PageRequest",
    "PageResult",
    "Pagination",
    "QueryEngine",
    "RecordSchema",
    "RecordSource",
    "SortDirection",
    "SortSpec",
    "list_records",
    "slice_page",
]
