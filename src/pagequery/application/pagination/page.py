"""Application pagination – Pagination metadata and PageResult."""
from __future__ import annotations

import dataclasses
import math
import uuid
from collections.abc import Mapping
from datetime import date, datetime
from decimal import Decimal
from typing import Any, Callable, Generic, TypeVar

T = TypeVar("T")


def page_count(records: int, limit: int) -> int:
    """Number of pages needed for *records* items; ``0`` when there are none."""
    if records <= 0 or limit <= 0:
        return 0
    return math.ceil(records / limit)


@dataclasses.dataclass(frozen=True)
class Pagination:
    """``{current, limit, records, pages}`` block returned with every page."""

    current: int
    limit: int
    records: int
    pages: int

    @classmethod
    def for_total(cls, page: int, limit: int, records: int) -> "Pagination":
        return cls(current=page, limit=limit, records=records, pages=page_count(records, limit))

    def to_dict(self) -> dict[str, int]:
        return dataclasses.asdict(self)


@dataclasses.dataclass(frozen=True)
class PageResult(Generic[T]):
    """One page of records plus its pagination metadata."""

    data: list[T]
    pagination: Pagination

    @property
    def has_next(self) -> bool:
        return self.pagination.current < self.pagination.pages

    @property
    def has_previous(self) -> bool:
        return self.pagination.current > 1

    def map(self, fn: Callable[[T], Any]) -> "PageResult[Any]":
        """Return a new :class:`PageResult` with each record transformed by *fn*.

        Typically used to project full records onto summary views.
        """
        return PageResult(data=[fn(item) for item in self.data], pagination=self.pagination)

    def to_dict(self) -> dict[str, Any]:
        """JSON-ready ``{"pagination": ..., "data": [...]}`` view.

        Datetimes are rendered as ISO 8601 strings, UUIDs and decimals as
        strings.
        """
        return {
            "pagination": self.pagination.to_dict(),
            "data": [_jsonable(item) for item in self.data],
        }


def _jsonable(value: Any) -> Any:
    if isinstance(value, Mapping):
        return {str(k): _jsonable(v) for k, v in value.items()}
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        return _jsonable(dataclasses.asdict(value))
    if isinstance(value, (list, tuple)):
        return [_jsonable(v) for v in value]
    if isinstance(value, (datetime, date)):
        return value.isoformat()
    if isinstance(value, (uuid.UUID, Decimal)):
        return str(value)
    return value


__all__ = ["PageResult", "Pagination", "page_count"]
