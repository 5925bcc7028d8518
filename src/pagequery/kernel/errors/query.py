"""Query errors – malformed pagination, filter or sort input.

Every error here is raised by the validation layer before a single record is
read. None of them is retried internally.
"""

from __future__ import annotations

from typing import Any

from pagequery.kernel.errors.domain import ValidationError


class QueryValidationError(ValidationError):
    """Base class for rejected list queries."""

    default_code = "invalid_query"

    def __init__(self, message: str, *, field: str, reason: str, **kwargs: Any) -> None:
        kwargs.setdefault("errors", [{"field": field, "reason": reason}])
        super().__init__(message, **kwargs)
        self.field = field
        self.reason = reason


class InvalidLimitError(QueryValidationError):
    """``limit`` is not an integer in ``[1, max_limit]``."""

    default_code = "invalid_limit"

    def __init__(self, limit: object, max_limit: int) -> None:
        super().__init__(
            f"limit must be an integer between 1 and {max_limit}, got {limit!r}",
            field="limit",
            reason="out_of_range",
            detail={"limit": limit, "max_limit": max_limit},
        )
        self.limit = limit
        self.max_limit = max_limit


class InvalidPageError(QueryValidationError):
    """``page`` is not an integer ``>= 1``."""

    default_code = "invalid_page"

    def __init__(self, page: object) -> None:
        super().__init__(
            f"page must be an integer >= 1, got {page!r}",
            field="page",
            reason="out_of_range",
            detail={"page": page},
        )
        self.page = page


class InvalidFilterFieldError(QueryValidationError):
    """Unknown filter field, or a condition that does not apply to its type."""

    default_code = "invalid_filter_field"

    def __init__(self, field: str, reason: str, *, condition: str | None = None) -> None:
        message = f"cannot filter on '{field}': {reason}"
        if condition is not None:
            message = f"cannot apply '{condition}' to '{field}': {reason}"
        super().__init__(
            message,
            field=field,
            reason=reason,
            detail={"field": field, "condition": condition},
        )
        self.condition = condition


class InvalidSortFieldError(QueryValidationError):
    """Unknown or non-sortable sort field."""

    default_code = "invalid_sort_field"

    def __init__(self, field: str, reason: str = "unknown field") -> None:
        super().__init__(
            f"cannot sort by '{field}': {reason}",
            field=field,
            reason=reason,
            detail={"field": field},
        )


__all__ = [
    "InvalidFilterFieldError",
    "InvalidLimitError",
    "InvalidPageError",
    "InvalidSortFieldError",
    "QueryValidationError",
]
