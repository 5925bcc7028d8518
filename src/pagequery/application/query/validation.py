"""Application query – validation layer.

All checks are O(size of the query), never touch records, and raise the
first failure found in the order: limit, page, filters, keyword, sort.
"""
from __future__ import annotations

from collections.abc import Mapping

from pagequery.application.pagination.page_request import PageRequest, SortSpec
from pagequery.application.query.conditions import (
    AnyOf,
    Condition,
    Contains,
    Exact,
    Keyword,
    Range,
)
from pagequery.application.query.schema import FieldSpec, FieldType, RecordSchema
from pagequery.application.query.values import coerce
from pagequery.kernel.errors import (
    InvalidFilterFieldError,
    InvalidLimitError,
    InvalidPageError,
    InvalidSortFieldError,
)

__all__ = ["validate", "validate_filter", "validate_page_request", "validate_sort"]


def _is_int(value: object) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def validate_page_request(page_request: PageRequest, max_limit: int) -> None:
    limit = page_request.limit
    if not _is_int(limit) or limit < 1 or limit > max_limit:
        raise InvalidLimitError(limit, max_limit)
    page = page_request.page
    if not _is_int(page) or page < 1:
        raise InvalidPageError(page)


def _check_operands(spec: FieldSpec, condition: Condition) -> None:
    if isinstance(condition, Exact):
        operands = [condition.value]
    elif isinstance(condition, Range):
        operands = [condition.from_, condition.to]
    elif isinstance(condition, AnyOf):
        operands = list(condition.values)
    elif isinstance(condition, Contains):
        if not isinstance(condition.text, str):
            raise InvalidFilterFieldError(spec.name, "contains expects a string", condition="contains")
        return
    else:
        return
    for operand in operands:
        try:
            coerce(operand, spec.type)
        except (TypeError, ValueError) as exc:
            raise InvalidFilterFieldError(
                spec.name, f"invalid {spec.type.value} value {operand!r}", condition=condition.kind
            ) from exc


def validate_filter(filter_spec: Mapping[str, Condition], schema: RecordSchema) -> None:
    for name, condition in filter_spec.items():
        spec = schema.get(name)
        if spec is None:
            raise InvalidFilterFieldError(name, "unknown field")
        if not spec.filterable:
            raise InvalidFilterFieldError(name, "field is not filterable")
        if not spec.supports(condition.kind):
            raise InvalidFilterFieldError(
                name, f"not applicable to {spec.type.value} fields", condition=condition.kind
            )
        _check_operands(spec, condition)


def _validate_keyword(keyword: Keyword, schema: RecordSchema) -> None:
    if not isinstance(keyword.text, str):
        raise InvalidFilterFieldError("keyword", "keyword text must be a string")
    for name in keyword.fields:
        spec = schema.get(name)
        if spec is None:
            raise InvalidFilterFieldError(name, "unknown field", condition="keyword")
        if not spec.filterable or spec.type is not FieldType.STRING:
            raise InvalidFilterFieldError(
                name, "keyword search needs a filterable string field", condition="keyword"
            )


def validate_sort(sort_spec: SortSpec, schema: RecordSchema) -> None:
    spec = schema.get(sort_spec.field)
    if spec is None:
        raise InvalidSortFieldError(sort_spec.field)
    if not spec.sortable:
        raise InvalidSortFieldError(sort_spec.field, "field is not sortable")


def validate(
    page_request: PageRequest,
    filter_spec: Mapping[str, Condition],
    sort_spec: SortSpec,
    schema: RecordSchema,
    max_limit: int,
    keyword: Keyword | None = None,
) -> None:
    """Raise a :class:`~pagequery.kernel.errors.QueryValidationError` on bad input."""
    validate_page_request(page_request, max_limit)
    validate_filter(filter_spec, schema)
    if keyword is not None:
        _validate_keyword(keyword, schema)
    validate_sort(sort_spec, schema)
