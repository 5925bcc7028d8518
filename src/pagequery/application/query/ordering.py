"""Application query – sort comparator with a deterministic id tie-break."""
from __future__ import annotations

from collections.abc import Iterable
from typing import Any

from pagequery.application.pagination.page_request import SortDirection, SortSpec
from pagequery.application.query.predicate import field_value
from pagequery.application.query.schema import FieldType, RecordSchema
from pagequery.application.query.values import coerce_stored, infer_type

__all__ = ["compare", "sort_records"]


def _sort_key(record: Any, name: str, ftype: FieldType | None) -> tuple[bool, Any]:
    # Nulls (and values that do not fit the field type) rank above every
    # value: last in ASC, first in DESC.
    value = field_value(record, name)
    if value is not None:
        value = coerce_stored(value, ftype or infer_type(value))
    if value is None:
        return (True, None)
    return (False, value)


def _cmp(a: tuple[bool, Any], b: tuple[bool, Any]) -> int:
    if a == b:
        return 0
    return -1 if a < b else 1


def compare(
    a: Any,
    b: Any,
    sort_spec: SortSpec,
    schema: RecordSchema | None = None,
    id_field: str | None = None,
) -> int:
    """Three-way comparison of two records: ``-1``, ``0`` or ``1``.

    Only the primary field honours ``sort_spec.direction``; ties fall back to
    the id field ascending so that distinct records never compare equal.
    """
    id_name = id_field or (schema.id_field if schema is not None else "id")
    ftype = schema.type_of(sort_spec.field) if schema is not None else None
    result = _cmp(_sort_key(a, sort_spec.field, ftype), _sort_key(b, sort_spec.field, ftype))
    if sort_spec.direction is SortDirection.DESC:
        result = -result
    if result == 0:
        id_type = schema.type_of(id_name) if schema is not None else None
        result = _cmp(_sort_key(a, id_name, id_type), _sort_key(b, id_name, id_type))
    return result


def sort_records(
    records: Iterable[Any],
    sort_spec: SortSpec,
    schema: RecordSchema | None = None,
    id_field: str | None = None,
) -> list[Any]:
    """Return a new list ordered consistently with :func:`compare`.

    Sorts by id first, then stably by the primary key. ``reverse=True`` keeps
    equal elements in their existing (id ascending) order.
    """
    id_name = id_field or (schema.id_field if schema is not None else "id")
    ftype = schema.type_of(sort_spec.field) if schema is not None else None
    id_type = schema.type_of(id_name) if schema is not None else None

    decorated = [
        (_sort_key(r, sort_spec.field, ftype), _sort_key(r, id_name, id_type), r)
        for r in records
    ]
    decorated.sort(key=lambda item: item[1])
    decorated.sort(key=lambda item: item[0], reverse=sort_spec.direction is SortDirection.DESC)
    return [item[2] for item in decorated]
