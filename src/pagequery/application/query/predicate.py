"""Application query – filter predicate evaluator.

:func:`compile_filter` turns a filter spec into a reusable predicate with its
operands coerced once; :func:`matches` is the one-shot form. Both are pure:
records are only read.
"""
from __future__ import annotations

from collections.abc import Mapping
from datetime import timedelta
from typing import Any, Callable

from pagequery.application.query.conditions import (
    AnyOf,
    Condition,
    Contains,
    Exact,
    IsNull,
    Keyword,
    Range,
)
from pagequery.application.query.schema import FieldType, RecordSchema
from pagequery.application.query.values import coerce, coerce_stored, infer_type, is_date_only

Record = Any
Predicate = Callable[[Record], bool]

__all__ = ["Predicate", "compile_condition", "compile_filter", "field_value", "matches"]


def field_value(record: Record, name: str) -> Any:
    """Read *name* from a mapping record, or from an attribute otherwise."""
    if isinstance(record, Mapping):
        return record.get(name)
    return getattr(record, name, None)


def _operand_type(condition: Condition) -> FieldType:
    if isinstance(condition, Exact):
        return infer_type(condition.value)
    if isinstance(condition, Range):
        return infer_type(condition.from_ if condition.from_ is not None else condition.to)
    if isinstance(condition, AnyOf) and condition.values:
        return infer_type(condition.values[0])
    return FieldType.STRING


def compile_condition(name: str, condition: Condition, field_type: FieldType | None = None) -> Predicate:
    """Predicate for a single ``field -> condition`` pair."""
    ftype = field_type or _operand_type(condition)

    def value_of(record: Record) -> Any:
        return coerce_stored(field_value(record, name), ftype)

    if isinstance(condition, IsNull):
        expected = condition.expected
        return lambda record: (field_value(record, name) is None) is expected

    if isinstance(condition, Exact):
        target = coerce(condition.value, ftype)
        if target is None:
            return lambda record: field_value(record, name) is None
        if ftype is FieldType.DATETIME and is_date_only(condition.value):
            # A calendar date matches its whole day: [start, start + 1 day).
            day_end = target + timedelta(days=1)

            def same_day(record: Record) -> bool:
                value = value_of(record)
                return value is not None and target <= value < day_end

            return same_day

        def exact(record: Record) -> bool:
            value = value_of(record)
            return value is not None and value == target

        return exact

    if isinstance(condition, Contains):
        case_sensitive = condition.case_sensitive
        needle = condition.text if case_sensitive else condition.text.casefold()
        if not needle:
            return lambda record: True

        def contains(record: Record) -> bool:
            value = field_value(record, name)
            if value is None:
                return False
            text = value if isinstance(value, str) else str(value)
            return needle in (text if case_sensitive else text.casefold())

        return contains

    if isinstance(condition, Range):
        if condition.unbounded:
            return lambda record: True
        low = coerce(condition.from_, ftype)
        high = coerce(condition.to, ftype)

        def in_range(record: Record) -> bool:
            value = value_of(record)
            if value is None:
                return False
            if low is not None and value < low:
                return False
            if high is not None and value > high:
                return False
            return True

        return in_range

    if isinstance(condition, AnyOf):
        options = tuple(coerce(v, ftype) for v in condition.values)

        def any_of(record: Record) -> bool:
            if field_value(record, name) is None:
                return None in options
            value = value_of(record)
            return value is not None and value in options

        return any_of

    raise TypeError(f"unsupported condition: {condition!r}")


def _compile_keyword(keyword: Keyword) -> Predicate:
    needle = keyword.needle.casefold()
    if not needle:
        return lambda record: True
    fields = keyword.fields

    def keyword_match(record: Record) -> bool:
        for name in fields:
            value = field_value(record, name)
            if value is not None and needle in str(value).casefold():
                return True
        return False

    return keyword_match


def compile_filter(
    filter_spec: Mapping[str, Condition] | None,
    schema: RecordSchema | None = None,
    keyword: Keyword | None = None,
) -> Predicate:
    """Conjunction of every condition in *filter_spec* (plus *keyword*)."""
    checks: list[Predicate] = []
    for name, condition in (filter_spec or {}).items():
        ftype = schema.type_of(name) if schema is not None else None
        checks.append(compile_condition(name, condition, ftype))
    if keyword is not None:
        checks.append(_compile_keyword(keyword))
    if not checks:
        return lambda record: True
    return lambda record: all(check(record) for check in checks)


def matches(
    record: Record,
    filter_spec: Mapping[str, Condition] | None,
    schema: RecordSchema | None = None,
    keyword: Keyword | None = None,
) -> bool:
    """``True`` when *record* satisfies every condition in *filter_spec*."""
    return compile_filter(filter_spec, schema, keyword)(record)
