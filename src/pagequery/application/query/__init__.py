"""Application query – filter, sort and paginate record listings."""
from pagequery.application.query.conditions import (
    AnyOf,
    Condition,
    Contains,
    Exact,
    FilterSpec,
    IsNull,
    Keyword,
    Range,
    parse_condition,
    parse_filter_spec,
)
from pagequery.application.query.engine import QueryEngine, list_records
from pagequery.application.query.ordering import compare, sort_records
from pagequery.application.query.predicate import compile_filter, matches
from pagequery.application.query.schema import FieldSpec, FieldType, RecordSchema
from pagequery.application.query.source import InMemoryRecordSource, RecordSource
from pagequery.application.query.validation import validate

__all__ = [
    "AnyOf",
    "Condition",
    "Contains",
    "Exact",
    "FieldSpec",
    "FieldType",
    "FilterSpec",
    "InMemoryRecordSource",
    "IsNull",
    "Keyword",
    "QueryEngine",
    "Range",
    "RecordSchema",
    "RecordSource",
    "compare",
    "compile_filter",
    "list_records",
    "matches",
    "parse_condition",
    "parse_filter_spec",
    "sort_records",
    "validate",
]
