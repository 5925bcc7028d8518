"""Application query – field types and the record schema.

The schema is the single data-driven description of what a caller may filter
and sort on. Validation consults it instead of ad hoc per-endpoint checks.
"""
from __future__ import annotations

import dataclasses
from collections.abc import Iterable
from enum import Enum


class FieldType(str, Enum):
    STRING = "string"
    NUMBER = "number"
    BOOLEAN = "boolean"
    DATETIME = "datetime"
    UUID = "uuid"


# Condition kinds allowed per field type; ``is_null`` is governed by
# ``FieldSpec.nullable`` instead.
_APPLICABLE: dict[FieldType, frozenset[str]] = {
    FieldType.STRING: frozenset({"exact", "contains", "range", "any_of"}),
    FieldType.NUMBER: frozenset({"exact", "range", "any_of"}),
    FieldType.BOOLEAN: frozenset({"exact", "any_of"}),
    FieldType.DATETIME: frozenset({"exact", "range", "any_of"}),
    FieldType.UUID: frozenset({"exact", "any_of"}),
}


@dataclasses.dataclass(frozen=True)
class FieldSpec:
    """Describes one record field exposed to list queries."""

    name: str
    type: FieldType
    filterable: bool = True
    sortable: bool = True
    nullable: bool = False

    def supports(self, kind: str) -> bool:
        if kind == "is_null":
            return self.nullable
        return kind in _APPLICABLE[self.type]


@dataclasses.dataclass(frozen=True)
class RecordSchema:
    """Allowed filter/sort fields of one record kind.

    Example::

        schema = RecordSchema.of(
            id=FieldType.UUID,
            title=FieldType.STRING,
            created_at=FieldType.DATETIME,
        )
    """

    fields: tuple[FieldSpec, ...]
    id_field: str = "id"

    def __post_init__(self) -> None:
        names = [f.name for f in self.fields]
        if len(names) != len(set(names)):
            raise ValueError("duplicate field names in schema")
        if self.id_field not in names:
            raise ValueError(f"id field '{self.id_field}' is not declared in the schema")

    @classmethod
    def of(cls, id_field: str = "id", **types: FieldType | str) -> "RecordSchema":
        """Shortcut: every field filterable, sortable and non-nullable."""
        return cls(
            fields=tuple(FieldSpec(name, FieldType(t)) for name, t in types.items()),
            id_field=id_field,
        )

    @classmethod
    def from_specs(cls, specs: Iterable[FieldSpec], id_field: str = "id") -> "RecordSchema":
        return cls(fields=tuple(specs), id_field=id_field)

    def get(self, name: str) -> FieldSpec | None:
        for spec in self.fields:
            if spec.name == name:
                return spec
        return None

    def type_of(self, name: str) -> FieldType | None:
        spec = self.get(name)
        return spec.type if spec is not None else None


__all__ = ["FieldSpec", "FieldType", "RecordSchema"]
