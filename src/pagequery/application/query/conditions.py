"""Application query – filter conditions (tagged variant) and keyword search."""
from __future__ import annotations

import dataclasses
from collections.abc import Mapping
from typing import Any, ClassVar, Union

from pagequery.kernel.errors import InvalidFilterFieldError

__all__ = [
    "AnyOf",
    "Condition",
    "Contains",
    "Exact",
    "FilterSpec",
    "IsNull",
    "Keyword",
    "Range",
    "parse_condition",
    "parse_filter_spec",
]


@dataclasses.dataclass(frozen=True)
class Exact:
    """Field equals *value* under the field's semantic type."""
    kind: ClassVar[str] = "exact"
    value: Any


@dataclasses.dataclass(frozen=True)
class Contains:
    """String field contains *text*; an empty *text* matches every record."""
    kind: ClassVar[str] = "contains"
    text: str
    case_sensitive: bool = True


@dataclasses.dataclass(frozen=True)
class Range:
    """Inclusive ``from_ <= value <= to``; either bound may be omitted."""
    kind: ClassVar[str] = "range"
    from_: Any = None
    to: Any = None

    @property
    def unbounded(self) -> bool:
        return self.from_ is None and self.to is None


@dataclasses.dataclass(frozen=True)
class AnyOf:
    """Field value is one of *values*. An empty collection matches nothing."""
    kind: ClassVar[str] = "any_of"
    values: tuple[Any, ...]

    def __post_init__(self) -> None:
        object.__setattr__(self, "values", tuple(self.values))


@dataclasses.dataclass(frozen=True)
class IsNull:
    kind: ClassVar[str] = "is_null"
    expected: bool = True


Condition = Union[Exact, Contains, Range, AnyOf, IsNull]
FilterSpec = Mapping[str, Condition]


@dataclasses.dataclass(frozen=True)
class Keyword:
    """Case-insensitive free-text search over several string fields (OR)."""
    text: str
    fields: tuple[str, ...]

    def __post_init__(self) -> None:
        object.__setattr__(self, "fields", tuple(self.fields))

    @property
    def needle(self) -> str:
        return self.text.strip()


_CONDITION_TYPES = (Exact, Contains, Range, AnyOf, IsNull)


def parse_condition(field: str, raw: Any) -> Condition:
    """Build a condition from its dict form, e.g. ``{"range": {"from": 1}}``.

    Condition instances are returned unchanged.
    """
    if isinstance(raw, _CONDITION_TYPES):
        return raw
    if not isinstance(raw, Mapping) or len(raw) != 1:
        raise InvalidFilterFieldError(field, "condition must be a single-key mapping")
    (kind, operand), = raw.items()
    if kind == "exact":
        return Exact(operand)
    if kind == "contains":
        if isinstance(operand, Mapping):
            return Contains(
                text=operand.get("text", ""),
                case_sensitive=bool(operand.get("case_sensitive", True)),
            )
        return Contains(operand)
    if kind == "range":
        if not isinstance(operand, Mapping):
            raise InvalidFilterFieldError(field, "range bounds must be a mapping", condition=kind)
        unknown = set(operand) - {"from", "to"}
        if unknown:
            raise InvalidFilterFieldError(
                field, f"unknown range bound(s): {', '.join(sorted(unknown))}", condition=kind
            )
        return Range(from_=operand.get("from"), to=operand.get("to"))
    if kind == "any_of":
        if isinstance(operand, (str, bytes)) or not hasattr(operand, "__iter__"):
            raise InvalidFilterFieldError(field, "any_of expects a list of values", condition=kind)
        return AnyOf(tuple(operand))
    if kind == "is_null":
        return IsNull(bool(operand))
    raise InvalidFilterFieldError(field, f"unknown condition '{kind}'")


def parse_filter_spec(raw: Mapping[str, Any] | None) -> dict[str, Condition]:
    """Normalise a caller-supplied filter mapping.

    ``None`` values are dropped: an absent condition means "no constraint".
    """
    if not raw:
        return {}
    return {field: parse_condition(field, cond) for field, cond in raw.items() if cond is not None}
