"""Application pagination – PageRequest, SortSpec, SortDirection."""
from __future__ import annotations

import dataclasses
from enum import Enum


class SortDirection(str, Enum):
    ASC = "asc"
    DESC = "desc"

    @classmethod
    def parse(cls, value: "SortDirection | str") -> "SortDirection":
        """Accept ``"asc"``/``"desc"`` in any case as well as enum members."""
        if isinstance(value, SortDirection):
            return value
        return cls(str(value).strip().lower())


@dataclasses.dataclass(frozen=True)
class SortSpec:
    """Single sort criterion; ties are always broken by record id."""
    field: str
    direction: SortDirection = SortDirection.ASC

    def __post_init__(self) -> None:
        object.__setattr__(self, "direction", SortDirection.parse(self.direction))

    @classmethod
    def parse(cls, value: "SortSpec | str") -> "SortSpec":
        """Accept ``"created_at"`` (ascending) or ``"-created_at"`` (descending)."""
        if isinstance(value, SortSpec):
            return value
        text = value.strip()
        if text.startswith("-"):
            return cls(text[1:], SortDirection.DESC)
        return cls(text.lstrip("+"), SortDirection.ASC)


@dataclasses.dataclass(frozen=True)
class PageRequest:
    """Offset-based pagination parameters.

    Bounds are *not* enforced here: an out-of-range page or limit must reach
    the validation layer and be rejected there, never clamped.
    """
    page: int = 1
    limit: int = 20

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.limit


__all__ = ["PageRequest", "SortDirection", "SortSpec"]
