"""Config settings – QuerySettings (pagination policy)."""
from __future__ import annotations

import dataclasses
from typing import ClassVar

from pagequery.config.settings.base import Settings
from pagequery.config.validation import InvalidSettingValueError


@dataclasses.dataclass
class QuerySettings(Settings):
    """Pagination policy shared by every list endpoint.

    The ceiling and the default ordering are policy, not contract: deployments
    override them through ``PAGEQUERY_*`` environment variables.
    """

    _prefix: ClassVar[str] = "PAGEQUERY"

    max_limit: int = 1000
    default_limit: int = 20
    default_sort_field: str = "created_at"
    default_sort_direction: str = "desc"
    tie_break_field: str = "id"
    log_queries: bool = True

    def _validate(self) -> None:
        if self.max_limit < 1:
            raise InvalidSettingValueError("max_limit", self.max_limit, "must be >= 1")
        if self.default_limit < 1 or self.default_limit > self.max_limit:
            raise InvalidSettingValueError(
                "default_limit", self.default_limit, f"must be between 1 and {self.max_limit}"
            )
        if self.default_sort_direction.lower() not in ("asc", "desc"):
            raise InvalidSettingValueError(
                "default_sort_direction", self.default_sort_direction, "must be 'asc' or 'desc'"
            )
        if not self.default_sort_field:
            raise InvalidSettingValueError("default_sort_field", self.default_sort_field, "must not be empty")
        if not self.tie_break_field:
            raise InvalidSettingValueError("tie_break_field", self.tie_break_field, "must not be empty")


__all__ = ["QuerySettings"]
