"""Application query – record sources.

A source hands the engine one internally consistent snapshot per call. The
engine never sees a record while it is being written.
"""
from __future__ import annotations

import threading
from collections.abc import Iterable, Mapping, Sequence
from types import MappingProxyType
from typing import Any, Callable, Protocol, runtime_checkable

__all__ = ["InMemoryRecordSource", "RecordSource"]


@runtime_checkable
class RecordSource(Protocol):
    """Port: enumerate every candidate record after the coarse pre-filter."""

    def snapshot(self) -> Sequence[Mapping[str, Any]]: ...


class InMemoryRecordSource:
    """Thread-safe in-process record store.

    *scope* is the coarse pre-filter applied on every snapshot, e.g.
    ``lambda r: r["deleted_at"] is None`` for soft-deleted rows or
    ``lambda r: r["author_id"] == actor_id`` for ownership.
    """

    def __init__(
        self,
        records: Iterable[Mapping[str, Any]] = (),
        *,
        id_field: str = "id",
        scope: Callable[[Mapping[str, Any]], bool] | None = None,
    ) -> None:
        self._id_field = id_field
        self._scope = scope
        self._lock = threading.Lock()
        self._records: dict[Any, Mapping[str, Any]] = {}
        for record in records:
            self._put(record)

    def _put(self, record: Mapping[str, Any]) -> None:
        if self._id_field not in record:
            raise KeyError(f"record has no '{self._id_field}' field")
        self._records[record[self._id_field]] = MappingProxyType(dict(record))

    def add(self, record: Mapping[str, Any]) -> None:
        with self._lock:
            if record.get(self._id_field) in self._records:
                raise KeyError(f"duplicate record id {record.get(self._id_field)!r}")
            self._put(record)

    def replace(self, record: Mapping[str, Any]) -> None:
        """Insert or overwrite the record with the same id."""
        with self._lock:
            self._put(record)

    def remove(self, record_id: Any) -> None:
        """Delete by id. Removing a missing id is a no-op."""
        with self._lock:
            self._records.pop(record_id, None)

    def snapshot(self) -> tuple[Mapping[str, Any], ...]:
        with self._lock:
            records = tuple(self._records.values())
        if self._scope is None:
            return records
        return tuple(r for r in records if self._scope(r))

    def __len__(self) -> int:
        with self._lock:
            return len(self._records)
