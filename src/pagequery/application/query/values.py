"""Application query – semantic value coercion.

Filter operands and record values are both normalised through
:func:`coerce` before being compared, so ``"2026-02-26T10:00:00Z"`` and an
aware ``datetime`` for the same instant compare equal, ``"42"`` equals ``42``
on a number field, and so on.
"""
from __future__ import annotations

import uuid
from datetime import date, datetime, timezone
from decimal import Decimal, InvalidOperation
from typing import Any

from pagequery.application.query.schema import FieldType

_TRUE = frozenset({"1", "true", "yes", "y", "on"})
_FALSE = frozenset({"0", "false", "no", "n", "off"})


def _coerce_bool(value: Any) -> bool:
    if isinstance(value, bool):
        return value
    text = str(value).strip().lower()
    if text in _TRUE:
        return True
    if text in _FALSE:
        return False
    raise ValueError(f"not a boolean: {value!r}")


def _coerce_number(value: Any) -> Decimal:
    # Every number becomes a Decimal; floats go through repr() so 0.1 == "0.1".
    if isinstance(value, bool):
        raise ValueError(f"not a number: {value!r}")
    if isinstance(value, Decimal):
        result = value
    elif isinstance(value, int):
        result = Decimal(value)
    elif isinstance(value, float):
        result = Decimal(repr(value))
    else:
        text = str(value).strip()
        if not text:
            raise ValueError("empty number")
        try:
            result = Decimal(text.replace(",", "."))
        except InvalidOperation as exc:
            raise ValueError(f"not a number: {value!r}") from exc
    if not result.is_finite():
        raise ValueError(f"not a finite number: {value!r}")
    return result


def is_date_only(value: Any) -> bool:
    """``True`` for a calendar date without a time part, e.g. ``"2026-02-26"``."""
    if isinstance(value, date) and not isinstance(value, datetime):
        return True
    if not isinstance(value, str):
        return False
    text = value.strip()
    if not text or "T" in text or " " in text:
        return False
    try:
        date.fromisoformat(text)
    except ValueError:
        return False
    return True


def _coerce_datetime(value: Any) -> datetime:
    if isinstance(value, datetime):
        parsed = value
    elif isinstance(value, date):
        # Date-only value on a timestamp field -> start of that day.
        parsed = datetime.combine(value, datetime.min.time())
    else:
        text = str(value).strip()
        if not text:
            raise ValueError("empty datetime")
        if is_date_only(text):
            parsed = datetime.combine(date.fromisoformat(text), datetime.min.time())
        else:
            parsed = datetime.fromisoformat(text.replace("Z", "+00:00"))
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def _coerce_uuid(value: Any) -> uuid.UUID:
    if isinstance(value, uuid.UUID):
        return value
    return uuid.UUID(str(value).strip())


def infer_type(value: Any) -> FieldType:
    """Best-effort field type for schemaless comparisons."""
    if isinstance(value, bool):
        return FieldType.BOOLEAN
    if isinstance(value, (int, float, Decimal)):
        return FieldType.NUMBER
    if isinstance(value, (datetime, date)):
        return FieldType.DATETIME
    if isinstance(value, uuid.UUID):
        return FieldType.UUID
    return FieldType.STRING


def coerce(value: Any, field_type: FieldType) -> Any:
    """Normalise *value* to the comparable form of *field_type*.

    ``None`` passes through. Raises :class:`ValueError` when the value cannot
    represent the type.
    """
    if value is None:
        return None
    if field_type is FieldType.STRING:
        return value if isinstance(value, str) else str(value)
    if field_type is FieldType.NUMBER:
        return _coerce_number(value)
    if field_type is FieldType.BOOLEAN:
        return _coerce_bool(value)
    if field_type is FieldType.DATETIME:
        return _coerce_datetime(value)
    if field_type is FieldType.UUID:
        return _coerce_uuid(value)
    raise ValueError(f"unsupported field type: {field_type!r}")


def coerce_stored(value: Any, field_type: FieldType) -> Any:
    """Like :func:`coerce`, but a stored value that does not fit *field_type*
    reads as ``None``: it never matches a filter and sorts with the nulls.
    """
    try:
        return coerce(value, field_type)
    except (TypeError, ValueError):
        return None


__all__ = ["coerce", "coerce_stored", "infer_type", "is_date_only"]
