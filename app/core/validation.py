"""Required-field checks for inbound payloads. Pure, no I/O."""

from __future__ import annotations

from typing import Any, Iterable, List, Mapping

from app.core.errors import ValidationError


def is_blank(value: Any) -> bool:
    return value is None or value == ""


def missing_fields(payload: Mapping[str, Any], fields: Iterable[str]) -> List[str]:
    return [field for field in fields if is_blank(payload.get(field))]


def require_fields(payload: Any, *fields: str, message: str | None = None) -> None:
    """Raise ValidationError unless every field in ``fields`` is present, non-null and non-empty."""
    if not isinstance(payload, Mapping):
        raise ValidationError("Invalid request body", details="Expected a JSON object")

    missing = missing_fields(payload, fields)
    if missing:
        raise ValidationError(message or f"Missing required fields: {', '.join(missing)}")
