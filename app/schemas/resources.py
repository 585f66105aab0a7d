"""Taxonomy record shapes with their field defaults."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Any, List

from pydantic import BaseModel, ConfigDict, Field, model_validator


def utc_now_iso() -> str:
    """Current UTC time as ``2024-01-01T00:00:00.000Z``."""
    return datetime.now(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


class ResourceRecord(BaseModel):
    """Fields shared by every taxonomy.

    Absent or null fields take their default, and so does an empty string for a
    string field. Empty lists are kept as supplied. Unknown keys are dropped.
    ``is_active`` is true for any value except a literal ``false``.
    """

    model_config = ConfigDict(extra="ignore")

    id: str
    name: str
    description: str = ""
    is_active: bool = True
    created_at: str
    updated_at: str

    @model_validator(mode="before")
    @classmethod
    def _apply_defaults(cls, data: Any) -> Any:
        if not isinstance(data, dict):
            return data

        cleaned = {}
        for key, value in data.items():
            field = cls.model_fields.get(key)
            if field is None or value is None:
                continue
            if key == "is_active":
                value = value is not False
            elif value == "" and isinstance(field.get_default(), str):
                continue
            cleaned[key] = value
        return cleaned


class BrandProfile(ResourceRecord):
    tone: str = ""
    logo: str = "🏢"


class DemographicProfile(ResourceRecord):
    age_range: str = ""
    characteristics: List[str] = Field(default_factory=list)
    emoji: str = "👤"


class LegalGuideline(ResourceRecord):
    category: str = ""
    rules: List[str] = Field(default_factory=list)
    severity_levels: List[str] = Field(default_factory=lambda: ["low", "medium", "high"])
    compliance_requirements: List[str] = Field(default_factory=list)
