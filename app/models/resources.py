"""Persistent taxonomy records when a database is configured (SQLStore)."""

from sqlalchemy import JSON, Boolean, String
from sqlalchemy.dialects.postgresql import JSONB
from sqlalchemy.orm import Mapped, mapped_column

from app.models.base import Base


class TaxonomyRecord(Base):
    """One brand, demographic or legal guideline, keyed by (taxonomy, id).

    Taxonomy-specific fields live in ``payload``; the columns that every
    taxonomy shares are kept as real columns for ordering and filtering.
    """

    __tablename__ = "taxonomy_records"

    taxonomy: Mapped[str] = mapped_column(String(32), primary_key=True)
    record_id: Mapped[str] = mapped_column("id", String(100), primary_key=True)

    name: Mapped[str] = mapped_column(String(200), nullable=False)
    is_active: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)

    payload: Mapped[dict] = mapped_column(JSON().with_variant(JSONB, "postgresql"), nullable=False)

    # ISO-8601 strings exactly as returned to the API
    created_at: Mapped[str] = mapped_column(String(32), nullable=False)
    updated_at: Mapped[str] = mapped_column(String(32), nullable=False, index=True)
