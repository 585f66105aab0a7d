"""Store backends behind the resource gateway.

Both implementations satisfy the ``Store`` protocol, so the gateway never
knows whether it is running in demo mode or against a database.
"""

from __future__ import annotations

import copy
import time
import uuid
from typing import Any, Dict, Iterable, List, Protocol

from sqlalchemy import delete, func, select
from sqlalchemy.orm import Session, sessionmaker

from app.core.logging import get_logger
from app.models.resources import TaxonomyRecord

log = get_logger("stores")

Record = Dict[str, Any]

_SHARED_COLUMNS = ("id", "name", "is_active", "created_at", "updated_at")


class Store(Protocol):
    name: str

    def new_id(self) -> str: ...

    def list(self) -> List[Record]: ...

    def insert(self, record: Record) -> Record: ...

    def update(self, record: Record) -> Record: ...

    def delete(self, record_id: str) -> bool: ...


class FallbackStore:
    """Demo mode: reads return a fixed snapshot, writes are echoed back.

    The snapshot is copied on construction and on every read so no caller can
    mutate what the next request sees.
    """

    name = "demo"

    def __init__(self, snapshot: Iterable[Record]):
        self._snapshot: tuple = tuple(copy.deepcopy(dict(r)) for r in snapshot)

    def new_id(self) -> str:
        return f"custom-{int(time.time() * 1000)}"

    def list(self) -> List[Record]:
        return copy.deepcopy(list(self._snapshot))

    def insert(self, record: Record) -> Record:
        return record

    def update(self, record: Record) -> Record:
        return record

    def delete(self, record_id: str) -> bool:
        # Nothing is retained in demo mode, so there is nothing to remove
        return True


class SQLStore:
    """Database-backed store for a single taxonomy."""

    name = "database"

    def __init__(self, session_factory: sessionmaker[Session], taxonomy: str):
        self.session_factory = session_factory
        self.taxonomy = taxonomy

    def new_id(self) -> str:
        return uuid.uuid4().hex

    # -------------------------------------------------------------------------
    # Row <-> record mapping
    # -------------------------------------------------------------------------
    def _to_row(self, record: Record) -> TaxonomyRecord:
        payload = {k: v for k, v in record.items() if k not in _SHARED_COLUMNS}
        return TaxonomyRecord(
            taxonomy=self.taxonomy,
            record_id=record["id"],
            name=record["name"],
            is_active=record.get("is_active", True),
            payload=payload,
            created_at=record["created_at"],
            updated_at=record["updated_at"],
        )

    @staticmethod
    def _to_record(row: TaxonomyRecord) -> Record:
        return {
            "id": row.record_id,
            "name": row.name,
            "is_active": row.is_active,
            "created_at": row.created_at,
            "updated_at": row.updated_at,
            **(row.payload or {}),
        }

    # -------------------------------------------------------------------------
    # Store protocol
    # -------------------------------------------------------------------------
    def list(self) -> List[Record]:
        stmt = (
            select(TaxonomyRecord)
            .where(TaxonomyRecord.taxonomy == self.taxonomy)
            .order_by(TaxonomyRecord.created_at.asc(), TaxonomyRecord.record_id.asc())
        )
        with self.session_factory() as session:
            return [self._to_record(row) for row in session.execute(stmt).scalars().all()]

    def insert(self, record: Record) -> Record:
        with self.session_factory() as session:
            session.add(self._to_row(record))
            session.commit()
        return record

    def update(self, record: Record) -> Record:
        # merge() makes update an upsert; a missing id is created
        with self.session_factory() as session:
            session.merge(self._to_row(record))
            session.commit()
        return record

    def delete(self, record_id: str) -> bool:
        stmt = delete(TaxonomyRecord).where(
            TaxonomyRecord.taxonomy == self.taxonomy,
            TaxonomyRecord.record_id == record_id,
        )
        with self.session_factory() as session:
            deleted = session.execute(stmt).rowcount
            session.commit()
        return deleted > 0

    def count(self) -> int:
        stmt = select(func.count()).select_from(TaxonomyRecord).where(TaxonomyRecord.taxonomy == self.taxonomy)
        with self.session_factory() as session:
            return session.execute(stmt).scalar() or 0

    def seed_if_empty(self, records: Iterable[Record]) -> int:
        """Load the sample records when this taxonomy has no rows yet."""
        if self.count():
            return 0

        rows = [self._to_row(dict(r)) for r in records]
        with self.session_factory() as session:
            session.add_all(rows)
            session.commit()
        log.info(f"Seeded {len(rows)} {self.taxonomy} record(s)")
        return len(rows)
